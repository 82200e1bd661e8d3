from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import RoundRepositoryDB, SubscriptionRepositoryDB
from database.exceptions import DatabaseError, QueryError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "RoundRepositoryDB",
    "SubscriptionRepositoryDB",
    "DatabaseError",
    "QueryError",
]
