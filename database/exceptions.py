class DatabaseError(Exception):
    """Base for all database errors."""


class QueryError(DatabaseError):
    """A read against the round store failed."""
