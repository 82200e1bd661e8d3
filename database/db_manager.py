import asyncpg

from database.repositories import RoundRepositoryDB, SubscriptionRepositoryDB


class DatabaseManager:
    """Groups the read repositories over one shared asyncpg pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.rounds = RoundRepositoryDB(pool)
        self.subscriptions = SubscriptionRepositoryDB(pool)
