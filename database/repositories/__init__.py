from .round_repo import RoundRepositoryDB
from .subscription_repo import SubscriptionRepositoryDB

__all__ = ["RoundRepositoryDB", "SubscriptionRepositoryDB"]
