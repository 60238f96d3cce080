"""Infrastructure repositories"""

from .mongo_user_repo import MongoUserRepository
from .in_memory_user_repo import InMemoryUserRepository

__all__ = [
    "MongoUserRepository",
    "InMemoryUserRepository",
]
