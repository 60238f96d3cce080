"""Domain layer - Business entities and interfaces"""

from .entities import NewUser, User, UserFilter, UserRole
from .repositories import UserRepository
from .services import InvalidUserIdError, UserIdParser, default_avatar

__all__ = [
    "NewUser",
    "User",
    "UserFilter",
    "UserRole",
    "UserRepository",
    "InvalidUserIdError",
    "UserIdParser",
    "default_avatar",
]
