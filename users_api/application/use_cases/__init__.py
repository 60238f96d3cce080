"""Application use cases"""

from .create_user import CreateUserUseCase, CreateUserInput
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase, ListUsersInput
from .user_results import (
    CreateUserResult,
    DeleteUserResult,
    GetUserResult,
    ListUsersResult,
    UserError,
    UserErrorCode,
)

__all__ = [
    "CreateUserUseCase",
    "CreateUserInput",
    "CreateUserResult",
    "DeleteUserUseCase",
    "DeleteUserResult",
    "GetUserUseCase",
    "GetUserResult",
    "ListUsersUseCase",
    "ListUsersInput",
    "ListUsersResult",
    "UserError",
    "UserErrorCode",
]
