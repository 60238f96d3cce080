"""
Name: User Use Case Results

Responsibilities:
  - Provide consistent error/result types for user use cases
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from ...domain.entities import User


class UserErrorCode(str, Enum):
    """R: Error codes for user use cases."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


@dataclass
class UserError:
    code: UserErrorCode
    message: str
    errors: List[Dict[str, Any]] | None = None


@dataclass
class ListUsersResult:
    users: List[User]
    error: UserError | None = None


@dataclass
class GetUserResult:
    user: User | None = None
    error: UserError | None = None


@dataclass
class CreateUserResult:
    user: User | None = None
    error: UserError | None = None


@dataclass
class DeleteUserResult:
    deleted: bool
    error: UserError | None = None
