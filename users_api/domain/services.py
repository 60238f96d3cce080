"""
Name: Domain Service Interfaces

Responsibilities:
  - Define the identifier-parsing capability used by get/delete
  - Define the deterministic avatar rule for new users

Collaborators:
  - application.use_cases: GetUserUseCase, DeleteUserUseCase, CreateUserUseCase
  - infrastructure.object_ids: ObjectIdParser implementation

Constraints:
  - No dependencies on infrastructure or frameworks

Notes:
  - The parser owns its error message, so swapping the store's id format
    does not touch the use cases
"""

import hashlib
from typing import Protocol

GRAVATAR_BASE_URL = "https://gravatar.com/avatar/"


class InvalidUserIdError(ValueError):
    """R: Raised when a raw identifier is not legal for the store."""

    def __init__(self, raw_id: str, message: str):
        self.raw_id = raw_id
        self.message = message
        super().__init__(message)


class UserIdParser(Protocol):
    """
    R: string -> validated id, or InvalidUserIdError.
    """

    def __call__(self, raw_id: str) -> str:
        ...


def default_avatar(email: str) -> str:
    """R: Identicon URL derived from the MD5 of the normalized email."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}{digest}?d=identicon"
