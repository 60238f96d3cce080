"""
Name: Custom Exceptions and Error Handling

Responsibilities:
  - Define internal exceptions for infrastructure failures
  - Generate unique error IDs for tracking

Collaborators:
  - exception_handlers.py: maps these to RFC 7807 responses
  - infrastructure.repositories: raise DatabaseError on driver failures

Notes:
  - error_id is UUID for log correlation
  - Expected outcomes (not found, bad input) are NOT exceptions; use cases
    return typed results for those
"""

from uuid import uuid4


class UsersApiError(Exception):
    """Base exception for the users API."""

    error_code: str = "USERS_API_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(UsersApiError):
    """Database connection or query error."""

    error_code: str = "DATABASE_ERROR"
