"""
Name: List Users Use Case

Responsibilities:
  - Turn raw query parameters into a UserFilter
  - Reject an age that is not a 32-bit integer
  - Retrieve matching users in store iteration order

Collaborators:
  - domain.repositories.UserRepository
  - domain.entities.UserFilter
"""

import re
from dataclasses import dataclass

from ...domain.entities import AGE_MAX, AGE_MIN, UserFilter
from ...domain.repositories import UserRepository
from ...logger import logger
from .user_results import ListUsersResult, UserError, UserErrorCode

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]{1,10}")


@dataclass
class ListUsersInput:
    """
    R: Raw query parameters; None means the parameter was not supplied.
    """

    age: str | None = None
    company: str | None = None
    role: str | None = None


class ListUsersUseCase:
    """R: List users, optionally filtered by age, company and role."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: ListUsersInput) -> ListUsersResult:
        age = None
        if input_data.age is not None:
            raw_age = input_data.age
            if not _INTEGER_PATTERN.fullmatch(raw_age) or not (
                AGE_MIN <= int(raw_age) <= AGE_MAX
            ):
                logger.info("Rejected age filter", extra={"age": input_data.age})
                return ListUsersResult(
                    users=[],
                    error=UserError(
                        code=UserErrorCode.VALIDATION_ERROR,
                        message="age must be a 32-bit integer.",
                        errors=[{"loc": ["query", "age"], "value": input_data.age}],
                    ),
                )
            age = int(raw_age)

        user_filter = UserFilter(
            age=age,
            company=input_data.company,
            role=input_data.role,
        )
        users = self.repository.list_users(user_filter)
        return ListUsersResult(users=users)
