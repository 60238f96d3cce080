"""
Name: Create User Use Case

Responsibilities:
  - Validate required fields, age, email format and role
  - Default the avatar from the email when none is given
  - Insert the user and return it with its new id

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.default_avatar

Notes:
  - All field problems are reported together in UserError.errors
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from ...domain.entities import AGE_MAX, NewUser, UserRole
from ...domain.repositories import UserRepository
from ...domain.services import default_avatar
from ...logger import logger
from .user_results import CreateUserResult, UserError, UserErrorCode

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_!#$%&'*+/=?`{|}~^.-]+@[a-zA-Z0-9.-]+$")


@dataclass
class CreateUserInput:
    name: str | None = None
    age: int | None = None
    company: str | None = None
    email: str | None = None
    role: str | None = None
    avatar: str | None = None


class CreateUserUseCase:
    """R: Create a user."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: CreateUserInput) -> CreateUserResult:
        errors = self._validate(input_data)
        if errors:
            logger.info(
                "Rejected new user",
                extra={"fields": [error["field"] for error in errors]},
            )
            return CreateUserResult(
                error=UserError(
                    code=UserErrorCode.VALIDATION_ERROR,
                    message="The new user is not valid.",
                    errors=errors,
                )
            )

        email = input_data.email.strip()
        avatar = (input_data.avatar or "").strip() or default_avatar(email)
        new_user = NewUser(
            name=input_data.name.strip(),
            age=input_data.age,
            company=input_data.company.strip(),
            email=email,
            role=UserRole(input_data.role),
            avatar=avatar,
        )

        user = self.repository.create_user(new_user)
        logger.info("User created", extra={"user_id": user.id, "role": user.role})
        return CreateUserResult(user=user)

    @staticmethod
    def _validate(input_data: CreateUserInput) -> List[Dict[str, Any]]:
        errors: List[Dict[str, Any]] = []

        def reject(field: str, message: str) -> None:
            errors.append({"field": field, "message": message})

        if not (input_data.name or "").strip():
            reject("name", "User must have a non-empty user name")

        if input_data.age is None:
            reject("age", "User must have an age")
        elif input_data.age <= 0:
            reject("age", "User's age must be greater than zero")
        elif input_data.age > AGE_MAX:
            reject("age", f"User's age must be at most {AGE_MAX}")

        if not (input_data.company or "").strip():
            reject("company", "User must have a non-empty company name")

        if input_data.email is None or not EMAIL_PATTERN.match(input_data.email.strip()):
            reject("email", "User must have a legal email")

        if input_data.role not in UserRole.values():
            reject("role", f"User must have a legal user role: {', '.join(UserRole.values())}")

        return errors
