"""
Name: Get User Use Case

Responsibilities:
  - Validate the requested id with the configured parser
  - Retrieve a single user by id

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.UserIdParser
"""

from ...domain.repositories import UserRepository
from ...domain.services import InvalidUserIdError, UserIdParser
from .user_results import GetUserResult, UserError, UserErrorCode

USER_NOT_FOUND_MESSAGE = "The requested user was not found"


class GetUserUseCase:
    """R: Fetch a user by ID."""

    def __init__(self, repository: UserRepository, id_parser: UserIdParser):
        self.repository = repository
        self.id_parser = id_parser

    def execute(self, raw_id: str) -> GetUserResult:
        try:
            user_id = self.id_parser(raw_id)
        except InvalidUserIdError as exc:
            return GetUserResult(
                error=UserError(code=UserErrorCode.BAD_REQUEST, message=exc.message)
            )

        user = self.repository.get_user(user_id)
        if not user:
            return GetUserResult(
                error=UserError(
                    code=UserErrorCode.NOT_FOUND,
                    message=USER_NOT_FOUND_MESSAGE,
                )
            )

        return GetUserResult(user=user)
