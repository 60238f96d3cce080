"""
Name: Delete User Use Case

Responsibilities:
  - Validate the requested id with the configured parser
  - Remove the matching user

Collaborators:
  - domain.repositories.UserRepository
  - domain.services.UserIdParser
"""

from ...domain.repositories import UserRepository
from ...domain.services import InvalidUserIdError, UserIdParser
from ...logger import logger
from .user_results import DeleteUserResult, UserError, UserErrorCode


class DeleteUserUseCase:
    """R: Delete a user by ID."""

    def __init__(self, repository: UserRepository, id_parser: UserIdParser):
        self.repository = repository
        self.id_parser = id_parser

    def execute(self, raw_id: str) -> DeleteUserResult:
        try:
            user_id = self.id_parser(raw_id)
        except InvalidUserIdError as exc:
            return DeleteUserResult(
                deleted=False,
                error=UserError(code=UserErrorCode.BAD_REQUEST, message=exc.message),
            )

        if not self.repository.delete_user(user_id):
            return DeleteUserResult(
                deleted=False,
                error=UserError(
                    code=UserErrorCode.NOT_FOUND,
                    message=(
                        f"Was unable to delete ID {raw_id}; perhaps illegal ID "
                        "or an ID for an item not in the system?"
                    ),
                ),
            )

        logger.info("User deleted", extra={"user_id": user_id})
        return DeleteUserResult(deleted=True)
