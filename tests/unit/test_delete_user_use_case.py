"""
Name: Delete User Use Case Tests

Responsibilities:
  - Verify deletion, malformed ids and ids not in the store
"""

import pytest

from users_api.application.use_cases import DeleteUserUseCase, UserErrorCode
from users_api.infrastructure.object_ids import ObjectIdParser


pytestmark = pytest.mark.unit


@pytest.fixture
def use_case(memory_repository) -> DeleteUserUseCase:
    return DeleteUserUseCase(repository=memory_repository, id_parser=ObjectIdParser())


def test_delete_existing_user(use_case, memory_repository, sam_id):
    result = use_case.execute(sam_id)

    assert result.error is None
    assert result.deleted is True
    assert memory_repository.get_user(sam_id) is None
    assert memory_repository.count_users() == 3


def test_delete_twice_reports_not_found(use_case, sam_id):
    use_case.execute(sam_id)
    result = use_case.execute(sam_id)

    assert result.deleted is False
    assert result.error.code == UserErrorCode.NOT_FOUND


def test_delete_unknown_id_message(use_case, unknown_id):
    result = use_case.execute(unknown_id)

    assert result.error.code == UserErrorCode.NOT_FOUND
    assert result.error.message == (
        f"Was unable to delete ID {unknown_id}; perhaps illegal ID "
        "or an ID for an item not in the system?"
    )


def test_delete_rejects_malformed_id(mock_repository):
    use_case = DeleteUserUseCase(repository=mock_repository, id_parser=ObjectIdParser())

    result = use_case.execute("12345")

    assert result.deleted is False
    assert result.error.code == UserErrorCode.BAD_REQUEST
    mock_repository.delete_user.assert_not_called()
