"""
Name: Dependency Injection Container

Responsibilities:
  - Wire up dependencies for the application
  - Provide factory functions for use cases
  - Manage singleton instances of the repository and id parser

Collaborators:
  - infrastructure.repositories: MongoUserRepository, InMemoryUserRepository
  - infrastructure.object_ids: ObjectIdParser
  - application.use_cases: List/Get/Create/Delete user use cases
  - FastAPI Depends(): Dependency injection mechanism

Constraints:
  - Manual DI (no library like dependency-injector)
  - Singletons via functools.lru_cache

Notes:
  - This is the composition root (where dependencies are wired)
  - Tests swap implementations through app.dependency_overrides
"""

from functools import lru_cache

from .config import get_settings
from .domain.repositories import UserRepository
from .domain.services import UserIdParser
from .infrastructure.db import get_database
from .infrastructure.object_ids import ObjectIdParser
from .infrastructure.repositories import InMemoryUserRepository, MongoUserRepository
from .application.use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)


@lru_cache
def get_user_repository() -> UserRepository:
    """
    R: Get singleton instance of the user repository.

    Returns:
        MongoDB implementation, or in-memory when USERS_REPOSITORY=memory
    """
    settings = get_settings()
    if settings.users_repository == "memory":
        return InMemoryUserRepository()
    database = get_database(settings.mongo_db_name)
    return MongoUserRepository(database[settings.mongo_users_collection])


@lru_cache
def get_user_id_parser() -> UserIdParser:
    """R: Identifier format of the configured store."""
    return ObjectIdParser()


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(repository=get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(
        repository=get_user_repository(),
        id_parser=get_user_id_parser(),
    )


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(repository=get_user_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(
        repository=get_user_repository(),
        id_parser=get_user_id_parser(),
    )
