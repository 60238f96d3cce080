"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (in-memory store, no .env file)
  - Provide the seeded user set used across unit tests
  - Provide mock and in-memory repositories

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - users_api.domain: Domain entities and protocols

Notes:
  - Fixtures are auto-discovered by pytest
  - Seed users: Chris, Pat, Jamie, Sam (Sam has a fixed id)
"""

import os
import sys
from pathlib import Path
from typing import List
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("USERS_REPOSITORY", "memory")

from users_api import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from users_api.domain.entities import User  # noqa: E402
from users_api.domain.repositories import UserRepository  # noqa: E402
from users_api.infrastructure.repositories import InMemoryUserRepository  # noqa: E402

SAM_ID = "5fd8a2b8c1e4a93e6c0b7a11"
UNKNOWN_ID = "588935f5c668650dc77df581"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that need a running MongoDB"
    )


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def seed_users() -> List[User]:
    """R: The four users every listing test starts from."""
    return [
        User(
            id="5fd8a2b8c1e4a93e6c0b7a01",
            name="Chris",
            age=25,
            company="UMM",
            email="chris@umm.edu",
            role="admin",
            avatar="https://gravatar.com/avatar/chris?d=identicon",
        ),
        User(
            id="5fd8a2b8c1e4a93e6c0b7a02",
            name="Pat",
            age=37,
            company="IBM",
            email="pat@ibm.com",
            role="editor",
            avatar="https://gravatar.com/avatar/pat?d=identicon",
        ),
        User(
            id="5fd8a2b8c1e4a93e6c0b7a03",
            name="Jamie",
            age=37,
            company="OHMNET",
            email="jamie@ohmnet.com",
            role="viewer",
            avatar="https://gravatar.com/avatar/jamie?d=identicon",
        ),
        User(
            id=SAM_ID,
            name="Sam",
            age=45,
            company="OHMNET",
            email="sam@ohmnet.com",
            role="viewer",
            avatar="https://gravatar.com/avatar/sam?d=identicon",
        ),
    ]


# ============================================================================
# Repository Fixtures
# ============================================================================


@pytest.fixture
def memory_repository(seed_users: List[User]) -> InMemoryUserRepository:
    """R: In-memory repository pre-loaded with the seed users."""
    return InMemoryUserRepository(users=seed_users)


@pytest.fixture
def mock_repository() -> Mock:
    """R: Bare mock UserRepository for interaction tests."""
    return Mock(spec=UserRepository)


# ============================================================================
# Cache Fixtures
# ============================================================================


@pytest.fixture
def clear_caches():
    """R: Reset settings and container singletons around a test."""
    from users_api.config import get_settings
    from users_api.container import get_user_id_parser, get_user_repository

    def _clear():
        get_settings.cache_clear()
        get_user_repository.cache_clear()
        get_user_id_parser.cache_clear()

    _clear()
    yield
    _clear()


@pytest.fixture
def sam_id() -> str:
    """R: Fixed id of the seeded user Sam."""
    return SAM_ID


@pytest.fixture
def unknown_id() -> str:
    """R: Well-formed ObjectId that is not in the seed set."""
    return UNKNOWN_ID
