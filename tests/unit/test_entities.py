"""
Name: Domain Entity Tests

Responsibilities:
  - Verify UserFilter matching and query shape
  - Verify NewUser document mapping
  - Verify the avatar rule
"""

import hashlib

import pytest

from users_api.domain.entities import NewUser, User, UserFilter, UserRole
from users_api.domain.services import default_avatar


pytestmark = pytest.mark.unit


def _user(**overrides) -> User:
    fields = dict(
        id="5fd8a2b8c1e4a93e6c0b7a03",
        name="Jamie",
        age=37,
        company="OHMNET",
        email="jamie@ohmnet.com",
        role="viewer",
    )
    fields.update(overrides)
    return User(**fields)


class TestUserFilter:
    def test_empty_filter_matches_everything(self):
        assert UserFilter().as_dict() == {}
        assert UserFilter().matches(_user())

    def test_as_dict_only_includes_set_constraints(self):
        assert UserFilter(age=37, role="viewer").as_dict() == {
            "age": 37,
            "role": "viewer",
        }

    def test_matches_is_conjunction(self):
        user = _user()
        assert UserFilter(company="OHMNET", age=37).matches(user)
        assert not UserFilter(company="OHMNET", age=45).matches(user)

    def test_age_zero_is_a_constraint(self):
        assert UserFilter(age=0).as_dict() == {"age": 0}
        assert not UserFilter(age=0).matches(_user())


class TestNewUser:
    def test_to_document_stores_role_value(self):
        new_user = NewUser(
            name="Pat",
            age=37,
            company="IBM",
            email="pat@ibm.com",
            role=UserRole.EDITOR,
            avatar="",
        )

        assert new_user.to_document()["role"] == "editor"
        assert "_id" not in new_user.to_document()

    def test_with_id_builds_user(self):
        new_user = NewUser(
            name="Pat",
            age=37,
            company="IBM",
            email="pat@ibm.com",
            role=UserRole.EDITOR,
            avatar="a.png",
        )

        user = new_user.with_id("abc")

        assert user == User(
            id="abc",
            name="Pat",
            age=37,
            company="IBM",
            email="pat@ibm.com",
            role="editor",
            avatar="a.png",
        )


def test_user_role_values():
    assert UserRole.values() == ["admin", "editor", "viewer"]


def test_default_avatar_normalizes_email():
    digest = hashlib.md5(b"someone@example.com").hexdigest()
    assert default_avatar("  SomeOne@Example.com ") == (
        f"https://gravatar.com/avatar/{digest}?d=identicon"
    )
