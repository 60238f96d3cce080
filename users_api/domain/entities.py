"""
Name: Domain Entities

Responsibilities:
  - Define the User entity and its supporting value types
  - Keep user data shapes centralized

Collaborators:
  - None (pure domain layer, no external dependencies)

Constraints:
  - No dependencies on infrastructure or frameworks
  - Identifiers are opaque strings; their format belongs to the store

Notes:
  - NewUser is a validated user that has not been assigned an id yet
  - UserFilter is a conjunction of optional equality constraints
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# R: Ages are stored as 32-bit signed integers
AGE_MIN = -(2**31)
AGE_MAX = 2**31 - 1


class UserRole(str, Enum):
    """R: Roles a user may be created with."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @classmethod
    def values(cls) -> list[str]:
        return [role.value for role in cls]


@dataclass
class User:
    """
    R: A user record read back from the store.

    Attributes:
        id: Opaque store-assigned identifier (string form)
        name: Display name
        age: Age in years (non-negative)
        company: Employer name
        email: Contact email
        role: Role name (one of UserRole values for users created via the API)
        avatar: Avatar image URL
    """

    id: str
    name: str
    age: int
    company: str
    email: str
    role: str
    avatar: str = ""


@dataclass
class NewUser:
    """R: Validated user data awaiting insertion."""

    name: str
    age: int
    company: str
    email: str
    role: UserRole
    avatar: str

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "company": self.company,
            "email": self.email,
            "role": self.role.value,
            "avatar": self.avatar,
        }

    def with_id(self, user_id: str) -> User:
        return User(id=user_id, **self.to_document())


@dataclass(frozen=True)
class UserFilter:
    """
    R: Equality constraints joined by logical AND.

    A field left as None imposes no constraint.
    """

    age: Optional[int] = None
    company: Optional[str] = None
    role: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Only the constraints that are actually set."""
        return {
            key: value
            for key, value in (
                ("age", self.age),
                ("company", self.company),
                ("role", self.role),
            )
            if value is not None
        }

    def matches(self, user: User) -> bool:
        return all(getattr(user, key) == value for key, value in self.as_dict().items())
