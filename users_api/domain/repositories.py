"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define the contract for user persistence
  - Provide abstraction over storage technology

Collaborators:
  - domain.entities: User, NewUser, UserFilter
  - Implementations in infrastructure.repositories

Constraints:
  - Pure interfaces (Protocol), no implementation
  - Storage-agnostic (MongoDB or in-memory)
  - Ids passed in have already been validated by a UserIdParser

Notes:
  - Using typing.Protocol for structural subtyping
  - Enables testing with mock repositories
"""

from typing import List, Optional, Protocol

from .entities import NewUser, User, UserFilter


class UserRepository(Protocol):
    """
    R: Interface for user persistence.

    Implementations must provide:
      - Filtered listing in store iteration order
      - Lookup, insertion and deletion by id
      - A connectivity check
    """

    def list_users(self, user_filter: UserFilter) -> List[User]:
        """
        R: List users matching every constraint in the filter.

        Args:
            user_filter: Conjunction of equality constraints

        Returns:
            Matching users in store iteration order
        """
        ...

    def get_user(self, user_id: str) -> Optional[User]:
        """
        R: Fetch a single user by id.

        Returns:
            User if found, otherwise None
        """
        ...

    def create_user(self, user: NewUser) -> User:
        """
        R: Insert a user and return it with its assigned id.
        """
        ...

    def delete_user(self, user_id: str) -> bool:
        """
        R: Delete a user by id.

        Returns:
            True if a user was removed, False otherwise
        """
        ...

    def count_users(self) -> int:
        """R: Total number of stored users."""
        ...

    def ping(self) -> bool:
        """
        R: Check repository connectivity/availability.

        Returns:
            True if the underlying data store is reachable.
        """
        ...
