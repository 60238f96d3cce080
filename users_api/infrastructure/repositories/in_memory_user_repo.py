"""
Name: In-Memory User Repository

Responsibilities:
  - Store users in process memory (tests / local demos)
  - Mirror the Mongo repository's filtering and id semantics

Collaborators:
  - domain.repositories.UserRepository: the contract implemented here
  - infrastructure.object_ids: fresh ObjectId strings

Constraints:
  - Thread-safe: access guarded by a Lock
  - Iteration order is insertion order (like an unindexed collection scan)
"""

from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional

from ...domain.entities import NewUser, User, UserFilter
from ..object_ids import new_object_id


class InMemoryUserRepository:
    """R: Dict-backed UserRepository."""

    def __init__(
        self,
        users: Iterable[User] = (),
        id_factory: Callable[[], str] = new_object_id,
    ) -> None:
        self._lock = Lock()
        self._id_factory = id_factory
        self._users: Dict[str, User] = {user.id: user for user in users}

    def list_users(self, user_filter: UserFilter) -> List[User]:
        with self._lock:
            return [user for user in self._users.values() if user_filter.matches(user)]

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def create_user(self, user: NewUser) -> User:
        with self._lock:
            created = user.with_id(self._id_factory())
            self._users[created.id] = created
            return created

    def delete_user(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    def ping(self) -> bool:
        return True
