"""
Name: MongoDB User Repository

Responsibilities:
  - Query the users collection with equality filters
  - Insert and delete user documents
  - Map documents into User records

Collaborators:
  - pymongo Collection
  - domain.repositories.UserRepository: the contract implemented here

Constraints:
  - Ids arrive already validated (24-hex strings)
  - Driver failures surface as DatabaseError
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ...domain.entities import NewUser, User, UserFilter
from ...exceptions import DatabaseError
from ...logger import logger


def _document_to_user(doc: Dict[str, Any]) -> User:
    age = doc.get("age")
    try:
        age = int(age)
    except (TypeError, ValueError):
        age = 0

    return User(
        id=str(doc.get("_id")),
        name=doc.get("name") or "",
        age=age,
        company=doc.get("company") or "",
        email=doc.get("email") or "",
        role=doc.get("role") or "",
        avatar=doc.get("avatar") or "",
    )


class MongoUserRepository:
    """R: UserRepository backed by a MongoDB collection."""

    def __init__(self, collection: Collection):
        self._collection = collection

    def list_users(self, user_filter: UserFilter) -> List[User]:
        """R: Conjunction of equality constraints as one query document."""
        query = user_filter.as_dict()
        try:
            return [_document_to_user(doc) for doc in self._collection.find(query)]
        except PyMongoError as e:
            logger.error(f"MongoUserRepository: List users failed: {e}")
            raise DatabaseError(f"User listing failed: {e}", original_error=e)

    def get_user(self, user_id: str) -> Optional[User]:
        try:
            doc = self._collection.find_one({"_id": ObjectId(user_id)})
        except PyMongoError as e:
            logger.error(f"MongoUserRepository: Get by id failed: {e}")
            raise DatabaseError(f"User lookup failed: {e}", original_error=e)

        if not doc:
            return None
        return _document_to_user(doc)

    def create_user(self, user: NewUser) -> User:
        try:
            result = self._collection.insert_one(user.to_document())
        except PyMongoError as e:
            logger.error(f"MongoUserRepository: Create user failed: {e}")
            raise DatabaseError(f"User creation failed: {e}", original_error=e)

        return user.with_id(str(result.inserted_id))

    def delete_user(self, user_id: str) -> bool:
        try:
            result = self._collection.delete_one({"_id": ObjectId(user_id)})
        except PyMongoError as e:
            logger.error(f"MongoUserRepository: Delete user failed: {e}")
            raise DatabaseError(f"User deletion failed: {e}", original_error=e)

        return result.deleted_count == 1

    def count_users(self) -> int:
        try:
            return self._collection.count_documents({})
        except PyMongoError as e:
            logger.error(f"MongoUserRepository: Count users failed: {e}")
            raise DatabaseError(f"User count failed: {e}", original_error=e)

    def ping(self) -> bool:
        try:
            self._collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoUserRepository: Ping failed: {e}")
            return False
