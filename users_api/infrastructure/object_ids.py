"""
Name: ObjectId Parser

Responsibilities:
  - Validate raw path identifiers against the MongoDB ObjectId format
  - Normalize them to lowercase 24-hex strings

Collaborators:
  - bson (ships with pymongo)
  - domain.services.UserIdParser: the contract implemented here
"""

from bson import ObjectId
from bson.errors import InvalidId

from ..domain.services import InvalidUserIdError

INVALID_OBJECT_ID_MESSAGE = "The requested user id wasn't a legal Mongo Object ID."


class ObjectIdParser:
    """R: UserIdParser for MongoDB ObjectIds."""

    def __call__(self, raw_id: str) -> str:
        if not isinstance(raw_id, str) or len(raw_id) != 24:
            raise InvalidUserIdError(str(raw_id), INVALID_OBJECT_ID_MESSAGE)
        try:
            return str(ObjectId(raw_id))
        except (InvalidId, TypeError) as exc:
            raise InvalidUserIdError(raw_id, INVALID_OBJECT_ID_MESSAGE) from exc


def new_object_id() -> str:
    """R: Fresh ObjectId in string form."""
    return str(ObjectId())
