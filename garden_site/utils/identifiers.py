"""
Identifier Helpers
==================

Entities are addressed by ``EntityId``: a small integer in the in-memory
store, an ObjectId hex string in MongoDB. Routes receive arbitrary path
segments, so every parser here returns None instead of raising.
"""
from typing import Any, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId

EntityId = Union[int, str]


def is_numeric_id(value: Any) -> bool:
    """True for ints (not bools) and strings made only of ASCII digits."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if not isinstance(value, str):
        return False
    digits = value.strip()
    return digits.isascii() and digits.isdigit()


def to_int_id(value: Any) -> Optional[int]:
    """Parse an in-memory identifier. Returns None for anything non-numeric."""
    if not is_numeric_id(value):
        return None
    return int(value)


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Build a MongoDB ObjectId from an ObjectId or a 24-char hex string."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value.strip())
    except (InvalidId, TypeError):
        return None


def object_id_to_str(value: Any) -> Optional[str]:
    """Render a stored identifier back into its plain string form."""
    if value is None:
        return None
    return str(value)
