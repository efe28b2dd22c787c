"""Input assertions for metadata keys."""

import weakref
from typing import Any, Optional

from ..core.exceptions import InvalidArgument

PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes)


def validate_object(value: Any) -> Optional[str]:
    """
    Validate that a value can be used as a metadata key.

    Args:
        value: Candidate key object

    Returns:
        Error message if invalid, None if valid
    """
    if value is None:
        return "Expected an object, got None"

    if isinstance(value, PRIMITIVE_TYPES):
        return f"Expected an object, got primitive {type(value).__name__} {value!r}"

    try:
        weakref.ref(value)
    except TypeError:
        return f"Expected an object with reference identity, got {type(value).__name__}"

    return None


def assert_object(value: Any) -> None:
    """
    Raise InvalidArgument unless value is object-like.

    Args:
        value: Candidate key object
    """
    error = validate_object(value)
    if error is not None:
        raise InvalidArgument(value, error)
