"""Object helpers for array-like values."""
import array
from typing import Any, List

from collection_util.exceptions import InvalidArgumentError

# Values treated as arrays. Strings are deliberately absent.
ARRAY_TYPES = (list, tuple, array.array, bytes, bytearray, memoryview)


def is_array(obj: Any) -> bool:
    """Return True if obj is an array-like value (object or typed array)."""
    return isinstance(obj, ARRAY_TYPES)


def to_object_array(source: Any) -> List[Any]:
    """
    Convert an array-like value into a list of plain Python objects.

    Typed arrays (``array.array``, ``bytes``, ``bytearray``, ``memoryview``)
    are unpacked into their element values, so ``array('i', [1, 2])`` and
    ``b"\\x01\\x02"`` both become ``[1, 2]``.

    Args:
        source: The (potentially typed) array, may be None

    Returns:
        New list with the array's elements; empty list for None

    Raises:
        InvalidArgumentError: If source is not an array
    """
    if source is None:
        return []
    if isinstance(source, memoryview):
        return source.tolist()
    if isinstance(source, array.array):
        return source.tolist()
    if isinstance(source, ARRAY_TYPES):
        return list(source)
    raise InvalidArgumentError(
        f"Source is not an array: {type(source).__name__}",
        details={"type": type(source).__name__},
    )
