"""Low-level helpers shared by the collection utilities."""

from collection_util.utilities.assertions import is_true, not_empty, not_null
from collection_util.utilities.objects import is_array, to_object_array

__all__ = [
    # Assertions
    "is_true",
    "not_null",
    "not_empty",
    # Object helpers
    "is_array",
    "to_object_array",
]
