"""Collection validation utility functions."""

from typing import Any, Optional, Sequence, Sized


def is_empty(collection: Optional[Sized]) -> bool:
    """
    Check if a collection or mapping is None or empty.

    Args:
        collection: Collection or mapping to check

    Returns:
        True if collection is None or has no elements
    """
    return collection is None or len(collection) == 0


def is_not_empty(collection: Optional[Sized]) -> bool:
    """
    Check if a collection or mapping has at least one element.

    Args:
        collection: Collection or mapping to check

    Returns:
        True if collection is not None and has elements
    """
    return not is_empty(collection)


def list_is_empty(lst: Optional[Sequence[Any]]) -> bool:
    """
    Check if a list is None or empty.

    Args:
        lst: List to check

    Returns:
        True if list is None or empty
    """
    return lst is None or len(lst) == 0


def list_is_not_empty(lst: Optional[Sequence[Any]]) -> bool:
    """
    Check if a list contains any element.

    Args:
        lst: List to check

    Returns:
        True if list is not None and not empty
    """
    return not list_is_empty(lst)
