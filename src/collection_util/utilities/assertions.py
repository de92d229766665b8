"""
Precondition assertions.

Each helper raises InvalidArgumentError carrying the caller's message when
its check fails, and returns nothing otherwise.
"""
from typing import Any, Optional, Sized

from collection_util.exceptions import InvalidArgumentError


def is_true(expression: bool, message: str) -> None:
    """
    Assert a boolean expression.

    Args:
        expression: Boolean expression to check
        message: Error message used when the expression is false

    Raises:
        InvalidArgumentError: If expression is false
    """
    if not expression:
        raise InvalidArgumentError(message)


def not_null(obj: Any, message: str) -> None:
    """
    Assert that an object is not None.

    Args:
        obj: Object to check
        message: Error message used when the object is None

    Raises:
        InvalidArgumentError: If obj is None
    """
    if obj is None:
        raise InvalidArgumentError(message)


def not_empty(value: Optional[Sized], message: str) -> None:
    """
    Assert that a collection or mapping is neither None nor empty.

    Args:
        value: Collection or mapping to check
        message: Error message used when the value is None or empty

    Raises:
        InvalidArgumentError: If value is None or has no elements
    """
    if value is None or len(value) == 0:
        raise InvalidArgumentError(message, details={"size": 0 if value is None else len(value)})
