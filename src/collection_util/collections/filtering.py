"""Collection filtering and search utility functions."""

from typing import Any, Callable, Collection, Iterable, Optional, Tuple, Type, TypeVar, Union

from collection_util.collections.validation import is_empty

T = TypeVar("T")

TypeFilter = Union[Type[Any], Tuple[Type[Any], ...], None]


def contains_instance(collection: Optional[Iterable[Any]], element: Any) -> bool:
    """
    Check whether a collection contains the given element instance.

    An element matches when it is the same object or compares equal.

    Args:
        collection: Collection to check, may be None
        element: Element to look for, may be None

    Returns:
        True if found, False otherwise
    """
    if collection is not None:
        for candidate in collection:
            if candidate is element or candidate == element:
                return True
    return False


def contains_any(source: Optional[Collection[Any]], candidates: Optional[Collection[Any]]) -> bool:
    """
    Check whether any element of candidates is contained in source.

    Args:
        source: Source collection
        candidates: Candidates to search for

    Returns:
        True if any candidate is present, False if none is or either input is empty
    """
    if is_empty(source) or is_empty(candidates):
        return False
    return any(candidate in source for candidate in candidates)


def find_first_match(
    source: Optional[Collection[Any]], candidates: Optional[Collection[T]]
) -> Optional[T]:
    """
    Return the first element of candidates that is contained in source.

    Candidates are checked in their own iteration order.

    Args:
        source: Source collection
        candidates: Candidates to search for

    Returns:
        The first present candidate, or None if not found
    """
    if is_empty(source) or is_empty(candidates):
        return None
    for candidate in candidates:
        if candidate in source:
            return candidate
    return None


def _matcher(type_: TypeFilter, matches: Optional[Callable[[Any], bool]]) -> Callable[[Any], bool]:
    """Build the element test used by the type searches."""
    if matches is not None:
        return matches
    if type_ is None:
        return lambda element: True
    return lambda element: isinstance(element, type_)


def find_instance_of_type(
    collection: Optional[Collection[Any]],
    type_: TypeFilter = None,
    matches: Optional[Callable[[Any], bool]] = None,
) -> Any:
    """
    Find the first value of the given type in a collection.

    Scanning stops as soon as a second matching element is seen; the first
    one is returned regardless.

    Args:
        collection: Collection to search
        type_: Type (or tuple of types) to look for; None matches everything
        matches: Optional predicate used instead of the type check

    Returns:
        First matching value, or None if none
    """
    if is_empty(collection):
        return None
    test = _matcher(type_, matches)
    value = None
    found = False
    for element in collection:
        if test(element):
            if found:
                break
            value = element
            found = True
    return value


def find_value_of_type(
    collection: Optional[Collection[Any]],
    type_: TypeFilter = None,
    matches: Optional[Callable[[Any], bool]] = None,
) -> Any:
    """
    Find a single value of the given type in a collection.

    Args:
        collection: Collection to search
        type_: Type (or tuple of types) to look for; None matches everything
        matches: Optional predicate used instead of the type check

    Returns:
        The matching value if there is exactly one, None if there are
        none or more than one
    """
    if is_empty(collection):
        return None
    test = _matcher(type_, matches)
    value = None
    found = False
    for element in collection:
        if test(element):
            if found:
                # More than one value found, no clear single value.
                return None
            value = element
            found = True
    return value
