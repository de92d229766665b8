"""Collection transformation and merge utility functions."""

from collections import ChainMap
from typing import Any, Callable, Iterable, List, Mapping, MutableMapping, Optional, TypeVar

from collection_util.exceptions import InvalidArgumentError
from collection_util.utilities.objects import to_object_array

T = TypeVar("T")
U = TypeVar("U")


def _get_logger():
    """Lazy import logger."""
    from collection_util.helpers.logger import get_logger
    return get_logger(__name__)


def convert_list(from_list: Optional[Iterable[T]], mapping_function: Callable[[T], U]) -> List[U]:
    """
    Convert a list of one type into a list of another.

    Example:
        >>> convert_list(employees, lambda emp: User(emp.name, emp.email))

    Args:
        from_list: List to convert
        mapping_function: Function applied to each element

    Returns:
        New list holding the mapped elements in the original order

    Raises:
        InvalidArgumentError: If from_list is None
        Exception: Anything raised by mapping_function, unchanged
    """
    if from_list is None:
        raise InvalidArgumentError("List must not be None")
    return [mapping_function(item) for item in from_list]


def array_to_list(source: Any) -> List[Any]:
    """
    Convert an array into a list.

    Typed arrays (``array.array``, ``bytes`` and friends) become lists of
    plain Python values. Prefer ``list()`` when the argument is known to be
    a list or tuple; this helper is meant for values that may be any kind of
    array at runtime.

    Args:
        source: The (potentially typed) array, may be None

    Returns:
        The converted list; empty for None

    Raises:
        InvalidArgumentError: If source is not an array
    """
    return to_object_array(source)


def merge_array_into_collection(array: Any, collection: Any) -> None:
    """
    Merge the given array into the given collection.

    Elements are appended in array order. Sets and other collections
    without ``append`` receive them through ``add``.

    Args:
        array: The array to merge, may be None
        collection: The target collection to merge the array into

    Raises:
        InvalidArgumentError: If collection is None or cannot be added to
    """
    if collection is None:
        raise InvalidArgumentError("Collection must not be None")
    if hasattr(collection, "append"):
        add = collection.append
    elif hasattr(collection, "add"):
        add = collection.add
    else:
        raise InvalidArgumentError(
            f"Collection does not support adding elements: {type(collection).__name__}"
        )

    elements = to_object_array(array)
    for element in elements:
        add(element)
    _get_logger().debug("Merged array into collection", count=len(elements))


def _property_value(properties: Mapping[Any, Any], key: Any) -> Any:
    """Look up a property, falling back to linked defaults for None values."""
    value = properties[key]
    if value is None and isinstance(properties, ChainMap):
        # Allow for defaults fallback behind an overriding None
        for defaults in properties.maps[1:]:
            fallback = defaults.get(key)
            if fallback is not None:
                return fallback
    return value


def merge_properties_into_map(
    properties: Optional[Mapping[Any, Any]], target_map: MutableMapping[str, Any]
) -> None:
    """
    Merge a properties mapping into the given map, copying every entry.

    Keys are stored as strings. A ``ChainMap`` is treated as properties
    with linked defaults: entries that only exist in its parent maps are
    copied as well.

    Args:
        properties: The properties to merge, may be None
        target_map: The target map to merge the properties into

    Raises:
        InvalidArgumentError: If target_map is None
    """
    if target_map is None:
        raise InvalidArgumentError("Map must not be None")
    if properties is None:
        return
    count = 0
    for key in properties:
        target_map[str(key)] = _property_value(properties, key)
        count += 1
    _get_logger().debug("Merged properties into map", count=count)
