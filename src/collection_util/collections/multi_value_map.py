"""Multi-value map contract and the adapter over plain mappings of lists."""

from abc import abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Mapping, MutableMapping, Optional, TypeVar

from collection_util.exceptions import InvalidArgumentError
from collection_util.utilities.assertions import not_empty, not_null

K = TypeVar("K")
V = TypeVar("V")


def _get_logger():
    """Lazy import logger."""
    from collection_util.helpers.logger import get_logger
    return get_logger(__name__)


class MultiValueMap(MutableMapping[K, List[V]]):
    """
    A mapping that stores multiple values per key.

    Item access works on the whole value list; the methods below work on
    individual values.
    """

    @abstractmethod
    def add(self, key: K, value: V) -> None:
        """Append a value to the list for key, creating the list if needed."""

    def add_all(self, key: K, values: Iterable[V]) -> None:
        """Append every value to the list for key."""
        for value in values:
            self.add(key, value)

    @abstractmethod
    def get_first(self, key: K) -> Optional[V]:
        """Return the first value for key, or None if the key is absent."""

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        """Replace the values for key with the single given value."""

    @abstractmethod
    def set_all(self, values: Mapping[K, V]) -> None:
        """Replace the values for every key of the given single-value mapping."""

    @abstractmethod
    def to_single_value_map(self) -> Dict[K, V]:
        """Return a new mapping of each key to its first value."""


class MultiValueMapAdapter(MultiValueMap[K, V]):
    """
    Adapts a ``MutableMapping[K, List[V]]`` to the MultiValueMap contract.

    The backing map is referenced, not copied: changes made through the
    adapter are visible in the backing map and vice versa. Container
    operations are passed straight through to the backing map.
    """

    def __init__(self, backing_map: MutableMapping[K, List[V]], reject_empty: Optional[bool] = None):
        """
        Wrap a backing map.

        Args:
            backing_map: Mapping of keys to value lists
            reject_empty: Also reject an empty backing map. Defaults to the
                ``multi_value_map.reject_empty_backing_map`` configuration value.

        Raises:
            InvalidArgumentError: If backing_map is None, not a mutable
                mapping, or empty while empty maps are rejected
        """
        not_null(backing_map, "'map' must not be None")
        if not isinstance(backing_map, MutableMapping):
            raise InvalidArgumentError(
                f"'map' must be a mutable mapping, got {type(backing_map).__name__}"
            )
        if reject_empty is None:
            from collection_util.config.manager import get_config_manager
            reject_empty = get_config_manager().config.multi_value_map.reject_empty_backing_map
        if reject_empty:
            not_empty(backing_map, "'map' must not be empty")
        self._map = backing_map
        _get_logger().debug("Created multi-value map adapter", size=len(backing_map))

    # Multi-value operations

    def add(self, key: K, value: V) -> None:
        values = self._map.get(key)
        if values is None:
            values = []
            self._map[key] = values
        values.append(value)

    def get_first(self, key: K) -> Optional[V]:
        """
        Raises:
            IndexError: If key is present with an empty list
        """
        values = self._map.get(key)
        return values[0] if values is not None else None

    def set(self, key: K, value: V) -> None:
        self._map[key] = [value]

    def set_all(self, values: Mapping[K, V]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def to_single_value_map(self) -> Dict[K, V]:
        """
        Raises:
            IndexError: If any key is present with an empty list
        """
        return {key: values[0] for key, values in self._map.items()}

    # Delegated container operations

    def __getitem__(self, key: K) -> List[V]:
        return self._map[key]

    def __setitem__(self, key: K, value: List[V]) -> None:
        self._map[key] = value

    def __delitem__(self, key: K) -> None:
        del self._map[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: Any) -> bool:
        return key in self._map

    def get(self, key: K, default: Any = None) -> Any:
        return self._map.get(key, default)

    def pop(self, key: K, *default: Any) -> Any:
        return self._map.pop(key, *default)

    def update(self, *args: Any, **kwargs: Any) -> None:
        self._map.update(*args, **kwargs)

    def clear(self) -> None:
        self._map.clear()

    def keys(self):
        return self._map.keys()

    def values(self):
        return self._map.values()

    def items(self):
        return self._map.items()

    def is_empty(self) -> bool:
        return len(self._map) == 0

    def contains_value(self, value: Any) -> bool:
        """Check whether any key maps to the given value list."""
        return any(values == value for values in self._map.values())

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        return self._map == other

    def __hash__(self) -> int:
        # Unhashable backing maps (dict) raise TypeError here, as they would directly.
        return hash(self._map)

    def __str__(self) -> str:
        return str(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"


def to_multi_value_map(mapping: MutableMapping[K, List[V]]) -> MultiValueMap[K, V]:
    """
    Adapt a ``MutableMapping[K, List[V]]`` to a MultiValueMap.

    Args:
        mapping: The original mapping

    Returns:
        The multi-value map view over mapping
    """
    return MultiValueMapAdapter(mapping)
