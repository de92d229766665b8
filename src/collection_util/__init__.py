"""collection-util - null-safe collection helpers.

Key Components:
    - collections: validation, filtering, transforming helpers and the
      multi-value map adapter
    - utilities: precondition assertions and array normalisation
    - config: defaults, environment overrides and the typed schema
    - helpers: structlog logging setup

Usage:
    >>> from collection_util import find_first_match, to_multi_value_map
    >>> find_first_match({"a", "b"}, ["x", "b", "a"])
    'b'
    >>> m = to_multi_value_map({})
    >>> m.add("k", "v1")
    >>> m.get_first("k")
    'v1'
"""

from collection_util._package import PACKAGE_NAME, __version__
from collection_util.collections import (
    MultiValueMap,
    MultiValueMapAdapter,
    array_to_list,
    contains_any,
    contains_instance,
    convert_list,
    find_first_match,
    find_instance_of_type,
    find_value_of_type,
    is_empty,
    is_not_empty,
    list_is_empty,
    list_is_not_empty,
    merge_array_into_collection,
    merge_properties_into_map,
    to_multi_value_map,
)
from collection_util.exceptions import (
    CollectionUtilError,
    ConfigurationError,
    InvalidArgumentError,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    "is_empty",
    "is_not_empty",
    "list_is_empty",
    "list_is_not_empty",
    "contains_instance",
    "contains_any",
    "find_first_match",
    "find_instance_of_type",
    "find_value_of_type",
    "convert_list",
    "array_to_list",
    "merge_array_into_collection",
    "merge_properties_into_map",
    "MultiValueMap",
    "MultiValueMapAdapter",
    "to_multi_value_map",
    "CollectionUtilError",
    "ConfigurationError",
    "InvalidArgumentError",
]
