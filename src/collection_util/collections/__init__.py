"""Collection utility functions organized by responsibility."""

from collection_util.collections.filtering import (
    contains_any,
    contains_instance,
    find_first_match,
    find_instance_of_type,
    find_value_of_type,
)
from collection_util.collections.multi_value_map import (
    MultiValueMap,
    MultiValueMapAdapter,
    to_multi_value_map,
)
from collection_util.collections.transforming import (
    array_to_list,
    convert_list,
    merge_array_into_collection,
    merge_properties_into_map,
)
from collection_util.collections.validation import (
    is_empty,
    is_not_empty,
    list_is_empty,
    list_is_not_empty,
)

__all__ = [
    # Validation functions
    "is_empty",
    "is_not_empty",
    "list_is_empty",
    "list_is_not_empty",
    # Filtering functions
    "contains_instance",
    "contains_any",
    "find_first_match",
    "find_instance_of_type",
    "find_value_of_type",
    # Transformation functions
    "convert_list",
    "array_to_list",
    "merge_array_into_collection",
    "merge_properties_into_map",
    # Multi-value maps
    "MultiValueMap",
    "MultiValueMapAdapter",
    "to_multi_value_map",
]
