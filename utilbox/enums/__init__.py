"""Enum helpers backed by an explicit metadata registry."""

from utilbox.enums.helpers import (
    combine_flags,
    get_all_values,
    get_by_description,
    get_by_display_name,
    get_description,
    get_description_by_display_name,
    get_descriptions,
    get_display_name,
    get_display_names,
    get_values_with_descriptions,
    has_flag,
    is_valid_value,
    parse_enum,
    remove_flag,
    to_int,
    try_parse_enum,
)
from utilbox.enums.metadata import (
    EnumMetadata,
    enum_metadata,
    get_metadata,
    register_enum_metadata,
)

__all__ = [
    # Metadata registry
    "EnumMetadata",
    "enum_metadata",
    "get_metadata",
    "register_enum_metadata",
    # Helpers
    "combine_flags",
    "get_all_values",
    "get_by_description",
    "get_by_display_name",
    "get_description",
    "get_description_by_display_name",
    "get_descriptions",
    "get_display_name",
    "get_display_names",
    "get_values_with_descriptions",
    "has_flag",
    "is_valid_value",
    "parse_enum",
    "remove_flag",
    "to_int",
    "try_parse_enum",
]
