"""Lookup and conversion helpers for enums.

Display names and descriptions come from the metadata registry
(utilbox.enums.metadata); a member without registered text falls back to
its name.

Usage:
    from utilbox.enums import get_by_display_name, get_display_name

    get_display_name(AccountStatus.ACTIVE)  # "Active"
    get_by_display_name(AccountStatus, "Closed")  # AccountStatus.CLOSED
"""

import operator
from enum import Enum, Flag
from functools import reduce
from typing import Any, TypeVar

from utilbox.core.result import Result, Success
from utilbox.enums.metadata import get_metadata

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound=Flag)

INVALID_ENUM_VALUE = "invalid_enum_value"


def get_display_name(member: Enum) -> str:
    return get_metadata(member).display_name or member.name


def get_description(member: Enum) -> str:
    return get_metadata(member).description or member.name


def to_int(member: Enum) -> int:
    """Integer value of member.

    Raises:
        TypeError: If the member's value is not an integer.
    """
    if not isinstance(member.value, int):
        raise TypeError(f"{type(member).__name__}.{member.name} does not have an integer value")
    return int(member.value)


def has_flag(value: Enum, flag: Enum) -> bool:
    """Bitwise containment for Flag enums, plain equality otherwise."""
    if isinstance(value, Flag) and isinstance(flag, Flag):
        return (value & flag) == flag
    return value == flag


def is_valid_value(enum_cls: type[Enum], value: Any) -> bool:
    """Check if value is the value of a declared member (aliases included)."""
    return any(member.value == value for member in enum_cls.__members__.values())


def get_values_with_descriptions(enum_cls: type[Enum]) -> list[tuple[int, str]]:
    """Pairs of (integer value, description) for every member, in definition order."""
    return [(to_int(member), get_description(member)) for member in enum_cls]


def _require_text(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value


def get_by_display_name(enum_cls: type[E], display_name: str) -> E:
    """Find the member whose registered display name equals display_name.

    Raises:
        ValueError: If display_name is blank or no member matches.
    """
    _require_text(display_name, "display_name")
    for member in enum_cls:
        if get_metadata(member).display_name == display_name:
            return member
    raise ValueError(
        f"Enum with display name '{display_name}' not found in {enum_cls.__name__}"
    )


def get_by_description(enum_cls: type[E], description: str) -> E:
    """Find the member whose registered description equals description.

    Raises:
        ValueError: If description is blank or no member matches.
    """
    _require_text(description, "description")
    for member in enum_cls:
        if get_metadata(member).description == description:
            return member
    raise ValueError(
        f"Enum with description '{description}' not found in {enum_cls.__name__}"
    )


def get_description_by_display_name(enum_cls: type[Enum], display_name: str) -> str:
    """Registered description of the member with display_name, or ""."""
    try:
        member = get_by_display_name(enum_cls, display_name)
    except ValueError:
        return ""
    return get_metadata(member).description or ""


def get_all_values(enum_cls: type[E]) -> list[E]:
    return list(enum_cls)


def parse_enum(enum_cls: type[E], value: str, *, ignore_case: bool = True) -> E:
    """Resolve a member by name.

    Args:
        enum_cls: Enum class to search.
        value: Member name; surrounding whitespace is ignored.
        ignore_case: Compare names case-insensitively.

    Raises:
        ValueError: If value is blank or names no member.
    """
    name = _require_text(value, "value").strip()
    members = enum_cls.__members__
    if name in members:
        return members[name]
    if ignore_case:
        folded = name.casefold()
        for member_name, member in members.items():
            if member_name.casefold() == folded:
                return member
    raise ValueError(f"'{value}' is not a valid {enum_cls.__name__}")


def try_parse_enum(
    enum_cls: type[E], value: str, *, ignore_case: bool = True
) -> Result[E]:
    """Result-returning parse_enum: VALIDATION failure instead of raising."""
    try:
        member = parse_enum(enum_cls, value, ignore_case=ignore_case)
    except ValueError as exc:
        return Result.validation(INVALID_ENUM_VALUE, str(exc))
    return Success(value=member)


def get_display_names(enum_cls: type[E]) -> dict[E, str]:
    return {member: get_display_name(member) for member in enum_cls}


def get_descriptions(enum_cls: type[E]) -> dict[E, str]:
    return {member: get_description(member) for member in enum_cls}


def _require_flag(enum_cls: type[Enum]) -> None:
    if not issubclass(enum_cls, Flag):
        raise TypeError(f"Enum {enum_cls.__name__} must be a Flag enum")


def combine_flags(enum_cls: type[F], *flags: F) -> F:
    """Bitwise OR of flags (the empty flag when none are given).

    Raises:
        TypeError: If enum_cls is not a Flag enum.
    """
    _require_flag(enum_cls)
    return reduce(operator.or_, flags, enum_cls(0))


def remove_flag(value: F, flag: F) -> F:
    """Clear the bits of flag from value.

    Raises:
        TypeError: If value is not a Flag member.
    """
    _require_flag(type(value))
    return value & ~flag
