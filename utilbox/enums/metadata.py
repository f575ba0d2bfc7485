"""Enum Metadata Registry - display names and descriptions for enum members.

Enum members carry no presentation text of their own. Human-readable names
and longer descriptions are registered once per enum class, either with the
class decorator or by calling register_enum_metadata directly, and looked
up by the helpers in utilbox.enums.helpers.

Adding metadata to an enum:
1. Decorate the class with @enum_metadata(MEMBER=EnumMetadata(...), ...)
2. Members without an entry fall back to their name

Usage:
    from enum import Enum
    from utilbox.enums import EnumMetadata, enum_metadata

    @enum_metadata(
        ACTIVE=EnumMetadata(display_name="Active", description="Account in use"),
        CLOSED=EnumMetadata(display_name="Closed"),
    )
    class AccountStatus(Enum):
        ACTIVE = 1
        CLOSED = 2
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=type[Enum])


@dataclass(frozen=True, slots=True)
class EnumMetadata:
    """Presentation metadata for a single enum member.

    Attributes:
        display_name: Short label shown to users.
        description: Longer explanation of the member.
    """

    display_name: str | None = None
    description: str | None = None


_EMPTY = EnumMetadata()

# ═══════════════════════════════════════════════════════════════
# ENUM METADATA REGISTRY
# ═══════════════════════════════════════════════════════════════

_REGISTRY: dict[type[Enum], dict[Enum, EnumMetadata]] = {}


def register_enum_metadata(
    enum_cls: type[Enum], mapping: Mapping[Enum | str, EnumMetadata]
) -> None:
    """Register metadata for members of enum_cls.

    Entries are merged into any metadata already registered for the class.

    Args:
        enum_cls: Enum class the metadata belongs to.
        mapping: Members (or member names) mapped to their metadata.

    Raises:
        ValueError: If a key is not a member of enum_cls.
    """
    entries = _REGISTRY.setdefault(enum_cls, {})
    for key, metadata in mapping.items():
        # Checked first: members of str-mixin enums are also str instances
        if isinstance(key, enum_cls):
            member = key
        elif isinstance(key, str) and key in enum_cls.__members__:
            member = enum_cls.__members__[key]
        else:
            raise ValueError(f"{key!r} is not a member of {enum_cls.__name__}")
        entries[member] = metadata


def enum_metadata(**by_member_name: EnumMetadata) -> Callable[[E], E]:
    """Class decorator form of register_enum_metadata."""

    def decorator(enum_cls: E) -> E:
        register_enum_metadata(enum_cls, by_member_name)
        return enum_cls

    return decorator


def get_metadata(member: Enum) -> EnumMetadata:
    """Return the metadata registered for member (empty when none)."""
    return _REGISTRY.get(type(member), {}).get(member, _EMPTY)
