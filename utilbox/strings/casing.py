"""String casing conversions.

None and empty input pass through unchanged so callers can chain these on
optional fields.

Usage:
    from utilbox.strings import to_snake_case

    to_snake_case("HelloWorld")  # 'hello_world'
"""

import re

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WORD_START = re.compile(r"(^|\s)(\S)")
_WORD_SEPARATOR = re.compile(r"[\W_]+")


def _capitalize_words(value: str) -> str:
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), value.lower())


def to_title_case(value: str | None) -> str | None:
    """Capitalize the first letter of every whitespace-separated word.

    Example:
        >>> to_title_case("hElLo WoRlD")
        'Hello World'
    """
    if not value:
        return value
    return _capitalize_words(value)


def to_camel_case(value: str | None) -> str | None:
    """Lowercase the first character, leaving the rest untouched.

    Example:
        >>> to_camel_case("HelloWorld")
        'helloWorld'
    """
    if not value:
        return value
    return value[0].lower() + value[1:]


def to_snake_case(value: str | None) -> str | None:
    """Insert underscores at lower-to-upper boundaries and lowercase.

    Example:
        >>> to_snake_case("helloWorld")
        'hello_world'
    """
    if value is None or not value.strip():
        return value
    return _CASE_BOUNDARY.sub(r"\1_\2", value).lower()


def to_kebab_case(value: str | None) -> str | None:
    """Insert hyphens at lower-to-upper boundaries and lowercase.

    Example:
        >>> to_kebab_case("HelloWorld")
        'hello-world'
    """
    if value is None or not value.strip():
        return value
    return _CASE_BOUNDARY.sub(r"\1-\2", value).lower()


def to_pascal_case(value: str | None) -> str | None:
    """Split on non-word characters and underscores, capitalize and join.

    Example:
        >>> to_pascal_case("hello_world")
        'HelloWorld'
    """
    if not value:
        return value
    words = [word for word in _WORD_SEPARATOR.split(value) if word]
    return "".join(word[0].upper() + word[1:].lower() for word in words)
