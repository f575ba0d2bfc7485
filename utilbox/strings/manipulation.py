"""String manipulation helpers."""

import unicodedata
from collections.abc import Mapping


def trim_to_length(value: str | None, max_length: int) -> str:
    """Cut value to max_length characters, appending '...' when cut.

    Returns an empty string for empty input or a non-positive max_length.
    """
    if not value or max_length <= 0:
        return ""
    if len(value) > max_length:
        return value[:max_length] + "..."
    return value


def safe_substring(value: str | None, start: int, length: int) -> str:
    """Substring that never raises; out-of-range start yields ''."""
    if not value or start < 0 or start >= len(value):
        return ""
    return value[start : start + max(length, 0)]


def remove_whitespace(value: str | None) -> str | None:
    """Remove every whitespace character."""
    if not value:
        return value
    return "".join(ch for ch in value if not ch.isspace())


def remove_accents(value: str | None) -> str | None:
    """Strip combining diacritical marks ('café' -> 'cafe')."""
    if not value:
        return value
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def remove_non_alphanumeric(value: str | None) -> str | None:
    """Keep only letters and digits."""
    if not value:
        return value
    return "".join(ch for ch in value if ch.isalnum())


def replace_multiple(value: str | None, replacements: Mapping[str, str] | None) -> str | None:
    """Apply replacements sequentially, in mapping order."""
    if not value or replacements is None:
        return value
    for old, new in replacements.items():
        value = value.replace(old, new)
    return value


def reverse(value: str | None) -> str | None:
    """Reverse the characters of value."""
    if value is None:
        return None
    return value[::-1]


def reverse_words(value: str | None) -> str | None:
    """Reverse space-separated word order, collapsing repeated spaces."""
    if value is None or not value.strip():
        return value
    return " ".join(reversed(value.split()))
