"""String helpers: casing, validation and manipulation.

Usage:
    from utilbox.strings import to_kebab_case, is_valid_isbn, trim_to_length
"""

from utilbox.strings.casing import (
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)
from utilbox.strings.manipulation import (
    remove_accents,
    remove_non_alphanumeric,
    remove_whitespace,
    replace_multiple,
    reverse,
    reverse_words,
    safe_substring,
    trim_to_length,
)
from utilbox.strings.validation import (
    contains_only_digits,
    ends_with_any,
    is_alphabetic,
    is_numeric,
    is_palindrome,
    is_valid_email,
    is_valid_isbn,
    is_valid_url,
    starts_with_any,
)

__all__ = [
    "contains_only_digits",
    "ends_with_any",
    "is_alphabetic",
    "is_numeric",
    "is_palindrome",
    "is_valid_email",
    "is_valid_isbn",
    "is_valid_url",
    "remove_accents",
    "remove_non_alphanumeric",
    "remove_whitespace",
    "replace_multiple",
    "reverse",
    "reverse_words",
    "safe_substring",
    "starts_with_any",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "trim_to_length",
]
