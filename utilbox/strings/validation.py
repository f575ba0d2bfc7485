"""Boolean string checks.

All checks return False for None or empty input rather than raising.
"""

from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email


def is_valid_email(value: str | None) -> bool:
    """Check RFC-compliant email syntax (no deliverability lookup).

    The address must already be in its normalized form apart from case,
    e.g. surrounding whitespace or display names are rejected.
    """
    if not value or not value.strip():
        return False
    try:
        validated = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return validated.normalized.lower() == value.lower()


def is_alphabetic(value: str | None) -> bool:
    """Check that every character is a letter."""
    return bool(value) and value.isalpha()  # type: ignore[union-attr]


def is_numeric(value: str | None) -> bool:
    """Check that the string parses as a number (int, decimal or exponent)."""
    if not value or not value.strip():
        return False
    try:
        float(value.replace(",", ""))
    except ValueError:
        return False
    return True


def contains_only_digits(value: str | None) -> bool:
    """Check that every character is a decimal digit."""
    return bool(value) and value.isdecimal()  # type: ignore[union-attr]


def is_palindrome(value: str | None) -> bool:
    """Case-insensitive palindrome check; empty input is not a palindrome."""
    if not value:
        return False
    folded = value.lower()
    return folded == folded[::-1]


def is_valid_url(value: str | None) -> bool:
    """Check for an absolute http(s) URL with a host."""
    if not value or not value.strip():
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme.lower() in {"http", "https"} and bool(parts.netloc)


def starts_with_any(value: str | None, *prefixes: str) -> bool:
    """Check whether value starts with any of the given prefixes (ordinal)."""
    if value is None:
        return False
    return any(value.startswith(prefix) for prefix in prefixes)


def ends_with_any(value: str | None, *suffixes: str) -> bool:
    """Check whether value ends with any of the given suffixes (ordinal)."""
    if value is None:
        return False
    return any(value.endswith(suffix) for suffix in suffixes)


def is_valid_isbn(value: str | None) -> bool:
    """Validate an ISBN-10 or ISBN-13 checksum.

    Hyphens and spaces are ignored. An ISBN-10 may end in 'X' (value 10).

    Example:
        >>> is_valid_isbn("0-306-40615-2")
        True
        >>> is_valid_isbn("978-0-306-40615-7")
        True
    """
    if not value:
        return False
    isbn = value.replace("-", "").replace(" ", "")
    if len(isbn) == 10:
        return _is_valid_isbn10(isbn)
    if len(isbn) == 13:
        return _is_valid_isbn13(isbn)
    return False


def _is_valid_isbn10(isbn: str) -> bool:
    body, check = isbn[:9], isbn[9]
    if not body.isdecimal() or not (check.isdecimal() or check == "X"):
        return False
    total = sum((10 - i) * int(digit) for i, digit in enumerate(body))
    total += 10 if check == "X" else int(check)
    return total % 11 == 0


def _is_valid_isbn13(isbn: str) -> bool:
    if not isbn.isdecimal():
        return False
    total = sum(int(digit) * (1 if i % 2 == 0 else 3) for i, digit in enumerate(isbn[:12]))
    return int(isbn[12]) == (10 - total % 10) % 10
