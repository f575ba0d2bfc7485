"""Unit tests for Error value objects and ErrorType.

Tests cover:
- Category factories fix the ErrorType
- Error.NONE sentinel
- Structural equality (cause excluded)
- from_exception conversion
- Result misuse exceptions

Architecture:
- Pure unit tests
"""

from dataclasses import FrozenInstanceError

import pytest

from utilbox.core.enums import ErrorType
from utilbox.core.errors import Error, ResultUsageError, ResultValueAccessError


@pytest.mark.unit
class TestErrorType:
    """Test ErrorType enum."""

    def test_values_are_snake_case_strings(self):
        """Test every category has its string value."""
        assert ErrorType.values() == [
            "generic",
            "validation",
            "not_found",
            "conflict",
            "authentication",
            "authorization",
            "unexpected",
        ]

    def test_error_type_is_str(self):
        """Test categories compare equal to their values."""
        assert ErrorType.NOT_FOUND == "not_found"


@pytest.mark.unit
class TestErrorFactories:
    """Test Error factory classmethods."""

    @pytest.mark.parametrize(
        ("factory", "error_type"),
        [
            (Error.generic, ErrorType.GENERIC),
            (Error.validation, ErrorType.VALIDATION),
            (Error.not_found, ErrorType.NOT_FOUND),
            (Error.conflict, ErrorType.CONFLICT),
            (Error.authentication, ErrorType.AUTHENTICATION),
            (Error.authorization, ErrorType.AUTHORIZATION),
            (Error.unexpected, ErrorType.UNEXPECTED),
        ],
    )
    def test_factory_sets_type(self, factory, error_type):
        """Test each factory fixes its category."""
        error = factory("code", "Description")

        assert error.type == error_type
        assert error.code == "code"
        assert error.description == "Description"

    def test_default_type_is_generic(self):
        """Test direct construction defaults to GENERIC."""
        assert Error(code="x", description="y").type == ErrorType.GENERIC

    def test_str_renders_code_and_description(self):
        """Test string representation."""
        assert str(Error.not_found("user_not_found", "No user")) == "user_not_found: No user"


@pytest.mark.unit
class TestErrorEquality:
    """Test structural equality and immutability."""

    def test_equal_fields_are_equal(self):
        """Test errors with the same fields are equal and hash alike."""
        first = Error.validation("bad", "Bad input")
        second = Error.validation("bad", "Bad input")

        assert first == second
        assert hash(first) == hash(second)

    def test_different_type_not_equal(self):
        """Test the category takes part in equality."""
        assert Error.validation("bad", "Bad") != Error.conflict("bad", "Bad")

    def test_cause_excluded_from_equality(self):
        """Test two errors differing only by cause are equal."""
        assert Error.unexpected("e", "boom", cause=ValueError("a")) == Error.unexpected(
            "e", "boom"
        )

    def test_error_is_frozen(self):
        """Test fields cannot be reassigned."""
        error = Error.generic("a", "b")

        with pytest.raises(FrozenInstanceError):
            error.code = "c"


@pytest.mark.unit
class TestErrorNone:
    """Test the Error.NONE sentinel."""

    def test_none_sentinel_fields(self):
        """Test NONE has empty code and description and GENERIC type."""
        assert Error.NONE.code == ""
        assert Error.NONE.description == ""
        assert Error.NONE.type == ErrorType.GENERIC
        assert Error.NONE.is_none

    def test_real_error_is_not_none(self):
        """Test a real error is not the sentinel."""
        assert not Error.generic("a", "b").is_none


@pytest.mark.unit
class TestErrorFromException:
    """Test exception conversion."""

    def test_from_exception(self):
        """Test class name becomes code and message becomes description."""
        exc = KeyError("missing")

        error = Error.from_exception(exc)

        assert error.type == ErrorType.UNEXPECTED
        assert error.code == "KeyError"
        assert error.description == str(exc)
        assert error.cause is exc

    def test_cause_not_in_repr(self):
        """Test repr omits the cause."""
        error = Error.from_exception(ValueError("secret"))

        assert "cause" not in repr(error)


@pytest.mark.unit
class TestResultExceptions:
    """Test Result misuse exceptions."""

    def test_usage_error_is_value_error(self):
        """Test ResultUsageError subclasses ValueError."""
        assert issubclass(ResultUsageError, ValueError)

    def test_value_access_error_carries_errors(self):
        """Test the access error keeps the failure's errors."""
        errors = (Error.not_found("missing", "Missing"),)

        exc = ResultValueAccessError(errors)

        assert exc.errors == errors
        assert str(exc) == "Cannot access value of a failed result (missing: Missing)"
