"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Failures are data: one or more structured Error
values carried by a Failure. The only place an exception is turned into an
Error is Result.attempt / Result.attempt_async.

Architecture:
- Result[T] is a closed tagged union: Success[T] | Failure[T]
- Both variants are frozen dataclasses (never mutated after construction)
- Payload-less results are Result[None] (Result.success() carries None)
- Reading .value on a Failure raises ResultValueAccessError

Usage:
    def divide(a: float, b: float) -> Result[float]:
        if b == 0:
            return Result.validation("division_by_zero", "Cannot divide by zero")
        return Result.success(a / b)

    result = divide(10, 2).map(lambda v: v * 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(errors=errors):
            print(f"Errors: {errors}")
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from utilbox.core.container import get_logger
from utilbox.core.enums import ErrorType
from utilbox.core.errors import Error, ResultUsageError, ResultValueAccessError

T = TypeVar("T")  # Success value type
U = TypeVar("U")  # Mapped value type

ErrorMapper = Callable[[Exception], "Error | Iterable[Error]"]


def _normalize_errors(errors: "Error | Iterable[Error] | str | None") -> tuple[Error, ...]:
    """Coerce failure input into a non-empty tuple of real errors.

    A bare string is wrapped in a GENERIC error with an empty code.

    Raises:
        ResultUsageError: If input is None, empty, Error.NONE, or holds
            anything other than Error instances.
    """
    if errors is None:
        raise ResultUsageError("A failure requires an error, got None")
    if isinstance(errors, str):
        normalized: tuple[Any, ...] = (Error.generic("", errors),)
    elif isinstance(errors, Error):
        normalized = (errors,)
    else:
        normalized = tuple(errors)

    if not normalized:
        raise ResultUsageError("A failure requires at least one error")
    for error in normalized:
        if not isinstance(error, Error):
            raise ResultUsageError(
                f"Failure errors must be Error instances, got {type(error).__name__}"
            )
        if error == Error.NONE:
            raise ResultUsageError("Error.NONE cannot be used as a failure")
    return normalized


class Result(ABC, Generic[T]):
    """Outcome of an operation: Success[T] or Failure[T].

    Never instantiate Result directly; use the factories (success, failure,
    the category shortcuts, combine, attempt).
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @staticmethod
    def success(value: U = None) -> "Success[U]":  # type: ignore[assignment]
        """Create a successful result, optionally carrying a value."""
        return Success(value=value)

    @staticmethod
    def failure(errors: "Error | Iterable[Error] | str") -> "Failure[Any]":
        """Create a failed result from one error or an ordered list of errors.

        Args:
            errors: An Error, an iterable of Errors (first is primary), or a
                plain message wrapped in a GENERIC error.

        Raises:
            ResultUsageError: If no real error is supplied.
        """
        return Failure(errors=errors)  # type: ignore[arg-type]

    @staticmethod
    def validation(
        code: str = "validation_failed", description: str = "Validation failed"
    ) -> "Failure[Any]":
        """Create a VALIDATION failure."""
        return Failure(errors=(Error.validation(code, description),))

    @staticmethod
    def not_found(
        code: str = "not_found", description: str = "Resource not found"
    ) -> "Failure[Any]":
        """Create a NOT_FOUND failure."""
        return Failure(errors=(Error.not_found(code, description),))

    @staticmethod
    def conflict(
        code: str = "conflict", description: str = "Resource conflict"
    ) -> "Failure[Any]":
        """Create a CONFLICT failure."""
        return Failure(errors=(Error.conflict(code, description),))

    @staticmethod
    def unauthorized(
        code: str = "unauthorized", description: str = "Authentication required"
    ) -> "Failure[Any]":
        """Create an AUTHENTICATION failure."""
        return Failure(errors=(Error.authentication(code, description),))

    @staticmethod
    def forbidden(
        code: str = "forbidden", description: str = "Access denied"
    ) -> "Failure[Any]":
        """Create an AUTHORIZATION failure."""
        return Failure(errors=(Error.authorization(code, description),))

    @staticmethod
    def unexpected(
        code: str = "unexpected", description: str = "An unexpected error occurred"
    ) -> "Failure[Any]":
        """Create an UNEXPECTED failure."""
        return Failure(errors=(Error.unexpected(code, description),))

    @staticmethod
    def combine(*results: "Result[Any]") -> "Result[None]":
        """Combine results into one payload-less result.

        Args:
            *results: Results to combine.

        Returns:
            Success(None) if every input succeeded, otherwise a Failure with
            the errors of every failed input concatenated in input order.

        Example:
            >>> combined = Result.combine(Result.success(), Result.failure(a), Result.failure(b))
            >>> combined.errors == (a, b)
            True
        """
        errors = [error for result in results if result.is_failure for error in result.errors]
        if errors:
            return Failure(errors=tuple(errors))
        return Success(value=None)

    @staticmethod
    def attempt(
        func: Callable[[], U],
        *,
        map_error: ErrorMapper | None = None,
        exception_type: type[Exception] = Exception,
    ) -> "Result[U]":
        """Run func and capture a raised exception as a Failure.

        Args:
            func: Zero-argument callable to run.
            map_error: Optional mapping from exception to Error(s). Applied
                only to instances of exception_type.
            exception_type: Exception class handled by map_error. Other
                exceptions fall through to the generic UNEXPECTED handler.

        Returns:
            Success with func's return value, or Failure describing the
            exception. The generic handler keeps the exception as the
            error's cause.

        Note:
            Only Exception subclasses are intercepted; KeyboardInterrupt,
            SystemExit and asyncio.CancelledError propagate.
        """
        try:
            value = func()
        except Exception as exc:
            return _failure_from_exception(exc, map_error, exception_type)
        return Success(value=value)

    @staticmethod
    async def attempt_async(
        func: Callable[[], Awaitable[U]],
        *,
        map_error: ErrorMapper | None = None,
        exception_type: type[Exception] = Exception,
    ) -> "Result[U]":
        """Await func() and capture a raised exception as a Failure.

        Same contract as attempt(), for coroutine functions.
        """
        try:
            value = await func()
        except Exception as exc:
            return _failure_from_exception(exc, map_error, exception_type)
        return Success(value=value)

    # ------------------------------------------------------------------
    # Shared accessors
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def is_success(self) -> bool:
        """True when the operation succeeded."""

    @property
    def is_failure(self) -> bool:
        """True when the operation failed."""
        return not self.is_success

    # Provided by each variant (a dataclass field on Failure)
    errors: tuple[Error, ...]

    @property
    def error(self) -> Error:
        """Primary error, or Error.NONE on success."""
        errors = self.errors
        return errors[0] if errors else Error.NONE

    @property
    def error_type(self) -> ErrorType:
        """Category of the primary error (GENERIC on success)."""
        return self.error.type

    def value_or(self, default: T) -> T:
        """Return the success value, or default on failure."""
        if self.is_success:
            return self.value  # type: ignore[attr-defined,no-any-return]
        return default

    # ------------------------------------------------------------------
    # Side-effect hooks
    # ------------------------------------------------------------------

    def on_success(self, action: Callable[[T], object]) -> "Result[T]":
        """Run action(value) if successful; return self unchanged."""
        if self.is_success:
            action(self.value)  # type: ignore[attr-defined]
        return self

    def on_failure(self, action: Callable[[tuple[Error, ...]], object]) -> "Result[T]":
        """Run action(errors) if failed; return self unchanged."""
        if self.is_failure:
            action(self.errors)
        return self

    def match(
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[tuple[Error, ...]], U],
    ) -> U:
        """Exit the Result world: exactly one branch runs, its return is returned."""
        if self.is_success:
            return on_success(self.value)  # type: ignore[attr-defined]
        return on_failure(self.errors)

    # ------------------------------------------------------------------
    # Combinators (implemented per variant)
    # ------------------------------------------------------------------

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Transform the success value; failures propagate unchanged."""

    @abstractmethod
    def chain(self, func: "Callable[[T], Result[U]]") -> "Result[U]":
        """Bind a Result-returning step; failures short-circuit."""

    @abstractmethod
    def ensure(
        self,
        predicate: Callable[[T], bool],
        error: "Error | Callable[[T], Error]",
    ) -> "Result[T]":
        """Fail with error unless predicate(value) holds."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Result[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (None for payload-less results).
    """

    __match_args__ = ("value",)

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def errors(self) -> tuple[Error, ...]:
        return ()

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Wrap func(value) in a new Success."""
        return Success(value=func(self.value))

    def chain(self, func: "Callable[[T], Result[U]]") -> "Result[U]":
        """Return func(value) as-is (monadic bind, no double wrapping)."""
        return func(self.value)

    def ensure(
        self,
        predicate: Callable[[T], bool],
        error: "Error | Callable[[T], Error]",
    ) -> "Result[T]":
        """Keep self if predicate(value) holds, otherwise fail with error.

        Args:
            predicate: Check applied to the value.
            error: Error to report, or a factory deriving it from the value.
        """
        if predicate(self.value):
            return self
        resolved = error if isinstance(error, Error) else error(self.value)
        return Failure(errors=(resolved,))


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Result[T]):
    """Represents a failed operation result.

    Attributes:
        errors: Non-empty tuple of errors; the first is the primary error.

    Raises:
        ResultUsageError: On construction with no errors or with Error.NONE.
    """

    __match_args__ = ("errors",)

    errors: tuple[Error, ...]  # type: ignore[misc]

    def __post_init__(self) -> None:
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "errors", _normalize_errors(self.errors))

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> T:
        """Always raises: a failure carries no value."""
        raise ResultValueAccessError(self.errors)

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Propagate errors unchanged; func is never called."""
        return Failure(errors=self.errors)

    def chain(self, func: "Callable[[T], Result[U]]") -> "Result[U]":
        """Short-circuit: propagate errors unchanged; func is never called."""
        return Failure(errors=self.errors)

    def ensure(
        self,
        predicate: Callable[[T], bool],
        error: "Error | Callable[[T], Error]",
    ) -> "Result[T]":
        """No-op on an existing failure."""
        return self


def _failure_from_exception(
    exc: Exception,
    map_error: ErrorMapper | None,
    exception_type: type[Exception],
) -> "Failure[Any]":
    """Translate an intercepted exception into a Failure and log it."""
    if map_error is not None and isinstance(exc, exception_type):
        failure: Failure[Any] = Failure(errors=map_error(exc))  # type: ignore[arg-type]
    else:
        failure = Failure(errors=(Error.from_exception(exc),))

    get_logger().warning(
        "result_attempt_failed",
        error_type=type(exc).__name__,
        error_message=str(exc),
        error_code=failure.error.code,
    )
    return failure
