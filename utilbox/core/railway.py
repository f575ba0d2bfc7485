"""Free-function combinators for chaining Results.

These mirror the Result methods as plain functions and add async variants.
Every combinator short-circuits: a Failure input is forwarded with its
errors unchanged and the supplied function is never called.

Usage:
    from utilbox.core.railway import chain, chain_async, transform

    order = chain(create_order(customer_id, amount), validate_inventory)
    dto = transform(order, to_dto)

    payment = await chain_async(order, process_payment)
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from utilbox.core.errors import Error
from utilbox.core.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")


def chain(result: Result[T], func: Callable[[T], Result[U]]) -> Result[U]:
    """Bind a Result-returning function onto a result.

    Args:
        result: Input result.
        func: Function from the success value to a new Result.

    Returns:
        The input's errors as a Failure if it failed (func not called),
        otherwise exactly what func returns.
    """
    if isinstance(result, Failure):
        return Failure(errors=result.errors)
    return func(result.value)


async def chain_async(
    result: Result[T], func: Callable[[T], Awaitable[Result[U]]]
) -> Result[U]:
    """Async bind: await func(value) only when result succeeded.

    Pure sequential continuation. Cancellation of the awaited call
    propagates to the caller untouched.
    """
    if isinstance(result, Failure):
        return Failure(errors=result.errors)
    return await func(result.value)


def transform(result: Result[T], func: Callable[[T], U]) -> Result[U]:
    """Map a plain (non-Result) function over a successful value.

    Args:
        result: Input result.
        func: Transformation that cannot fail.

    Returns:
        Success(func(value)) or the input's errors unchanged.
    """
    if isinstance(result, Failure):
        return Failure(errors=result.errors)
    return Success(value=func(result.value))


async def transform_async(
    result: Result[T], func: Callable[[T], Awaitable[U]]
) -> Result[U]:
    """Async transform: await func(value) and wrap it in a Success."""
    if isinstance(result, Failure):
        return Failure(errors=result.errors)
    return Success(value=await func(result.value))


def ensure(
    result: Result[T],
    predicate: Callable[[T], bool],
    error: Error | Callable[[T], Error],
) -> Result[T]:
    """Gate a successful result on predicate; see Result.ensure."""
    return result.ensure(predicate, error)


def tap(result: Result[T], action: Callable[[T], object]) -> Result[T]:
    """Run a side effect on the success value and return result unchanged."""
    return result.on_success(action)
