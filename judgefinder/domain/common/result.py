"""
Result type for fallible domain operations.

The Result type makes success and failure explicit values, so expected
failure paths never rely on exceptions for control flow.

Example:
    def parse_bar_number(raw: str) -> Result[BarNumber, ValidationError]:
        if not raw:
            return Err(ValidationError("Bar number cannot be empty"))
        return Ok(BarNumber(...))

    # Chaining
    price = (
        Money.from_dollars(500)
        .flat_map(lambda m: m.multiply(1.5))
        .map(lambda m: m.to_formatted_string())
    )

    # Exiting the monad
    message = price.match(ok=lambda text: text, err=lambda error: error.message)
"""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type
F = TypeVar("F")  # Mapped error type


class UnwrapError(ValueError):
    """Raised when a Result is unwrapped on the wrong variant."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        """Always True for Ok."""
        return True

    @property
    def is_err(self) -> bool:
        """Always False for Ok."""
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        """Get the value (default is ignored for Ok)."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises UnwrapError - Ok has no error."""
        raise UnwrapError(f"Called unwrap_err() on an Ok result: {self.value!r}")

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Apply a function to the success value."""
        return Ok(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        """Apply a function that returns a Result to the success value."""
        return fn(self.value)

    def map_err(self, fn: Callable[[Any], object]) -> "Ok[T]":
        """No-op for Ok - returns self."""
        return self

    def match(self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Run the ok branch."""
        return ok(self.value)

    def tap(self, fn: Callable[[T], object]) -> "Ok[T]":
        """Run a side effect with the value and return self unchanged."""
        fn(self.value)
        return self

    def tap_err(self, fn: Callable[[Any], object]) -> "Ok[T]":
        """No-op for Ok - returns self."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_ok(self) -> bool:
        """Always False for Err."""
        return False

    @property
    def is_err(self) -> bool:
        """Always True for Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raises UnwrapError - Err has no value."""
        raise UnwrapError(f"Called unwrap() on an Err result: {self.error!r}")

    def unwrap_or(self, default: U) -> U:
        """Return the default value for Err."""
        return default

    def unwrap_err(self) -> E:
        """Get the error."""
        return self.error

    def map(self, fn: Callable[[Any], object]) -> "Err[E]":
        """No-op for Err - returns self."""
        return self

    def flat_map(self, fn: Callable[[Any], "Result[Any, Any]"]) -> "Err[E]":
        """No-op for Err - returns self."""
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        """Apply a function to the error value."""
        return Err(fn(self.error))

    def match(self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Run the err branch."""
        return err(self.error)

    def tap(self, fn: Callable[[Any], object]) -> "Err[E]":
        """No-op for Err - returns self."""
        return self

    def tap_err(self, fn: Callable[[E], object]) -> "Err[E]":
        """Run a side effect with the error and return self unchanged."""
        fn(self.error)
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result - a union of Ok and Err
Result = Ok[T] | Err[E]


def combine(results: Iterable["Result[T, E]"]) -> "Result[list[T], E]":
    """
    Combine results into a single Result of a list.

    Fails fast: the first Err encountered is returned and later results
    are not inspected. Errors are never accumulated.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def from_callable(
    fn: Callable[[], T], map_error: Callable[[Exception], E] | None = None
) -> "Result[T, E | Exception]":
    """Run a throwing computation, converting any raised exception into an Err."""
    try:
        return Ok(fn())
    except Exception as exc:
        return Err(map_error(exc) if map_error else exc)


async def from_awaitable(
    awaitable: Awaitable[T], map_error: Callable[[Exception], E] | None = None
) -> "Result[T, E | Exception]":
    """Await a coroutine or future, converting a raised exception into an Err."""
    try:
        return Ok(await awaitable)
    except Exception as exc:
        return Err(map_error(exc) if map_error else exc)
