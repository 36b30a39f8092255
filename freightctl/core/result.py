"""Result types for explicit error handling.

`Ok` / `Err` model the usual either/or outcome. Remote calls that can report
work done *and* fail in the same response use `Partial`, which carries an
optional value and an optional error side by side.

Usage:
    match client.promote_to_stage(call):
        case Ok(promotion):
            ...
        case Err(error):
            ...

    partial = client.promote_subscribers(call)
    for promotion in partial.value or []:
        ...
    if partial.error is not None:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError since there is no value.

        Raises:
            ValueError: Always, containing the error.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


@dataclass(frozen=True, slots=True)
class Partial[T, E]:
    """A result where a value and an error may both be present.

    Attributes:
        value: Whatever the callee managed to produce, or None when nothing
            came back at all.
        error: The failure reported alongside (or instead of) the value.
    """

    value: T | None = None
    error: E | None = None

    def map(self, f: Callable[[T], U]) -> Partial[U, E]:
        if self.value is None:
            return Partial(None, self.error)
        return Partial(f(self.value), self.error)


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err."""
    return isinstance(result, Err)
