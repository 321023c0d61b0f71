"""Result type for flat error handling (like Rust's Result<T, E>).

A Result is either ``Ok(value)`` or ``Err(error)``. Both variants are frozen
dataclasses with no shared base class, so consumers dispatch with ``match``:

    match parse(text):
        case Ok(value):
            ...
        case Err(error):
            ...

or stay inside the combinators (``map``, ``and_then``, ``or_else``, ...).
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    is_success = is_ok
    is_failure = is_err

    def match[U](
        self, on_success: Callable[[T], U], on_failure: Callable[[Never], U]
    ) -> U:
        """Call ``on_success`` with the value and return what it returns."""
        return on_success(self.value)

    def get_value_or_default(self, default: object) -> T:
        return self.value

    def get_value_or_compute(self, compute_fn: Callable[[Never], object]) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> "Ok[U]":
        """Transform the value, keeping the Ok variant."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Never], object]) -> "Ok[T]":
        # No error payload to transform.
        return self

    def and_[U, F](self, other: "Result[U, F]") -> "Result[U, F]":
        """Return ``other``; this value is discarded."""
        return other

    def and_then[U, F](self, fn: Callable[[T], "Result[U, F]"]) -> "Result[U, F]":
        """Return the Result produced by ``fn(value)``."""
        return fn(self.value)

    def or_(self, other: object) -> "Ok[T]":
        return self

    def or_else(self, fn: Callable[[Never], object]) -> "Ok[T]":
        return self


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error result."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    is_success = is_ok
    is_failure = is_err

    def match[U](
        self, on_success: Callable[[Never], U], on_failure: Callable[[E], U]
    ) -> U:
        """Call ``on_failure`` with the error and return what it returns."""
        return on_failure(self.error)

    def get_value_or_default[D](self, default: D) -> D:
        return default

    def get_value_or_compute[D](self, compute_fn: Callable[[E], D]) -> D:
        """Compute a fallback value from the error."""
        return compute_fn(self.error)

    def map(self, fn: Callable[[Never], object]) -> "Err[E]":
        # No value to transform.
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> "Err[F]":
        """Transform the error, keeping the Err variant."""
        return Err(fn(self.error))

    def and_(self, other: object) -> "Err[E]":
        return self

    def and_then(self, fn: Callable[[Never], object]) -> "Err[E]":
        return self

    def or_[U, F](self, other: "Result[U, F]") -> "Result[U, F]":
        """Return ``other`` as the recovery Result."""
        return other

    def or_else[U, F](self, fn: Callable[[E], "Result[U, F]"]) -> "Result[U, F]":
        """Return the Result produced by ``fn(error)``."""
        return fn(self.error)


type Result[T, E] = Ok[T] | Err[E]
