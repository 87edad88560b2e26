# json_any_key/core/types/results.py

"""Result type for per-entry outcomes of lazy decoding."""

# Standard library imports
from dataclasses import dataclass
from typing import Callable

# Local imports
from json_any_key.core.domain.errors import DecodeError


@dataclass(frozen=True)
class Ok[T]:
    """Success result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))

    def flat_map[U](self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Flat map for chaining operations."""
        return func(self.value)


@dataclass(frozen=True)
class Err:
    """Error result carrying the decode failure for one entry."""

    error: DecodeError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> object:
        """Raise the carried error."""
        raise self.error

    def map[U](self, func: Callable[[object], U]) -> "Err":
        """Map has no effect on errors."""
        return self

    def flat_map[U](self, func: Callable[[object], "Result[U]"]) -> "Err":
        """Flat map has no effect on errors."""
        return self


type Result[T] = Ok[T] | Err

__all__ = ["Ok", "Err", "Result"]
