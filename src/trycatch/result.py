"""Result type for explicit error handling without exceptions.

A Result is exactly one of two frozen dataclasses:

- ``Success(data)`` for an operation that completed normally
- ``Failure(error)`` for one that did not

Callers branch on ``is_success`` / ``is_error``, on ``isinstance``, or on the
``ok`` flag every variant carries. ``None`` is a perfectly good success payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeGuard, Union

from typing_extensions import TypeVar

T = TypeVar("T")
E = TypeVar("E", default=Exception)
U = TypeVar("U")
F = TypeVar("F")


class UnwrapError(ValueError):
    """Raised when a Result is unwrapped on the wrong variant."""

    def __init__(self, message: str, payload: Any) -> None:
        super().__init__(message)
        self.payload = payload


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    data: T
    ok: ClassVar[bool] = True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data

    def unwrap_err(self) -> Any:
        raise UnwrapError(f"Called unwrap_err on Success: {self.data!r}", self.data)

    def unwrap_or(self, default: T) -> T:
        return self.data

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.data

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.data))

    def map_err(self, fn: Callable[[Any], Any]) -> Success[T]:
        return self

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.data)

    def match(self, success: Callable[[T], U], failure: Callable[[Any], U]) -> U:
        return success(self.data)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "data": self.data}


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Error result containing an error value.

    The error is whatever was raised or passed in; it is never wrapped,
    stringified or otherwise touched.
    """

    error: E
    ok: ClassVar[bool] = False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError(f"Called unwrap on Failure: {self.error!r}", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Failure[F]:
        return Failure(fn(self.error))

    def flat_map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        return self

    def match(self, success: Callable[[Any], U], failure: Callable[[E], U]) -> U:
        return failure(self.error)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "error": self.error}


Result = Union[Success[T], Failure[E]]


def success(data: T) -> Success[T]:
    """Wrap ``data`` in a Success. No validation is performed."""
    return Success(data)


def failure(error: E) -> Failure[E]:
    """Wrap ``error`` in a Failure.

    Any value is accepted: exceptions, strings, dicts, status codes.
    """
    return Failure(error)


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    """Return True if ``result`` holds a success payload.

    Example:
        result = try_catch(lambda: "value")
        if is_success(result):
            print(result.data)
    """
    return isinstance(result, Success)


def is_error(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    """Return True if ``result`` holds an error payload."""
    return isinstance(result, Failure)


def is_result(value: object) -> bool:
    return isinstance(value, (Success, Failure))
