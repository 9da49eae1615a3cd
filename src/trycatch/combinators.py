"""Free-function combinators over Result values.

Each combinator delegates to the method of the same name on the variant,
so ``map(result, fn)`` and ``result.map(fn)`` are interchangeable. Failures
pass through untouched: the very same object comes back out.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

from src.trycatch.result import Failure, Result, is_result, success

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def map(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply ``fn`` to a success payload.

    Exceptions raised by ``fn`` are not caught here; wrap the call in
    ``try_catch_sync`` if ``fn`` can fail.
    """
    return result.map(fn)


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply ``fn`` to a failure payload, leaving successes alone."""
    return result.map_err(fn)


def flat_map(result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Bind a fallible step onto ``result``.

    On success the Result returned by ``fn`` is handed back as-is, with no
    extra wrapping. On failure ``fn`` is never called.

    Example:
        def parse(text: str) -> Result[int, str]:
            return success(int(text)) if text.isdigit() else failure("NaN")

        flat_map(success("5"), parse)    # Success(data=5)
        flat_map(success("abc"), parse)  # Failure(error='NaN')
    """
    return result.flat_map(fn)


def unwrap_or(result: Result[T, E], default: T) -> T:
    return result.unwrap_or(default)


def unwrap_or_else(result: Result[T, E], fn: Callable[[E], T]) -> T:
    """Return the success payload, or compute one from the error."""
    return result.unwrap_or_else(fn)


def match(
    result: Result[T, E],
    *,
    success: Callable[[T], U],
    failure: Callable[[E], U],
) -> U:
    """Exhaustive case analysis: exactly one of the two handlers runs.

    Example:
        match(failure(404), success=lambda d: f"ok:{d}", failure=lambda e: f"err:{e}")
        # 'err:404'
    """
    return result.match(success, failure)


def chain(
    input: Union[T, Result[T, E]],
    *operations: Callable[[Any], Result[Any, E]],
) -> Result[Any, E]:
    """Run ``operations`` in order, each fed the previous success payload.

    A raw ``input`` is wrapped with ``success`` first; a Result is used as
    given. The first Failure short-circuits the rest and is returned as-is.

    Example:
        chain(
            "5",
            lambda s: try_catch_sync(lambda: int(s)),
            lambda n: success(n * 2),
            lambda n: success(str(n)),
        )
        # Success(data='10')
    """
    current: Result[Any, E] = input if is_result(input) else success(input)  # type: ignore[assignment]

    for operation in operations:
        if isinstance(current, Failure):
            return current
        current = operation(current.data)

    return current


__all__ = [
    "chain",
    "flat_map",
    "map",
    "map_err",
    "match",
    "unwrap_or",
    "unwrap_or_else",
]
