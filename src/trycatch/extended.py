"""Extended dispatcher with an error hook, a rethrow switch and cleanup.

``try_catch_with`` dispatches exactly like ``try_catch`` and adds:

- ``handler``: called with the exception before the Failure is built, or
  the string ``"throw"`` to re-raise the exception instead of returning a
  Failure at all
- ``cleanup``: run exactly once after the operation settles, whatever the
  outcome, before the caller sees the Result (or the re-raised exception)

Usage:
    result = try_catch_with(
        lambda: risky_operation(),
        handler=lambda exc: log.warning("operation failed: %s", exc),
        cleanup=connection.close,
    )
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Literal, Optional, TypeVar, Union, overload

from src.trycatch.result import Failure, Result, Success
from src.trycatch.wrappers import AsyncResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETHROW: Literal["throw"] = "throw"

ErrorHandler = Union[Callable[[Exception], object], Literal["throw"]]
Cleanup = Callable[[], object]


def _handle(exc: Exception, handler: Optional[ErrorHandler]) -> Failure[Exception]:
    if handler == RETHROW:
        logger.debug("try_catch_with rethrowing %s: %s", type(exc).__name__, exc)
        raise exc
    logger.debug("try_catch_with caught %s: %s", type(exc).__name__, exc)
    if handler is not None:
        handler(exc)  # type: ignore[operator]
    return Failure(exc)


async def _settle_with(
    awaitable: Awaitable[T],
    handler: Optional[ErrorHandler],
    cleanup: Optional[Cleanup],
) -> Result[T, Exception]:
    try:
        return Success(await awaitable)
    except Exception as exc:
        return _handle(exc, handler)
    finally:
        if cleanup is not None:
            cleanup()


@overload
def try_catch_with(
    arg: Awaitable[T],
    handler: Optional[ErrorHandler] = ...,
    cleanup: Optional[Cleanup] = ...,
) -> AsyncResult[T]: ...


@overload
def try_catch_with(
    arg: Callable[[], Awaitable[T]],
    handler: Optional[ErrorHandler] = ...,
    cleanup: Optional[Cleanup] = ...,
) -> AsyncResult[T]: ...


@overload
def try_catch_with(
    arg: Callable[[], T],
    handler: Optional[ErrorHandler] = ...,
    cleanup: Optional[Cleanup] = ...,
) -> Result[T, Exception]: ...


def try_catch_with(
    arg: Any,
    handler: Optional[ErrorHandler] = None,
    cleanup: Optional[Cleanup] = None,
) -> Any:
    """Run ``arg`` like ``try_catch``, with an error hook and cleanup.

    Args:
        arg: A zero-argument callable or an awaitable.
        handler: Callback receiving the exception before the Failure is
            returned, or ``"throw"`` to re-raise it instead.
        cleanup: Called once after the operation settles. For awaitables it
            runs when the returned coroutine finishes, not when this function
            returns.

    Returns:
        A Result, or a coroutine resolving to one when ``arg`` is (or returns)
        an awaitable.

    Raises:
        TypeError: If ``arg`` is neither awaitable nor callable.
        Exception: The original exception, when ``handler`` is ``"throw"``.
    """
    if handler is not None and handler != RETHROW and not callable(handler):
        raise TypeError(
            f'try_catch_with handler must be a callable or "throw", got {handler!r}'
        )
    if inspect.isawaitable(arg):
        return _settle_with(arg, handler, cleanup)
    if not callable(arg):
        raise TypeError(
            f"try_catch_with expects a callable or an awaitable, got {type(arg).__name__}"
        )

    try:
        value = arg()
    except Exception as exc:
        try:
            return _handle(exc, handler)
        finally:
            if cleanup is not None:
                cleanup()

    if inspect.isawaitable(value):
        return _settle_with(value, handler, cleanup)
    if cleanup is not None:
        cleanup()
    return Success(value)
