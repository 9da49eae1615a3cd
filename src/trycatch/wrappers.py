"""Execution wrappers turning raised exceptions into Result values.

Three entry points:

- ``try_catch_sync``: call a function now, always return a plain Result
- ``try_catch_async``: await a coroutine/future (or a function producing one),
  always return a coroutine resolving to a Result
- ``try_catch``: inspect the argument at runtime and pick one of the above

Only ``Exception`` subclasses are converted. ``asyncio.CancelledError``,
``KeyboardInterrupt`` and ``SystemExit`` keep propagating so that task
cancellation and interpreter shutdown behave as usual.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Coroutine, TypeVar, Union, overload

from src.trycatch.result import Failure, Result, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")

AsyncResult = Coroutine[Any, Any, Result[T, Exception]]


def try_catch_sync(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn`` and capture its outcome.

    Never suspends. If ``fn`` returns an awaitable it becomes the success
    payload unchanged; it is not awaited and errors raised inside it later
    are not caught here.

    Example:
        try_catch_sync(lambda: 5 + 5)          # Success(data=10)
        try_catch_sync(lambda: int("boom"))    # Failure(error=ValueError(...))
    """
    try:
        return Success(fn())
    except Exception as exc:
        logger.debug("try_catch_sync caught %s: %s", type(exc).__name__, exc)
        return Failure(exc)


async def try_catch_async(
    fn_or_awaitable: Union[Callable[[], Awaitable[T]], Awaitable[T]],
) -> Result[T, Exception]:
    """Await an operation and capture its outcome.

    Accepts either an awaitable already in flight (coroutine, Future, Task)
    or a zero-argument callable producing one. An exception raised while
    calling the callable is treated the same as one raised while awaiting.
    A callable returning a plain value settles to ``Success`` of that value.
    """
    try:
        if inspect.isawaitable(fn_or_awaitable):
            value = await fn_or_awaitable
        else:
            value = fn_or_awaitable()
            if inspect.isawaitable(value):
                value = await value
        return Success(value)
    except Exception as exc:
        logger.debug("try_catch_async caught %s: %s", type(exc).__name__, exc)
        return Failure(exc)


async def _settle(awaitable: Awaitable[T]) -> Result[T, Exception]:
    try:
        return Success(await awaitable)
    except Exception as exc:
        logger.debug("try_catch caught %s: %s", type(exc).__name__, exc)
        return Failure(exc)


@overload
def try_catch(arg: Awaitable[T]) -> AsyncResult[T]: ...


@overload
def try_catch(arg: Callable[[], Awaitable[T]]) -> AsyncResult[T]: ...


@overload
def try_catch(arg: Callable[[], T]) -> Result[T, Exception]: ...


def try_catch(arg: Any) -> Any:
    """Run a function or await an awaitable, capturing any exception.

    Dispatch happens on the runtime shape of ``arg``:

    - awaitable: returns a coroutine, as ``try_catch_async`` would
    - callable returning an awaitable: returns a coroutine awaiting it
    - callable returning a plain value: returns a Result right away
    - callable raising immediately: returns a plain ``Failure``

    The static return type for a callable whose return value is not known
    to be awaitable is the plain Result. Use ``try_catch_sync`` or
    ``try_catch_async`` when the shape must be guaranteed.

    Example:
        result = try_catch(lambda: json.loads('{"valid": "json"}'))

        async_result = await try_catch(fetch_profile(user_id))

    Raises:
        TypeError: If ``arg`` is neither awaitable nor callable.
    """
    if inspect.isawaitable(arg):
        return _settle(arg)
    if not callable(arg):
        raise TypeError(
            f"try_catch expects a callable or an awaitable, got {type(arg).__name__}"
        )

    try:
        value = arg()
    except Exception as exc:
        logger.debug("try_catch caught %s: %s", type(exc).__name__, exc)
        return Failure(exc)

    if inspect.isawaitable(value):
        return _settle(value)
    return Success(value)


t = try_catch
tc = try_catch_sync
tca = try_catch_async
