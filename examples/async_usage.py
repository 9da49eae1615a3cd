"""Asynchronous usage example.

Awaits several simulated network calls, collecting each outcome as a Result,
and shows cleanup running once the call settles.

Usage:
    python examples/async_usage.py
"""

import asyncio

from src.trycatch import is_success, try_catch, try_catch_async, try_catch_with


async def fetch(endpoint: str) -> dict[str, str]:
    await asyncio.sleep(0.05)
    if endpoint.endswith("/missing"):
        raise LookupError(f"404 for {endpoint}")
    return {"endpoint": endpoint, "status": "200"}


async def main() -> None:
    endpoints = ["/users", "/orders", "/users/missing"]

    # 1. Run requests concurrently; none of them raise into gather()
    results = await asyncio.gather(*(try_catch_async(fetch(e)) for e in endpoints))
    for endpoint, result in zip(endpoints, results):
        if is_success(result):
            print(f"{endpoint}: {result.data['status']}")
        else:
            print(f"{endpoint}: failed with {result.error!r}")

    # 2. The unified dispatcher picks the async path for coroutine functions
    first = await try_catch(lambda: fetch("/health"))
    print(f"/health ok={first.ok}")

    # 3. Error hook and cleanup around a single call
    await try_catch_with(
        fetch("/users/missing"),
        handler=lambda exc: print(f"handler saw: {exc}"),
        cleanup=lambda: print("connection released"),
    )


if __name__ == "__main__":
    asyncio.run(main())
