"""Basic synchronous usage example.

Demonstrates wrapping fallible calls, branching on the outcome and composing
steps without nested try/except blocks.

Usage:
    python examples/basic_usage.py
"""

import json

from src.trycatch import (
    Result,
    chain,
    failure,
    is_error,
    match,
    success,
    try_catch_sync,
    unwrap_or_else,
)


def parse_age(text: str) -> Result[int, str]:
    parsed = try_catch_sync(lambda: int(text))
    if is_error(parsed):
        return failure(f"not a number: {text!r}")
    if parsed.data < 0:
        return failure(f"negative age: {parsed.data}")
    return parsed


def main() -> None:
    # 1. Wrap a call that may raise
    result = try_catch_sync(lambda: json.loads('{"name": "Ada", "age": "36"}'))
    if is_error(result):
        print(f"Invalid payload: {result.error}")
        return
    profile = result.data
    print(f"Parsed profile: {profile}")

    # 2. Compose fallible steps; the first failure wins
    for raw in (profile["age"], "thirty", "-4"):
        age = chain(raw, parse_age, lambda n: success(n + 1))
        print(
            match(
                age,
                success=lambda n: f"{raw!r}: next birthday turns {n}",
                failure=lambda e: f"{raw!r}: rejected ({e})",
            )
        )

    # 3. Fall back to a value computed from the error
    retries = unwrap_or_else(
        try_catch_sync(lambda: int("many")),
        lambda exc: len(str(exc)) % 3,
    )
    print(f"Retries: {retries}")


if __name__ == "__main__":
    main()
