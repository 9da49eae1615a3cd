"""CLI interface for the trycatch library.

Provides command-line access to:
- demo: Run the reference sync and async scenarios
- json: Parse JSON files, reporting each outcome as a Result
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Optional

from src.trycatch.combinators import chain, flat_map, match
from src.trycatch.config import TryCatchConfig, configure_logging
from src.trycatch.result import Result, failure, success
from src.trycatch.wrappers import try_catch, try_catch_async, try_catch_sync


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="trycatch - explicit Result values instead of exceptions"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the reference scenarios")
    demo_parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Simulated latency for async scenarios in seconds",
    )

    # JSON command
    json_parser = subparsers.add_parser("json", help="Parse JSON files")
    json_parser.add_argument("files", nargs="+", help="Files to parse")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    config = TryCatchConfig()
    configure_logging(config)

    if args.command == "demo":
        run_demo(config, delay=args.delay)
    elif args.command == "json":
        sys.exit(run_json(args.files))


def _describe(result: Result[Any, Any]) -> str:
    return match(
        result,
        success=lambda data: f"Success({data!r})",
        failure=lambda error: f"Failure({error!r})",
    )


def _jsonable(result: Result[Any, Any]) -> dict[str, Any]:
    payload = result.to_dict()
    if "error" in payload and isinstance(payload["error"], BaseException):
        payload["error"] = f"{type(payload['error']).__name__}: {payload['error']}"
    return payload


def _parse_int(text: str) -> Result[int, str]:
    return try_catch_sync(lambda: int(text)).map_err(lambda _: "NaN")


async def _resolve_after(delay: float, value: Any) -> Any:
    await asyncio.sleep(delay)
    return value


async def _reject_after(delay: float, error: Exception) -> Any:
    await asyncio.sleep(delay)
    raise error


async def _async_scenarios(delay: float) -> list[tuple[str, Result[Any, Any]]]:
    return [
        ("try_catch_async(resolves 42)", await try_catch_async(_resolve_after(delay, 42))),
        (
            'try_catch_async(rejects ValueError("x"))',
            await try_catch_async(_reject_after(delay, ValueError("x"))),
        ),
        ("try_catch(async lambda)", await try_catch(lambda: _resolve_after(delay, "async data"))),
    ]


def run_demo(config: TryCatchConfig, delay: Optional[float] = None) -> None:
    """Run the reference scenarios and print each outcome."""
    delay = config.demo_delay if delay is None else delay

    print("=" * 60)
    print("trycatch - Demo")
    print("=" * 60)
    print()

    def boom() -> int:
        raise RuntimeError("boom")

    scenarios: list[tuple[str, Result[Any, Any]]] = [
        ("try_catch_sync(5 + 5)", try_catch_sync(lambda: 5 + 5)),
        ('try_catch_sync(raise RuntimeError("boom"))', try_catch_sync(boom)),
        ('flat_map(success("5"), parse_int)', flat_map(success("5"), _parse_int)),
        ('flat_map(success("abc"), parse_int)', flat_map(success("abc"), _parse_int)),
        (
            'chain("5", parse_int, double, str)',
            chain("5", _parse_int, lambda n: success(n * 2), lambda n: success(str(n))),
        ),
    ]

    print(f"[1/3] Synchronous scenarios ({len(scenarios)})")
    for label, result in scenarios:
        print(f"      {label} -> {_describe(result)}")
    print()

    print(f"[2/3] Asynchronous scenarios (delay {delay:.3f}s)")
    async_scenarios = asyncio.run(_async_scenarios(delay))
    for label, result in async_scenarios:
        print(f"      {label} -> {_describe(result)}")
    print()

    matched = match(
        failure(404),
        success=lambda d: f"ok:{d}",
        failure=lambda e: f"err:{e}",
    )
    print("[3/3] match(failure(404), ...)")
    print(f"      -> {matched}")
    print("=" * 60)

    json_output = {
        label: _jsonable(result) for label, result in scenarios + async_scenarios
    }
    print("JSON output:")
    print(json.dumps(json_output, indent=config.json_indent or None, default=repr))


def _read(path: Path) -> Result[str, Exception]:
    return try_catch_sync(path.read_text)


def _parse(text: str) -> Result[Any, Exception]:
    return try_catch_sync(lambda: json.loads(text))


def run_json(files: list[str]) -> int:
    """Parse each file as JSON, printing one result line per file.

    Returns:
        Process exit status: 0 if every file parsed, 1 otherwise.
    """
    status = 0
    for file_path in files:
        result = chain(Path(file_path), _read, _parse)
        if result.is_err():
            status = 1
        line = {"file": file_path, **_jsonable(result)}
        print(json.dumps(line, default=repr))
    return status


if __name__ == "__main__":
    main()
