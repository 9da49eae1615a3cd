"""trycatch - explicit Result values for sync and async error handling."""

from src.trycatch.combinators import (
    chain,
    flat_map,
    map,
    map_err,
    match,
    unwrap_or,
    unwrap_or_else,
)
from src.trycatch.extended import RETHROW, try_catch_with
from src.trycatch.result import (
    Failure,
    Result,
    Success,
    UnwrapError,
    failure,
    is_error,
    is_success,
    success,
)
from src.trycatch.wrappers import t, tc, tca, try_catch, try_catch_async, try_catch_sync

__all__ = [
    "Result",
    "Success",
    "Failure",
    "UnwrapError",
    "success",
    "failure",
    "is_success",
    "is_error",
    "map",
    "map_err",
    "flat_map",
    "unwrap_or",
    "unwrap_or_else",
    "match",
    "chain",
    "try_catch",
    "try_catch_sync",
    "try_catch_async",
    "try_catch_with",
    "RETHROW",
    "t",
    "tc",
    "tca",
]
