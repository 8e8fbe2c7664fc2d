"""Result primitives for bridged outcomes.

A producer settles exactly once; ``capture`` turns that settlement into a
``Success`` or ``Failure`` value so callers can branch on data rather than on
try/except.
"""

from __future__ import annotations

import dataclasses
import inspect
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A producer that resolved with a value."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A producer that failed, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


def is_thunk(producer: object) -> bool:
    """Return True when *producer* is a factory rather than a started operation."""
    return callable(producer) and not inspect.isawaitable(producer)


async def flatten(obj: typing.Any) -> typing.Any:
    """Await *obj* until a non-awaitable value remains."""
    while inspect.isawaitable(obj):
        obj = await obj
    return obj


async def capture(producer: typing.Any) -> Result[typing.Any, Exception]:
    """Run *producer* to settlement and return its outcome as a Result.

    - Thunks are invoked first; a synchronous raise becomes a ``Failure``.
    - Awaitables are awaited (and flattened).
    - Any other object is treated as an already-resolved value.

    Cancellation is not an outcome and propagates.
    """
    try:
        produced = producer() if is_thunk(producer) else producer
        value = await flatten(produced)
    except Exception as e:
        return Failure(e)
    return Success(value)
