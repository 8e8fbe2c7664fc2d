"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: producer shapes and errback doubles
shared by the unit, property and contract suites.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import functools
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def resolved(value: Any) -> asyncio.Future[Any]:
    fut = asyncio.get_running_loop().create_future()
    fut.set_result(value)
    return fut


def rejected(error: BaseException) -> asyncio.Future[Any]:
    fut = asyncio.get_running_loop().create_future()
    fut.set_exception(error)
    return fut


async def settle_with(value: Any) -> Any:
    return value


async def fail_with(error: BaseException) -> Any:
    raise error


def throw(error: BaseException) -> Any:
    raise error


# Each entry builds a fresh producer; call it inside a running loop.
SUCCESS_FORMS: dict[str, Callable[[Any], Any]] = {
    "resolved_future": resolved,
    "coroutine": settle_with,
    "task": lambda v: asyncio.ensure_future(settle_with(v)),
    "sync_value": lambda v: lambda: v,
    "sync_resolve": lambda v: lambda: resolved(v),
    "async_value": lambda v: functools.partial(settle_with, v),
    "async_resolve": lambda v: lambda: settle_with(resolved(v)),
}

FAILURE_FORMS: dict[str, Callable[[BaseException], Any]] = {
    "rejected_future": rejected,
    "coroutine": fail_with,
    "sync_reject": lambda e: lambda: rejected(e),
    "sync_throw": lambda e: functools.partial(throw, e),
    "async_throw": lambda e: functools.partial(fail_with, e),
    "async_reject": lambda e: lambda: settle_with(rejected(e)),
}


@dataclass
class RecordingErrback:
    """Errback double that records the positional arguments of each call.

    Returns ``result`` or raises ``error``; with ``awaitable=True`` it hands
    back a coroutine that does so instead.
    """

    result: Any = None
    error: BaseException | None = None
    awaitable: bool = False
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.awaitable:
            if self.error is not None:
                return fail_with(self.error)
            return settle_with(self.result)
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class NextTask:
    """Task-runner double that hands its body a ``next`` completion callback.

    Mirrors callback-style task libraries: the body reports completion by
    calling ``next(err, value)``; the runner records what it received.
    """

    body: Callable[[Callable[..., None]], Any]
    completions: list[tuple[Any, ...]] = field(default_factory=list)

    def run(self) -> Any:
        return self.body(self.next)

    def next(self, *args: Any) -> None:
        self.completions.append(args)
