"""Forward a producer's outcome to an errback, and the errback's outcome back.

The producer is an awaitable or a zero-argument callable. Its settlement is
delivered to the errback Node-style: ``errback(None, value)`` on success and
``errback(error)`` on failure. Whatever the errback returns (or raises)
settles the task that ``bridge`` hands back, so bridges compose.

The errback is called directly in the task step that observes the producer's
settlement, never on a later loop iteration: a raise inside the errback always
lands on the returned task instead of escaping into a scheduler callback.
Dropping that task without retrieving its exception yields asyncio's usual
"Task exception was never retrieved" report.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from errback_bridge.config import BridgeConfig
from errback_bridge.errors import InvalidErrbackError, NoRunningLoopError
from errback_bridge.result import Failure, Result, Success, flatten, is_thunk

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

V = TypeVar("V")
R = TypeVar("R")


def bridge(
    producer: Awaitable[V] | Callable[[], V | Awaitable[V]],
    errback: Callable[..., R | Awaitable[R]],
    *,
    config: BridgeConfig | None = None,
) -> asyncio.Task[R]:
    """Forward *producer*'s outcome to *errback* and return the errback's outcome.

    Args:
        producer: An awaitable, or a zero-argument callable returning a value
            or an awaitable. Callables are invoked immediately, before this
            function returns; a synchronous raise is delivered to the errback
            exactly like an asynchronous failure.
        errback: Called once as ``errback(None, value)`` on success or
            ``errback(error)`` on failure (no value argument).
        config: Optional task naming and log tracing settings.

    Returns:
        A task resolving to the errback's return value (awaited if it is
        awaitable), or failing with whatever the errback raised.

    Raises:
        InvalidErrbackError: *errback* is not callable.
        NoRunningLoopError: Called outside of a running event loop.

    Example:
        def done(err, value=None):
            return "failed" if err else value.upper()

        assert await bridge(fetch_name(), done) == "ADA"
    """
    return _launch("bridge", producer, errback, _errback_dispatch(errback), config)


def bridge_result(
    producer: Awaitable[V] | Callable[[], V | Awaitable[V]],
    callback: Callable[[Result[V, Exception]], R | Awaitable[R]],
    *,
    config: BridgeConfig | None = None,
) -> asyncio.Task[R]:
    """Like :func:`bridge`, but hand the callback a single ``Success``/``Failure``.

    Use this when a legitimate ``None`` success value must stay
    distinguishable from a failure.
    """
    return _launch("bridge_result", producer, callback, callback, config)


def _errback_dispatch(
    errback: Callable[..., R | Awaitable[R]],
) -> Callable[[Result[Any, Exception]], R | Awaitable[R]]:
    def dispatch(outcome: Result[Any, Exception]) -> R | Awaitable[R]:
        if isinstance(outcome, Success):
            return errback(None, outcome.value)
        return errback(outcome.error)

    return dispatch


def _launch(
    entry: str,
    producer: Any,
    handler: object,
    dispatch: Callable[[Result[Any, Exception]], Any],
    config: BridgeConfig | None,
) -> asyncio.Task[Any]:
    # Misuse is reported before a thunk gets the chance to run.
    if not callable(handler):
        raise InvalidErrbackError(
            f"{entry}() needs a callable handler, got {type(handler).__name__}",
            hint="Pass a function accepting (error, value).",
        )
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as e:
        raise NoRunningLoopError(
            f"{entry}() requires a running event loop",
            hint="Call it from a coroutine, e.g. one started with asyncio.run().",
        ) from e

    cfg = config if config is not None else BridgeConfig()
    thunk = is_thunk(producer)
    started = _start(producer)
    logger.debug(
        "bridge %s: started from %s", cfg.task_name, "thunk" if thunk else "awaitable"
    )
    return loop.create_task(_relay(started, dispatch, cfg), name=cfg.task_name)


def _start(producer: Any) -> Result[Any, Exception]:
    """Invoke a thunk now; a synchronous raise is kept as a Failure.

    Never routed through a Future: ``StopIteration`` cannot be set on one.
    """
    if not is_thunk(producer):
        return Success(producer)
    try:
        return Success(producer())
    except Exception as e:
        return Failure(e)


async def _relay(
    started: Result[Any, Exception],
    dispatch: Callable[[Result[Any, Exception]], Any],
    cfg: BridgeConfig,
) -> Any:
    outcome: Result[Any, Exception] = started
    if isinstance(started, Success):
        try:
            outcome = Success(await flatten(started.value))
        except Exception as e:
            outcome = Failure(e)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "bridge %s: producer settled (%s)",
            cfg.task_name,
            _describe(outcome, trace_values=bool(cfg.trace_values)),
        )

    # Outside the try: errback failures belong to the returned task.
    returned = dispatch(outcome)
    result = await flatten(returned)
    logger.debug("bridge %s: errback settled", cfg.task_name)
    return result


def _describe(outcome: Result[Any, Exception], *, trace_values: bool) -> str:
    if isinstance(outcome, Success):
        return f"success: {outcome.value!r}" if trace_values else "success"
    if trace_values:
        return f"failure: {outcome.error!r}"
    return f"failure: {type(outcome.error).__name__}"
