"""errback-bridge: forward awaitable outcomes to Node-style errbacks.

Public API:
    - bridge(): Deliver a producer's outcome as ``errback(err, value)``
    - bridge_result(): Deliver it as a single ``Success``/``Failure``
    - capture(): Await a producer into a ``Result``
    - BridgeConfig: Task naming and log tracing settings
"""

from __future__ import annotations

import logging

from errback_bridge.bridge import bridge, bridge_result
from errback_bridge.config import BridgeConfig
from errback_bridge.errors import (
    BridgeError,
    ConfigurationError,
    InvalidErrbackError,
    NoRunningLoopError,
)
from errback_bridge.result import Failure, Result, Success, capture

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("errback-bridge")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("errback_bridge").addHandler(logging.NullHandler())

__all__ = [
    "BridgeConfig",
    "BridgeError",
    "ConfigurationError",
    "Failure",
    "InvalidErrbackError",
    "NoRunningLoopError",
    "Result",
    "Success",
    "bridge",
    "bridge_result",
    "capture",
]
