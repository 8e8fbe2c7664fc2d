"""Configuration: frozen BridgeConfig with environment fallbacks."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from errback_bridge.errors import ConfigurationError

load_dotenv()

DEFAULT_TASK_NAME = "errback-bridge"

_TASK_NAME_ENV_VAR = "ERRBACK_BRIDGE_TASK_NAME"
_TRACE_VALUES_ENV_VAR = "ERRBACK_BRIDGE_TRACE_VALUES"


@dataclass(frozen=True)
class BridgeConfig:
    """Immutable configuration for a bridge invocation.

    Fields left at their defaults are resolved from the environment:

    - ``ERRBACK_BRIDGE_TASK_NAME`` names the returned task.
    - ``ERRBACK_BRIDGE_TRACE_VALUES=1`` includes values and errors in DEBUG
      log records.

    Example:
        config = BridgeConfig(task_name="upload-relay")
        task = bridge(upload(), on_uploaded, config=config)
    """

    task_name: str = DEFAULT_TASK_NAME
    #: Auto-resolved from ``ERRBACK_BRIDGE_TRACE_VALUES`` when *None*.
    trace_values: bool | None = None

    def __post_init__(self) -> None:
        """Resolve environment fallbacks and validate."""
        if self.task_name == DEFAULT_TASK_NAME:
            env_name = os.environ.get(_TASK_NAME_ENV_VAR)
            if env_name is not None:
                object.__setattr__(self, "task_name", env_name)

        if not isinstance(self.task_name, str) or not self.task_name.strip():
            raise ConfigurationError(
                f"task_name must be a non-empty string, got {self.task_name!r}",
                hint=f"Pass task_name=... or unset {_TASK_NAME_ENV_VAR}.",
            )

        if self.trace_values is None:
            enabled = os.environ.get(_TRACE_VALUES_ENV_VAR) == "1"
            object.__setattr__(self, "trace_values", enabled)

    def __str__(self) -> str:
        """Return a compact, developer-friendly representation."""
        return (
            f"BridgeConfig(task_name={self.task_name!r}, "
            f"trace_values={self.trace_values})"
        )

    __repr__ = __str__
