"""Runtime configuration for the user list demo."""

from __future__ import annotations

import dataclasses
import os
from typing import Mapping, Optional

from ._errors import ConfigError


__all__ = (
    "StoreConfig",
)


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_seconds(name: str, value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        seconds = float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}")
    if seconds < 0:
        raise ConfigError(f"{name} must not be negative, got {value!r}")
    return seconds


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Demo configuration.

    Parameters
    ----------
    fetch_delay : float
        Seconds before the simulated fetch adds its users.
    lifetime : float
        Seconds the list view stays attached to the store.
    log_state_changes : bool
        Log every dispatched action (DEBUG) and resulting state (INFO).
    """

    fetch_delay: float = 4.0
    lifetime: float = 15.0
    log_state_changes: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
        env = os.environ if environ is None else environ
        defaults = cls()

        return cls(
            fetch_delay=_env_seconds(
                "USERSTORE_FETCH_DELAY",
                env.get("USERSTORE_FETCH_DELAY"),
                defaults.fetch_delay
            ),
            lifetime=_env_seconds(
                "USERSTORE_LIFETIME",
                env.get("USERSTORE_LIFETIME"),
                defaults.lifetime
            ),
            log_state_changes=_env_bool(
                env.get("USERSTORE_LOG_STATE"),
                defaults.log_state_changes
            )
        )
