from __future__ import annotations

import pytest

from userstore import ConfigError, StoreConfig


def test_defaults() -> None:
    config = StoreConfig.from_env({})

    assert config == StoreConfig(fetch_delay=4.0, lifetime=15.0, log_state_changes=True)


def test_values_read_from_environment() -> None:
    config = StoreConfig.from_env(
        {
            "USERSTORE_FETCH_DELAY": "0.5",
            "USERSTORE_LIFETIME": "2",
            "USERSTORE_LOG_STATE": "off",
        }
    )

    assert config.fetch_delay == 0.5
    assert config.lifetime == 2.0
    assert config.log_state_changes is False


def test_unrecognised_boolean_falls_back_to_default() -> None:
    config = StoreConfig.from_env({"USERSTORE_LOG_STATE": "maybe"})

    assert config.log_state_changes is True


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_invalid_seconds_rejected(value: str) -> None:
    with pytest.raises(ConfigError):
        StoreConfig.from_env({"USERSTORE_FETCH_DELAY": value})
