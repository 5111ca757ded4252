"""Admin service layer for configuration and stats management."""

from __future__ import annotations

import logging
import os
from typing import Any

from scraper_generator.core.request_builder import (
    DEFAULT_RELAY_BASE_URL,
    DEFAULT_UPSTREAM_BASE_URL,
)
from scraper_generator.metrics import get_metrics

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, Any] = {
    "upstream_base_url": DEFAULT_UPSTREAM_BASE_URL,
    "relay_base_url": DEFAULT_RELAY_BASE_URL,
    "request_timeout": None,  # None leaves the timeout to the transport
}

# Runtime configuration overrides (not persisted)
_runtime_config: dict[str, Any] = dict(_DEFAULTS)

# Initialize settings from environment variables if present
_upstream_env = os.getenv("UPSTREAM_BASE_URL")
_relay_env = os.getenv("RELAY_BASE_URL")
_timeout_env = os.getenv("REQUEST_TIMEOUT")

if _upstream_env:
    _runtime_config["upstream_base_url"] = _upstream_env
if _relay_env:
    _runtime_config["relay_base_url"] = _relay_env
if _timeout_env:
    try:
        _runtime_config["request_timeout"] = float(_timeout_env)
    except ValueError:
        logger.warning(f"Ignoring invalid REQUEST_TIMEOUT value: {_timeout_env!r}")


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value with runtime override support.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    return _runtime_config.get(key, default)


def get_stats() -> dict[str, Any]:
    """Get server statistics and metrics.

    Returns:
        Dictionary with server stats including generation request metrics
    """
    return get_metrics().to_dict()


def get_current_config() -> dict[str, Any]:
    """Get current runtime configuration.

    Returns:
        Dictionary with current config, defaults, and note
    """
    return {
        "config": _runtime_config,
        "defaults": _DEFAULTS,
        "note": "Changes are not persisted and will reset on server restart",
    }


def _is_http_url(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(("http://", "https://"))


def update_config(config_updates: dict[str, Any]) -> dict[str, Any]:
    """Update runtime configuration.

    Unknown keys and values that fail validation are skipped.

    Args:
        config_updates: Dictionary of config key-value pairs to update

    Returns:
        Dictionary with status, message, updated keys, and current config
    """
    updated = []
    for key, value in config_updates.items():
        if key in ("upstream_base_url", "relay_base_url") and _is_http_url(value):
            _runtime_config[key] = value
            updated.append(key)
        elif key == "request_timeout" and (
            value is None
            or (isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0)
        ):
            _runtime_config[key] = value
            updated.append(key)

    return {
        "status": "success",
        "message": f"Updated {len(updated)} config value(s)",
        "updated": updated,
        "current_config": _runtime_config,
    }


def reset_config() -> None:
    """Restore every runtime value to its default."""
    _runtime_config.clear()
    _runtime_config.update(_DEFAULTS)
