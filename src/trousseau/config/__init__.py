"""Configuration."""

from trousseau.config.settings import (
    TrousseauConfig,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

__all__ = [
    "TrousseauConfig",
    "get_settings",
    "load_config",
    "override_settings",
    "reset_settings",
]
