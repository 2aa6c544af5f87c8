"""Configuration-related exceptions."""

from __future__ import annotations

from routeguard.exceptions.base import RouteguardError


class ConfigError(RouteguardError, ValueError):
    """Raised when routeguard configuration is invalid."""
