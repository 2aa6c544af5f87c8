"""Configuration loading for routeguard.

This package facade re-exports the public names so callers can use
``from routeguard.config import ...``.
"""

from __future__ import annotations

from routeguard.config.loader import load_config
from routeguard.config.model import RouteguardConfig

__all__ = [
    "RouteguardConfig",
    "load_config",
]
