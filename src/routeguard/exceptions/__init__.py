"""Shared exception hierarchy and structured error model for routeguard."""

from __future__ import annotations

from .base import RouteguardError
from .config import ConfigError
from .field_error import FieldError, also
from .parsing import ManifestParseError
from .validation import RouteValidationError

__all__ = [
    "ConfigError",
    "FieldError",
    "ManifestParseError",
    "RouteValidationError",
    "RouteguardError",
    "also",
]
