"""Parsing-related exceptions."""

from __future__ import annotations

from routeguard.exceptions.base import RouteguardError


class ManifestParseError(RouteguardError, ValueError):
    """Raised when a Route manifest cannot be read or decoded."""
