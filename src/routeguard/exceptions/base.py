"""Root exception for routeguard."""

from __future__ import annotations


class RouteguardError(Exception):
    """Base class for all routeguard operational errors."""
