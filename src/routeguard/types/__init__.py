"""Shared type aliases for routeguard."""

from .common import JsonObject, JsonScalar, JsonValue, OutputFormat

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
