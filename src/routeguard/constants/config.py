"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "routeguard.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"disallow_deprecated", "output_format"})

DEFAULT_OUTPUT_FORMAT: str = "text"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
