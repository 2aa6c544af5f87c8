"""Config loading and normalization for routeguard."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

import yaml

from routeguard.config.model import RouteguardConfig
from routeguard.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_OUTPUT_FORMAT,
    VALID_OUTPUT_FORMATS,
)
from routeguard.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> RouteguardConfig:
    """Load config from ``routeguard.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return RouteguardConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            message = f"unknown config key `{key}`"
            raise ConfigError(f"{message} ({hint})" if hint else message)

    disallow_deprecated = raw.get("disallow_deprecated", False)
    if not isinstance(disallow_deprecated, bool):
        raise ConfigError("disallow_deprecated must be a boolean")

    output_format = raw.get("output_format", DEFAULT_OUTPUT_FORMAT)
    if not isinstance(output_format, str) or output_format not in VALID_OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {sorted(VALID_OUTPUT_FORMATS)}, got {output_format!r}")

    return RouteguardConfig(
        disallow_deprecated=disallow_deprecated,
        output_format=output_format,  # type: ignore[arg-type]
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
