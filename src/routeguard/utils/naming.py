"""Filesystem-safe names for report output."""

from __future__ import annotations

from routeguard.constants.naming import COLLAPSE_DASH_PATTERN, NON_OUTPUT_NAME_PATTERN


def sanitize_output_name(raw_name: str, fallback: str = "") -> str:
    """Reduce an untrusted object name to one safe path component.

    The result holds only ``[a-z0-9._-]`` and never starts or ends with
    ``-``, ``.`` or ``_``, so ``..`` and ``/`` cannot survive.
    """
    normalized = raw_name.strip().lower()
    normalized = NON_OUTPUT_NAME_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-._")
    return normalized or fallback
