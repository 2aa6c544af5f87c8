"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "routeguard: admission-time validation for traffic Route manifests.\n"
    "Checks that every target names exactly one revision or configuration,\n"
    "that percents stay within bounds and total 100, and that names are unique."
)
