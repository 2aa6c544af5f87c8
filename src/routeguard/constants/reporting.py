"""Reporting constants for text and JSON validation reports."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".routeguard-"
REPORT_TEMP_SUFFIX: str = ".json"
REPORT_FILE_SUFFIX: str = ".json"

VALID_ROUTE_LINE: str = "OK"
UNNAMED_ROUTE: str = "<unnamed>"
REPORT_NAME_FALLBACK: str = "route"
