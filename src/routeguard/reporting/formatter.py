"""Render validation results as text lines or JSON reports."""

from __future__ import annotations

import json

from routeguard.constants.reporting import UNNAMED_ROUTE, VALID_ROUTE_LINE
from routeguard.exceptions.field_error import FieldError
from routeguard.model import Route
from routeguard.types import JsonObject


def build_report(route: Route, error: FieldError | None) -> JsonObject:
    """Build the JSON report for one route."""
    return {
        "route": route.display_name or UNNAMED_ROUTE,
        "namespace": route.metadata.namespace,
        "valid": error is None,
        "error": error.to_dict() if error is not None else None,
    }


def format_text(route: Route, error: FieldError | None) -> str:
    """Format one route's result for a terminal, one finding per line."""
    name = route.display_name or UNNAMED_ROUTE
    if error is None:
        return f"{name}: {VALID_ROUTE_LINE}"
    lines = [f"{name}: {len(error.flatten())} finding(s)"]
    for leaf in error.flatten():
        line = f"  [{leaf.kind}] {leaf.message}"
        if leaf.paths:
            line = f"{line}: {', '.join(leaf.paths)}"
        lines.append(line)
        if leaf.details:
            lines.append(f"    {leaf.details}")
    return "\n".join(lines)


def format_json(results: list[tuple[Route, FieldError | None]]) -> str:
    """Format all results as a JSON array of reports."""
    return json.dumps([build_report(route, error) for route, error in results], indent=2)
