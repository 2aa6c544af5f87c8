"""Persist per-route JSON validation reports under one output directory."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from routeguard.constants.reporting import (
    REPORT_FILE_SUFFIX,
    REPORT_NAME_FALLBACK,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
)
from routeguard.exceptions.field_error import FieldError
from routeguard.model import Route
from routeguard.reporting.formatter import build_report
from routeguard.utils.naming import sanitize_output_name


class ReportWriter:
    """Writes ``<namespace>/<name>.json`` reports beneath ``out_root``.

    Namespace and name come from untrusted metadata, so both are sanitized
    to a single path component. Routes that map to the same file within one
    writer get ``-2``, ``-3``... suffixes instead of overwriting each other.
    """

    def __init__(self, out_root: Path) -> None:
        self.out_root = out_root
        self._claimed: set[Path] = set()

    def report_path(self, route: Route) -> Path:
        """Claim and return the report path for *route*."""
        directory = self.out_root
        namespace = sanitize_output_name(route.metadata.namespace)
        if namespace:
            directory = directory / namespace
        stem = sanitize_output_name(route.display_name, REPORT_NAME_FALLBACK)

        path = directory / f"{stem}{REPORT_FILE_SUFFIX}"
        counter = 2
        while path in self._claimed:
            path = directory / f"{stem}-{counter}{REPORT_FILE_SUFFIX}"
            counter += 1
        self._claimed.add(path)
        return path

    def write(self, route: Route, error: FieldError | None) -> Path:
        """Write the report for *route* and return where it landed."""
        path = self.report_path(route)
        text = json.dumps(build_report(route, error), indent=2, sort_keys=True) + "\n"
        _replace_file(path, text)
        return path


def _replace_file(path: Path, text: str) -> None:
    """Write *text* to a sibling temp file, then rename it over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=REPORT_TEMP_PREFIX, suffix=REPORT_TEMP_SUFFIX)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
