"""Reporting package for routeguard outputs."""

from __future__ import annotations

from .formatter import build_report, format_json, format_text
from .writer import ReportWriter

__all__ = ["ReportWriter", "build_report", "format_json", "format_text"]
