"""Manifest identity for Route objects."""

from __future__ import annotations

ROUTE_KIND: str = "Route"
ROUTE_API_GROUP: str = "serving.knative.dev"
DEFAULT_API_VERSION: str = "serving.knative.dev/v1alpha1"

MANIFEST_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml", ".json"})
