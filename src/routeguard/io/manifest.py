"""Decode Route manifests (YAML or JSON) into the Route model.

Decoding only checks shapes and primitive types; semantic rules belong to
:mod:`routeguard.validation`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from routeguard.constants.manifest import DEFAULT_API_VERSION, ROUTE_API_GROUP, ROUTE_KIND
from routeguard.exceptions import ManifestParseError
from routeguard.model import ObjectMeta, Route, RouteSpec, TrafficTarget

logger = logging.getLogger(__name__)


def load_route_file(path: Path) -> list[Route]:
    """Load every Route document from a YAML or JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestParseError(f"Cannot read manifest {path}: {exc}") from exc

    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Invalid YAML in manifest {path}: {exc}") from exc

    routes: list[Route] = []
    for index, document in enumerate(documents):
        if document is None:
            continue
        if not isinstance(document, dict):
            raise ManifestParseError(f"Manifest {path} document {index} must be a mapping")
        routes.append(parse_route(document))
    logger.debug("Loaded %d route(s) from %s", len(routes), path)
    return routes


def parse_route(data: dict[str, Any]) -> Route:
    """Build a :class:`Route` from a decoded manifest mapping."""
    kind = data.get("kind", ROUTE_KIND)
    if kind != ROUTE_KIND:
        raise ManifestParseError(f"kind must be {ROUTE_KIND!r}, got {kind!r}")

    api_version = _string(data, "apiVersion", "apiVersion", default=DEFAULT_API_VERSION)
    if api_version.split("/", 1)[0] != ROUTE_API_GROUP:
        logger.warning("Unexpected apiVersion for Route: %s", api_version)

    return Route(
        metadata=_parse_metadata(_mapping(data, "metadata", "metadata")),
        spec=_parse_spec(_mapping(data, "spec", "spec")),
        api_version=api_version,
        kind=kind,
    )


def _parse_metadata(raw: dict[str, Any]) -> ObjectMeta:
    return ObjectMeta(
        name=_string(raw, "name", "metadata.name"),
        generate_name=_string(raw, "generateName", "metadata.generateName"),
        namespace=_string(raw, "namespace", "metadata.namespace"),
        labels=_string_map(raw, "labels", "metadata.labels"),
        annotations=_string_map(raw, "annotations", "metadata.annotations"),
    )


def _parse_spec(raw: dict[str, Any]) -> RouteSpec:
    traffic_raw = raw.get("traffic")
    if traffic_raw is None:
        traffic_raw = []
    if not isinstance(traffic_raw, list):
        raise ManifestParseError("spec.traffic must be a list")

    targets: list[TrafficTarget] = []
    for i, item in enumerate(traffic_raw):
        where = f"spec.traffic[{i}]"
        if not isinstance(item, dict):
            raise ManifestParseError(f"{where} must be a mapping")
        targets.append(
            TrafficTarget(
                name=_string(item, "name", f"{where}.name"),
                revision_name=_string(item, "revisionName", f"{where}.revisionName"),
                configuration_name=_string(item, "configurationName", f"{where}.configurationName"),
                percent=_integer(item, "percent", f"{where}.percent"),
                url=_string(item, "url", f"{where}.url"),
            )
        )
    return RouteSpec(
        traffic=tuple(targets),
        deprecated_generation=_integer(raw, "generation", "spec.generation"),
    )


def _mapping(raw: dict[str, Any], key: str, where: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestParseError(f"{where} must be a mapping")
    return value


def _string(raw: dict[str, Any], key: str, where: str, *, default: str = "") -> str:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ManifestParseError(f"{where} must be a string, got {type(value).__name__}")
    return value


def _integer(raw: dict[str, Any], key: str, where: str) -> int:
    value = raw.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ManifestParseError(f"{where} must be an integer, got {type(value).__name__}")
    return value


def _string_map(raw: dict[str, Any], key: str, where: str) -> dict[str, str]:
    value = _mapping(raw, key, where)
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise ManifestParseError(f"{where} must map strings to strings")
    return dict(value)
