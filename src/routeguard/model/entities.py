"""Route object model: metadata, spec, and weighted traffic targets."""

from __future__ import annotations

from dataclasses import dataclass, field

from routeguard.constants.manifest import DEFAULT_API_VERSION, ROUTE_KIND


@dataclass(frozen=True)
class ObjectMeta:
    """Subset of Kubernetes object metadata consulted during admission."""

    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TrafficTarget:
    """One weighted destination: a revision or a configuration, never both."""

    name: str = ""
    revision_name: str = ""
    configuration_name: str = ""
    percent: int = 0
    url: str = ""


@dataclass(frozen=True)
class RouteSpec:
    """Desired traffic split.

    ``deprecated_generation`` is accepted for backward-compatible input only;
    zero means unset.
    """

    traffic: tuple[TrafficTarget, ...] = ()
    deprecated_generation: int = 0


@dataclass(frozen=True)
class Route:
    """Top-level routing object submitted for admission."""

    metadata: ObjectMeta = ObjectMeta()
    spec: RouteSpec = RouteSpec()
    api_version: str = DEFAULT_API_VERSION
    kind: str = ROUTE_KIND

    @property
    def display_name(self) -> str:
        """Name used to key reports; falls back to ``generateName``."""
        return self.metadata.name or self.metadata.generate_name
