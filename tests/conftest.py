"""Shared pytest fixtures for routeguard tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from routeguard.model import ObjectMeta, Route, RouteSpec, TrafficTarget
from routeguard.validation import ValidationContext


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def routes_root(fixtures_root: Path) -> Path:
    """Return the directory of sample Route manifests."""
    return fixtures_root / "routes"


@pytest.fixture()
def ctx() -> ValidationContext:
    """Default validation context, as used inside a Route spec."""
    return ValidationContext().within_spec()


@pytest.fixture()
def valid_route() -> Route:
    """A Route splitting traffic 50/50 between a revision and a configuration."""
    return Route(
        metadata=ObjectMeta(name="my-route", namespace="default"),
        spec=RouteSpec(
            traffic=(
                TrafficTarget(name="current", revision_name="app-00001", percent=50),
                TrafficTarget(name="latest", configuration_name="app", percent=50),
            )
        ),
    )
