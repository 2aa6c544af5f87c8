"""Admission-time validation for traffic Route objects.

The package root re-exports the entry points an admission caller needs:
build a :class:`Route`, call :func:`validate_route`, and inspect the
returned :class:`FieldError` (``None`` means the Route is admissible).
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("routeguard")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from routeguard.exceptions import FieldError, RouteguardError, RouteValidationError  # noqa: E402
from routeguard.model import ObjectMeta, Route, RouteSpec, TrafficTarget  # noqa: E402
from routeguard.validation import ValidationContext, ensure_valid_route, validate_route  # noqa: E402

__all__ = [
    "FieldError",
    "ObjectMeta",
    "Route",
    "RouteSpec",
    "RouteValidationError",
    "RouteguardError",
    "TrafficTarget",
    "ValidationContext",
    "__version__",
    "ensure_valid_route",
    "validate_route",
]
