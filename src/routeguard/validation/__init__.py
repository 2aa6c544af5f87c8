"""Route admission validation engine."""

from __future__ import annotations

from .context import ValidationContext
from .deprecated import LEGACY_SPEC_FIELDS, LegacyField, check_deprecated
from .meta import validate_object_metadata
from .names import is_dns1035_label, is_dns1123_subdomain, is_qualified_name
from .route import (
    ensure_valid_route,
    is_empty_spec,
    validate_route,
    validate_route_spec,
    validate_traffic_target,
)

__all__ = [
    "LEGACY_SPEC_FIELDS",
    "LegacyField",
    "ValidationContext",
    "check_deprecated",
    "ensure_valid_route",
    "is_dns1035_label",
    "is_dns1123_subdomain",
    "is_empty_spec",
    "is_qualified_name",
    "validate_object_metadata",
    "validate_route",
    "validate_route_spec",
    "validate_traffic_target",
]
