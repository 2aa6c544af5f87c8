"""Route, RouteSpec, and TrafficTarget validators.

Every validator returns a :class:`FieldError` describing all findings, or
``None`` when the input is valid. Findings are merged, never raised, and
each containing level scopes its children's paths.
"""

from __future__ import annotations

import logging

from routeguard.constants.validation import (
    CONFIGURATION_NAME_FIELD,
    CURRENT_FIELD,
    METADATA_FIELD,
    NAME_FIELD,
    PERCENT_FIELD,
    PERCENT_MAX,
    PERCENT_MIN,
    PERCENT_TOTAL,
    REVISION_NAME_FIELD,
    SPEC_FIELD,
    TRAFFIC_FIELD,
    URL_FIELD,
)
from routeguard.exceptions.field_error import (
    FieldError,
    also,
    err_disallowed_fields,
    err_duplicate_definition,
    err_invalid_key_name,
    err_missing_field,
    err_missing_one_of,
    err_multiple_one_of,
    err_out_of_bounds_value,
    err_sum_mismatch,
)
from routeguard.exceptions.validation import RouteValidationError
from routeguard.model import Route, RouteSpec, TrafficTarget
from routeguard.validation.context import ValidationContext
from routeguard.validation.deprecated import check_deprecated
from routeguard.validation.meta import validate_object_metadata
from routeguard.validation.names import is_qualified_name

logger = logging.getLogger(__name__)


def validate_route(ctx: ValidationContext, route: Route) -> FieldError | None:
    """Validate a whole Route: metadata under ``metadata``, spec under ``spec``."""
    errs: FieldError | None = None
    meta_errs = validate_object_metadata(route.metadata)
    if meta_errs is not None:
        errs = also(errs, meta_errs.via_field(METADATA_FIELD))
    spec_errs = validate_route_spec(ctx.within_spec(), route.spec)
    if spec_errs is not None:
        errs = also(errs, spec_errs.via_field(SPEC_FIELD))
    logger.debug(
        "Validated route %s: %d finding(s)",
        route.display_name,
        len(errs.flatten()) if errs is not None else 0,
    )
    return errs


def validate_route_spec(ctx: ValidationContext, spec: RouteSpec) -> FieldError | None:
    """Validate the traffic block as a whole.

    An entirely empty spec yields a single missing-field finding. Otherwise
    each target is validated, non-empty names must be unique, and percents
    must total exactly 100.
    """
    if is_empty_spec(spec):
        return err_missing_field(CURRENT_FIELD)

    errs = check_deprecated(ctx, spec)

    first_seen: dict[str, int] = {}  # target name -> index of first definition
    percent_sum = 0
    for i, target in enumerate(spec.traffic):
        target_errs = validate_traffic_target(ctx, target)
        if target_errs is not None:
            errs = also(errs, target_errs.via_field_index(TRAFFIC_FIELD, i))

        percent_sum += target.percent

        if not target.name:
            continue
        first = first_seen.get(target.name)
        if first is None:
            first_seen[target.name] = i
            continue
        errs = also(
            errs,
            err_duplicate_definition(
                target.name,
                f"{TRAFFIC_FIELD}[{first}].{NAME_FIELD}",
                f"{TRAFFIC_FIELD}[{i}].{NAME_FIELD}",
            ),
        )

    if percent_sum != PERCENT_TOTAL:
        errs = also(errs, err_sum_mismatch(percent_sum, PERCENT_TOTAL, TRAFFIC_FIELD))
    logger.debug("Validated %d traffic target(s), percent total %d", len(spec.traffic), percent_sum)
    return errs


def validate_traffic_target(ctx: ValidationContext, target: TrafficTarget) -> FieldError | None:
    """Validate a single target; paths are relative to the target itself."""
    errs = _validate_destination(target)
    if target.percent < PERCENT_MIN or target.percent > PERCENT_MAX:
        errs = also(errs, err_out_of_bounds_value(target.percent, PERCENT_MIN, PERCENT_MAX, PERCENT_FIELD))
    if target.url:
        errs = also(errs, err_disallowed_fields(URL_FIELD))
    return errs


def _validate_destination(target: TrafficTarget) -> FieldError | None:
    """Exactly one of revisionName/configurationName, with qualified-name syntax."""
    if target.revision_name and target.configuration_name:
        return err_multiple_one_of(REVISION_NAME_FIELD, CONFIGURATION_NAME_FIELD)
    if target.revision_name:
        return _check_qualified_name(target.revision_name, REVISION_NAME_FIELD)
    if target.configuration_name:
        return _check_qualified_name(target.configuration_name, CONFIGURATION_NAME_FIELD)
    return err_missing_one_of(REVISION_NAME_FIELD, CONFIGURATION_NAME_FIELD)


def _check_qualified_name(value: str, field: str) -> FieldError | None:
    violations = is_qualified_name(value)
    if violations:
        return err_invalid_key_name(value, field, *violations)
    return None


def is_empty_spec(spec: RouteSpec) -> bool:
    """Return True when *spec* equals the zero-valued spec."""
    return spec == RouteSpec()


def ensure_valid_route(ctx: ValidationContext, route: Route) -> None:
    """Raise :class:`RouteValidationError` if *route* has any findings."""
    errs = validate_route(ctx, route)
    if errs is not None:
        raise RouteValidationError(errs)
