"""Backward-compatibility checks for legacy Route spec fields."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from routeguard.constants.validation import GENERATION_FIELD
from routeguard.exceptions.field_error import FieldError, also, err_disallowed_fields
from routeguard.model import RouteSpec
from routeguard.validation.context import ValidationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegacyField:
    """A deprecated spec field: its manifest path and how to tell it is set."""

    path: str
    is_set: Callable[[RouteSpec], bool]


LEGACY_SPEC_FIELDS: tuple[LegacyField, ...] = (
    LegacyField(path=GENERATION_FIELD, is_set=lambda spec: spec.deprecated_generation != 0),
)


def check_deprecated(ctx: ValidationContext, spec: RouteSpec) -> FieldError | None:
    """Report set legacy fields when the context disallows them.

    Without ``disallow_deprecated`` legacy fields are accepted silently.
    """
    errs: FieldError | None = None
    for legacy in LEGACY_SPEC_FIELDS:
        if not legacy.is_set(spec):
            continue
        if ctx.disallow_deprecated:
            errs = also(errs, err_disallowed_fields(legacy.path))
        else:
            logger.debug("Accepting deprecated field: %s", legacy.path)
    return errs
