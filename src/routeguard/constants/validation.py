"""Stable finding kinds, bounds, and field names for Route validation."""

from __future__ import annotations

MISSING_FIELD: str = "MissingField"
MULTIPLE_ONE_OF: str = "MultipleOneOf"
MISSING_ONE_OF: str = "MissingOneOf"
INVALID_KEY_NAME: str = "InvalidKeyName"
OUT_OF_BOUNDS_VALUE: str = "OutOfBoundsValue"
DISALLOWED_FIELDS: str = "DisallowedFields"
DUPLICATE_DEFINITION: str = "DuplicateDefinition"
SUM_MISMATCH: str = "SumMismatch"
INVALID_VALUE: str = "InvalidValue"

ALL_KINDS: tuple[str, ...] = (
    MISSING_FIELD,
    MULTIPLE_ONE_OF,
    MISSING_ONE_OF,
    INVALID_KEY_NAME,
    OUT_OF_BOUNDS_VALUE,
    DISALLOWED_FIELDS,
    DUPLICATE_DEFINITION,
    SUM_MISMATCH,
    INVALID_VALUE,
)

CURRENT_FIELD: str = ""

PERCENT_MIN: int = 0
PERCENT_MAX: int = 100
PERCENT_TOTAL: int = 100

TRAFFIC_FIELD: str = "traffic"
NAME_FIELD: str = "name"
REVISION_NAME_FIELD: str = "revisionName"
CONFIGURATION_NAME_FIELD: str = "configurationName"
PERCENT_FIELD: str = "percent"
URL_FIELD: str = "url"
GENERATION_FIELD: str = "generation"
METADATA_FIELD: str = "metadata"
SPEC_FIELD: str = "spec"
