"""Object metadata validation for admitted objects."""

from __future__ import annotations

from routeguard.constants.naming import DNS1035_LABEL_MAX_LENGTH, GENERATE_NAME_SUFFIX_LENGTH
from routeguard.constants.validation import INVALID_VALUE
from routeguard.exceptions.field_error import FieldError, also, err_missing_one_of
from routeguard.model import ObjectMeta
from routeguard.validation.names import is_dns1035_label


def validate_object_metadata(meta: ObjectMeta) -> FieldError | None:
    """Validate ``name``/``generateName``; paths are relative to ``metadata``."""
    if not meta.name and not meta.generate_name:
        return err_missing_one_of("name", "generateName")

    errs: FieldError | None = None
    if meta.name:
        errs = also(errs, _validate_name(meta.name, "name"))
    if meta.generate_name:
        # Reserve room for the server-generated suffix.
        probe = meta.generate_name + "x" * GENERATE_NAME_SUFFIX_LENGTH
        errs = also(errs, _validate_name(probe, "generateName"))
    return errs


def _validate_name(name: str, field: str) -> FieldError | None:
    if len(name) > DNS1035_LABEL_MAX_LENGTH:
        return FieldError(
            message=f"exceeds maximum name length: {len(name)} > {DNS1035_LABEL_MAX_LENGTH}",
            paths=(field,),
            kind=INVALID_VALUE,
        )
    violations = is_dns1035_label(name)
    if violations:
        return FieldError(
            message=f"not a DNS 1035 label: {violations}",
            paths=(field,),
            kind=INVALID_VALUE,
        )
    return None
