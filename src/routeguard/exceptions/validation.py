"""Exception wrapper for callers that want invalid Routes to raise."""

from __future__ import annotations

from routeguard.exceptions.base import RouteguardError
from routeguard.exceptions.field_error import FieldError


class RouteValidationError(RouteguardError, ValueError):
    """Raised by ``ensure_valid_route`` when a Route has validation findings."""

    def __init__(self, field_error: FieldError) -> None:
        super().__init__(str(field_error))
        self.field_error = field_error
