"""Config data model for routeguard."""

from __future__ import annotations

from dataclasses import dataclass

from routeguard.constants.config import DEFAULT_OUTPUT_FORMAT
from routeguard.types import OutputFormat
from routeguard.validation.context import ValidationContext


@dataclass(frozen=True)
class RouteguardConfig:
    """Resolved validator config."""

    disallow_deprecated: bool = False
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT  # type: ignore[assignment]

    def validation_context(self) -> ValidationContext:
        """Build the validation context these settings describe."""
        return ValidationContext(disallow_deprecated=self.disallow_deprecated)
