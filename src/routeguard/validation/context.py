"""Ambient flags threaded through a validation call."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ValidationContext:
    """Per-call validation flags.

    ``deadline`` is carried for callers that enforce one; validators never
    poll it.
    """

    in_spec: bool = False
    disallow_deprecated: bool = False
    deadline: float | None = None

    def within_spec(self) -> ValidationContext:
        """Return a copy marked as validating inside a ``spec`` block."""
        return replace(self, in_spec=True)

    def with_disallow_deprecated(self, disallow: bool = True) -> ValidationContext:
        """Return a copy that rejects deprecated legacy fields."""
        return replace(self, disallow_deprecated=disallow)
