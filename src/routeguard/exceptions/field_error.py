"""Structured, path-annotated validation error model.

A :class:`FieldError` is an immutable value: validators return one (or
``None`` when nothing is wrong), containing structures merge their
children's findings with :func:`also` and scope them with ``via_field`` /
``via_index`` so a leaf finding on ``percent`` surfaces as
``spec.traffic[2].percent`` at the top.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from routeguard.constants.validation import (
    CURRENT_FIELD,
    DISALLOWED_FIELDS,
    DUPLICATE_DEFINITION,
    INVALID_KEY_NAME,
    MISSING_FIELD,
    MISSING_ONE_OF,
    MULTIPLE_ONE_OF,
    OUT_OF_BOUNDS_VALUE,
    SUM_MISMATCH,
)
from routeguard.types import JsonObject


@dataclass(frozen=True)
class FieldError:
    """A validation finding, or an ordered composite of findings.

    Leaves carry ``message``/``paths``/``kind``/``details``; a composite
    produced by :func:`also` carries only ``errors`` (always leaves).
    """

    message: str = ""
    paths: tuple[str, ...] = ()
    kind: str = ""
    details: str = ""
    errors: tuple[FieldError, ...] = ()

    def flatten(self) -> tuple[FieldError, ...]:
        """Return the leaf findings in the order they were merged."""
        if self.errors:
            return self.errors
        return (self,)

    def also(self, *others: FieldError | None) -> FieldError:
        """Merge this error with *others*, ignoring ``None`` operands."""
        return also(self, *others) or self

    def via_field(self, *names: str) -> FieldError:
        """Prefix every path with the dotted field *names*, outermost first."""
        prefixes = [name for name in names if name]
        result = self
        for name in reversed(prefixes):
            result = result._rewrite(name)
        return result

    def via_index(self, index: int) -> FieldError:
        """Prefix every path with ``[index]``."""
        return self._rewrite(f"[{index}]")

    def via_field_index(self, name: str, index: int) -> FieldError:
        """Prefix every path with ``name[index]``."""
        return self.via_index(index).via_field(name)

    def all_paths(self) -> tuple[str, ...]:
        """Return every path across all leaves, de-duplicated in order."""
        seen: dict[str, None] = {}
        for leaf in self.flatten():
            for path in leaf.paths:
                seen.setdefault(path, None)
        return tuple(seen)

    def kinds(self) -> tuple[str, ...]:
        """Return the kind of every leaf in order."""
        return tuple(leaf.kind for leaf in self.flatten())

    def error(self) -> str:
        """Render one line per leaf: ``message: path, path`` plus any details."""
        lines: list[str] = []
        for leaf in self.flatten():
            line = leaf.message
            if leaf.paths:
                line = f"{line}: {', '.join(leaf.paths)}"
            if leaf.details:
                line = f"{line}\n{leaf.details}"
            lines.append(line)
        return "\n".join(lines)

    def to_dict(self) -> JsonObject:
        """Serialize to the API response shape: message, paths, causes."""
        return {
            "message": self.error(),
            "paths": list(self.all_paths()),
            "causes": [
                {
                    "kind": leaf.kind,
                    "message": leaf.message,
                    "paths": list(leaf.paths),
                    "details": leaf.details,
                }
                for leaf in self.flatten()
            ],
        }

    def __str__(self) -> str:
        return self.error()

    def _rewrite(self, prefix: str) -> FieldError:
        if self.errors:
            return replace(self, errors=tuple(leaf._rewrite(prefix) for leaf in self.errors))
        return replace(self, paths=tuple(_with_prefix(prefix, path) for path in self.paths))


def also(*errors: FieldError | None) -> FieldError | None:
    """Merge errors left to right; ``None`` is the identity.

    A single present operand is returned unchanged.
    """
    present = [err for err in errors if err is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    leaves: list[FieldError] = []
    for err in present:
        leaves.extend(err.flatten())
    return FieldError(errors=tuple(leaves))


def _with_prefix(prefix: str, path: str) -> str:
    if path == CURRENT_FIELD:
        return prefix
    if path.startswith("["):
        return f"{prefix}{path}"
    return f"{prefix}.{path}"


def err_missing_field(*paths: str) -> FieldError:
    return FieldError(message="missing field(s)", paths=paths, kind=MISSING_FIELD)


def err_multiple_one_of(*paths: str) -> FieldError:
    return FieldError(message="expected exactly one, got both", paths=paths, kind=MULTIPLE_ONE_OF)


def err_missing_one_of(*paths: str) -> FieldError:
    return FieldError(message="expected exactly one, got neither", paths=paths, kind=MISSING_ONE_OF)


def err_invalid_key_name(value: str, field: str, *violations: str) -> FieldError:
    return FieldError(
        message=f'invalid key name "{value}"',
        paths=(field,),
        kind=INVALID_KEY_NAME,
        details=", ".join(violations),
    )


def err_out_of_bounds_value(value: int, lower: int, upper: int, field: str) -> FieldError:
    return FieldError(
        message=f"expected {lower} <= {value} <= {upper}",
        paths=(field,),
        kind=OUT_OF_BOUNDS_VALUE,
    )


def err_disallowed_fields(*paths: str) -> FieldError:
    return FieldError(message="must not set the field(s)", paths=paths, kind=DISALLOWED_FIELDS)


def err_duplicate_definition(name: str, *paths: str) -> FieldError:
    return FieldError(
        message=f'Multiple definitions for "{name}"',
        paths=paths,
        kind=DUPLICATE_DEFINITION,
    )


def err_sum_mismatch(total: int, expected: int, field: str) -> FieldError:
    return FieldError(
        message=f"Traffic targets sum to {total}, want {expected}",
        paths=(field,),
        kind=SUM_MISMATCH,
    )
