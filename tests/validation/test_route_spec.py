"""Tests for whole-spec validation: sums, duplicate names, empty specs."""

from __future__ import annotations

import pytest

from routeguard.constants.validation import (
    DISALLOWED_FIELDS,
    DUPLICATE_DEFINITION,
    MISSING_FIELD,
    MULTIPLE_ONE_OF,
    OUT_OF_BOUNDS_VALUE,
    SUM_MISMATCH,
)
from routeguard.model import RouteSpec, TrafficTarget
from routeguard.validation import ValidationContext, is_empty_spec, validate_route_spec


def _spec(*percents: int, names: tuple[str, ...] = ()) -> RouteSpec:
    padded = names + ("",) * (len(percents) - len(names))
    return RouteSpec(
        traffic=tuple(
            TrafficTarget(name=name, revision_name=f"rev-{i}", percent=percent)
            for i, (name, percent) in enumerate(zip(padded, percents))
        )
    )


def test_empty_spec_reports_single_missing_field(ctx: ValidationContext) -> None:
    err = validate_route_spec(ctx, RouteSpec())

    assert err is not None
    assert err.kinds() == (MISSING_FIELD,)
    assert err.paths == ("",)


def test_is_empty_spec() -> None:
    assert is_empty_spec(RouteSpec())
    assert not is_empty_spec(RouteSpec(deprecated_generation=1))
    assert not is_empty_spec(_spec(100))


def test_fifty_fifty_split_is_valid(ctx: ValidationContext) -> None:
    spec = RouteSpec(
        traffic=(
            TrafficTarget(revision_name="app-00001", percent=50),
            TrafficTarget(configuration_name="app", percent=50),
        )
    )

    assert validate_route_spec(ctx, spec) is None


@pytest.mark.parametrize(
    ("percents", "total"),
    [((99,), 99), ((50, 51), 101), ((0, 0), 0), ((30, 30, 30), 90)],
    ids=["single_short", "pair_over", "all_zero", "three_short"],
)
def test_sum_mismatch_is_attributed_to_traffic(ctx: ValidationContext, percents: tuple[int, ...], total: int) -> None:
    err = validate_route_spec(ctx, _spec(*percents))

    assert err is not None
    assert err.kinds() == (SUM_MISMATCH,)
    assert err.paths == ("traffic",)
    assert err.message == f"Traffic targets sum to {total}, want 100"


@pytest.mark.parametrize("percents", [(100,), (25, 25, 50), (0, 100), (1,) * 100])
def test_no_sum_mismatch_when_total_is_100(ctx: ValidationContext, percents: tuple[int, ...]) -> None:
    err = validate_route_spec(ctx, _spec(*percents))

    assert err is None


def test_deprecated_generation_only_still_checks_sum(ctx: ValidationContext) -> None:
    err = validate_route_spec(ctx, RouteSpec(deprecated_generation=4))

    assert err is not None
    assert err.kinds() == (SUM_MISMATCH,)


def test_duplicate_name_reports_both_indices(ctx: ValidationContext) -> None:
    err = validate_route_spec(ctx, _spec(50, 50, names=("a", "a")))

    assert err is not None
    assert err.kinds() == (DUPLICATE_DEFINITION,)
    assert err.paths == ("traffic[0].name", "traffic[1].name")
    assert err.message == 'Multiple definitions for "a"'


def test_repeated_name_is_reported_against_first_occurrence(ctx: ValidationContext) -> None:
    err = validate_route_spec(ctx, _spec(25, 25, 25, 25, names=("a", "b", "a", "a")))

    assert err is not None
    duplicates = [leaf for leaf in err.flatten() if leaf.kind == DUPLICATE_DEFINITION]
    assert [leaf.paths for leaf in duplicates] == [
        ("traffic[0].name", "traffic[2].name"),
        ("traffic[0].name", "traffic[3].name"),
    ]


def test_empty_names_are_not_checked_for_uniqueness(ctx: ValidationContext) -> None:
    assert validate_route_spec(ctx, _spec(50, 50, names=("", ""))) is None


def test_target_errors_are_scoped_by_index(ctx: ValidationContext) -> None:
    spec = RouteSpec(
        traffic=(
            TrafficTarget(revision_name="ok", percent=50),
            TrafficTarget(revision_name="r", configuration_name="c", percent=50),
        )
    )

    err = validate_route_spec(ctx, spec)

    assert err is not None
    assert err.kinds() == (MULTIPLE_ONE_OF,)
    assert err.paths == ("traffic[1].revisionName", "traffic[1].configurationName")


def test_sum_check_runs_even_when_every_target_fails(ctx: ValidationContext) -> None:
    spec = RouteSpec(
        traffic=(
            TrafficTarget(revision_name="r", percent=150, url="http://x"),
            TrafficTarget(revision_name="r", configuration_name="c", percent=-10),
        )
    )

    err = validate_route_spec(ctx, spec)

    assert err is not None
    assert err.kinds() == (
        OUT_OF_BOUNDS_VALUE,
        DISALLOWED_FIELDS,
        MULTIPLE_ONE_OF,
        OUT_OF_BOUNDS_VALUE,
        SUM_MISMATCH,
    )
    assert err.flatten()[-1].message == "Traffic targets sum to 140, want 100"


def test_findings_follow_traversal_order(ctx: ValidationContext) -> None:
    spec = RouteSpec(
        traffic=(
            TrafficTarget(name="a", percent=10),
            TrafficTarget(name="a", revision_name="r", percent=10),
        )
    )

    err = validate_route_spec(ctx, spec)

    assert err is not None
    assert err.all_paths() == (
        "traffic[0].revisionName",
        "traffic[0].configurationName",
        "traffic[0].name",
        "traffic[1].name",
        "traffic",
    )


def test_disallowed_deprecated_generation(ctx: ValidationContext) -> None:
    spec = RouteSpec(traffic=_spec(100).traffic, deprecated_generation=2)

    assert validate_route_spec(ctx, spec) is None

    err = validate_route_spec(ctx.with_disallow_deprecated(), spec)

    assert err is not None
    assert err.kinds() == (DISALLOWED_FIELDS,)
    assert err.paths == ("generation",)
