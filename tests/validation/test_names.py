"""Tests for Kubernetes name syntax checkers."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from routeguard.validation import is_dns1035_label, is_dns1123_subdomain, is_qualified_name


@pytest.mark.parametrize(
    "value",
    ["a", "MyName", "my.name", "123-abc", "under_score", "example.com/MyName", "a" * 63],
)
def test_qualified_name_valid(value: str) -> None:
    assert is_qualified_name(value) == []


@pytest.mark.parametrize(
    ("value", "fragment"),
    [
        ("", "name part must be non-empty"),
        ("-leading", "name part must consist of alphanumeric characters"),
        ("trailing.", "name part must consist of alphanumeric characters"),
        ("a" * 64, "name part must be no more than 63 characters"),
        ("/name", "prefix part must be non-empty"),
        ("Bad_Prefix/name", "prefix part a lowercase RFC 1123 subdomain"),
        ("a/b/c", "a qualified name must consist of"),
    ],
    ids=["empty", "leading_dash", "trailing_dot", "too_long", "empty_prefix", "bad_prefix", "two_slashes"],
)
def test_qualified_name_violations(value: str, fragment: str) -> None:
    violations = is_qualified_name(value)

    assert violations
    assert any(fragment in message for message in violations)


def test_dns1123_subdomain() -> None:
    assert is_dns1123_subdomain("example.com") == []
    assert is_dns1123_subdomain("Example.com")
    assert is_dns1123_subdomain("a" * 254)


def test_dns1035_label() -> None:
    assert is_dns1035_label("my-route") == []
    assert is_dns1035_label("1route")
    assert is_dns1035_label("my.route")
    assert is_dns1035_label("a" * 64) == ["must be no more than 63 characters"]


@pytest.mark.parametrize(
    "checker",
    [is_qualified_name, is_dns1123_subdomain, is_dns1035_label],
    ids=["qualified_name", "dns1123_subdomain", "dns1035_label"],
)
def test_trailing_newline_is_rejected(checker: Callable[[str], list[str]]) -> None:
    assert checker("app-00001\n")


def test_empty_name_part_reports_both_violations() -> None:
    violations = is_qualified_name("example.com/")

    assert len(violations) == 2
    assert violations[0] == "name part must be non-empty"
    assert violations[1].startswith("name part must consist of alphanumeric characters")
