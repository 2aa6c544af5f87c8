"""Kubernetes name syntax checkers.

Each checker returns the list of violation messages; an empty list means
the value is valid.
"""

from __future__ import annotations

from re import Pattern

from routeguard.constants.naming import (
    DNS1035_LABEL_ERR_MSG,
    DNS1035_LABEL_FMT,
    DNS1035_LABEL_MAX_LENGTH,
    DNS1035_LABEL_PATTERN,
    DNS1123_SUBDOMAIN_ERR_MSG,
    DNS1123_SUBDOMAIN_FMT,
    DNS1123_SUBDOMAIN_MAX_LENGTH,
    DNS1123_SUBDOMAIN_PATTERN,
    QUALIFIED_NAME_ERR_MSG,
    QUALIFIED_NAME_EXAMPLES,
    QUALIFIED_NAME_FMT,
    QUALIFIED_NAME_MAX_LENGTH,
    QUALIFIED_NAME_PATTERN,
)


def is_qualified_name(value: str) -> list[str]:
    """Check ``[prefix/]name`` where prefix is a DNS-1123 subdomain."""
    errs: list[str] = []
    parts = value.split("/")
    if len(parts) == 1:
        name = parts[0]
    elif len(parts) == 2:
        prefix, name = parts
        if not prefix:
            errs.append("prefix part " + _empty_error())
        else:
            errs.extend(f"prefix part {msg}" for msg in is_dns1123_subdomain(prefix))
    else:
        return [
            "a qualified name "
            + _regex_error(QUALIFIED_NAME_ERR_MSG, QUALIFIED_NAME_FMT, QUALIFIED_NAME_EXAMPLES)
            + " with an optional DNS subdomain prefix and '/' (e.g. 'example.com/MyName')"
        ]

    if not name:
        errs.append("name part " + _empty_error())
    elif len(name) > QUALIFIED_NAME_MAX_LENGTH:
        errs.append("name part " + _max_len_error(QUALIFIED_NAME_MAX_LENGTH))
    if not QUALIFIED_NAME_PATTERN.fullmatch(name):
        errs.append(
            "name part " + _regex_error(QUALIFIED_NAME_ERR_MSG, QUALIFIED_NAME_FMT, QUALIFIED_NAME_EXAMPLES)
        )
    return errs


def is_dns1123_subdomain(value: str) -> list[str]:
    """Check a lowercase RFC 1123 subdomain."""
    return _check(
        value,
        DNS1123_SUBDOMAIN_MAX_LENGTH,
        DNS1123_SUBDOMAIN_PATTERN,
        DNS1123_SUBDOMAIN_ERR_MSG,
        DNS1123_SUBDOMAIN_FMT,
        ("example.com",),
    )


def is_dns1035_label(value: str) -> list[str]:
    """Check a DNS-1035 label, the syntax required for object names."""
    return _check(
        value,
        DNS1035_LABEL_MAX_LENGTH,
        DNS1035_LABEL_PATTERN,
        DNS1035_LABEL_ERR_MSG,
        DNS1035_LABEL_FMT,
        ("my-name", "abc-123"),
    )


def _check(
    value: str,
    max_length: int,
    pattern: Pattern[str],
    message: str,
    fmt: str,
    examples: tuple[str, ...],
) -> list[str]:
    errs: list[str] = []
    if len(value) > max_length:
        errs.append(_max_len_error(max_length))
    if not pattern.fullmatch(value):
        errs.append(_regex_error(message, fmt, examples))
    return errs


def _max_len_error(length: int) -> str:
    return f"must be no more than {length} characters"


def _empty_error() -> str:
    return "must be non-empty"


def _regex_error(message: str, fmt: str, examples: tuple[str, ...]) -> str:
    if not examples:
        return f"{message} (regex used for validation is '{fmt}')"
    quoted = " or ".join(f"'{example}'" for example in examples)
    return f"{message} (e.g. {quoted}, regex used for validation is '{fmt}')"
