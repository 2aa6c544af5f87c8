"""Kubernetes object-name syntax limits and patterns."""

from __future__ import annotations

import re
from re import Pattern

QUALIFIED_NAME_MAX_LENGTH: int = 63
DNS1123_SUBDOMAIN_MAX_LENGTH: int = 253
DNS1035_LABEL_MAX_LENGTH: int = 63

QUALIFIED_NAME_FMT: str = "([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]"
QUALIFIED_NAME_ERR_MSG: str = (
    "must consist of alphanumeric characters, '-', '_' or '.', "
    "and must start and end with an alphanumeric character"
)
QUALIFIED_NAME_EXAMPLES: tuple[str, ...] = ("MyName", "my.name", "123-abc")

DNS1123_LABEL_FMT: str = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT: str = DNS1123_LABEL_FMT + r"(\." + DNS1123_LABEL_FMT + ")*"
DNS1123_SUBDOMAIN_ERR_MSG: str = (
    "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric characters, "
    "'-' or '.', and must start and end with an alphanumeric character"
)

DNS1035_LABEL_FMT: str = "[a-z]([-a-z0-9]*[a-z0-9])?"
DNS1035_LABEL_ERR_MSG: str = (
    "a DNS-1035 label must consist of lower case alphanumeric characters or '-', "
    "start with an alphabetic character, and end with an alphanumeric character"
)

QUALIFIED_NAME_PATTERN: Pattern[str] = re.compile(QUALIFIED_NAME_FMT)
DNS1123_SUBDOMAIN_PATTERN: Pattern[str] = re.compile(DNS1123_SUBDOMAIN_FMT)
DNS1035_LABEL_PATTERN: Pattern[str] = re.compile(DNS1035_LABEL_FMT)

GENERATE_NAME_SUFFIX_LENGTH: int = 5

NON_OUTPUT_NAME_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9._-]+")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-+")
