"""Input sanitization for the entry form.

Sanitizers are total: anything that is not a ``str`` becomes ``''`` and no
function here raises. They are lossy on purpose, validation runs on the
result afterwards.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import datetime
from typing import Any

from markupsafe import escape

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# markupsafe covers & < > " ' and handles & first.
_EXTRA_ENTITIES = {
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}


def normalize_whitespace(value: Any) -> str:
    """Trim ``value`` and collapse inner whitespace runs to one space."""
    if not isinstance(value, str):
        return ""
    return " ".join(value.split())


def _is_name_char(ch: str) -> bool:
    return ch.isalpha() or ch in " -'"


def sanitize_name(value: Any) -> str:
    """Keep letters (accented included), spaces, hyphens and apostrophes.

    Disallowed characters are deleted, not encoded. Composition, filtering and
    whitespace normalization repeat until the text stops changing: deleting
    a character can leave a double space or two newly composable letters.
    """
    if not isinstance(value, str):
        return ""
    text = normalize_whitespace(value)
    while True:
        composed = unicodedata.normalize("NFC", text)
        cleaned = normalize_whitespace("".join(ch for ch in composed if _is_name_char(ch)))
        if cleaned == text:
            return cleaned
        text = cleaned


def escape_html(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    escaped = str(escape(value))
    for char, entity in _EXTRA_ENTITIES.items():
        escaped = escaped.replace(char, entity)
    return escaped


def sanitize_date(value: Any) -> str:
    """Return ``value`` if it is a real ``YYYY-MM-DD`` calendar date, else ``''``."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return ""
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return ""
    return value


def sanitize_input(value: Any) -> str:
    """Normalize and HTML-escape free text bound for markup."""
    return escape_html(normalize_whitespace(value))
