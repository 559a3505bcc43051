"""Ordered validation rules per field.

Each field maps to a tuple of :class:`Rule`. Rules run in order and the
first failing rule supplies the message, so precedence is positional.
Rules see the value trimmed of surrounding whitespace.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

NAME_REQUIRED = "Name is required"
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters"
NAME_INVALID_CHARS = "Name can only contain letters, spaces, hyphens, and apostrophes"
DATE_REQUIRED = "Date is required"
DATE_INVALID = "Please enter a valid date"


def name_too_long(max_length: int) -> str:
    return f"Name must not exceed {max_length} characters"


@dataclass(frozen=True)
class Rule:
    """A predicate over a trimmed field value and the message for its failure."""

    test: Callable[[str], bool]
    message: str


RuleTable = Mapping[str, tuple[Rule, ...]]


def _allowed_name(value: str) -> bool:
    return all(ch.isalpha() or ch.isspace() or ch in "-'" for ch in value)


def _calendar_date(value: str) -> bool:
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def build_rule_table(name_max_length: int = NAME_MAX_LENGTH) -> RuleTable:
    """Build the read-only rule table for the ``name`` and ``date`` fields."""
    name_rules = (
        Rule(lambda v: bool(v), NAME_REQUIRED),
        Rule(lambda v: len(v) >= NAME_MIN_LENGTH, NAME_TOO_SHORT),
        Rule(lambda v: len(v) <= name_max_length, name_too_long(name_max_length)),
        Rule(_allowed_name, NAME_INVALID_CHARS),
    )
    date_rules = (
        Rule(lambda v: bool(v), DATE_REQUIRED),
        Rule(_calendar_date, DATE_INVALID),
    )
    return MappingProxyType({"name": name_rules, "date": date_rules})


DEFAULT_RULES: RuleTable = build_rule_table()


def first_failure(rules: tuple[Rule, ...], value: Any) -> str:
    """Return the message of the first rule ``value`` fails, or ``''``.

    ``None`` and non-string values are checked as their ``str`` form, with
    ``None`` counting as empty.
    """
    trimmed = ("" if value is None else str(value)).strip()
    for rule in rules:
        if not rule.test(trimmed):
            return rule.message
    return ""
