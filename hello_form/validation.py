"""Per-field error state for the entry form."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from hello_form.rules import DEFAULT_RULES, RuleTable, first_failure

FORM_FIELDS = ("name", "date")


class ValidationSession:
    """Holds the ErrorMap for a set of fields and runs the rule table over them.

    Every registered field is always present in :attr:`errors`; ``''`` means
    the field is currently valid. Validation can be re-run at any time and
    only ever overwrites the state of the field being validated.
    """

    def __init__(
        self,
        fields: Iterable[str] = FORM_FIELDS,
        rules: RuleTable = DEFAULT_RULES,
    ) -> None:
        self._rules = rules
        self.errors: dict[str, str] = dict.fromkeys(fields, "")

    @property
    def has_errors(self) -> bool:
        return any(message != "" for message in self.errors.values())

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    def validate_field(self, field_name: str, value: Any) -> bool:
        """Validate one field, record its message and return whether it passed.

        A field with no rules always passes.
        """
        message = first_failure(self._rules.get(field_name, ()), value)
        self.errors[field_name] = message
        return message == ""

    def validate_form(self, values: Mapping[str, Any]) -> bool:
        """Validate every registered field against ``values``.

        All fields are validated even after one fails so that every message
        can be shown at once. Missing values count as empty.
        """
        results = [self.validate_field(name, values.get(name)) for name in list(self.errors)]
        return all(results)

    def clear_error(self, field_name: str) -> None:
        if field_name in self.errors:
            self.errors[field_name] = ""

    def clear_all_errors(self) -> None:
        for field_name in self.errors:
            self.errors[field_name] = ""

    def set_error(self, field_name: str, message: str) -> None:
        """Record an error that no single-field rule expresses."""
        self.errors[field_name] = message
