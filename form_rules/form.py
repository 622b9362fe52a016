"""Form adapters: anything with a synchronous validate() -> bool."""
import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from form_rules.rule_set import RuleSet, evaluate_rule_set

logger = logging.getLogger(__name__)


class FormAdapter(Protocol):
    def validate(self) -> bool:
        """Evaluate every field's rules against current values and show failures."""
        ...


class Form:
    """In-memory form: a RuleSet plus a source of current values.

    `values` is either a mapping (read on every validate(), so later edits
    to it are picked up) or a zero-argument callable returning one.
    """

    def __init__(
        self,
        rules: RuleSet,
        values: Mapping[str, Any] | Callable[[], Mapping[str, Any]] | None = None,
    ):
        self.rules = rules
        self._values = values if values is not None else {}
        self.errors: dict[str, str] = {}

    def __repr__(self):
        return f"Form(fields={list(self.rules)}, errors={self.errors})"

    def current_values(self) -> Mapping[str, Any]:
        if callable(self._values):
            return self._values()
        return self._values

    def validate(self) -> bool:
        self.errors = evaluate_rule_set(self.rules, self.current_values())
        if self.errors:
            logger.debug("Form invalid: %s", ", ".join(self.errors))
        return not self.errors

    def error_for(self, field_name: str) -> str | None:
        """Message currently shown for field_name, if any."""
        return self.errors.get(field_name)

    def reset_validation(self) -> None:
        self.errors = {}
