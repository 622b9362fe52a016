"""RuleSet evaluation: ordered decision functions per field, first failure wins."""
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from form_rules.errors import InvalidRuleResultError
from form_rules.rules import DecisionFunction

logger = logging.getLogger(__name__)

RuleSet = Mapping[str, Sequence[DecisionFunction]]


def _check_result(result: Any, field_name: str | None) -> bool | str:
    if result is True:
        return result
    if isinstance(result, str) and result:
        return result
    raise InvalidRuleResultError(field_name, result)


def first_failure(
    rules: Sequence[DecisionFunction], value: Any, field_name: str | None = None
) -> str | None:
    """Evaluate rules in order; return the first failure message, or None."""
    for rule in rules:
        result = _check_result(rule(value), field_name)
        if result is not True:
            return result
    return None


def all_failures(
    rules: Sequence[DecisionFunction], value: Any, field_name: str | None = None
) -> list[str]:
    """Every failure message for value, in rule order."""
    failures: list[str] = []
    for rule in rules:
        result = _check_result(rule(value), field_name)
        if result is not True:
            failures.append(result)
    return failures


def evaluate_rule_set(rule_set: RuleSet, values: Mapping[str, Any]) -> dict[str, str]:
    """Run every field's rules against its current value.

    Returns field name -> first failure message, for failing fields only.
    Fields with no value in `values` are evaluated as None.
    """
    errors: dict[str, str] = {}
    for field_name, rules in rule_set.items():
        message = first_failure(rules, values.get(field_name), field_name)
        if message is not None:
            logger.debug("Field %s failed: %s", field_name, message)
            errors[field_name] = message
    return errors
