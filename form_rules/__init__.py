"""Declarative field validation rules for interactive forms."""

from .rules import (
    DecisionFunction,
    required,
    email,
    phone,
    matches,
    field_reference,
    max_length,
    min_length,
    username,
)
from .rule_set import RuleSet, first_failure, all_failures, evaluate_rule_set
from .form import Form, FormAdapter
from .context import ValidationContext
from .errors import FormNotBoundError, ReentrantValidationError, InvalidRuleResultError

__all__ = [
    "DecisionFunction",
    "required",
    "email",
    "phone",
    "matches",
    "field_reference",
    "max_length",
    "min_length",
    "username",
    "RuleSet",
    "first_failure",
    "all_failures",
    "evaluate_rule_set",
    "Form",
    "FormAdapter",
    "ValidationContext",
    "FormNotBoundError",
    "ReentrantValidationError",
    "InvalidRuleResultError",
]
