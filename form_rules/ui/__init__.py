from .rule_form import RuleForm, INVALID_COLOUR

__all__ = ["RuleForm", "INVALID_COLOUR"]
