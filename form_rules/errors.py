"""Exceptions raised for misuse of the validation API (never for a failing value)."""


class FormNotBoundError(RuntimeError):
    """A server error was reported before any form was bound to the context."""


class ReentrantValidationError(RuntimeError):
    """report_server_error was called again while its own validation pass was running."""


class InvalidRuleResultError(TypeError):
    """A decision function returned something other than True or a non-empty message."""

    def __init__(self, field_name: str | None, result):
        self.field_name = field_name
        self.result = result
        where = f" for field {field_name!r}" if field_name else ""
        super().__init__(f"Rule{where} returned {result!r}; expected True or a non-empty message")
