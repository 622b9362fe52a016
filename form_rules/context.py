"""ValidationContext: binds one form and injects server error codes for one pass."""
import logging
from typing import Any

from form_rules.errors import FormNotBoundError, ReentrantValidationError
from form_rules.form import FormAdapter
from form_rules.rules import DecisionFunction

logger = logging.getLogger(__name__)


class ValidationContext:
    """Validation state owned by a single form.

    Usage:
        context = ValidationContext()
        rules = {"email": [email(), context.api_error_rule("auth/email-taken", "Email already used")]}
        ...
        if context.bind_and_validate(form):
            code = submit(...)
            if code:
                context.report_server_error(code)

    Server error codes are only active during the validate() call made by
    report_server_error, so they disappear on the next revalidation once the
    user edits the field.
    """

    def __init__(self):
        self._active_codes: set[str] = set()
        self._injecting = False
        self.bound_form: FormAdapter | None = None

    @property
    def active_server_error_codes(self) -> frozenset[str]:
        return frozenset(self._active_codes)

    @property
    def is_injecting(self) -> bool:
        return self._injecting

    def api_error_rule(self, error_code: str, message: str) -> DecisionFunction:
        """Rule that fails with `message` while `error_code` is being reported."""

        def rule(value: Any) -> bool | str:
            if error_code in self._active_codes:
                return message
            return True

        return rule

    def bind_and_validate(self, form: FormAdapter) -> bool:
        """Remember the form for later server errors, then validate it."""
        if self.bound_form is not form:
            logger.info("Binding form %s to validation context", type(form).__name__)
        self.bound_form = form
        return form.validate()

    def report_server_error(self, error_code: str) -> None:
        """Show `error_code` on any field primed with a matching api_error_rule.

        Replaces (does not add to) previously reported codes, and clears them
        again once the validation pass returns.
        """
        if self.bound_form is None:
            logger.error("Server error %s reported before a form was bound", error_code)
            raise FormNotBoundError(
                f"Cannot report server error {error_code!r}: call bind_and_validate() first"
            )
        if self._injecting:
            raise ReentrantValidationError(
                f"Server error {error_code!r} reported during another server error pass"
            )

        logger.info("Reporting server error %s", error_code)
        self._active_codes = {error_code}
        self._injecting = True
        try:
            self.bound_form.validate()
        finally:
            self._active_codes = set()
            self._injecting = False
