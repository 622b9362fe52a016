"""Rule factories: each returns a decision function (value) -> True | message."""
import re
from collections.abc import Callable, Mapping
from typing import Any

DecisionFunction = Callable[[Any], "bool | str"]

# Up to 24 chars after the last dot, new TLDs can be long.
EMAIL_REGEX = re.compile(
    r"\w+([.\-+]\w+)*\+*@\w+([.-]\w+)*(\.\w{2,24})+",
    re.ASCII,
)
# Optional +, optional country code, optional (area code), exchange, subscriber.
PHONE_REGEX = re.compile(
    r"^[+]?(?:[0-9]{1,3}[-\s.]?)?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$",
    re.IGNORECASE | re.MULTILINE,
)
USERNAME_REGEX = re.compile(r"[a-zA-Z0-9_]+")

DEFAULT_REQUIRED_MESSAGE = "This field is required."
DEFAULT_EMAIL_MESSAGE = "Invalid email address format."
DEFAULT_PHONE_MESSAGE = "Invalid phone number format"
DEFAULT_MATCHES_MESSAGE = "Passwords must match."
DEFAULT_USERNAME_MESSAGE = "Only letters, numbers and underscore are allowed."


def _length(value: Any) -> int | None:
    """len(value), or None for values that have no length."""
    try:
        return len(value)
    except TypeError:
        return None


def required(message: str | None = None) -> DecisionFunction:
    """Fails on any falsy value.

    Note that this is a plain truthiness check, so 0 and False fail too.
    """
    message = message or DEFAULT_REQUIRED_MESSAGE

    def rule(value: Any) -> bool | str:
        if not value:
            return message
        return True

    return rule


def email(message: str | None = None) -> DecisionFunction:
    message = message or DEFAULT_EMAIL_MESSAGE

    def rule(value: Any) -> bool | str:
        if isinstance(value, str) and EMAIL_REGEX.fullmatch(value):
            return True
        return message

    return rule


def phone(message: str | None = None) -> DecisionFunction:
    """Accepts e.g. 555-123-4567, (555) 123 4567, +1 (555) 123-4567."""
    message = message or DEFAULT_PHONE_MESSAGE

    def rule(value: Any) -> bool | str:
        if isinstance(value, str) and PHONE_REGEX.search(value):
            return True
        return message

    return rule


def field_reference(owner: Any, name: str) -> Callable[[], Any]:
    """Accessor for owner[name] (or owner.name), read each time it is called.

    Used with matches() because the referenced value usually does not exist
    yet when the rules are built. Missing keys/attributes read as None.
    """
    if isinstance(owner, Mapping):
        return lambda: owner.get(name)
    return lambda: getattr(owner, name, None)


def matches(reference: Callable[[], Any], message: str | None = None) -> DecisionFunction:
    """Passes when the value equals reference() at evaluation time."""
    message = message or DEFAULT_MATCHES_MESSAGE

    def rule(value: Any) -> bool | str:
        if reference() == value:
            return True
        return message

    return rule


def max_length(length: int, message: str | None = None) -> DecisionFunction:
    """Only enforced when a value is present; combine with required() otherwise."""
    message = message or f"Max {length} characters allowed."

    def rule(value: Any) -> bool | str:
        if not value:
            return True
        size = _length(value)
        if size is not None and size > length:
            return message
        return True

    return rule


def min_length(length: int, message: str | None = None) -> DecisionFunction:
    """Only enforced when a value is present; combine with required() otherwise."""
    message = message or f"Min {length} characters allowed."

    def rule(value: Any) -> bool | str:
        if not value:
            return True
        size = _length(value)
        if size is not None and size < length:
            return message
        return True

    return rule


def username(message: str | None = None) -> DecisionFunction:
    message = message or DEFAULT_USERNAME_MESSAGE

    def rule(value: Any) -> bool | str:
        if isinstance(value, str) and USERNAME_REGEX.fullmatch(value):
            return True
        return message

    return rule
