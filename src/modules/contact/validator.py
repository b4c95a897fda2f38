import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Deliberately loose: one "@", at least one dot after it, no whitespace.
# Multi-label and internationalized addresses are not specially handled.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    message: str


class ContactValidationError(Exception):
    """Raised with every failing field and its message."""

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__(next(iter(field_errors.values())))
        self.field_errors = field_errors


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_submission(data: Mapping[str, Any]) -> ContactSubmission:
    """
    Check the contact form fields and return a trimmed submission.

    Raises:
        ContactValidationError: listing all failing fields, not just the first.
    """
    errors: Dict[str, str] = {}

    name = _text(data.get("name"))
    if not name:
        errors["name"] = "Name is required"
    elif len(name) < NAME_MIN_LENGTH:
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters"

    raw_email = data.get("email")
    email = _text(raw_email)
    if not email:
        errors["email"] = "Email is required"
    elif not is_valid_email(raw_email):
        errors["email"] = "Please enter a valid email address"

    message = _text(data.get("message"))
    if not message:
        errors["message"] = "Message is required"
    elif len(message) < MESSAGE_MIN_LENGTH:
        errors["message"] = f"Message must be at least {MESSAGE_MIN_LENGTH} characters"

    if errors:
        raise ContactValidationError(errors)
    return ContactSubmission(name=name, email=email, message=message)
