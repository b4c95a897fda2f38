from dataclasses import dataclass
from typing import Any, Mapping

from src.modules.contact.dispatcher import send_contact_email
from src.modules.contact.outcomes import DeliveryOutcome
from src.modules.contact.providers.factory import ProviderConfig
from src.modules.contact.validator import ContactSubmission, validate_submission

@dataclass(frozen=True)
class ContactResult:
    submission: ContactSubmission
    outcome: DeliveryOutcome

async def process_contact_form(form_data: Mapping[str, Any], config: ProviderConfig) -> ContactResult:
    """
    Validate a contact form submission and relay it by email.

    Args:
        form_data (Mapping): Contains 'name', 'email', and 'message'.
        config (ProviderConfig): The provider selected at startup.

    Returns:
        ContactResult: the trimmed submission and its delivery outcome.

    Raises:
        ContactValidationError: the submission never reaches a provider.
    """
    submission = validate_submission(form_data)
    outcome = await send_contact_email(submission, config)
    return ContactResult(submission=submission, outcome=outcome)
