# src/modules/contact/contact_controller.py

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import JSONResponse

from src.common.config import settings
from src.common.rate_limit import limiter
from src.common.utils.global_messages import GlobalMessages
from src.modules.contact import contact_service, recorder, schemas
from src.modules.contact.outcomes import Delivered, user_message
from src.modules.contact.providers.factory import ProviderConfig, get_provider_config
from src.modules.contact.validator import ContactValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])

@router.post(
    "/send",
    response_model=schemas.ContactFormResponse,
    responses={400: {"model": schemas.ContactErrorResponse}, 500: {"model": schemas.ContactErrorResponse}},
)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def send_contact_message(
    request: Request,
    form: schemas.ContactFormRequest,
    background_tasks: BackgroundTasks,
    config: ProviderConfig = Depends(get_provider_config),
):
    """
    Relay a contact form submission to the site owner by email.
    The submission is recorded in a background task only after the email is accepted,
    so the response never waits on, or depends on, the database write.
    """
    try:
        result = await contact_service.process_contact_form(form.model_dump(), config)
    except ContactValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e), "fields": e.field_errors},
        )

    outcome = result.outcome
    if not isinstance(outcome, Delivered):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": user_message(outcome)},
        )

    background_tasks.add_task(recorder.record_submission, result.submission)
    return schemas.ContactFormResponse(
        message=GlobalMessages.CONTACT_MESSAGE_SENT,
        messageId=outcome.message_id,
    )
