import logging
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.common.database.database import async_session
from src.models.models import ContactMessage
from src.modules.contact.validator import ContactSubmission

logger = logging.getLogger(__name__)

async def _insert_submission(submission: ContactSubmission, db: AsyncSession) -> ContactMessage:
    record = ContactMessage(
        name=submission.name,
        email=submission.email,
        message=submission.message,
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record

async def record_submission(
    submission: ContactSubmission,
    session_factory: Callable[[], AsyncSession] = async_session,
) -> None:
    """
    Persists a delivered contact submission.
    Intended to run from a FastAPI BackgroundTasks context after the response is sent,
    so every failure is logged here and never re-raised.
    """
    try:
        async with session_factory() as session:
            record = await _insert_submission(submission, session)
        logger.info("Recorded contact message %s from %s", record.id, submission.email)
    except Exception as e:
        logger.error("Failed to record contact message from %s: %s", submission.email, e, exc_info=e)
