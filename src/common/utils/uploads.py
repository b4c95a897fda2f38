import logging
import os
import time
import uuid
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from src.common.config import settings
from src.common.utils.global_messages import GlobalMessages

logger = logging.getLogger(__name__)

BLOG_FOLDER = "blog"
PROJECTS_FOLDER = "projects"
UPLOAD_URL_PREFIX = "/uploads"

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
CHUNK_SIZE = 64 * 1024

class UploadError(ValueError):
    pass

def ensure_upload_dirs() -> None:
    for folder in (BLOG_FOLDER, PROJECTS_FOLDER):
        os.makedirs(os.path.join(settings.UPLOAD_DIR, folder), exist_ok=True)

async def save_image(upload: UploadFile, folder: str, max_bytes: int) -> str:
    """
    Write an uploaded image under UPLOAD_DIR/<folder> and return its public URL.

    Raises:
        UploadError: not an image, or larger than max_bytes.
    """
    ext = os.path.splitext(upload.filename or "")[1].lower()
    if not (upload.content_type or "").startswith("image/") or ext not in ALLOWED_EXTENSIONS:
        raise UploadError(GlobalMessages.IMAGE_INVALID_TYPE)

    filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"
    path = os.path.join(settings.UPLOAD_DIR, folder, filename)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    # File I/O runs in the threadpool; a failed write never leaves a partial file behind.
    written = 0
    out = await run_in_threadpool(open, path, "wb")
    try:
        while chunk := await upload.read(CHUNK_SIZE):
            written += len(chunk)
            if written > max_bytes:
                raise UploadError(GlobalMessages.IMAGE_TOO_LARGE.format(limit_mb=max_bytes // (1024 * 1024)))
            await run_in_threadpool(out.write, chunk)
    except Exception:
        await run_in_threadpool(out.close)
        _discard(path)
        raise
    await run_in_threadpool(out.close)

    logger.info("Saved upload %s (%d bytes)", path, written)
    return f"{UPLOAD_URL_PREFIX}/{folder}/{filename}"

def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass

def remove_upload(url: Optional[str]) -> None:
    """Best-effort removal of a previously saved upload."""
    if not url or not url.startswith(UPLOAD_URL_PREFIX + "/"):
        return
    relative = url[len(UPLOAD_URL_PREFIX) + 1:]
    path = os.path.join(settings.UPLOAD_DIR, *relative.split("/"))
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove upload %s: %s", path, e)
