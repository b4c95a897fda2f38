# src/modules/blog/blog_controller.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.common.database.database import get_db_session
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.uploads import BLOG_FOLDER, UploadError, remove_upload, save_image
from src.modules.blog import blog_service, schemas

router = APIRouter(prefix="/api/blogs", tags=["blog"])

MAX_IMAGE_BYTES = 5 * 1024 * 1024
CONTENT_MIN_LENGTH = 10

# GET /api/blogs – Retrieve all posts, newest first
@router.get("", response_model=List[schemas.BlogPostResponse])
async def get_posts(db: AsyncSession = Depends(get_db_session)):
    return await blog_service.get_all_posts(db)

@router.post("", response_model=schemas.BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    title: str = Form(""),
    content: str = Form(""),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Publish a blog post from a multipart form, with an optional image.
    """
    title = title.strip()
    content = content.strip()
    if not title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=GlobalMessages.BLOG_TITLE_REQUIRED)
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=GlobalMessages.BLOG_CONTENT_REQUIRED)
    if len(content) < CONTENT_MIN_LENGTH:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=GlobalMessages.BLOG_CONTENT_TOO_SHORT)

    image_url = None
    if image is not None and image.filename:
        try:
            image_url = await save_image(image, BLOG_FOLDER, MAX_IMAGE_BYTES)
        except UploadError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await blog_service.create_post({"title": title, "content": content, "image": image_url}, db)
    except Exception:
        remove_upload(image_url)
        raise

@router.delete("/{post_id}", response_model=schemas.BlogDeleteResponse)
async def delete_post(post_id: UUID, db: AsyncSession = Depends(get_db_session)):
    post = await blog_service.delete_post(post_id, db)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GlobalMessages.BLOG_POST_NOT_FOUND)
    remove_upload(post.image)
    return schemas.BlogDeleteResponse(message=GlobalMessages.BLOG_POST_DELETED)
