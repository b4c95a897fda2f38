# src/modules/projects/project_controller.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dependencies import require_admin
from src.common.database.database import get_db_session
from src.common.utils.global_messages import GlobalMessages
from src.common.utils.uploads import PROJECTS_FOLDER, UploadError, remove_upload, save_image
from src.modules.projects import project_service, schemas

router = APIRouter(prefix="/api/projects", tags=["projects"])

MAX_IMAGE_BYTES = 10 * 1024 * 1024

# GET /api/projects – Retrieve all projects, newest first
@router.get("", response_model=List[schemas.ProjectResponse])
async def get_projects(db: AsyncSession = Depends(get_db_session)):
    return await project_service.get_all_projects(db)

@router.post(
    "",
    response_model=schemas.ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_project(
    title: str = Form(""),
    description: str = Form(""),
    tech_stack: str = Form(""),
    live_url: str = Form(""),
    repo_url: str = Form(""),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db_session)
):
    title = title.strip()
    if not title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=GlobalMessages.PROJECT_TITLE_REQUIRED)

    image_url = None
    if image is not None and image.filename:
        try:
            image_url = await save_image(image, PROJECTS_FOLDER, MAX_IMAGE_BYTES)
        except UploadError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    project_data = {
        "title": title,
        "description": description.strip(),
        "tech_stack": tech_stack.strip(),
        "live_url": live_url.strip(),
        "repo_url": repo_url.strip(),
        "image_url": image_url,
    }
    try:
        return await project_service.create_project(project_data, db)
    except Exception:
        remove_upload(image_url)
        raise

@router.delete(
    "/{project_id}",
    response_model=schemas.ProjectDeleteResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_project(project_id: UUID, db: AsyncSession = Depends(get_db_session)):
    project = await project_service.delete_project(project_id, db)
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GlobalMessages.PROJECT_NOT_FOUND)
    remove_upload(project.image_url)
    return schemas.ProjectDeleteResponse(message=GlobalMessages.PROJECT_DELETED)
