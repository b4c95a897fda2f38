# src/modules/projects/project_service.py

from typing import List, Optional
from uuid import UUID
from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.models import Project

async def get_all_projects(db: AsyncSession) -> List[Project]:
    result = await db.execute(select(Project).order_by(Project.created_at.desc()))
    return list(result.scalars().all())

async def get_project_by_id(project_id: UUID, db: AsyncSession) -> Optional[Project]:
    result = await db.execute(select(Project).where(Project.id == project_id))
    return result.scalars().first()

async def create_project(project_data: dict, db: AsyncSession) -> Project:
    # Empty optional fields are stored as NULL
    new_project = Project(
        title=project_data["title"],
        description=project_data.get("description") or None,
        tech_stack=project_data.get("tech_stack") or None,
        live_url=project_data.get("live_url") or None,
        repo_url=project_data.get("repo_url") or None,
        image_url=project_data.get("image_url"),
    )
    db.add(new_project)
    await db.commit()
    await db.refresh(new_project)
    return new_project

async def delete_project(project_id: UUID, db: AsyncSession) -> Optional[Project]:
    project = await get_project_by_id(project_id, db)
    if not project:
        return None
    await db.delete(project)
    await db.commit()
    return project
