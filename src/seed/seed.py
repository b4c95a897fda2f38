import asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

# Import the async_session from your database configuration.
from src.common.database.database import async_session, connect_to_db
from src.models.models import Project

# Placeholder projects shown until real ones are added through the admin form.
projects_data = [
    {"title": "My Project", "description": "Short description"},
    {"title": "Portfolio", "description": "Personal portfolio", "tech_stack": "React, FastAPI, PostgreSQL"},
    {"title": "Web App", "description": "A web application"},
]

async def seed_projects(session: AsyncSession):
    """
    Seed the projects table with demo entries, skipping titles that already exist.
    """
    result = await session.execute(select(Project.title))
    existing = set(result.scalars().all())
    for data in projects_data:
        if data["title"] in existing:
            continue
        session.add(Project(**data))

async def seed_all():
    """
    Run all seed functions. You can add additional seed functions here.
    """
    await connect_to_db()
    async with async_session() as session:
        # Using a transaction block to ensure all seeding operations succeed.
        async with session.begin():
            await seed_projects(session)

if __name__ == "__main__":
    asyncio.run(seed_all())
