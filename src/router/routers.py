# src/router/routers.py

from fastapi import FastAPI
from src.modules.blog.blog_controller import router as blog_router
from src.modules.contact.contact_controller import router as contact_router
from src.modules.projects.project_controller import router as project_router

def include_routers(app: FastAPI) -> None:
    app.include_router(blog_router)
    app.include_router(contact_router)
    app.include_router(project_router)
