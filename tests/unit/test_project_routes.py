import uuid
from datetime import datetime, timezone

import pytest

from src.models.models import Project

URL = "/api/projects"
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_list_projects_is_public(client, mock_db_session):
    project = Project(id=uuid.uuid4(), title="Portfolio", tech_stack="FastAPI, React", created_at=datetime.now(timezone.utc))
    mock_db_session.execute.return_value.scalars.return_value.all.return_value = [project]

    response = client.get(URL)

    assert response.status_code == 200
    assert response.json()[0]["title"] == "Portfolio"
    assert response.json()[0]["live_url"] is None


@pytest.mark.parametrize("headers", [{}, {"x-admin-password": "wrong"}])
def test_writes_require_admin_password(client, mock_db_session, headers):
    created = client.post(URL, data={"title": "Nope"}, headers=headers)
    deleted = client.delete(f"{URL}/{uuid.uuid4()}", headers=headers)

    assert created.status_code == 401
    assert created.json() == {"error": "Unauthorized"}
    assert deleted.status_code == 401
    mock_db_session.commit.assert_not_awaited()


def test_create_project_blank_fields_stored_as_null(client, mock_db_session, admin_headers):
    response = client.post(
        URL,
        data={"title": " Portfolio ", "description": "My site", "tech_stack": "", "live_url": "  ", "repo_url": "https://github.com/me/site"},
        files={"image": ("shot.png", PNG, "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Portfolio"
    assert body["tech_stack"] is None
    assert body["live_url"] is None
    assert body["repo_url"] == "https://github.com/me/site"
    assert body["image_url"].startswith("/uploads/projects/")
    mock_db_session.commit.assert_awaited_once()


def test_create_project_requires_title(client, admin_headers):
    response = client.post(URL, data={"description": "untitled"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Title is required"}


def test_delete_project(client, mock_db_session, admin_headers):
    project = Project(id=uuid.uuid4(), title="Old", created_at=datetime.now(timezone.utc))
    mock_db_session.execute.return_value.scalars.return_value.first.return_value = project

    response = client.delete(f"{URL}/{project.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Project deleted successfully"}
    mock_db_session.delete.assert_awaited_once_with(project)


def test_delete_missing_project(client, admin_headers):
    response = client.delete(f"{URL}/{uuid.uuid4()}", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Project not found"}


def test_delete_with_malformed_id(client, admin_headers):
    response = client.delete(f"{URL}/42", headers=admin_headers)

    assert response.status_code == 400
