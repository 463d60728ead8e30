"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from arc42docs.service.app import create_app
from arc42docs.tools import Arc42Tools, Toolkit
from tests._fixtures.workspace_builder import WorkspaceBuilder


@pytest.fixture
def client(toolkit: Toolkit, workspace_builder: WorkspaceBuilder) -> TestClient:
    settings = workspace_builder.settings()
    app = create_app(lambda: Arc42Tools(toolkit, settings))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_guide_endpoint(client: TestClient) -> None:
    response = client.get("/guide", params={"language": "de", "format": "md"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["language"] == "DE"
    assert data["data"]["guide"].startswith("# ")
    assert data["nextSteps"]


def test_init_status_and_sections(client: TestClient, workspace_builder: WorkspaceBuilder) -> None:
    init = client.post("/init", json={"project_name": "Shop", "format": "markdown"})
    assert init.status_code == 200
    assert init.json()["data"]["format"] == "markdown"
    assert (workspace_builder.root / "README.md").is_file()

    update = client.put(
        "/sections/12_glossary", json={"content": "one two three", "mode": "replace"}
    )
    assert update.status_code == 200
    assert update.json()["data"]["wordCount"] == 3

    section = client.get("/sections/12_glossary")
    assert section.status_code == 200
    assert section.json()["data"]["content"] == "one two three"

    status = client.get("/status")
    assert status.status_code == 200
    assert status.json()["data"]["sections"]["12_glossary"]["completeness"] == 3


def test_init_conflict(client: TestClient) -> None:
    assert client.post("/init", json={"project_name": "Shop"}).status_code == 200

    response = client.post("/init", json={"project_name": "Shop"})

    assert response.status_code == 409
    assert response.json()["error"] == "AlreadyInitializedError"
    assert "force=true" in response.json()["detail"]


def test_missing_workspace_is_not_found(client: TestClient) -> None:
    response = client.get("/status")

    assert response.status_code == 404
    assert response.json()["error"] == "NotInitializedError"


def test_invalid_requests_are_bad_requests(client: TestClient) -> None:
    assert client.get("/templates/13_appendix").status_code == 400
    assert client.get("/templates/12_glossary", params={"format": "docx"}).status_code == 400
    assert client.post("/init", json={"project_name": "Shop", "language": "XX"}).status_code == 400


def test_template_endpoint(client: TestClient) -> None:
    response = client.get("/templates/12_glossary", params={"language": "FR", "format": "adoc"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["content"].startswith("= 12. Glossaire")
    assert data["fileExtension"] == ".adoc"
