"""End-to-end behaviour of the Arc42Tools operation surface."""

from __future__ import annotations

from pathlib import Path

from arc42docs.tools import Arc42Tools, ToolResponse
from tests._fixtures.workspace_builder import WorkspaceBuilder


def test_init_then_status(tools: Arc42Tools, workspace_builder: WorkspaceBuilder) -> None:
    init = tools.init("Shop")
    assert init.success, init.message
    assert init.data["workspaceRoot"] == str(workspace_builder.root)
    assert init.data["sectionsCreated"] == 12

    status = tools.status()

    assert status.success
    data = status.data
    assert data["projectName"] == "Shop"
    assert data["initialized"] is True
    assert data["language"] == {"code": "EN", "name": "English", "nativeName": "English"}
    assert data["format"] == {"code": "asciidoc", "name": "AsciiDoc", "extension": ".adoc"}
    assert data["arc42TemplateReference"]["version"] == "9.0-EN"
    assert len(data["sections"]) == 12
    assert data["sectionsWithContent"] == 0
    assert data["summary"] == "0/12 sections have content"
    assert status.message == "Documentation status: 0/12 sections have content"
    assert {"code": "DE", "name": "German", "nativeName": "Deutsch"} in data["availableLanguages"]


def test_status_reports_word_counts(tools: Arc42Tools) -> None:
    tools.init("Shop", output_format="markdown")

    update = tools.update_section("10_quality_requirements", "one two three four five")
    section = tools.status().data["sections"]["10_quality_requirements"]

    assert update.success
    assert update.data["wordCount"] == 5
    assert section["wordCount"] == 5
    assert section["completeness"] == 5
    assert section["format"] == "markdown"
    assert section["path"].endswith("10_quality_requirements.md")


def test_update_missing_section_in_german_markdown_workspace(
    tools: Arc42Tools, workspace_builder: WorkspaceBuilder
) -> None:
    workspace_builder.config("language: DE\nformat: markdown\n")

    response = tools.update_section("03_context_and_scope", "Kontext")

    assert response.success, response.message
    assert response.data["sectionTitle"] == "Kontextabgrenzung"
    assert response.data["format"] == "markdown"
    assert response.data["path"].endswith("03_context_and_scope.md")
    assert response.message == "Section Kontextabgrenzung updated successfully"
    assert Path(response.data["path"]).read_text(encoding="utf-8") == "Kontext"


def test_get_section_round_trips_content(tools: Arc42Tools) -> None:
    tools.init("Shop")
    tools.update_section("12_glossary", "API - Application Programming Interface")

    response = tools.get_section("12_glossary")

    assert response.success
    assert response.data["content"] == "API - Application Programming Interface"
    assert response.data["sectionTitle"] == "Glossary"
    assert response.data["metadata"]["wordCount"] == 5


def test_append_mode(tools: Arc42Tools) -> None:
    tools.init("Shop")
    tools.update_section("12_glossary", "first", "replace")

    response = tools.update_section("12_glossary", "second", "append")

    assert response.data["mode"] == "append"
    assert tools.get_section("12_glossary").data["content"] == "first\n\nsecond"


def test_operations_require_a_workspace(tools: Arc42Tools) -> None:
    for response in (
        tools.status(),
        tools.get_section("01_introduction_and_goals"),
        tools.update_section("01_introduction_and_goals", "text"),
    ):
        assert not response.success
        assert response.error == "NotInitializedError"
        assert "not initialized" in response.message


def test_init_twice_fails_without_force(tools: Arc42Tools) -> None:
    assert tools.init("Shop").success

    again = tools.init("Shop")
    forced = tools.init("Shop", force=True)

    assert not again.success
    assert again.error == "AlreadyInitializedError"
    assert forced.success


def test_init_rejects_unknown_language(tools: Arc42Tools, workspace_builder: WorkspaceBuilder) -> None:
    response = tools.init("Shop", language="XX")

    assert not response.success
    assert response.error == "ValidationError"
    assert "Available languages: EN, DE" in response.message
    assert not workspace_builder.root.exists()


def test_init_in_target_folder(tools: Arc42Tools, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"

    response = tools.init("Shop", target_folder=str(target), language="fr")

    assert response.success
    assert (target / "arc42-docs" / "config.yaml").is_file()
    assert tools.status(str(target)).data["language"]["code"] == "FR"


def test_get_missing_section_file(tools: Arc42Tools, workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.root.mkdir(parents=True)

    response = tools.get_section("06_runtime_view")

    assert not response.success
    assert response.error == "NotFoundError"


def test_invalid_section_and_mode(tools: Arc42Tools) -> None:
    tools.init("Shop")

    unknown = tools.get_section("13_appendix")
    bad_mode = tools.update_section("12_glossary", "x", "prepend")
    empty = tools.update_section("12_glossary", "")

    assert unknown.error == "ValidationError"
    assert bad_mode.error == "ValidationError"
    assert empty.message == "Section and content are required"


def test_generate_template(tools: Arc42Tools) -> None:
    response = tools.generate_template("01_introduction_and_goals", "de", "md")

    assert response.success
    data = response.data
    assert data["format"] == "markdown"
    assert data["formatName"] == "Markdown"
    assert data["fileExtension"] == ".md"
    assert data["content"].startswith("# 1. Einführung und Ziele")
    assert data["metadata"]["languageCode"] == "DE"


def test_generate_template_rejects_unknown_choices(tools: Arc42Tools) -> None:
    assert tools.generate_template("12_glossary", output_format="docx").error == "ValidationError"
    assert tools.generate_template("12_glossary", language="XX").error == "ValidationError"


def test_workflow_guide_falls_back(tools: Arc42Tools) -> None:
    response = tools.workflow_guide("XX", "docx")

    assert response.success
    assert response.data["language"] == "EN"
    assert response.data["format"] == "asciidoc"
    assert response.data["guide"].startswith("= arc42 Architecture Documentation Workflow Guide")


def test_unexpected_errors_become_failures(tools: Arc42Tools, monkeypatch) -> None:
    def _boom(*_args, **_kwargs):
        raise KeyError("broken catalog")

    monkeypatch.setattr(tools.toolkit.provider, "get_workflow_guide", _boom)

    response = tools.workflow_guide()

    assert not response.success
    assert response.error == "KeyError"
    assert response.message.startswith("Failed to load the workflow guide")


def test_response_serialization() -> None:
    response = ToolResponse(success=True, message="ok", data={"a": 1}, next_steps=["next"])
    assert response.to_dict() == {
        "success": True,
        "message": "ok",
        "data": {"a": 1},
        "nextSteps": ["next"],
    }
    assert ToolResponse(success=False, message="no").to_dict() == {"success": False, "message": "no"}
    assert ToolResponse(success=False, message="no", error="ValidationError").to_dict() == {
        "success": False,
        "message": "no",
        "error": "ValidationError",
    }


def test_non_utf8_section_is_still_readable(
    tools: Arc42Tools, workspace_builder: WorkspaceBuilder
) -> None:
    tools.init("Shop", output_format="markdown")
    path = workspace_builder.root / "sections" / "02_architecture_constraints.md"
    path.write_bytes("Café naïve résumé".encode("latin-1"))

    status = tools.status()
    section = tools.get_section("02_architecture_constraints")

    assert status.success, status.message
    assert status.data["sections"]["02_architecture_constraints"]["wordCount"] == 3
    assert section.success, section.message
    assert "\ufffd" in section.data["content"]
    assert section.data["content"].startswith("Caf")


def test_os_errors_become_failures(tools: Arc42Tools, monkeypatch) -> None:
    assert tools.init("Shop").success

    def _denied(self, *_args, **_kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_text", _denied)

    response = tools.update_section("12_glossary", "API")

    assert response.success is False
    assert response.error == "PermissionError"
    assert response.message.startswith("Failed to update section: ")
    assert "Permission denied" in response.message
    assert response.to_dict()["error"] == "PermissionError"
