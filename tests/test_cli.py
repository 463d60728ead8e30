"""CLI parser and command behaviour tests."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from arc42docs.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "status"])
    assert args.verbose is True
    assert args.command == "status"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["status", "--verbose"])
    assert args.verbose is True
    assert args.command == "status"


@pytest.mark.parametrize(
    "argv, command",
    [
        (["guide"], "guide"),
        (["init", "Shop"], "init"),
        (["status"], "status"),
        (["get", "12_glossary"], "get"),
        (["update", "12_glossary", "--content", "x"], "update"),
        (["template", "12_glossary"], "template"),
        (["serve", "--port", "9000"], "serve"),
    ],
)
def test_cli_accepts_every_command(argv: list[str], command: str) -> None:
    args = _build_parser().parse_args(argv)
    assert args.command == command
    assert args.verbose is False


def test_cli_parses_init_options() -> None:
    args = _build_parser().parse_args(
        ["init", "Shop", "--force", "--target", "/tmp/x", "--language", "de", "--format", "md"]
    )
    assert args.force is True
    assert args.target_folder == "/tmp/x"
    assert args.language == "de"
    assert args.output_format == "md"


def test_update_requires_a_content_source() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["update", "12_glossary"])


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> dict:
    main(argv)
    return json.loads(capsys.readouterr().out)


def test_init_update_and_status_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    project = ["--project", str(tmp_path)]

    init = _run(project + ["init", "Shop", "--language", "DE", "--format", "markdown"], capsys)
    update = _run(project + ["update", "12_glossary", "--content", "eins zwei drei"], capsys)
    status = _run(project + ["status"], capsys)

    assert init["success"] is True
    assert update["data"]["sectionTitle"] == "Glossar"
    assert status["data"]["sections"]["12_glossary"]["wordCount"] == 3
    assert status["data"]["language"]["code"] == "DE"
    assert "nextSteps" in status


def test_update_reads_content_from_stdin(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    main(["--project", str(tmp_path), "init", "Shop"])
    capsys.readouterr()
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))

    update = _run(["--project", str(tmp_path), "update", "01_introduction_and_goals", "--file", "-"], capsys)

    assert update["success"] is True
    content = (tmp_path / "arc42-docs" / "sections" / "01_introduction_and_goals.adoc").read_text(
        encoding="utf-8"
    )
    assert content == "from stdin"


def test_raw_template_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["template", "12_glossary", "--format", "md", "--raw"])
    assert capsys.readouterr().out.startswith("# 12. Glossary\n")


def test_failures_exit_with_status_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--project", str(tmp_path), "status"])

    assert excinfo.value.code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is False
    assert "not initialized" in payload["message"]
