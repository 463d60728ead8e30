"""CLI entrypoints for arc42docs commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ToolSettings
from .logging import configure_logging
from .tools import Arc42Tools, ToolResponse, build_toolkit
from .workspace import WRITE_MODES


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_target_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        dest="target_folder",
        default=None,
        help="Folder that holds (or will hold) the arc42-docs workspace.",
    )


def _add_localization_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        default=None,
        help="Language code such as EN or DE (defaults to EN).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        default=None,
        help="Output format or alias: markdown, md, asciidoc, adoc (defaults to asciidoc).",
    )


def _add_raw_option(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument(
        "--raw",
        action="store_true",
        help=f"Print only the {what} instead of the JSON response.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arc42docs",
        description="Scaffold and maintain arc42 architecture documentation workspaces.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--project",
        default=None,
        help="Project directory containing the default workspace "
        "(defaults to $ARC42_PROJECT_PATH or the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write diagnostics to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    guide_parser = subparsers.add_parser("guide", help="Show the arc42 workflow guide.")
    _add_verbose_option(guide_parser, suppress_default=True)
    _add_localization_options(guide_parser)
    _add_raw_option(guide_parser, "guide text")

    init_parser = subparsers.add_parser("init", help="Initialize a documentation workspace.")
    _add_verbose_option(init_parser, suppress_default=True)
    init_parser.add_argument("project_name", help="Name of the project being documented.")
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Re-initialize even if the workspace already exists.",
    )
    _add_target_option(init_parser)
    _add_localization_options(init_parser)

    status_parser = subparsers.add_parser("status", help="Report documentation completeness.")
    _add_verbose_option(status_parser, suppress_default=True)
    _add_target_option(status_parser)

    get_parser = subparsers.add_parser("get", help="Read the content of a section.")
    _add_verbose_option(get_parser, suppress_default=True)
    get_parser.add_argument("section", help="Section id, e.g. 01_introduction_and_goals.")
    _add_target_option(get_parser)
    _add_raw_option(get_parser, "section content")

    update_parser = subparsers.add_parser("update", help="Write content to a section.")
    _add_verbose_option(update_parser, suppress_default=True)
    update_parser.add_argument("section", help="Section id, e.g. 01_introduction_and_goals.")
    source = update_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--content", default=None, help="Content to write.")
    source.add_argument(
        "--file",
        dest="content_file",
        default=None,
        help="Read the content from this file, or from stdin when '-'.",
    )
    update_parser.add_argument(
        "--mode",
        choices=WRITE_MODES,
        default="replace",
        help="Replace the section or append to it (default: replace).",
    )
    _add_target_option(update_parser)

    template_parser = subparsers.add_parser("template", help="Generate a section template.")
    _add_verbose_option(template_parser, suppress_default=True)
    template_parser.add_argument("section", help="Section id, e.g. 01_introduction_and_goals.")
    _add_localization_options(template_parser)
    _add_raw_option(template_parser, "template text")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for arc42docs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    settings = ToolSettings.from_env(args.project)

    if args.command == "serve":
        from .service.app import run_service

        try:
            run_service(host=args.host, port=args.port, settings=settings)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
        return

    tools = Arc42Tools(build_toolkit(), settings)

    if args.command == "guide":
        response = tools.workflow_guide(args.language, args.output_format)
        _emit(parser, response, raw_key="guide" if args.raw else None)
    elif args.command == "init":
        response = tools.init(
            args.project_name,
            force=args.force,
            target_folder=args.target_folder,
            language=args.language,
            output_format=args.output_format,
        )
        _emit(parser, response)
    elif args.command == "status":
        _emit(parser, tools.status(args.target_folder))
    elif args.command == "get":
        response = tools.get_section(args.section, args.target_folder)
        _emit(parser, response, raw_key="content" if args.raw else None)
    elif args.command == "update":
        try:
            content = _read_content(args.content, args.content_file)
        except OSError as exc:
            parser.exit(1, f"Cannot read content: {exc}\n")
        response = tools.update_section(args.section, content, args.mode, args.target_folder)
        _emit(parser, response)
    elif args.command == "template":
        response = tools.generate_template(args.section, args.language, args.output_format)
        _emit(parser, response, raw_key="content" if args.raw else None)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _read_content(content: str | None, content_file: str | None) -> str:
    if content is not None:
        return content
    if content_file == "-":
        return sys.stdin.read()
    return Path(str(content_file)).read_text(encoding="utf-8")


def _emit(
    parser: argparse.ArgumentParser, response: ToolResponse, *, raw_key: str | None = None
) -> None:
    if raw_key is not None and response.success and response.data is not None:
        sys.stdout.write(str(response.data[raw_key]))
    else:
        print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    if not response.success:
        parser.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
