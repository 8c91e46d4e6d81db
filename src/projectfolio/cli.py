"""Command-line interface entry point for projectfolio."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from projectfolio import __version__, pipelines
from projectfolio.errors import ProjectfolioError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectfolio", description="Projectfolio command-line interface"
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    shared.add_argument(
        "--projects-dir",
        dest="projects_dir",
        help="Directory containing project documents",
    )
    shared.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )

    build = subparsers.add_parser(
        "build", parents=[shared], help="Render the projects listing page"
    )
    build.add_argument("--output", dest="output_path", help="Output HTML file")
    build.add_argument("--title", dest="page_title", help="Page heading")

    subparsers.add_parser("list", parents=[shared], help="List parsed projects")
    inspect = subparsers.add_parser(
        "inspect", parents=[shared], help="Show the front matter of one document"
    )
    inspect.add_argument("document_path", metavar="path", help="Project document")
    subparsers.add_parser(
        "init", parents=[shared], help="Initialize a projectfolio config"
    )

    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value for key, value in vars(namespace).items() if key != "command"
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help()
        return

    handlers: dict[str, Any] = {
        "build": pipelines.run_build,
        "list": pipelines.run_list,
        "inspect": pipelines.run_inspect,
        "init": pipelines.run_init,
    }
    handler = handlers[args.command]

    try:
        handler(_normalize_cli_options(args))
    except ProjectfolioError as exc:
        print(f"projectfolio: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"projectfolio: hint: {exc.hint}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
