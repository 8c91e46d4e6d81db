"""pipelines"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from projectfolio import config
from projectfolio.errors import MissingSettingError, ProjectfolioError
from projectfolio.logging import get_logger
from projectfolio.projects import Project, ProjectRepository
from projectfolio.render import render_page
from projectfolio.utils.frontmatter import FrontMatterValue


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def run_build(cli_options: Mapping[str, Any] | None = None) -> Path:
    """
    Build command
    """

    settings = _merge_config(cli_options)
    logger = get_logger("projectfolio.build", bool(settings.get("verbose", False)))
    repository = ProjectRepository.from_settings(settings)

    # 読み込みに失敗したら空のページを出す
    projects: list[Project] = []
    try:
        projects = repository.load_all()
    except (ProjectfolioError, OSError) as exc:
        logger.error("Error reading projects directory: %s", exc)

    output_path = Path(str(settings["output_path"])).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    page = render_page(projects, title=str(settings.get("page_title") or "Projects"))
    output_path.write_text(page, encoding="utf-8")

    if projects:
        logger.info("Rendered %d project(s) -> %s", len(projects), output_path)
    else:
        logger.info("No projects found; rendered empty page -> %s", output_path)
    return output_path


def run_list(cli_options: Mapping[str, Any] | None = None) -> int:
    settings = _merge_config(cli_options)
    repository = ProjectRepository.from_settings(settings)
    projects = repository.load_all()
    for project in projects:
        marker = "*" if project.featured else " "
        print(f"{marker} {project.slug}\t{project.date}\t{project.title}")
    return len(projects)


def run_inspect(cli_options: Mapping[str, Any] | None = None) -> dict[str, FrontMatterValue]:
    cli_options = dict(cli_options or {})
    document_path = cli_options.pop("document_path", None)
    if not document_path:
        raise MissingSettingError("document_path", "Missing required argument: path")
    settings = _merge_config(cli_options)
    repository = ProjectRepository.from_settings(settings)
    meta = repository.extract(document_path)
    print(json.dumps(meta, ensure_ascii=False, indent=2))
    return meta


def run_init(cli_options: Mapping[str, Any] | None = None) -> None:
    """Init command."""
    logger = get_logger("projectfolio.init", False)
    init_result = config.initialize_config(cli_options)

    if init_result.config_created:
        logger.info("Config created at %s", init_result.config_path)
    elif init_result.config_updated_keys:
        logger.info(
            "Config updated at %s (added: %s)",
            init_result.config_path,
            ", ".join(init_result.config_updated_keys),
        )
    else:
        logger.info("Config already exists at %s", init_result.config_path)
