from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from projectfolio.errors import ProjectRepositoryError
from projectfolio.logging import get_logger
from projectfolio.utils import frontmatter
from projectfolio.utils.frontmatter import FrontMatterValue

from .types import Project, ProjectRepositoryConfig


@dataclass(slots=True)
class ProjectRepository:
    """プロジェクト文書（Markdownファイル）の読み込みを担当する。"""

    config: ProjectRepositoryConfig
    logger: logging.Logger = field(
        default_factory=lambda: get_logger("projectfolio.projects"), repr=False
    )

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ProjectRepository:
        verbose = bool(settings.get("verbose", False))
        return cls(
            ProjectRepositoryConfig.from_settings(settings),
            logger=get_logger("projectfolio.projects", verbose),
        )

    def list_documents(self) -> Iterable[Path]:
        """パターンに一致する文書を名前順で返す。存在しない場合は空。"""

        root = self.config.root_dir
        if not root.is_dir():
            return ()
        return sorted(path for path in root.glob(self.config.pattern) if path.is_file())

    def read(self, path: str | Path) -> str:
        target = Path(path).expanduser()
        try:
            return target.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ProjectRepositoryError(
                f"Failed to read project document: {target}"
            ) from exc

    def extract(self, path: str | Path) -> dict[str, FrontMatterValue]:
        """文書のfront matterを返す。構造値の解析エラーはそのまま送出する。"""

        meta = frontmatter.extract(self.read(path))
        self.logger.debug("Parsed %s (%d field(s))", Path(path).name, len(meta))
        return meta

    def load(self, path: str | Path) -> Project:
        target = Path(path)
        meta = self.extract(target)
        return Project.from_front_matter(target.name, meta)

    def load_all(self) -> list[Project]:
        root = self.config.root_dir
        if not root.is_dir():
            self.logger.warning("Projects directory does not exist: %s", root)
            return []
        return [self.load(path) for path in self.list_documents()]
