"""プロジェクト関連のデータクラス"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from projectfolio.errors import MissingSettingError
from projectfolio.utils.frontmatter import FrontMatterValue
from projectfolio.utils.slug import slug_from_filename

_IMAGE_PREFIXES = ("/", "http")


def _text(value: FrontMatterValue | None) -> str:
    return value if isinstance(value, str) else ""


def _image_url(value: FrontMatterValue | None) -> str:
    if isinstance(value, str) and value.startswith(_IMAGE_PREFIXES):
        return value
    return ""


def _tags(value: FrontMatterValue | None) -> tuple[str, ...]:
    if isinstance(value, list):
        return tuple(str(item) for item in value)
    if isinstance(value, str) and value:
        return (value,)
    return ()


# --- Config. ---
@dataclass(frozen=True, slots=True)
class ProjectRepositoryConfig:
    """プロジェクト文書の読み込みに必要な設定値を束ねる。"""

    root_dir: Path
    pattern: str = "*.md"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "root_dir", Path(self.root_dir).expanduser())

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ProjectRepositoryConfig:
        projects_dir = settings.get("projects_dir")
        if not projects_dir:
            raise MissingSettingError("projects_dir")
        pattern = str(settings.get("project_pattern") or "*.md")
        encoding = str(settings.get("encoding") or "utf-8")
        return cls(root_dir=Path(projects_dir), pattern=pattern, encoding=encoding)


# --- Records. ---
@dataclass(frozen=True, slots=True)
class ProjectLinks:
    github: str = ""
    live: str | None = None

    @classmethod
    def from_value(cls, value: FrontMatterValue | None) -> ProjectLinks:
        if not isinstance(value, Mapping) or not value:
            return cls()
        github = value.get("github")
        live = value.get("live")
        return cls(
            github=str(github) if github else "",
            live=str(live) if live else None,
        )


@dataclass(frozen=True, slots=True)
class Project:
    """一覧ページのカード1枚分の表示データ。"""

    slug: str
    title: str
    description: str = ""
    image: str = ""
    logo: str = ""
    date: str = ""
    tags: tuple[str, ...] = ()
    featured: bool = False
    links: ProjectLinks = field(default_factory=ProjectLinks)

    @classmethod
    def from_front_matter(
        cls, filename: str, meta: Mapping[str, FrontMatterValue]
    ) -> Project:
        """Front matterにない項目はデフォルト値で埋める。"""

        return cls(
            slug=slug_from_filename(filename),
            title=_text(meta.get("title")) or filename,
            description=_text(meta.get("description")),
            image=_image_url(meta.get("image")),
            logo=_image_url(meta.get("logo")),
            date=_text(meta.get("date")),
            tags=_tags(meta.get("tags")),
            featured=meta.get("featured") is True,
            links=ProjectLinks.from_value(meta.get("links")),
        )
