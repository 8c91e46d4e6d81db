"""Static HTML rendering of the projects listing page."""

from __future__ import annotations

import html
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path

from projectfolio.projects import Project

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_EMPTY_STATE = (
    '<div class="empty">\n'
    "  <h2>No projects found</h2>\n"
    "  <p>Check back later for new content!</p>\n"
    "</div>"
)


def _load_template(name: str) -> str:
    return (_TEMPLATES_DIR / name).read_text(encoding="utf-8")


def _escape(value: str) -> str:
    return html.escape(value, quote=True)


def format_display_date(value: str) -> str:
    """Format an ISO date as e.g. ``January 5, 2024``; unparsable values pass through."""

    raw = value.strip()
    if not raw:
        return ""
    try:
        parsed: date = datetime.fromisoformat(raw).date()
    except ValueError:
        return raw
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def _link_button(url: str | None, label: str, fallback: str, css: str) -> str:
    if url:
        return (
            f'<a class="button {css}" href="{_escape(url)}" '
            f'target="_blank" rel="noopener noreferrer">{label}</a>'
        )
    return f'<span class="button {css} disabled" aria-disabled="true">{fallback}</span>'


def render_card(project: Project) -> str:
    tags = "".join(
        f'<span class="badge">{_escape(tag)}</span>' for tag in project.tags
    )
    return _load_template("card.html").format(
        slug=_escape(project.slug),
        title=_escape(project.title),
        description=_escape(project.description),
        image=_escape(project.image),
        logo=_escape(project.logo),
        tags=tags,
        date=_escape(format_display_date(project.date)),
        github_button=_link_button(
            project.links.github, "GitHub", "No Repo", "github"
        ),
        live_button=_link_button(project.links.live, "Live Demo", "No Demo", "live"),
    )


def render_page(projects: Sequence[Project], title: str = "Projects") -> str:
    if projects:
        cards = "\n".join(render_card(project) for project in projects)
        content = (
            '<main class="container">\n'
            f"<h1>{_escape(title)}</h1>\n"
            f'<div class="grid">\n{cards}\n</div>\n'
            "</main>"
        )
    else:
        content = _EMPTY_STATE
    return _load_template("page.html").format(title=_escape(title), content=content)
