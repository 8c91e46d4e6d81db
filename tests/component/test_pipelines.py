from __future__ import annotations

import json
from pathlib import Path

import pytest

from projectfolio import pipelines
from projectfolio.errors import MalformedStructuredValueError


def _options(tmp_path: Path, **extra: object) -> dict[str, object]:
    options: dict[str, object] = {
        "config_path": str(tmp_path / "config.toml"),
        "projects_dir": str(tmp_path / "projects"),
        "output_path": str(tmp_path / "site" / "projects" / "index.html"),
    }
    options.update(extra)
    return options


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    root = tmp_path / "projects"
    root.mkdir()
    (root / "alpha.md").write_text(
        "---\n"
        "title: Alpha\n"
        "description: The first one\n"
        "image: /images/alpha.png\n"
        "date: 2024-05-04\n"
        "tags: [python, cli]\n"
        "featured: true\n"
        'links: {"github": "https://github.com/me/alpha"}\n'
        "---\n"
        "Longer write-up.\n",
        encoding="utf-8",
    )
    (root / "beta.md").write_text("---\ntitle: Beta\n---\n", encoding="utf-8")
    return root


def test_run_build_writes_page(tmp_path: Path, projects_dir: Path) -> None:
    output = pipelines.run_build(_options(tmp_path, page_title="My Work"))

    assert output == tmp_path / "site" / "projects" / "index.html"
    page = output.read_text(encoding="utf-8")
    assert "<h1>My Work</h1>" in page
    assert "Alpha" in page and "Beta" in page
    assert "May 4, 2024" in page
    assert "https://github.com/me/alpha" in page
    assert "No Demo" in page


def test_run_build_missing_directory_renders_empty_state(tmp_path: Path) -> None:
    output = pipelines.run_build(_options(tmp_path))
    assert "No projects found" in output.read_text(encoding="utf-8")


def test_run_build_malformed_document_renders_empty_state(
    tmp_path: Path, projects_dir: Path
) -> None:
    (projects_dir / "broken.md").write_text("---\nlinks: {bad}\n---\n", encoding="utf-8")
    output = pipelines.run_build(_options(tmp_path))
    assert "No projects found" in output.read_text(encoding="utf-8")


def test_run_list_prints_projects(
    tmp_path: Path, projects_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    count = pipelines.run_list(_options(tmp_path))
    assert count == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "* alpha\t2024-05-04\tAlpha"
    assert lines[1] == "  beta\t\tBeta"


def test_run_inspect_prints_json(
    tmp_path: Path, projects_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    meta = pipelines.run_inspect(
        _options(tmp_path, document_path=str(projects_dir / "alpha.md"))
    )
    assert meta["tags"] == ["python", "cli"]
    printed = json.loads(capsys.readouterr().out)
    assert printed == meta


def test_run_inspect_propagates_malformed_value(tmp_path: Path, projects_dir: Path) -> None:
    broken = projects_dir / "broken.md"
    broken.write_text("---\nlinks: {bad}\n---\n", encoding="utf-8")
    with pytest.raises(MalformedStructuredValueError):
        pipelines.run_inspect(_options(tmp_path, document_path=str(broken)))


def test_run_init_creates_config(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    pipelines.run_init({"config_path": str(config_path)})
    assert "projects_dir" in config_path.read_text(encoding="utf-8")


def test_run_build_non_utf8_document_renders_empty_state(
    tmp_path: Path, projects_dir: Path
) -> None:
    (projects_dir / "gamma.md").write_bytes(b"---\ntitle: \xff\xfe\n---\n")
    output = pipelines.run_build(_options(tmp_path))
    assert "No projects found" in output.read_text(encoding="utf-8")
