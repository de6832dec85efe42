"""Tests for docsite.writer."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from docsite.models import Project
from docsite.writer import SiteWriter, write_docs


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_write_docs_produces_expected_layout(sample_project: Project) -> None:
    write_docs(sample_project)

    output = Path(sample_project.output_dir)
    assert sorted(_snapshot(output)) == [
        "css/default.css",
        "demo.core.html",
        "demo.util.strings.html",
        "index.html",
        "js/page_effects.js",
        "other.html",
    ]
    index = (output / "index.html").read_text(encoding="utf-8")
    assert index.startswith("<!DOCTYPE html>\n")
    assert '<link type="text/css" href="css/default.css" rel="stylesheet">' in index
    assert '<script type="text/javascript" src="js/page_effects.js"></script>' in index
    assert 'href="demo.core.html"' in index


def test_write_docs_is_idempotent(sample_project: Project, tmp_path: Path) -> None:
    first = replace(sample_project, output_dir=str(tmp_path / "first"))
    second = replace(sample_project, output_dir=str(tmp_path / "second"))

    write_docs(first)
    write_docs(second)
    write_docs(second)

    assert _snapshot(tmp_path / "first") == _snapshot(tmp_path / "second")


def test_site_writer_overwrites_existing_assets(sample_project: Project) -> None:
    css = Path(sample_project.output_dir) / "css" / "default.css"
    css.parent.mkdir(parents=True)
    css.write_text("stale", encoding="utf-8")

    SiteWriter().write(sample_project)

    assert css.read_text(encoding="utf-8") != "stale"


def test_site_writer_uses_custom_asset_source(sample_project: Project, tmp_path: Path) -> None:
    assets = tmp_path / "assets"
    (assets / "css").mkdir(parents=True)
    (assets / "css" / "default.css").write_text("body {}", encoding="utf-8")

    SiteWriter(assets, assets=["css/default.css"]).write(sample_project)

    output = Path(sample_project.output_dir)
    assert (output / "css" / "default.css").read_text(encoding="utf-8") == "body {}"
    assert (output / "js").is_dir()
    assert not (output / "js" / "page_effects.js").exists()


def test_site_writer_propagates_missing_assets(sample_project: Project, tmp_path: Path) -> None:
    writer = SiteWriter(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        writer.write(sample_project)
    assert not (Path(sample_project.output_dir) / "index.html").exists()
