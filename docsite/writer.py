"""Writes a rendered documentation site to disk."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, Sequence

from .html.constants import ASSET_DIRS, INDEX_FILENAME, SCRIPTS, STYLESHEET
from .html.ids import namespace_filepath
from .html.markup import render_document
from .html.pages import index_page, namespace_page
from .logging import get_logger
from .models import Project

DEFAULT_ASSETS_DIR = Path(__file__).with_name("assets")


class SiteWriter:
    """Creates the output tree, copies static assets and writes every page.

    Failures are not caught: a partially written site is left as-is and the
    error reaches the caller.
    """

    def __init__(
        self,
        assets_dir: Path | None = None,
        *,
        assets: Sequence[str] | None = None,
    ) -> None:
        self.assets_dir = assets_dir or DEFAULT_ASSETS_DIR
        self.assets = tuple(assets) if assets is not None else (STYLESHEET, *SCRIPTS)
        self.logger = get_logger("writer")

    def write(self, project: Project) -> None:
        output_dir = Path(project.output_dir)
        self.logger.info(
            "Writing %d namespace pages to %s", len(project.namespaces), output_dir
        )
        self._mkdirs(output_dir, ASSET_DIRS)
        for asset in self.assets:
            self._copy_asset(output_dir, asset)
        self._write_index(output_dir, project)
        self._write_namespaces(output_dir, project)

    def _mkdirs(self, output_dir: Path, dirs: Iterable[str]) -> None:
        output_dir.mkdir(parents=True, exist_ok=True)
        for directory in dirs:
            (output_dir / directory).mkdir(parents=True, exist_ok=True)

    def _copy_asset(self, output_dir: Path, asset: str) -> None:
        source = self.assets_dir / asset
        destination = output_dir / asset
        self.logger.debug("Copying asset %s", asset)
        shutil.copyfile(source, destination)

    def _write_index(self, output_dir: Path, project: Project) -> None:
        _write_page(output_dir / INDEX_FILENAME, render_document(index_page(project)))
        self.logger.debug("Wrote %s", INDEX_FILENAME)

    def _write_namespaces(self, output_dir: Path, project: Project) -> None:
        for namespace in project.namespaces:
            path = namespace_filepath(output_dir, namespace)
            _write_page(path, render_document(namespace_page(project, namespace)))
            self.logger.debug("Wrote %s", path.name)


def write_docs(project: Project, *, writer: SiteWriter | None = None) -> None:
    """Render ``project`` into its output directory."""
    (writer or SiteWriter()).write(project)


def _write_page(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(content)


__all__ = ["DEFAULT_ASSETS_DIR", "SiteWriter", "write_docs"]
