from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from docsite.models import Deprecation, Namespace, Project, Var


@pytest.fixture
def sample_project(tmp_path: Path) -> Project:
    """Provide a small project with nested namespaces and varied vars."""
    core = Namespace(
        name="demo.core",
        doc="Core helpers for the demo.\n\nSee https://example.com/docs for more.",
        publics=(
            Var(
                name="run",
                doc="Run the thing.",
                arglists=(("task",), ("task", "opts")),
                added="1.0",
                path="demo/core.clj",
                line=12,
            ),
            Var(
                name="defthing",
                doc="Define a thing.",
                arglists=(("name", "&", "body"),),
                macro=True,
                deprecated=Deprecation(since="2.0"),
                path="demo/core.clj",
                line=40,
            ),
            Var(name="legacy", deprecated=Deprecation()),
        ),
    )
    strings = Namespace(
        name="demo.util.strings",
        doc="String utilities.",
        publics=(Var(name="blank?", arglists=(("s",),)),),
    )
    empty = Namespace(name="other")
    return Project(
        name="demo",
        version="1.2.0",
        description="A <demo> project.",
        output_dir=str(tmp_path / "doc"),
        src_dir_uri="https://example.com/blob/main/src/",
        src_linenum_anchor_prefix="L",
        namespaces=(core, strings, empty),
    )


@pytest.fixture(autouse=True)
def reset_docsite_logging() -> Iterator[None]:
    """Drop handlers installed by CLI runs."""
    yield
    logger = logging.getLogger("docsite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
