"""Command line entry point: ``docsite build MODEL``."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, load_config
from .loader import ModelError, load_project
from .logging import configure_logging
from .writer import write_docs


def _add_logging_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subcommands suppress their defaults so flags given before the command survive.
    default = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log every copied asset and written page.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only report warnings and errors on the console.",
    )
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also append log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Render an extracted documentation model into a static HTML site.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Write the index and namespace pages for a documentation model.",
    )
    _add_logging_options(build_parser, suppress_default=True)
    build_parser.add_argument(
        "model",
        help="Path to the YAML or JSON documentation model.",
    )
    build_parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to write the site into (overrides config and model).",
    )
    build_parser.add_argument(
        "--config",
        default=None,
        help="Path to .docsite.yml (defaults to the model's directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if args.command == "build":
        _run_build(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_build(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    model_path = Path(args.model)
    config_path = Path(args.config) if args.config else model_path.parent
    try:
        config = load_config(config_path)
        project = load_project(model_path, config=config)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, ModelError) as exc:
        parser.exit(1, f"docsite build failed: {exc}\n")

    if args.output_dir:
        project = replace(project, output_dir=args.output_dir)

    try:
        write_docs(project)
    except OSError as exc:
        parser.exit(1, f"docsite build failed: {exc}\nRun with --verbose for more details.\n")
    print(f"Documentation written to {_relativize(Path(project.output_dir))}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
