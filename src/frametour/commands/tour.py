"""Command line interface for following the tour.

This module provides a command line interface for listing and running
the lessons registered in :data:`frametour.catalog.DEFAULT_CATALOG`
and for rendering the whole tutorial as Markdown
through :func:`frametour.render.render_markdown`.

The results of the execution are printed to the console in a tabular format
using the :mod:`frametour.utils.tabulate` module.
"""

import argparse
import logging
import sys
from pathlib import Path

from frametour.catalog import DEFAULT_CATALOG, LessonCatalog, UnknownLessonError
from frametour.config import TourConfig
from frametour.lessons import LessonError
from frametour.logging_config import setup_logging
from frametour.render import render_lesson_text, render_markdown

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the parser of the command line arguments."""
    parser = argparse.ArgumentParser(
        prog="frametour", description="A guided tour of pandas, one lesson at a time."
    )
    parser.add_argument("--seed", type=int, help="Seed for the sample datasets.")
    parser.add_argument("--rows", type=int, help="Rows of the generated sales dataset.")
    parser.add_argument("--max-rows", type=int, help="Maximum rows printed for each result.")
    parser.add_argument("--output-dir", type=Path, help="Where to write files and plots.")
    parser.add_argument("--no-plots", action="store_true", help="Skip rendering plots.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level, like INFO or DEBUG.")
    parser.add_argument("--log-file", help="Also save logs to this file.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List the available lessons.")

    run = subparsers.add_parser("run", help="Run lessons and print their results.")
    run.add_argument("lessons", nargs="*", help="Names of the lessons to run.")
    run.add_argument("--all", action="store_true", help="Run all the lessons in order.")
    run.add_argument("--step", help="Run only this step, requires a single lesson.")

    render = subparsers.add_parser("render", help="Render the tutorial as Markdown.")
    render.add_argument("-o", "--output", type=Path, help="File to write, stdout by default.")
    render.add_argument("--title", default="A Tour of pandas", help="Title of the document.")
    return parser


def make_config(args: argparse.Namespace) -> TourConfig:
    """Layer command line options on top of the environment configuration."""
    config = TourConfig.from_env().replace(
        seed=args.seed,
        rows=args.rows,
        max_rows=args.max_rows,
        output_dir=args.output_dir,
    )
    if args.no_plots:
        config = config.replace(plots=False)
    return config


def list_lessons(catalog: LessonCatalog) -> None:
    """Print one line for each lesson of the catalog."""
    width = max(len(name) for name in catalog.names())
    for lesson in catalog:
        print(f"{lesson.name.ljust(width)}  {lesson.title} ({len(lesson.step_names())} steps)")


def run_lessons(
    catalog: LessonCatalog, names: list[str], config: TourConfig, only_step: str | None
) -> None:
    """Run the requested lessons and print their output."""
    # Lookup all the lessons before running anything,
    # so that a typo doesn't waste the time spent on the previous ones.
    lessons = [catalog.create(name, config) for name in names]
    for lesson in lessons:
        print(render_lesson_text(lesson, max_rows=config.max_rows, only_step=only_step))


def render_tutorial(
    catalog: LessonCatalog, config: TourConfig, output: Path | None, title: str
) -> None:
    """Render all the lessons of the catalog to Markdown."""
    lessons = [lesson(config) for lesson in catalog]
    base_dir = output.parent if output is not None else None
    document = render_markdown(lessons, max_rows=config.max_rows, title=title, base_dir=base_dir)
    if output is None:
        sys.stdout.write(document)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        log.info("Tutorial written to %s", output)


def main(argv: list[str] | None = None, catalog: LessonCatalog = DEFAULT_CATALOG) -> int:
    """Parse the command line arguments and execute the requested command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
        config = make_config(args)
    except ValueError as e:
        print(f"Invalid configuration, {e}", file=sys.stderr)
        return 2

    if args.command == "list":
        list_lessons(catalog)
        return 0

    if args.command == "run":
        names = catalog.names() if args.all else args.lessons
        if not names:
            parser.error("provide the names of the lessons to run or --all")
        if args.step is not None and len(names) != 1:
            parser.error("--step requires exactly one lesson")

    try:
        if args.command == "run":
            run_lessons(catalog, names, config, args.step)
        else:
            render_tutorial(catalog, config, args.output, args.title)
    except UnknownLessonError as e:
        print(e, file=sys.stderr)
        return 2
    except KeyError as e:
        # Unknown step of a known lesson.
        print(e.args[0], file=sys.stderr)
        return 2
    except LessonError as e:
        log.debug("Lesson failure", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
