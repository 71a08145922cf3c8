"""Turn lessons into something to read.

Two renderers are provided:

* :func:`render_lesson_text` produces the plain text printed by
  the ``frametour run`` command.
* :func:`render_markdown` produces the whole tutorial as a Markdown
  document: a table of contents followed by one section per lesson,
  where every step has its explanation, its code and its result.

Both rely on :func:`render_result` to display what a step returned,
tables are formatted by :mod:`frametour.utils.tabulate`.

>>> import pandas as pd
>>> print(render_result({"orders": 3, "top": pd.Series([2, 1], index=["b", "a"], name="n")}))
orders: 3
top:
  | n
- | -
b | 2
a | 1
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Iterable

import numpy as np
import pandas as pd

from .lessons import Lesson, LessonStep
from .utils.tabulate import tabulate

log = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".svg"}


def render_result(result: Any, max_rows: int = 20, markdown: bool = False) -> str:
    """Format the result of a step.

    :param result: What the step returned.
    :param max_rows: How many rows of tables to display at most.
    :param markdown: Produce Markdown tables instead of plain text ones.
    """
    if isinstance(result, (pd.DataFrame, pd.Series)):
        return tabulate(result, max_rows=max_rows, markdown=markdown)
    elif isinstance(result, dict):
        blocks = []
        for key, value in result.items():
            rendered = render_result(value, max_rows=max_rows, markdown=markdown)
            if "\n" in rendered or isinstance(value, (pd.DataFrame, pd.Series)):
                separator = "\n\n" if markdown else "\n"
                blocks.append(f"{key}:{separator}{rendered}")
            else:
                blocks.append(f"{key}: {rendered}")
        return ("\n\n" if markdown else "\n").join(blocks)
    elif isinstance(result, Path):
        return f"Saved to {result}"
    elif isinstance(result, np.ndarray):
        return np.array2string(result)
    elif result is None:
        return ""
    return str(result)


def render_step_text(lesson_step: LessonStep, max_rows: int = 20) -> str:
    """Plain text of a single step: title, code and result."""
    parts = [f"## {lesson_step.title}", "", lesson_step.source, ""]
    result = render_result(lesson_step.result, max_rows=max_rows)
    if result:
        parts.extend(["-> result:", result, ""])
    return "\n".join(parts)


def render_lesson_text(
    lesson: Lesson, max_rows: int = 20, only_step: str | None = None
) -> str:
    """Run a lesson and return its output as plain text.

    :param lesson: The lesson to run.
    :param max_rows: How many rows of tables to display at most.
    :param only_step: Run only the step with this name.
    """
    header = f"# {lesson.title}"
    body = [render_step_text(s, max_rows=max_rows) for s in lesson.steps(only=only_step)]
    return "\n".join([header, ""] + body)


def slugify(title: str) -> str:
    """Compute the anchor GitHub assigns to a Markdown heading.

    >>> slugify("Input and Output")
    'input-and-output'
    >>> slugify("Putting It All Together!")
    'putting-it-all-together'
    """
    slug = title.strip().lower().replace(" ", "-")
    return re.sub(r"[^a-z0-9_-]", "", slug)


def render_markdown(
    lessons: Iterable[Lesson],
    max_rows: int = 10,
    title: str = "A Tour of pandas",
    base_dir: str | Path | None = None,
) -> str:
    """Run the lessons and render the tutorial as a Markdown document.

    :param lessons: The lessons that make the sections of the tutorial.
    :param max_rows: How many rows of tables to display at most.
    :param title: Title of the document.
    :param base_dir: Directory the document will be saved in, links to
                     saved images are made relative to it.
    """
    lessons = list(lessons)
    lines = [f"# {title}", "", "## Table of Contents", ""]
    for idx, lesson in enumerate(lessons, start=1):
        lines.append(f"{idx}. [{lesson.title}](#{slugify(lesson.title)})")
    lines.append("")

    for lesson in lessons:
        log.info("Rendering lesson %s", lesson.name)
        lines.extend([f"## {lesson.title}", ""])
        if lesson.summary:
            lines.extend([lesson.summary, ""])
        for lesson_step in lesson.steps():
            lines.extend(_markdown_step(lesson_step, max_rows, base_dir))

    return "\n".join(lines).rstrip("\n") + "\n"


def _markdown_step(
    lesson_step: LessonStep, max_rows: int, base_dir: str | Path | None
) -> list[str]:
    lines = [f"### {lesson_step.title}", ""]
    if lesson_step.doc:
        lines.extend([lesson_step.doc, ""])
    if lesson_step.apis:
        apis = ", ".join(f"`{api}`" for api in lesson_step.apis)
        lines.extend([f"*See:* {apis}", ""])
    lines.extend(["```python", lesson_step.source, "```", ""])

    result = lesson_step.result
    if isinstance(result, Path) and result.suffix.lower() in IMAGE_SUFFIXES:
        target = result
        if base_dir is not None:
            target = Path(os.path.relpath(result, base_dir))
        lines.extend([f"![{lesson_step.title}]({target.as_posix()})", ""])
    else:
        rendered = render_result(result, max_rows=max_rows, markdown=True)
        if rendered:
            if isinstance(result, (pd.DataFrame, pd.Series, dict)):
                lines.extend([rendered, ""])
            else:
                lines.extend(["```", rendered, "```", ""])
    return lines
