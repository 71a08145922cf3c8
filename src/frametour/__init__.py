"""FrameTour

A guided, executable tour of the pandas data manipulation library.

FrameTour started as a plain Markdown tutorial: a table of contents followed
by sections about data structures, basic operations, data manipulation,
advanced operations, input/output and visualization, each one made of short
snippets calling pandas directly.

Snippets in a document rot silently, so here every section of the tutorial
is a :class:`frametour.lessons.base.Lesson` and every snippet is a real
function. This allows to:

* Run the lessons and look at the results, see :mod:`frametour.commands`.
* Test that each snippet still does what the prose claims.
* Regenerate the tutorial document itself from the code,
  see :mod:`frametour.render`.

FrameTour does not implement any data structure, storage or query engine,
all the heavy lifting is done by pandas, numpy and pyarrow.
The primary components are:

* The Lessons, one per tutorial section, in :mod:`frametour.lessons`.
* The Sample Datasets the lessons work on, in :mod:`frametour.datasets`.
* The Catalog, which knows the tutorial order, in :mod:`frametour.catalog`.
* The Renderers, which turn lessons into text or Markdown.
"""

from . import catalog, lessons, render
from .config import TourConfig

__all__ = ("catalog", "lessons", "render", "TourConfig")
