"""The lessons of the tour.

Each lesson corresponds to a section of the tutorial
and is self documented: the module docstring introduces
the concepts, the steps show them in action.

The lessons are meant to be followed in order:

>>> from frametour.lessons import StructuresLesson
>>> lesson = StructuresLesson()
>>> lesson.step_names()[:2]
['series_from_list', 'series_from_dict']
>>> first = next(lesson.steps())
>>> first.title
'Series from a list'
>>> first.result.tolist()
[10, 20, 30, 40]
"""

from .base import Lesson, LessonError, LessonStep, step
from .basics import BasicsLesson
from .categorical import CategoricalLesson
from .examples import ExamplesLesson
from .grouping import GroupingLesson
from .introduction import IntroductionLesson
from .io import IOLesson
from .manipulation import ManipulationLesson
from .merging import MergingLesson
from .reshaping import ReshapingLesson
from .structures import StructuresLesson
from .text import TextLesson
from .timeseries import TimeSeriesLesson
from .visualization import VisualizationLesson

__all__ = (
    "Lesson",
    "LessonError",
    "LessonStep",
    "step",
    "IntroductionLesson",
    "StructuresLesson",
    "BasicsLesson",
    "ManipulationLesson",
    "GroupingLesson",
    "MergingLesson",
    "ReshapingLesson",
    "TimeSeriesLesson",
    "CategoricalLesson",
    "TextLesson",
    "IOLesson",
    "VisualizationLesson",
    "ExamplesLesson",
)
