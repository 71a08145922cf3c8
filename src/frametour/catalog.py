"""The catalog of lessons available in the tour.

The catalog knows which lessons exist and in which order
they should be followed, and is the way the command line
and the renderers look lessons up by name:

>>> from frametour.catalog import DEFAULT_CATALOG
>>> DEFAULT_CATALOG.names()[:3]
['introduction', 'structures', 'basics']
>>> DEFAULT_CATALOG.get("grouping").title
'Grouping and Aggregation'
"""

import inspect
from typing import Iterable, Iterator

from .config import TourConfig
from .lessons import (
    BasicsLesson,
    CategoricalLesson,
    ExamplesLesson,
    GroupingLesson,
    IntroductionLesson,
    IOLesson,
    Lesson,
    ManipulationLesson,
    MergingLesson,
    ReshapingLesson,
    StructuresLesson,
    TextLesson,
    TimeSeriesLesson,
    VisualizationLesson,
)


class UnknownLessonError(KeyError):
    """An exception raised when looking up a lesson that does not exist."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown lesson {self.name!r}, available lessons: {', '.join(self.known)}"


class LessonCatalog:
    """Ordered collection of lesson classes, indexed by name."""

    def __init__(self, lessons: Iterable[type[Lesson]] = ()) -> None:
        """
        :param lessons: The lesson classes, in the order they should be followed.
        """
        self._lessons: dict[str, type[Lesson]] = {}
        for lesson in lessons:
            self.register(lesson)

    def __str__(self) -> str:
        return f"LessonCatalog({self.names()})"

    def __iter__(self) -> Iterator[type[Lesson]]:
        return iter(self._lessons.values())

    def __len__(self) -> int:
        return len(self._lessons)

    def __contains__(self, name: object) -> bool:
        return name in self._lessons

    def register(self, lesson: type[Lesson]) -> type[Lesson]:
        """Add a lesson at the end of the catalog.

        Returns the lesson itself, so it can be used as a class decorator.
        """
        if inspect.isabstract(lesson):
            raise TypeError(f"{lesson.__name__} is an abstract lesson and can't be registered")
        if lesson.name in self._lessons:
            raise ValueError(f"A lesson named {lesson.name!r} is already registered")
        self._lessons[lesson.name] = lesson
        return lesson

    def names(self) -> list[str]:
        """The names of the lessons, in tutorial order."""
        return list(self._lessons)

    def get(self, name: str) -> type[Lesson]:
        """Lookup a lesson class by name.

        :param name: The name of the lesson, like ``"grouping"``.
        """
        try:
            return self._lessons[name]
        except KeyError:
            raise UnknownLessonError(name, self.names()) from None

    def create(self, name: str, config: TourConfig | None = None) -> Lesson:
        """Lookup a lesson by name and instantiate it.

        :param name: The name of the lesson.
        :param config: The configuration the lesson will run with.
        """
        return self.get(name)(config)


DEFAULT_CATALOG = LessonCatalog(
    [
        IntroductionLesson,
        StructuresLesson,
        BasicsLesson,
        ManipulationLesson,
        GroupingLesson,
        MergingLesson,
        ReshapingLesson,
        TimeSeriesLesson,
        CategoricalLesson,
        TextLesson,
        IOLesson,
        VisualizationLesson,
        ExamplesLesson,
    ]
)
