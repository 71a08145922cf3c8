"""Base classes and interfaces for Lessons

This module defines the base components that are
necessary to represent a section of the tutorial
and run its examples.

A lesson is a class, and each example of the lesson
is a method marked with the :func:`step` decorator::

    class FirstLesson(Lesson):
        name = "first"
        title = "A first lesson"

        @step("Create a Series", pd.Series)
        def create(self):
            \"\"\"A Series is a labeled one-dimensional array.\"\"\"
            return pd.Series([1, 2, 3])

The body of the method is what the reader of the tutorial
will see as the snippet, and its docstring is the prose
explaining it. The returned value is the result of the snippet.

Running a lesson means iterating over its :meth:`Lesson.steps`
which emits one :class:`LessonStep` for each executed example::

    for lesson_step in FirstLesson().steps():
        print(lesson_step.title, lesson_step.result)
"""

import abc
import dataclasses
import functools
import inspect
import logging
from typing import Any, Callable, Iterator, TypeVar

from ..config import TourConfig
from ..datasets import SampleData
from ..utils.inspect import get_body_source, get_qualname

log = logging.getLogger(__name__)

StepFunction = TypeVar("StepFunction", bound=Callable[..., Any])

STEP_MARKER = "__frametour_step__"


@dataclasses.dataclass(frozen=True)
class StepInfo:
    """What the :func:`step` decorator records about a method."""

    title: str
    apis: tuple[Callable, ...] = ()


def step(title: str, *apis: Callable) -> Callable[[StepFunction], StepFunction]:
    """Mark a lesson method as a step of the tutorial.

    :param title: The heading of the step in the tutorial.
    :param apis: The pandas functions or methods the step demonstrates.
    """

    def decorator(func: StepFunction) -> StepFunction:
        setattr(func, STEP_MARKER, StepInfo(title=title, apis=apis))
        return func

    return decorator


@dataclasses.dataclass
class LessonStep:
    """The outcome of executing a step of a lesson."""

    lesson: str
    """Name of the lesson the step belongs to."""

    name: str
    """Name of the method implementing the step."""

    title: str
    doc: str
    """The explanation of the step, from the method docstring."""

    source: str
    """The code snippet of the step."""

    apis: list[str]
    """Qualified names of the pandas APIs the step demonstrates."""

    result: Any = None


class LessonError(Exception):
    """An exception raised when a step of a lesson fails."""

    def __init__(self, lesson: str, step: str, reason: BaseException) -> None:
        self.lesson = lesson
        self.step = step
        super().__init__(f"Step {lesson}.{step} failed: {reason!r}")


class Lesson(abc.ABC):
    """A section of the tutorial.

    Subclasses must provide a ``name``, which identifies
    the lesson on the command line, and a ``title`` which
    is the heading of the section. Optionally a ``summary``
    that introduces the section.

    Subclasses that don't provide them are abstract lessons,
    they can share steps and helpers with other lessons
    but can't be instantiated.

    Steps are executed in the order they are defined
    in the class body, subclasses of a lesson will run
    the steps of the parent lesson first.
    """

    summary: str = ""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Identifier of the lesson on the command line."""

    @property
    @abc.abstractmethod
    def title(self) -> str:
        """Heading of the lesson in the tutorial."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for attrname in ("name", "title"):
            if getattr(cls, attrname) == "":
                raise TypeError(f"Lesson {cls.__name__} must define a non empty {attrname}")

    def __init__(self, config: TourConfig | None = None) -> None:
        """
        :param config: The configuration of the tour, defaults to :class:`TourConfig`.
        """
        self.config = config or TourConfig()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, steps={len(self.step_names())})"

    @functools.cached_property
    def data(self) -> SampleData:
        """The sample datasets the lesson works on."""
        return SampleData(seed=self.config.seed, rows=self.config.rows)

    @classmethod
    def step_names(cls) -> list[str]:
        """Names of the methods implementing the steps, in execution order."""
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for attrname, value in vars(klass).items():
                if hasattr(value, STEP_MARKER) and attrname not in names:
                    names.append(attrname)
        return names

    def enabled(self) -> bool:
        """Whether the configuration allows the steps of the lesson to run."""
        return True

    def steps(self, only: str | None = None) -> Iterator[LessonStep]:
        """Execute the steps of the lesson one at a time.

        Steps are executed lazily, only when the consumer
        asks for the next one. Nothing is executed when
        the lesson is not :meth:`enabled`.

        :param only: Execute only the step with this name.
        """
        names = self.step_names()
        if only is not None:
            if only not in names:
                raise KeyError(f"{self.name} has no step named {only!r}")
            names = [only]

        if not self.enabled():
            log.info("Lesson %s is disabled, skipping its steps", self.name)
            return

        for name in names:
            yield self.run_step(name)

    def run_step(self, name: str) -> LessonStep:
        """Execute a single step of the lesson.

        :param name: The name of the method implementing the step.
        """
        method = getattr(self, name, None)
        info: StepInfo | None = getattr(method, STEP_MARKER, None)
        if info is None:
            raise KeyError(f"{self.name} has no step named {name!r}")

        log.debug("Running step %s.%s", self.name, name)
        try:
            result = method()
        except Exception as exc:
            raise LessonError(self.name, name, exc) from exc

        func = method.__func__
        return LessonStep(
            lesson=self.name,
            name=name,
            title=info.title,
            doc=inspect.cleandoc(func.__doc__ or ""),
            source=get_body_source(func),
            apis=[get_qualname(api) for api in info.apis],
            result=result,
        )
