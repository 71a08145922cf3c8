import pandas as pd
import pytest

from frametour.config import TourConfig
from frametour.datasets import SampleData
from frametour.lessons.base import Lesson, LessonError, LessonStep, step
from frametour.utils.inspect import get_qualname


class SampleLesson(Lesson):
    name = "sample"
    title = "Sample Lesson"

    executed: list

    def __init__(self, config=None):
        super().__init__(config)
        self.executed = []

    @step("Create a Series", pd.Series)
    def create(self):
        """A Series is a labeled one-dimensional array.

        It has an index.
        """
        self.executed.append("create")
        return pd.Series([1, 2, 3])

    def helper(self):
        return "not a step"

    @step("Sum the values", pd.Series.sum)
    def total(self):
        self.executed.append("total")
        return pd.Series([1, 2, 3]).sum()


class ExtendedLesson(SampleLesson):
    name = "extended"
    title = "Extended Lesson"

    @step("Broken step")
    def broken(self):
        return pd.DataFrame({"a": [1]})["missing"]

    @step("Overridden total")
    def total(self):
        return 0


def test_subclass_without_name_is_abstract():
    class NamelessLesson(Lesson):
        title = "No name"

    with pytest.raises(TypeError, match="abstract"):
        NamelessLesson()
    with pytest.raises(TypeError, match="abstract"):
        Lesson()


def test_subclass_requires_non_empty_title():
    with pytest.raises(TypeError, match="must define a non empty title"):

        class UntitledLesson(Lesson):
            name = "untitled"
            title = ""


def test_str():
    assert str(SampleLesson()) == "SampleLesson(name=sample, steps=2)"


def test_step_names_in_definition_order():
    assert SampleLesson.step_names() == ["create", "total"]


def test_step_names_inherited_first():
    assert ExtendedLesson.step_names() == ["create", "total", "broken"]


def test_steps():
    lesson = SampleLesson()
    steps = list(lesson.steps())
    assert [s.name for s in steps] == ["create", "total"]

    create = steps[0]
    assert isinstance(create, LessonStep)
    assert create.lesson == "sample"
    assert create.title == "Create a Series"
    assert create.doc == "A Series is a labeled one-dimensional array.\n\nIt has an index."
    assert create.source == 'self.executed.append("create")\nreturn pd.Series([1, 2, 3])'
    assert create.apis == [get_qualname(pd.Series)]
    assert create.apis[0].endswith(".Series")
    assert create.result.tolist() == [1, 2, 3]
    assert steps[1].result == 6
    assert steps[1].doc == ""


def test_steps_are_lazy():
    lesson = SampleLesson()
    iterator = lesson.steps()
    next(iterator)
    assert lesson.executed == ["create"]


def test_run_step():
    lesson = SampleLesson()
    assert lesson.run_step("total").result == 6
    assert lesson.executed == ["total"]


@pytest.mark.parametrize("name", ["helper", "missing", "config"])
def test_run_step_unknown(name):
    with pytest.raises(KeyError, match=f"sample has no step named '{name}'"):
        SampleLesson().run_step(name)


def test_overridden_step():
    assert ExtendedLesson().run_step("total").title == "Overridden total"


def test_failing_step():
    with pytest.raises(LessonError) as excinfo:
        ExtendedLesson().run_step("broken")
    assert excinfo.value.lesson == "extended"
    assert excinfo.value.step == "broken"
    assert isinstance(excinfo.value.__cause__, KeyError)
    assert str(excinfo.value).startswith("Step extended.broken failed: KeyError(")


def test_data_uses_config():
    lesson = SampleLesson(TourConfig(seed=3, rows=7))
    assert isinstance(lesson.data, SampleData)
    assert lesson.data is lesson.data
    assert str(lesson.data) == "SampleData(seed=3, rows=7)"
    assert len(lesson.data.sales()) == 7


def test_steps_only():
    lesson = SampleLesson()
    assert [s.name for s in lesson.steps(only="total")] == ["total"]
    assert lesson.executed == ["total"]


def test_steps_only_unknown():
    with pytest.raises(KeyError, match="sample has no step named 'wave'"):
        list(SampleLesson().steps(only="wave"))


class DisabledLesson(SampleLesson):
    name = "disabled"
    title = "Disabled Lesson"

    def enabled(self):
        return False


@pytest.mark.parametrize("only", [None, "create"])
def test_disabled_lesson_runs_nothing(only):
    lesson = DisabledLesson()
    assert list(lesson.steps(only=only)) == []
    assert lesson.executed == []
