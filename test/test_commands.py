import logging

import pandas as pd
import pytest

from frametour.catalog import LessonCatalog
from frametour.commands.tour import build_parser, main, make_config
from frametour.lessons import Lesson, step


class HelloLesson(Lesson):
    name = "hello"
    title = "Hello"
    summary = "Greetings."

    @step("Greet")
    def greet(self):
        return pd.Series(["hello"], name="greeting")

    @step("Count")
    def count(self):
        return len(self.data.sales())


class FailingLesson(Lesson):
    name = "failing"
    title = "Failing"

    @step("Divide by zero")
    def divide(self):
        return 1 / 0


CATALOG = LessonCatalog([HelloLesson, FailingLesson])


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in ("SEED", "ROWS", "MAX_ROWS", "OUTPUT_DIR", "PLOTS"):
        monkeypatch.delenv(f"FRAMETOUR_{var}", raising=False)
    yield
    logging.getLogger("frametour").handlers.clear()


def test_list(capsys):
    assert main(["list"], catalog=CATALOG) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["hello    Hello (2 steps)", "failing  Failing (1 steps)"]


def test_run(capsys):
    assert main(["--rows", "7", "run", "hello"], catalog=CATALOG) == 0
    out = capsys.readouterr().out
    assert "# Hello" in out
    assert "## Greet" in out
    assert "0 | hello" in out
    assert "-> result:\n7\n" in out


def test_run_single_step(capsys):
    assert main(["run", "hello", "--step", "count"], catalog=CATALOG) == 0
    out = capsys.readouterr().out
    assert "## Count" in out
    assert "## Greet" not in out


def test_run_unknown_lesson(capsys):
    assert main(["run", "hello", "bye"], catalog=CATALOG) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown lesson 'bye', available lessons: hello, failing" in captured.err


def test_run_unknown_step(capsys):
    assert main(["run", "hello", "--step", "wave"], catalog=CATALOG) == 2
    assert "hello has no step named 'wave'" in capsys.readouterr().err


def test_run_failing_lesson(capsys):
    assert main(["run", "failing"], catalog=CATALOG) == 1
    assert "Step failing.divide failed: ZeroDivisionError" in capsys.readouterr().err


def test_run_requires_lessons():
    with pytest.raises(SystemExit) as excinfo:
        main(["run"], catalog=CATALOG)
    assert excinfo.value.code == 2


def test_step_requires_single_lesson():
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--all", "--step", "greet"], catalog=CATALOG)
    assert excinfo.value.code == 2


def test_invalid_configuration(capsys):
    assert main(["--rows", "0", "list"], catalog=CATALOG) == 2
    assert "Invalid configuration, rows must be a positive number" in capsys.readouterr().err


def test_render_to_file(tmp_path):
    output = tmp_path / "docs" / "TUTORIAL.md"
    assert main(["render", "-o", str(output), "--title", "Hello Tour"], catalog=LessonCatalog([HelloLesson])) == 0
    document = output.read_text(encoding="utf-8")
    assert document.startswith("# Hello Tour\n")
    assert "1. [Hello](#hello)" in document


def test_render_to_stdout(capsys):
    assert main(["render"], catalog=LessonCatalog([HelloLesson])) == 0
    assert capsys.readouterr().out.startswith("# A Tour of pandas\n")


def test_make_config_layers_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FRAMETOUR_SEED", "5")
    monkeypatch.setenv("FRAMETOUR_ROWS", "50")
    args = build_parser().parse_args(
        ["--rows", "10", "--output-dir", str(tmp_path), "--no-plots", "list"]
    )
    config = make_config(args)
    assert config.seed == 5
    assert config.rows == 10
    assert config.output_dir == tmp_path
    assert config.plots is False


@pytest.mark.parametrize("option", [["--seed", "-5"], ["--max-rows", "-1"]])
def test_invalid_configuration_values(capsys, option):
    assert main([*option, "run", "hello"], catalog=CATALOG) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err


def test_no_plots_single_step(tmp_path, capsys):
    argv = ["--output-dir", str(tmp_path), "--no-plots", "run", "visualization", "--step", "line"]
    assert main(argv) == 0
    assert not (tmp_path / "line.png").exists()
    out = capsys.readouterr().out
    assert "# Visualization" in out
    assert "## Line plot" not in out
