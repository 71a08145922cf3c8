import pytest

from frametour.config import TourConfig
from frametour.datasets import SampleData


@pytest.fixture
def config(tmp_path):
    """A small configuration writing into a temporary directory."""
    return TourConfig(seed=42, rows=120, max_rows=10, output_dir=tmp_path / "out")


@pytest.fixture
def data(config):
    return SampleData(seed=config.seed, rows=config.rows)


@pytest.fixture
def run_step(config):
    """Run a single step of a lesson class and return its result."""

    def _run_step(lesson_cls, name):
        return lesson_cls(config).run_step(name).result

    return _run_step
