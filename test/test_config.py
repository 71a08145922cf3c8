from pathlib import Path

import pytest

from frametour.config import TourConfig


def test_defaults():
    config = TourConfig()
    assert config.seed == 42
    assert config.rows == 200
    assert config.max_rows == 20
    assert config.output_dir is None
    assert config.plots is True


@pytest.mark.parametrize("field", ["rows", "max_rows"])
def test_positive_values_required(field):
    with pytest.raises(ValueError, match=f"{field} must be a positive number"):
        TourConfig(**{field: 0})


def test_output_dir_converted_to_path():
    config = TourConfig(output_dir="some/dir")
    assert config.output_dir == Path("some/dir")


def test_from_env():
    config = TourConfig.from_env(
        {
            "FRAMETOUR_SEED": "7",
            "FRAMETOUR_ROWS": "1000",
            "FRAMETOUR_MAX_ROWS": "5",
            "FRAMETOUR_OUTPUT_DIR": "/tmp/tour",
            "FRAMETOUR_PLOTS": "off",
            "UNRELATED": "value",
        }
    )
    assert config == TourConfig(
        seed=7, rows=1000, max_rows=5, output_dir=Path("/tmp/tour"), plots=False
    )


def test_from_env_empty():
    assert TourConfig.from_env({}) == TourConfig()


def test_from_env_invalid_integer():
    with pytest.raises(ValueError, match="FRAMETOUR_ROWS must be an integer, got 'many'"):
        TourConfig.from_env({"FRAMETOUR_ROWS": "many"})


def test_replace_ignores_none():
    config = TourConfig(seed=7).replace(seed=None, rows=10)
    assert config.seed == 7
    assert config.rows == 10


def test_ensure_output_dir_creates_configured_directory(tmp_path):
    config = TourConfig(output_dir=tmp_path / "nested" / "out")
    path = config.ensure_output_dir()
    assert path == tmp_path / "nested" / "out"
    assert path.is_dir()


def test_ensure_output_dir_temporary_is_reused():
    config = TourConfig()
    first = config.ensure_output_dir()
    try:
        assert first.is_dir()
        assert first.name.startswith("frametour_")
        assert config.ensure_output_dir() == first
    finally:
        first.rmdir()


@pytest.mark.parametrize(
    "values, message",
    [
        ({"seed": -5}, "seed must be a non-negative number, got -5"),
        ({"rows": -1}, "rows must be a positive number, got -1"),
        ({"max_rows": 0}, "max_rows must be a positive number, got 0"),
    ],
)
def test_invalid_values(values, message):
    with pytest.raises(ValueError, match=message):
        TourConfig(**values)


def test_zero_seed_is_valid():
    assert TourConfig(seed=0).seed == 0


def test_from_env_negative_seed():
    with pytest.raises(ValueError, match="seed must be a non-negative number"):
        TourConfig.from_env({"FRAMETOUR_SEED": "-5"})
