"""Configuration of a tour.

All the knobs that influence how lessons are executed live
in a single :class:`TourConfig` object which is passed
to every lesson.

The configuration can be provided from the environment,
which is convenient when running the tutorial in CI::

    FRAMETOUR_SEED=7 FRAMETOUR_ROWS=1000 frametour run --all

and any explicit value (like command line options)
can then be layered on top of it with :meth:`TourConfig.replace`.
"""

import dataclasses
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Self

log = logging.getLogger(__name__)

ENV_PREFIX = "FRAMETOUR_"


@dataclasses.dataclass
class TourConfig:
    """Settings shared by all the lessons of a tour.

    >>> TourConfig(rows=10).rows
    10
    >>> TourConfig(rows=0)
    Traceback (most recent call last):
        ...
    ValueError: rows must be a positive number, got 0
    """

    seed: int = 42
    """Seed for the random generator building the sample datasets."""

    rows: int = 200
    """Number of rows of the generated sales dataset."""

    max_rows: int = 20
    """Maximum number of rows printed for each result."""

    output_dir: Path | None = None
    """Where lessons that write files put them, a temporary directory when ``None``."""

    plots: bool = True
    """When disabled the visualization lesson skips rendering images."""

    def __post_init__(self) -> None:
        if self.seed < 0:
            raise ValueError(f"seed must be a non-negative number, got {self.seed}")
        if self.rows <= 0:
            raise ValueError(f"rows must be a positive number, got {self.rows}")
        if self.max_rows <= 0:
            raise ValueError(f"max_rows must be a positive number, got {self.max_rows}")
        if self.output_dir is not None and not isinstance(self.output_dir, Path):
            self.output_dir = Path(self.output_dir)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build a configuration from ``FRAMETOUR_*`` environment variables.

        :param environ: The mapping to read from, defaults to ``os.environ``.
        """
        if environ is None:
            environ = os.environ

        values: dict[str, Any] = {}
        for name in ("seed", "rows", "max_rows"):
            varname = ENV_PREFIX + name.upper()
            if varname in environ:
                try:
                    values[name] = int(environ[varname])
                except ValueError:
                    raise ValueError(
                        f"{varname} must be an integer, got {environ[varname]!r}"
                    ) from None

        output_dir = environ.get(ENV_PREFIX + "OUTPUT_DIR")
        if output_dir:
            values["output_dir"] = Path(output_dir)

        plots = environ.get(ENV_PREFIX + "PLOTS")
        if plots is not None:
            values["plots"] = plots.strip().lower() not in ("0", "false", "no", "off")

        return cls(**values)

    def replace(self, **overrides: Any) -> Self:
        """Return a new configuration with the given values replaced.

        Overrides that are ``None`` are ignored, so that
        unset command line options don't override
        values coming from the environment.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def ensure_output_dir(self) -> Path:
        """Return the output directory, creating it if necessary.

        When no output directory was configured, a temporary one is
        created the first time this is invoked and reused afterwards.
        """
        if self.output_dir is None:
            self.output_dir = Path(tempfile.mkdtemp(prefix="frametour_"))
            log.info("No output directory configured, writing to %s", self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir
