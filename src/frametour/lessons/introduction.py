"""Introduction to pandas.

pandas is the most widely used library to work with tabular
data in Python. It provides two main data structures,
the :class:`pandas.Series` and the :class:`pandas.DataFrame`,
and a very large set of functions to load, clean, transform,
analyse and save data.

pandas builds on top of numpy for its in-memory storage and
can delegate to pyarrow for reading and writing columnar formats.
"""

import numpy as np
import pandas as pd
import pyarrow as pa

from .base import Lesson, step


class IntroductionLesson(Lesson):
    """Installation check and a first look at a DataFrame."""

    name = "introduction"
    title = "Introduction"
    summary = (
        "pandas is usually imported as ``pd``. It relies on numpy for "
        "computation and optionally on pyarrow for columnar file formats."
    )

    @step("Checking the installed versions")
    def versions(self):
        """Make sure the libraries used across the tutorial are available."""
        return pd.Series(
            {"pandas": pd.__version__, "numpy": np.__version__, "pyarrow": pa.__version__},
            name="version",
        )

    @step("A first DataFrame", pd.DataFrame)
    def first_dataframe(self):
        """A DataFrame is a table: named columns sharing the same row labels.

        The simplest way to build one is from a dictionary
        where each key is a column name and each value the column data.
        """
        df = pd.DataFrame(
            {
                "city": ["London", "Paris", "Berlin"],
                "population_m": [8.9, 2.1, 3.7],
            }
        )
        return df
