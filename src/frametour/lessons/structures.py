"""Data structures: Series and DataFrame.

The **Series** is a one-dimensional array of values with
an associated array of labels, the *index*. When no index
is provided, pandas uses a ``RangeIndex`` going from ``0``
to ``len - 1``.

The **DataFrame** is a two-dimensional table, it can be seen
as a dictionary of Series that all share the same index.
Each column has its own data type (its *dtype*).

For example, given the following data::

    name,  age
    Alice, 34
    Bob,   28

The DataFrame would have a ``name`` column of dtype ``object``,
an ``age`` column of dtype ``int64`` and an index ``[0, 1]``.
"""

import numpy as np
import pandas as pd

from .base import Lesson, step


class StructuresLesson(Lesson):
    """How Series and DataFrame objects are created and inspected."""

    name = "structures"
    title = "Data Structures"
    summary = (
        "The two core data structures of pandas: the one-dimensional "
        "labeled Series and the two-dimensional labeled DataFrame."
    )

    @step("Series from a list", pd.Series)
    def series_from_list(self):
        """Without an explicit index, labels are the positions of the values."""
        s = pd.Series([10, 20, 30, 40])
        return s

    @step("Series from a dictionary", pd.Series)
    def series_from_dict(self):
        """Dictionary keys become the labels of the Series."""
        s = pd.Series({"apples": 3, "pears": 5, "plums": 0})
        return s

    @step("Series with an explicit index and name", pd.Series)
    def series_with_index(self):
        """The ``name`` of a Series becomes its column name when it ends up in a DataFrame."""
        s = pd.Series([1.5, 2.5, 3.5], index=["a", "b", "c"], name="measure")
        return s

    @step("DataFrame from a dictionary of lists", pd.DataFrame)
    def frame_from_dict(self):
        """Each key is a column, all lists must have the same length."""
        df = pd.DataFrame(
            {
                "name": ["Alice", "Bob", "Charlie"],
                "age": [34, 28, 45],
                "city": ["London", "Paris", "London"],
            }
        )
        return df

    @step("DataFrame from a list of records", pd.DataFrame.from_records)
    def frame_from_records(self):
        """Each dictionary is a row, missing keys become missing values."""
        records = [
            {"name": "Alice", "age": 34},
            {"name": "Bob", "city": "Paris"},
        ]
        df = pd.DataFrame.from_records(records)
        return df

    @step("DataFrame from a numpy array", pd.DataFrame)
    def frame_from_numpy(self):
        """Column names and row labels can be provided separately."""
        values = np.arange(12).reshape(4, 3)
        df = pd.DataFrame(values, columns=["x", "y", "z"], index=list("abcd"))
        return df

    @step("Attributes of a DataFrame")
    def attributes(self):
        """``shape``, ``columns``, ``index`` and ``dtypes`` describe the table."""
        df = self.data.people()
        return pd.Series(
            {
                "shape": df.shape,
                "columns": list(df.columns),
                "index": repr(df.index),
                "dtypes": df.dtypes.astype(str).to_dict(),
            },
            name="attribute",
        )

    @step("Column data types", pd.DataFrame.dtypes)
    def dtypes(self):
        """Each column has a single dtype, missing numbers force ``float64``."""
        df = self.data.people()
        return df.dtypes.astype(str)

    @step("Back to numpy", pd.DataFrame.to_numpy)
    def to_numpy(self):
        """``to_numpy`` returns the underlying values as a numpy array."""
        df = pd.DataFrame({"x": [1, 2], "y": [3, 4]})
        return df.to_numpy()
