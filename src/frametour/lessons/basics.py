"""Basic operations: viewing, selecting, filtering and sorting data.

Selecting data is the most frequent operation in any analysis,
and pandas provides multiple ways to do it:

* ``df[...]`` selects columns by name, or rows with a boolean mask.
* ``df.loc[rows, cols]`` selects by *label*.
* ``df.iloc[rows, cols]`` selects by *position*.
* ``df.at`` and ``df.iat`` access a single value by label or position.

A key difference between ``loc`` and ``iloc`` is that slices
in ``loc`` include the end label, while ``iloc`` behaves like
a Python slice and excludes the end position.
"""

import pandas as pd

from .base import Lesson, step


class BasicsLesson(Lesson):
    """Look at the data, pick rows and columns, order them."""

    name = "basics"
    title = "Basic Operations"
    summary = (
        "Viewing data, selecting rows and columns by label or position, "
        "filtering with boolean conditions and sorting."
    )

    @step("First rows", pd.DataFrame.head)
    def head(self):
        """``head(n)`` returns the first ``n`` rows, 5 by default."""
        df = self.data.people()
        return df.head(3)

    @step("Last rows", pd.DataFrame.tail)
    def tail(self):
        """``tail(n)`` returns the last ``n`` rows."""
        df = self.data.people()
        return df.tail(2)

    @step("Summary statistics", pd.DataFrame.describe)
    def describe(self):
        """``describe`` computes count, mean, std and quantiles of numeric columns."""
        df = self.data.people()
        return df.describe()

    @step("Structure of the table", pd.DataFrame.info)
    def info(self):
        """``info`` prints dtypes and non missing counts, here gathered as a table."""
        df = self.data.people()
        summary = pd.DataFrame(
            {
                "dtype": df.dtypes.astype(str),
                "non_null": df.notna().sum(),
                "memory_bytes": df.memory_usage(index=False, deep=True),
            }
        )
        return summary

    @step("Selecting a column", pd.DataFrame.__getitem__)
    def select_column(self):
        """A single column name returns a Series."""
        df = self.data.people()
        return df["name"]

    @step("Selecting multiple columns", pd.DataFrame.__getitem__)
    def select_columns(self):
        """A list of column names returns a DataFrame, in the requested order."""
        df = self.data.people()
        return df[["city", "name"]]

    @step("Selecting by label", pd.DataFrame.loc)
    def select_loc(self):
        """Label slices are inclusive: ``1:3`` returns rows 1, 2 and 3."""
        df = self.data.people()
        return df.loc[1:3, ["name", "age"]]

    @step("Selecting by position", pd.DataFrame.iloc)
    def select_iloc(self):
        """Positional slices exclude the end: ``1:3`` returns rows 1 and 2."""
        df = self.data.people()
        return df.iloc[1:3, 0:2]

    @step("Accessing a single value", pd.DataFrame.at, pd.DataFrame.iat)
    def scalar_access(self):
        """``at`` and ``iat`` are the fastest way to read one value."""
        df = self.data.people()
        return {"at": df.at[2, "name"], "iat": df.iat[2, 0]}

    @step("Filtering with a condition")
    def boolean_filter(self):
        """Comparing a column returns a boolean Series, which can be used to pick rows."""
        df = self.data.people()
        return df[df["age"] > 40]

    @step("Combining conditions")
    def combined_filter(self):
        """Conditions are combined with ``&`` (and), ``|`` (or), ``~`` (not).

        Each condition must be wrapped in parentheses,
        as those operators bind tighter than comparisons.
        """
        df = self.data.people()
        return df[(df["city"] == "London") & (df["salary"] > 80000) | (df["department"] == "Marketing")]

    @step("Filtering by membership", pd.Series.isin)
    def isin_filter(self):
        """``isin`` checks each value against a set of accepted values."""
        df = self.data.people()
        return df[df["city"].isin(["Paris", "Berlin"])]

    @step("Filtering with a query string", pd.DataFrame.query)
    def query(self):
        """``query`` accepts an expression, ``@`` refers to local variables."""
        df = self.data.people()
        min_salary = 70000
        return df.query("department == 'Sales' and salary >= @min_salary")

    @step("Sorting by values", pd.DataFrame.sort_values)
    def sort_values(self):
        """Sort by multiple columns, each one with its own direction."""
        df = self.data.people()
        return df.sort_values(["city", "salary"], ascending=[True, False])

    @step("Sorting by index", pd.DataFrame.sort_index)
    def sort_index(self):
        """``sort_index`` restores the original order after other operations."""
        df = self.data.people().sort_values("name", ascending=False)
        return df.sort_index().head(3)

    @step("Adding columns", pd.DataFrame.assign)
    def add_columns(self):
        """Columns can be assigned directly or through ``assign``, which returns a new DataFrame."""
        df = self.data.people()
        df["monthly_salary"] = (df["salary"] / 12).round(2)
        df = df.assign(senior=lambda d: d["age"] >= 40)
        return df[["name", "monthly_salary", "senior"]]

    @step("Dropping columns", pd.DataFrame.drop)
    def drop_columns(self):
        """``drop`` removes rows or columns by label."""
        df = self.data.people()
        return df.drop(columns=["department", "salary"])
