"""Data manipulation: cleaning and transforming values.

Real world data is rarely ready to be analysed, it usually
contains missing values, duplicates, inconsistent types and
labels that need to be cleaned up.

pandas represents missing values as ``NaN`` (``NaT`` for dates),
most functions skip them by default: ``df["salary"].mean()``
ignores missing salaries instead of failing.
"""

import numpy as np
import pandas as pd

from .base import Lesson, step


class ManipulationLesson(Lesson):
    """Missing data, applying functions, renaming and type conversions."""

    name = "manipulation"
    title = "Data Manipulation"
    summary = (
        "Handling missing values, applying functions to rows and columns, "
        "renaming, converting types and removing duplicates."
    )

    @step("Detecting missing values", pd.DataFrame.isna)
    def detect_missing(self):
        """``isna`` marks missing values, summing it counts them per column."""
        df = self.data.people()
        return df.isna().sum()

    @step("Filling missing values", pd.DataFrame.fillna)
    def fill_missing(self):
        """``fillna`` accepts a dictionary to use a different value for each column."""
        df = self.data.people()
        filled = df.fillna({"age": df["age"].median(), "salary": 0})
        return filled.loc[[3, 4]]

    @step("Dropping missing values", pd.DataFrame.dropna)
    def drop_missing(self):
        """``dropna`` removes rows with any missing value, ``subset`` restricts the check."""
        df = self.data.people()
        return df.dropna(subset=["salary"])

    @step("Applying a function to columns", pd.DataFrame.apply)
    def apply_columns(self):
        """By default ``apply`` invokes the function once per column."""
        df = self.data.people()[["age", "salary"]]
        return df.apply(lambda column: column.max() - column.min())

    @step("Applying a function to rows", pd.DataFrame.apply)
    def apply_rows(self):
        """With ``axis=1`` the function receives each row as a Series."""
        df = self.data.people()
        df["badge"] = df.apply(lambda row: f"{row['name']} ({row['city']})", axis=1)
        return df[["name", "badge"]].head(3)

    @step("Mapping values", pd.Series.map)
    def map_values(self):
        """``map`` replaces each value using a dictionary or a function."""
        df = self.data.people()
        countries = {"London": "UK", "Paris": "France", "Berlin": "Germany"}
        df["country"] = df["city"].map(countries)
        return df[["city", "country"]].drop_duplicates()

    @step("Renaming columns", pd.DataFrame.rename)
    def rename(self):
        """``rename`` takes a mapping from old to new labels."""
        df = self.data.people()
        return df.rename(columns={"name": "employee", "salary": "annual_salary"}).head(2)

    @step("Converting types", pd.DataFrame.astype)
    def convert_types(self):
        """``astype`` converts columns, nullable ``Int64`` keeps integers with missing values."""
        df = self.data.people()
        converted = df.astype({"age": "Int64", "salary": "float32"})
        return converted.dtypes.astype(str)

    @step("Replacing values", pd.DataFrame.replace)
    def replace(self):
        """``replace`` substitutes specific values, here per column."""
        df = self.data.people()
        return df.replace({"department": {"Engineering": "R&D"}})[["name", "department"]]

    @step("Removing duplicates", pd.DataFrame.drop_duplicates)
    def drop_duplicates(self):
        """Keeps the first row for each distinct combination of the given columns."""
        df = self.data.people()
        return df.drop_duplicates(subset=["city", "department"])[["city", "department", "name"]]

    @step("Counting values", pd.Series.value_counts)
    def value_counts(self):
        """``value_counts`` returns the frequency of each value, most frequent first."""
        df = self.data.people()
        return df["city"].value_counts()

    @step("Clipping values", pd.Series.clip)
    def clip(self):
        """``clip`` caps values within a range."""
        df = self.data.people()
        return df["salary"].clip(lower=65000, upper=90000)

    @step("Conditional values", np.where, pd.Series.where)
    def conditional(self):
        """``np.where`` picks between two values, ``Series.where`` keeps values matching the condition."""
        df = self.data.people()
        df["band"] = np.where(df["salary"] >= 75000, "high", "standard")
        df["high_salary"] = df["salary"].where(df["band"] == "high")
        return df[["name", "salary", "band", "high_salary"]]
