"""Working with text.

String columns expose vectorised string methods through the
``str`` accessor. They mirror the methods of Python strings,
but operate on the whole column at once and propagate missing
values instead of failing on them.

Most of them accept regular expressions.
"""

import pandas as pd

from .base import Lesson, step


class TextLesson(Lesson):
    """Cleaning, searching and splitting strings."""

    name = "text"
    title = "Working with Text"
    summary = "Vectorised string operations through the ``str`` accessor."

    @step("Normalizing case and spaces", pd.Series.str)
    def normalize(self):
        """Inconsistent labels are a common source of wrong groupings."""
        reviews = self.data.reviews()
        cleaned = reviews["product"].str.strip().str.lower()
        return pd.DataFrame({"raw": reviews["product"], "cleaned": cleaned})

    @step("Searching text", pd.Series.str)
    def contains(self):
        """``str.contains`` returns a mask, ``case=False`` ignores the case."""
        reviews = self.data.reviews()
        return reviews[reviews["text"].str.contains("fast", case=False)][["review_id", "text"]]

    @step("Replacing with a regular expression", pd.Series.str)
    def replace(self):
        """Here order numbers are masked."""
        reviews = self.data.reviews()
        return reviews["text"].str.replace(r"#\d+", "#****", regex=True)

    @step("Splitting into columns", pd.Series.str)
    def split(self):
        """``expand=True`` returns a DataFrame with one column per part."""
        reviews = self.data.reviews()
        return reviews["text"].str.split(",", n=1, expand=True).rename(columns={0: "first", 1: "rest"})

    @step("Length of strings", pd.Series.str)
    def length(self):
        """``str.len`` counts the characters of each value."""
        reviews = self.data.reviews()
        return reviews.assign(length=reviews["text"].str.len())[["review_id", "length"]]

    @step("Extracting with named groups", pd.Series.str)
    def extract(self):
        """Each named group of the pattern becomes a column, rows not matching get missing values."""
        reviews = self.data.reviews()
        return reviews["text"].str.extract(r"[Oo]rder #(?P<order_number>\d+)")
