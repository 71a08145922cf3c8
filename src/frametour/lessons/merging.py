"""Combining DataFrames: concatenation, merges and joins.

``concat`` stacks DataFrames one after the other (or side by side),
aligning them on their labels.

``merge`` combines the rows of two DataFrames whose keys are equal,
like a SQL ``JOIN``. Supposing we have two tables::

    left:                 right:
    +----+--------+       +----+-----+
    | id | name   |       | id | age |
    +----+--------+       +----+-----+
    | 1  | Alice  |       | 3  | 25  |
    | 2  | Bob    |       | 2  | 30  |
    | 3  | Charlie|       +----+-----+
    +----+--------+

An *inner* merge keeps only the keys found in both tables,
so Bob and Charlie. A *left* merge keeps all the rows of the left
table, Alice would get a missing age. An *outer* merge keeps the
keys of both tables.

``join`` is a shortcut for merging on the index.
"""

import pandas as pd

from .base import Lesson, step


class MergingLesson(Lesson):
    """Stack tables and join them on keys."""

    name = "merging"
    title = "Merging and Joining"
    summary = "Concatenating tables and combining them on matching keys."

    @step("Concatenating rows", pd.concat)
    def concat_rows(self):
        """``ignore_index=True`` renumbers the rows instead of keeping the original labels."""
        first = pd.DataFrame({"name": ["Alice", "Bob"], "age": [34, 28]})
        second = pd.DataFrame({"name": ["Charlie"], "age": [45], "city": ["London"]})
        return pd.concat([first, second], ignore_index=True)

    @step("Concatenating columns", pd.concat)
    def concat_columns(self):
        """With ``axis=1`` the frames are placed side by side, aligned on the index."""
        names = pd.Series(["Alice", "Bob", "Charlie"], name="name")
        ages = pd.Series([34, 28], name="age")
        return pd.concat([names, ages], axis=1)

    @step("Inner merge", pd.merge)
    def inner_merge(self):
        """Only orders whose product exists in the catalog are kept."""
        sales = self.data.sales().head(5)
        products = self.data.products()
        merged = pd.merge(sales, products[["product", "launch_year"]], on="product", how="inner")
        return merged[["order_id", "product", "launch_year"]]

    @step("Left merge with indicator", pd.merge)
    def left_merge(self):
        """``indicator=True`` adds a ``_merge`` column telling where each row was found."""
        left = pd.DataFrame({"id": [1, 2, 3], "name": ["Alice", "Bob", "Charlie"]})
        right = pd.DataFrame({"id": [3, 2], "age": [25, 30]})
        return left.merge(right, on="id", how="left", indicator=True)

    @step("Outer merge", pd.merge)
    def outer_merge(self):
        """Keys missing from either side produce missing values."""
        left = pd.DataFrame({"id": [1, 2, 3], "name": ["Alice", "Bob", "Charlie"]})
        right = pd.DataFrame({"id": [3, 4], "age": [25, 40]})
        return left.merge(right, on="id", how="outer")

    @step("Merging on differently named keys", pd.merge)
    def merge_left_right_on(self):
        """``left_on`` and ``right_on`` name the key column of each side.

        Columns with the same name on both sides get the ``suffixes``.
        """
        employees = pd.DataFrame({"emp_id": [1, 2], "name": ["Alice", "Bob"], "city": ["London", "Paris"]})
        offices = pd.DataFrame({"employee": [1, 2], "city": ["Leeds", "Lyon"]})
        return employees.merge(
            offices, left_on="emp_id", right_on="employee", suffixes=("_home", "_office")
        )

    @step("Validating a merge", pd.merge)
    def validate_merge(self):
        """``validate`` checks the relationship, it fails if a product appeared twice in the catalog."""
        sales = self.data.sales()
        products = self.data.products()
        merged = sales.merge(products, on=["product", "category"], validate="many_to_one")
        return merged.groupby("launch_year")["total"].sum().round(2)

    @step("Joining on the index", pd.DataFrame.join)
    def join(self):
        """``join`` matches the index of both frames, left join by default."""
        regions = self.data.regions().set_index("region")
        totals = self.data.sales().groupby("region")["total"].sum().round(2).to_frame("revenue")
        return totals.join(regions)
