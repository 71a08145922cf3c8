"""Grouping and aggregation.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
for each group of rows sharing the same keys.

pandas follows the *split-apply-combine* pattern:
``groupby`` splits the rows in groups, a function
is applied to each group, and the results are combined
back in a new DataFrame.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

Grouping by city and summing the employees gives::

    city, n_employees
    Los Angeles, 20
    New York, 45

Note that the group keys become the index of the result,
and that they are sorted by default.
"""

import pandas as pd
from pandas.api.typing import DataFrameGroupBy, SeriesGroupBy

from .base import Lesson, step


class GroupingLesson(Lesson):
    """Split-apply-combine with groupby, pivot tables and binning."""

    name = "grouping"
    title = "Grouping and Aggregation"
    summary = (
        "Grouping rows by one or more keys and computing aggregations, "
        "transformations and filters on each group."
    )

    @step("Aggregating by a key", pd.DataFrame.groupby)
    def group_sum(self):
        """One row per group, the key becomes the index."""
        sales = self.data.sales()
        return sales.groupby("region")["total"].sum().round(2)

    @step("Grouping by multiple keys", pd.DataFrame.groupby)
    def group_multi(self):
        """Multiple keys produce a MultiIndex, ``as_index=False`` keeps them as columns."""
        sales = self.data.sales()
        return sales.groupby(["region", "category"], as_index=False)["quantity"].sum()

    @step("Named aggregations", DataFrameGroupBy.agg)
    def named_agg(self):
        """Each output column is declared as ``name=(column, function)``."""
        sales = self.data.sales()
        summary = sales.groupby("product").agg(
            orders=("order_id", "count"),
            units=("quantity", "sum"),
            revenue=("total", "sum"),
            avg_price=("unit_price", "mean"),
        )
        return summary.round(2).sort_values("revenue", ascending=False)

    @step("Group sizes", DataFrameGroupBy.size)
    def group_size(self):
        """``size`` counts rows per group, including those with missing values."""
        df = self.data.people()
        return df.groupby("city").size()

    @step("Transforming within groups", SeriesGroupBy.transform)
    def transform(self):
        """``transform`` returns one value per row, aligned with the original data.

        Here it's used to compute the share of each order on the revenue
        of its region.
        """
        sales = self.data.sales()
        region_total = sales.groupby("region")["total"].transform("sum")
        sales["region_share"] = (sales["total"] / region_total).round(4)
        return sales[["order_id", "region", "total", "region_share"]].head()

    @step("Filtering groups", DataFrameGroupBy.filter)
    def filter_groups(self):
        """``filter`` keeps all the rows of the groups for which the function returns ``True``."""
        df = self.data.people()
        return df.groupby("department").filter(lambda group: len(group) > 2)

    @step("Pivot tables", pd.pivot_table)
    def pivot_table(self):
        """A pivot table groups by two keys and lays out one of them as columns.

        ``margins=True`` adds the totals of each row and column.
        """
        sales = self.data.sales()
        table = pd.pivot_table(
            sales,
            values="total",
            index="region",
            columns="category",
            aggfunc="sum",
            margins=True,
            margins_name="Total",
        )
        return table.round(2)

    @step("Binning values", pd.cut)
    def binning(self):
        """``cut`` splits a numeric column in intervals, which can then be used as group keys."""
        df = self.data.people()
        df["age_group"] = pd.cut(df["age"], bins=[20, 30, 40, 60], labels=["20s", "30s", "40+"])
        return df.groupby("age_group", observed=False)["salary"].mean().round(2)
