"""Reshaping tables and hierarchical indexes.

The same data can be laid out in a *long* format, one row per
observation::

    date,       city,   temperature
    2024-03-01, London, 8.1
    2024-03-01, Madrid, 14.3

or in a *wide* format, one column per variable::

    date,       London, Madrid
    2024-03-01, 8.1,    14.3

``pivot`` goes from long to wide, ``melt`` from wide to long.
``stack`` and ``unstack`` do the same moving levels between the
index and the columns, which requires a ``MultiIndex``:
an index made of multiple levels.
"""

import pandas as pd

from .base import Lesson, step


class ReshapingLesson(Lesson):
    """Pivot, melt, stack and work with MultiIndex."""

    name = "reshaping"
    title = "Reshaping and MultiIndex"
    summary = "Moving data between long and wide layouts and using hierarchical indexes."

    def _daily(self):
        temperatures = self.data.temperatures()
        return temperatures.resample("D").mean().round(1)

    @step("Wide to long", pd.melt)
    def melt(self):
        """``melt`` turns columns into rows of ``variable``/``value`` pairs."""
        daily = self._daily().reset_index()
        long = daily.melt(id_vars="timestamp", var_name="city", value_name="temperature")
        return long.head(4)

    @step("Long to wide", pd.DataFrame.pivot)
    def pivot(self):
        """``pivot`` requires each index/column pair to be unique."""
        daily = self._daily().reset_index()
        long = daily.melt(id_vars="timestamp", var_name="city", value_name="temperature")
        return long.pivot(index="timestamp", columns="city", values="temperature").head(3)

    @step("Creating a MultiIndex", pd.DataFrame.set_index)
    def multiindex(self):
        """Setting multiple columns as the index creates a MultiIndex."""
        sales = self.data.sales()
        totals = sales.groupby(["region", "product"], as_index=False)["total"].sum()
        indexed = totals.set_index(["region", "product"]).round(2)
        return indexed.head(6)

    @step("Unstacking a level", pd.Series.unstack)
    def unstack(self):
        """``unstack`` moves the innermost index level to the columns."""
        sales = self.data.sales()
        totals = sales.groupby(["region", "category"])["total"].sum().round(2)
        return totals.unstack()

    @step("Stacking columns", pd.DataFrame.stack)
    def stack(self):
        """``stack`` is the inverse of ``unstack``, columns become the innermost level."""
        wide = pd.DataFrame(
            {"2023": [10, 20], "2024": [15, 25]},
            index=pd.Index(["North", "South"], name="region"),
        )
        return wide.stack().rename("sales")

    @step("Cross sections", pd.DataFrame.xs)
    def cross_section(self):
        """``xs`` selects by a value of any index level."""
        sales = self.data.sales()
        totals = sales.set_index(["region", "product"]).sort_index()
        return totals.xs("Laptop", level="product")[["order_id", "total"]].head()

    @step("Swapping levels", pd.DataFrame.swaplevel)
    def swap_levels(self):
        """After swapping, sort the index to keep selections efficient."""
        sales = self.data.sales()
        totals = sales.groupby(["region", "category"])[["total"]].sum().round(2)
        return totals.swaplevel().sort_index()

    @step("Back to columns", pd.DataFrame.reset_index)
    def reset_index(self):
        """``reset_index`` turns the index levels back into regular columns."""
        sales = self.data.sales()
        totals = sales.groupby(["region", "category"])[["total"]].sum().round(2)
        return totals.reset_index().head()

    @step("Cross tabulation", pd.crosstab)
    def crosstab(self):
        """``crosstab`` counts the occurrences of each pair of values."""
        people = self.data.people()
        return pd.crosstab(people["department"], people["city"])
