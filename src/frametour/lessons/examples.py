"""A complete example: analysing sales.

This lesson puts together what the previous ones showed,
following the typical flow of an analysis:

1. Load the raw data.
2. Clean it: fix types and drop invalid rows.
3. Enrich it by merging reference tables.
4. Aggregate it to answer the questions at hand.
5. Summarise the findings.

Each step builds on the result of the previous one,
so they are expressed as small methods chained together
by the final report.
"""

import pandas as pd

from .base import Lesson, step


class ExamplesLesson(Lesson):
    """An end to end analysis of the sales dataset."""

    name = "examples"
    title = "Putting It All Together"
    summary = "An end to end analysis of the sales data, from raw records to a report."

    def load(self) -> pd.DataFrame:
        return self.data.sales()

    def clean(self, sales: pd.DataFrame) -> pd.DataFrame:
        sales = sales.dropna(subset=["quantity", "unit_price"])
        sales = sales[sales["quantity"] > 0]
        return sales.astype({"region": "category", "product": "category"})

    def enrich(self, sales: pd.DataFrame) -> pd.DataFrame:
        products = self.data.products()[["product", "launch_year", "list_price"]]
        regions = self.data.regions()
        sales = sales.astype({"product": str, "region": str})
        enriched = sales.merge(products, on="product", how="left", validate="many_to_one")
        enriched = enriched.merge(regions, on="region", how="left", validate="many_to_one")
        enriched["discount_pct"] = (
            (1 - enriched["unit_price"] / enriched["list_price"]) * 100
        ).round(1)
        enriched["month"] = enriched["date"].dt.to_period("M").astype(str)
        return enriched

    @step("Loading and cleaning", pd.DataFrame.dropna, pd.DataFrame.astype)
    def load_and_clean(self):
        """Invalid rows are dropped and repeated labels become categories."""
        sales = self.clean(self.load())
        return sales.dtypes.astype(str)

    @step("Enriching with reference data", pd.DataFrame.merge)
    def enriched(self):
        """Product details and region managers are merged into each order."""
        sales = self.enrich(self.clean(self.load()))
        return sales[["order_id", "product", "region", "manager", "discount_pct"]].head()

    @step("Monthly revenue by region", pd.pivot_table)
    def monthly_revenue(self):
        """One row per month, one column per region."""
        sales = self.enrich(self.clean(self.load()))
        return sales.pivot_table(
            index="month", columns="region", values="total", aggfunc="sum", fill_value=0
        ).round(2)

    @step("Top products", pd.DataFrame.nlargest)
    def top_products(self):
        """``nlargest`` is a faster alternative to sorting and taking the head."""
        sales = self.enrich(self.clean(self.load()))
        revenue = sales.groupby("product", as_index=False).agg(
            revenue=("total", "sum"), units=("quantity", "sum")
        )
        revenue["rank"] = revenue["revenue"].rank(ascending=False).astype(int)
        return revenue.nlargest(3, "revenue").round(2)

    @step("Summary report")
    def report(self):
        """The key figures of the analysis, as a dictionary of results."""
        sales = self.enrich(self.clean(self.load()))
        by_region = sales.groupby("region")["total"].sum()
        return {
            "orders": len(sales),
            "revenue": round(sales["total"].sum(), 2),
            "best_region": by_region.idxmax(),
            "average_discount_pct": round(sales["discount_pct"].mean(), 2),
            "revenue_by_manager": sales.groupby("manager")["total"].sum().round(2),
        }
