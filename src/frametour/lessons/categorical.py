"""Categorical data.

Columns with a limited set of distinct values, like a city
or a product category, can be stored as ``category`` dtype.

A categorical column stores each distinct value once (the
*categories*) and for each row only a small integer *code*
pointing to its category. This saves memory and makes
grouping faster.

Categories can also be *ordered*, which allows to compare
and sort values according to a custom order instead of
the alphabetical one, for example ``low < medium < high``.
"""

import pandas as pd

from .base import Lesson, step


class CategoricalLesson(Lesson):
    """Converting to categories, ordering them and counting them."""

    name = "categorical"
    title = "Categorical Data"
    summary = "Storing repeated labels efficiently and giving them a meaningful order."

    @step("Converting to category", pd.Series.astype)
    def convert(self):
        """The distinct values become the categories, sorted."""
        df = self.data.people()
        cities = df["city"].astype("category")
        return pd.Series({"dtype": str(cities.dtype), "categories": list(cities.cat.categories)})

    @step("Categories and codes", pd.Series.cat)
    def codes(self):
        """Each value is stored as the position of its category."""
        df = self.data.people()
        cities = df["city"].astype("category")
        return pd.DataFrame({"city": cities, "code": cities.cat.codes})

    @step("Ordered categories", pd.CategoricalDtype)
    def ordered(self):
        """An ordered ``CategoricalDtype`` allows comparisons and sorts by the given order."""
        sizes = pd.Series(["medium", "small", "large", "small", "medium"])
        size_type = pd.CategoricalDtype(["small", "medium", "large"], ordered=True)
        sizes = sizes.astype(size_type)
        return pd.DataFrame(
            {
                "sorted": sizes.sort_values().reset_index(drop=True),
                "above_small": (sizes > "small").reset_index(drop=True),
            }
        )

    @step("Memory savings", pd.Series.memory_usage)
    def memory(self):
        """With few distinct values repeated many times, categories use a fraction of the memory."""
        sales = self.data.sales()
        as_object = sales["region"].astype(object)
        as_category = sales["region"].astype("category")
        return pd.Series(
            {
                "object_bytes": as_object.memory_usage(deep=True),
                "category_bytes": as_category.memory_usage(deep=True),
            }
        )

    @step("Counting unused categories", pd.Series.value_counts)
    def unused(self):
        """Categories without rows are still reported, with a count of zero."""
        df = self.data.people()
        cities = df["city"].astype(pd.CategoricalDtype(["Berlin", "London", "Paris", "Rome"]))
        return cities.value_counts(sort=False)

    @step("Renaming categories", pd.Series.cat)
    def rename(self):
        """Renaming categories changes all the rows using them at once."""
        df = self.data.people()
        departments = df["department"].astype("category")
        departments = departments.cat.rename_categories({"Engineering": "Eng", "Marketing": "Mkt"})
        return departments.value_counts(sort=False)
