"""Sample datasets used by the lessons.

Tutorials are easier to follow when all examples work on the
same few datasets, so that the reader gets familiar with them.

The :class:`SampleData` class builds them. Small reference tables,
like ``people`` and ``products``, are hand written so that the
results shown in the tutorial are easy to verify by eye.
Larger ones, like ``sales``, are randomly generated from a seed,
which makes them reproducible:

>>> data = SampleData(seed=42, rows=5)
>>> data.sales().equals(SampleData(seed=42, rows=5).sales())
True
>>> data.people()[["name", "city"]].head(3)
      name    city
0    Alice  London
1      Bob   Paris
2  Charlie  London
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

log = logging.getLogger(__name__)

PRODUCTS = {
    # product: (category, launch_year, list_price)
    "Laptop": ("Electronics", 2019, 950.0),
    "Phone": ("Electronics", 2021, 650.0),
    "Headphones": ("Electronics", 2020, 120.0),
    "Desk": ("Furniture", 2018, 300.0),
    "Chair": ("Furniture", 2018, 150.0),
    "Lamp": ("Furniture", 2022, 45.0),
}

REGIONS = {"North": "Olivia", "South": "Liam", "East": "Emma", "West": "Noah"}


class SampleData:
    """Factory of the datasets used across the tutorial.

    Every accessor returns a new object, so lessons are free
    to modify what they receive without affecting each other.
    """

    def __init__(self, seed: int = 42, rows: int = 200) -> None:
        """
        :param seed: Seed of the random generator used for generated datasets.
        :param rows: Number of rows of the ``sales`` dataset.
        """
        self.seed = seed
        self.rows = rows

    def __str__(self) -> str:
        return f"SampleData(seed={self.seed}, rows={self.rows})"

    def _rng(self, offset: int = 0) -> np.random.Generator:
        # Each dataset has its own stream, so that adding
        # a dataset doesn't change the content of the others.
        return np.random.default_rng(self.seed + offset)

    def people(self) -> pd.DataFrame:
        """A small table of employees with a couple of missing values."""
        return pd.DataFrame(
            {
                "name": ["Alice", "Bob", "Charlie", "Diana", "Edward", "Fiona", "George", "Hannah"],
                "age": [34, 28, 45, np.nan, 38, 29, 52, 41],
                "city": ["London", "Paris", "London", "Berlin", "Paris", "Berlin", "London", "Paris"],
                "department": [
                    "Engineering",
                    "Marketing",
                    "Engineering",
                    "Sales",
                    "Sales",
                    "Engineering",
                    "Marketing",
                    "Sales",
                ],
                "salary": [85000.0, 62000.0, 98000.0, 71000.0, np.nan, 79000.0, 67000.0, 73000.0],
            }
        )

    def products(self) -> pd.DataFrame:
        """The catalog of products that appear in sales."""
        return pd.DataFrame(
            [
                {"product": name, "category": category, "launch_year": year, "list_price": price}
                for name, (category, year, price) in PRODUCTS.items()
            ]
        )

    def regions(self) -> pd.DataFrame:
        """Sales regions and their managers."""
        return pd.DataFrame({"region": list(REGIONS), "manager": list(REGIONS.values())})

    def sales(self) -> pd.DataFrame:
        """One order per day, starting from 2024-01-01.

        The ``total`` column is always ``quantity * unit_price``
        rounded to cents, and the unit price is within 10%
        of the product list price.
        """
        rng = self._rng(1)
        names = np.array(list(PRODUCTS))
        products = rng.choice(names, size=self.rows)
        list_prices = np.array([PRODUCTS[p][2] for p in products])
        quantity = rng.integers(1, 11, size=self.rows)
        unit_price = np.round(list_prices * rng.uniform(0.9, 1.1, size=self.rows), 2)

        sales = pd.DataFrame(
            {
                "order_id": np.arange(1, self.rows + 1),
                "date": pd.date_range("2024-01-01", periods=self.rows, freq="D"),
                "product": products,
                "category": [PRODUCTS[p][0] for p in products],
                "region": rng.choice(np.array(list(REGIONS)), size=self.rows),
                "quantity": quantity,
                "unit_price": unit_price,
            }
        )
        sales["total"] = (sales["quantity"] * sales["unit_price"]).round(2)
        return sales

    def temperatures(self) -> pd.DataFrame:
        """Hourly temperatures of two cities over a week.

        Temperatures follow a daily cycle, peaking in the afternoon,
        plus some random noise.
        """
        rng = self._rng(2)
        index = pd.date_range("2024-03-01", periods=7 * 24, freq="h", name="timestamp")
        daily_cycle = np.sin((index.hour.to_numpy() - 9) / 24 * 2 * np.pi)
        return pd.DataFrame(
            {
                "London": np.round(8 + 4 * daily_cycle + rng.normal(0, 1, len(index)), 1),
                "Madrid": np.round(14 + 6 * daily_cycle + rng.normal(0, 1, len(index)), 1),
            },
            index=index,
        )

    def reviews(self) -> pd.DataFrame:
        """Free text product reviews."""
        return pd.DataFrame(
            {
                "review_id": [101, 102, 103, 104, 105, 106],
                "product": ["Laptop", "phone", "LAMP", "Desk", "Laptop ", "Chair"],
                "text": [
                    "Great laptop, FAST delivery! Order #1042",
                    "Battery dies too fast. order #1043",
                    "Nice lamp, but the bulb was missing",
                    "Solid desk. Order #1050 arrived late",
                    "Screen is great, keyboard is great",
                    "Comfortable chair",
                ],
                "rating": [5, 2, 3, 4, 5, 4],
            }
        )

    def write_csv_samples(self, directory: str | Path) -> dict[str, Path]:
        """Write the reference datasets as CSV files.

        Useful to try the input functions of pandas
        on real files.

        :param directory: Where to write the files, created if missing.
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        paths = {}
        for name in ("people", "products", "sales"):
            path = directory / f"{name}.csv"
            getattr(self, name)().to_csv(path, index=False)
            log.info("Wrote %s sample dataset to %s", name, path)
            paths[name] = path
        return paths
