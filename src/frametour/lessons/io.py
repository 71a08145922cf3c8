"""Reading and writing data.

pandas can read and write many formats, each through a pair of
``read_<format>`` functions and ``DataFrame.to_<format>`` methods:

* CSV: :func:`pandas.read_csv` and ``DataFrame.to_csv``
* Parquet: :func:`pandas.read_parquet` and ``DataFrame.to_parquet``
* JSON: :func:`pandas.read_json` and ``DataFrame.to_json``
* Excel: :func:`pandas.read_excel` and ``DataFrame.to_excel``
* SQL: :func:`pandas.read_sql` and ``DataFrame.to_sql``

Text formats like CSV and JSON don't store the data types,
so they have to be inferred or declared again when reading.
Parquet instead is a binary columnar format that preserves
them, pandas relies on pyarrow to read and write it.

Each step of this lesson writes the data into the configured
output directory and reads it back, so that what went through
the round trip can be compared with the original.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

import pandas as pd
import pyarrow as pa

from .base import Lesson, step

log = logging.getLogger(__name__)


class IOLesson(Lesson):
    """Round trips through files, databases and Arrow tables."""

    name = "io"
    title = "Input and Output"
    summary = "Reading and writing CSV, Parquet, JSON, Excel and SQL databases."

    def output_path(self, filename: str) -> Path:
        """Where to save a file produced by the lesson."""
        path = self.config.ensure_output_dir() / filename
        log.info("Writing %s", path)
        return path

    @step("CSV files", pd.DataFrame.to_csv, pd.read_csv)
    def csv(self):
        """``parse_dates`` restores date columns, otherwise they would be read back as strings."""
        sales = self.data.sales()
        path = self.output_path("sales.csv")
        sales.to_csv(path, index=False)
        return pd.read_csv(path, parse_dates=["date"]).head()

    @step("Reading selected columns in chunks", pd.read_csv)
    def csv_chunks(self):
        """``chunksize`` reads a large file a piece at a time, ``usecols`` skips unneeded columns."""
        sales = self.data.sales()
        path = self.output_path("sales_chunks.csv")
        sales.to_csv(path, index=False)

        partials = []
        with pd.read_csv(path, usecols=["region", "total"], chunksize=50) as reader:
            for chunk in reader:
                partials.append(chunk.groupby("region")["total"].sum())
        return pd.concat(partials).groupby(level=0).sum().round(2)

    @step("Parquet files", pd.DataFrame.to_parquet, pd.read_parquet)
    def parquet(self):
        """Parquet keeps the dtypes, including dates and categories."""
        sales = self.data.sales().astype({"region": "category"})
        path = self.output_path("sales.parquet")
        sales.to_parquet(path, engine="pyarrow", index=False)
        restored = pd.read_parquet(path, engine="pyarrow")
        return restored.dtypes.astype(str)

    @step("JSON records", pd.DataFrame.to_json, pd.read_json)
    def json(self):
        """``orient="records"`` writes one object per row, ``lines=True`` one row per line."""
        people = self.data.people()
        path = self.output_path("people.jsonl")
        people.to_json(path, orient="records", lines=True)
        return pd.read_json(path, orient="records", lines=True).head(3)

    @step("Excel workbooks", pd.DataFrame.to_excel, pd.read_excel)
    def excel(self):
        """Each DataFrame can go to its own sheet, ``sheet_name`` picks what to read back."""
        path = self.output_path("tour.xlsx")
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            self.data.people().to_excel(writer, sheet_name="people", index=False)
            self.data.products().to_excel(writer, sheet_name="products", index=False)
        return pd.read_excel(path, sheet_name="products", engine="openpyxl")

    @step("SQL databases", pd.DataFrame.to_sql, pd.read_sql_query)
    def sql(self):
        """Any DB-API connection works for SQLite, other databases need SQLAlchemy.

        Queries run in the database and only their result is loaded.
        """
        sales = self.data.sales()
        with closing(sqlite3.connect(":memory:")) as connection:
            sales.to_sql("sales", connection, index=False)
            result = pd.read_sql_query(
                "SELECT region, COUNT(*) AS orders, ROUND(SUM(total), 2) AS revenue "
                "FROM sales WHERE quantity >= ? GROUP BY region ORDER BY region",
                connection,
                params=(5,),
            )
        return result

    @step("Arrow tables", pa.Table.from_pandas, pa.Table.to_pandas)
    def arrow(self):
        """Converting to a ``pyarrow.Table`` gives access to the Arrow ecosystem."""
        products = self.data.products()
        table = pa.Table.from_pandas(products, preserve_index=False)
        return pd.Series(
            {
                "schema": [f"{field.name}: {field.type}" for field in table.schema],
                "rows": table.num_rows,
                "round_trip_equal": table.to_pandas().equals(products),
            }
        )
