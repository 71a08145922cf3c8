"""Visualization.

DataFrames and Series have a ``plot`` method, a thin layer
over matplotlib: ``df.plot(kind=...)`` draws the columns against
the index, and returns the matplotlib ``Axes`` for further
customisation.

Plots are saved as PNG images in the output directory,
using the non interactive ``Agg`` backend so that the
lesson also runs on machines without a display.
"""

import logging
from pathlib import Path
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from .base import Lesson, step  # noqa: E402

log = logging.getLogger(__name__)


class VisualizationLesson(Lesson):
    """Line, bar, histogram and scatter plots saved to files."""

    name = "visualization"
    title = "Visualization"
    summary = "Plotting Series and DataFrames with the matplotlib based ``plot`` API."

    def enabled(self) -> bool:
        """Plotting steps only run when plots are enabled in the configuration."""
        return self.config.plots

    def save(self, ax: plt.Axes, filename: str) -> Path:
        """Save the figure containing the axes and release its memory."""
        path = self.config.ensure_output_dir() / filename
        fig = ax.get_figure()
        fig.tight_layout()
        fig.savefig(path, dpi=100)
        plt.close(fig)
        log.info("Saved plot %s", path)
        return path

    @step("Line plot", pd.DataFrame.plot)
    def line(self):
        """A line for each column, the DatetimeIndex is used as the x axis."""
        temperatures = self.data.temperatures()
        daily = temperatures.resample("D").mean()
        ax = daily.plot(title="Daily mean temperature", ylabel="°C")
        return self.save(ax, "line.png")

    @step("Bar chart", pd.Series.plot)
    def bar(self):
        """Bar charts are the natural companion of grouped totals."""
        sales = self.data.sales()
        revenue = sales.groupby("region")["total"].sum().sort_values()
        ax = revenue.plot(kind="bar", title="Revenue by region", rot=0)
        return self.save(ax, "bar.png")

    @step("Histogram", pd.Series.plot)
    def histogram(self):
        """A histogram shows how the values are distributed."""
        sales = self.data.sales()
        ax = sales["quantity"].plot(kind="hist", bins=10, title="Units per order")
        return self.save(ax, "histogram.png")

    @step("Scatter plot", pd.DataFrame.plot)
    def scatter(self):
        """Scatter plots relate two columns, here quantity and total of each order."""
        sales = self.data.sales()
        ax = sales.plot(kind="scatter", x="quantity", y="total", alpha=0.5, title="Order size")
        return self.save(ax, "scatter.png")
