"""Time series: dates, resampling and windows.

pandas has first class support for dates and times.
When the index of a DataFrame is a ``DatetimeIndex``
rows can be selected with partial date strings,
and the data can be *resampled* to a different frequency:
hourly readings can become daily averages (downsampling)
or daily values can be spread to hours (upsampling).

Frequencies are expressed with aliases like
``"h"`` (hour), ``"D"`` (calendar day), ``"W"`` (week)
and ``"MS"`` (month start).
"""

import pandas as pd

from .base import Lesson, step


class TimeSeriesLesson(Lesson):
    """Generate, parse, resample and window time indexed data."""

    name = "timeseries"
    title = "Time Series"
    summary = "Working with dates, resampling to other frequencies and rolling windows."

    @step("Generating dates", pd.date_range)
    def date_range(self):
        """``date_range`` creates a sequence of timestamps at a fixed frequency."""
        return pd.Series(pd.date_range("2024-01-01", periods=4, freq="W"), name="week_end")

    @step("Parsing dates", pd.to_datetime)
    def parse_dates(self):
        """``to_datetime`` parses strings, ``format`` makes the parsing strict and fast."""
        raw = pd.Series(["01/03/2024", "15/03/2024", "31/03/2024"])
        return pd.to_datetime(raw, format="%d/%m/%Y")

    @step("Date components", pd.Series.dt)
    def date_components(self):
        """The ``dt`` accessor exposes the parts of each date."""
        sales = self.data.sales().head(5)
        return pd.DataFrame(
            {
                "date": sales["date"],
                "year": sales["date"].dt.year,
                "month": sales["date"].dt.month,
                "weekday": sales["date"].dt.day_name(),
            }
        )

    @step("Selecting a time range")
    def time_slicing(self):
        """With a DatetimeIndex, partial date strings select whole periods."""
        temperatures = self.data.temperatures()
        return temperatures.loc["2024-03-02 06:00":"2024-03-02 09:00"]

    @step("Downsampling", pd.DataFrame.resample)
    def resample(self):
        """Hourly readings become daily statistics."""
        temperatures = self.data.temperatures()
        return temperatures.resample("D").agg(["min", "mean", "max"]).round(1)

    @step("Monthly totals", pd.DataFrame.resample)
    def monthly(self):
        """``"MS"`` labels each month with its first day."""
        sales = self.data.sales().set_index("date")
        return sales["total"].resample("MS").sum().round(2)

    @step("Rolling windows", pd.DataFrame.rolling)
    def rolling(self):
        """A 24 hours rolling mean smooths the daily cycle away.

        The first 23 values are missing, as the window is not full yet.
        """
        temperatures = self.data.temperatures()
        smoothed = temperatures.rolling(window=24).mean().round(2)
        return smoothed.iloc[22:26]

    @step("Shifting and changes", pd.Series.shift, pd.Series.pct_change)
    def shift(self):
        """``shift`` moves values forward in time, ``pct_change`` compares each value with the previous one."""
        sales = self.data.sales().set_index("date")
        monthly = sales["total"].resample("MS").sum()
        return pd.DataFrame(
            {
                "revenue": monthly.round(2),
                "previous": monthly.shift(1).round(2),
                "change_pct": (monthly.pct_change() * 100).round(1),
            }
        )
