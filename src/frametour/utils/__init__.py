"""Generic utilities and helpers.

This is a collection of generic utilities and helpers
that can be helpful in the other parts of the codebase
and are not specifically bound or related to any lesson.
"""

from . import inspect, tabulate

__all__ = ("inspect", "tabulate")
