"""Shell commands exposing FrameTour functionalities.

This module contains the shell commands that can be used to follow the tour.

frametour
=========

``frametour`` lists, runs and renders the lessons::

    frametour list
    frametour run grouping merging
    frametour run basics --step query
    frametour --output-dir build/tour render -o build/tour/TUTORIAL.md

The sample data can be made bigger or different changing its size and seed::

    frametour --rows 5000 --seed 7 run timeseries

The same options can be provided through the ``FRAMETOUR_SEED``,
``FRAMETOUR_ROWS``, ``FRAMETOUR_MAX_ROWS``, ``FRAMETOUR_OUTPUT_DIR``
and ``FRAMETOUR_PLOTS`` environment variables.
"""
