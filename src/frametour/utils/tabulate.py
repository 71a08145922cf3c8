"""Format tabular data into a text table for print.

the `tabulate` function takes a :class:`pandas.DataFrame` or a :class:`pandas.Series`
and formats it into a text table. It will truncate long strings, format floats to
2 decimal places, and limit the number of rows to display.
The function is used to display the results of lesson steps both in the
terminal and in the generated Markdown tutorial.

Example:

    >>> import pandas as pd
    >>> data = {
    ...     "Product": ["Videogame", "Laptop", "Laptop"],
    ...     "Quantity": [8, 8, 7],
    ...     "Price": [66.5, 38.72, 77.46],
    ... }
    >>> print(tabulate(pd.DataFrame(data), index=False))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46

The index is displayed as the leading columns, when it has no name
its header is left empty:

    >>> print(tabulate(pd.Series([1.5, None], index=["a", "b"], name="value")))
      | value
    - | -----
    a | 1.50
    b | NaN
"""

from typing import Any

import pandas as pd


def tabulate(
    data: pd.DataFrame | pd.Series,
    max_rows: int = 20,
    index: bool = True,
    markdown: bool = False,
) -> str:
    """Format a DataFrame or Series into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22

    :param data: The data to format.
    :param max_rows: How many rows to display at most.
    :param index: If the index should be displayed as leading columns.
    :param markdown: Produce a Markdown pipe table instead of plain text.
    """
    if isinstance(data, pd.Series):
        data = data.to_frame(name=data.name if data.name is not None else "value")

    cols = [format_header(c) for c in data.columns]
    index_cols: list[str] = []
    if index:
        index_cols = [format_header(n) for n in data.index.names]

    head = data.head(max_rows)
    rows = []
    for label, values in zip(head.index, head.itertuples(index=False, name=None)):
        row = []
        if index:
            labels = label if isinstance(label, tuple) else (label,)
            row.extend(format_value(v) for v in labels)
        row.extend(format_value(v) for v in values)
        rows.append(row)

    header_cols = index_cols + cols
    colsizes = compute_max_colsize(header_cols, rows)
    if markdown:
        # Markdown requires at least 3 dashes in the separator.
        colsizes = [max(size, 3) for size in colsizes]

    header = [maketablerow(header_cols, colsizes=colsizes, markdown=markdown)]
    separator = [
        maketablerow(
            ["-"] * len(header_cols), colsizes=colsizes, fillvalue="-", markdown=markdown
        )
    ]
    textrows = [maketablerow(row, colsizes=colsizes, markdown=markdown) for row in rows]

    table = "\n".join(header + separator + textrows)
    if len(data) > max_rows:
        more = f"... and {len(data) - max_rows} more rows"
        table += f"\n\n*{more}*" if markdown else f"\n{more}"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(
    cols: list[str], colsizes: list[int], fillvalue: str = " ", markdown: bool = False
) -> str:
    """Make a table row with the given column sizes."""
    if markdown:
        # Pipes inside values would be confused with column separators.
        cols = [col.replace("|", "\\|") for col in cols]
    row = " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )
    if markdown:
        row = f"| {row} |"
    else:
        row = row.rstrip()
    return row


def format_header(name: Any) -> str:
    """Format a column or index name, unnamed levels are left empty."""
    if name is None:
        return ""
    if isinstance(name, tuple):
        return ".".join(str(n) for n in name)
    return str(name)


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings. Missing values are displayed as ``NaN``.
    """
    if v is None or v is pd.NA or v is pd.NaT or (isinstance(v, float) and v != v):
        return "NaN"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, pd.Timestamp) and v == v.normalize():
        return v.strftime("%Y-%m-%d")

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
