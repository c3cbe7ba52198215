"""HTML table rendering for lookup results.

Every value is escaped exactly once on the way out. Rows are read, never
modified.
"""

import html
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from imdchecker.models import RESULT_HEADERS, ResultRow

NO_RESULTS_MESSAGE = "No results found."

Row = Union[ResultRow, Mapping[str, Any]]


def display_value(value: Any) -> str:
    """
    String form of a cell value: None/False -> '', True -> '1'.

    Whole floats drop the fraction (5.0 -> '5'); other floats keep str().
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape(text: str) -> str:
    """Escape & < > " ' as HTML entities."""
    return html.escape(text, quote=True).replace("&#x27;", "&#039;")


def render_row(row: Row, fields: Sequence[str]) -> str:
    """
    Render *row* as '<tr><td>…</td></tr>' with one cell per field.

    Cells follow the order of *fields*, not the row's own key order. A field
    missing from the row renders as an empty cell.
    """
    values = row.to_dict() if isinstance(row, ResultRow) else row
    cells = "".join(
        f"<td>{escape(display_value(values.get(name)))}</td>"
        for name in fields
    )
    return f"<tr>{cells}</tr>"


def render_no_results(fields: Sequence[str]) -> str:
    return f'<tr><td colspan="{len(fields)}">{NO_RESULTS_MESSAGE}</td></tr>'


def render_table(
    rows: Iterable[Row],
    fields: Sequence[str],
    headers: Optional[Sequence[str]] = None,
) -> str:
    """Full results table: a header row, then the rows or a no-results row."""
    if headers is None:
        headers = RESULT_HEADERS
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = [render_row(row, fields) for row in rows]
    if not body:
        body = [render_no_results(fields)]
    return f'<table id="data"><tr>{head}</tr>{"".join(body)}</table>'
