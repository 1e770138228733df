# report.py

import logging
import sys
from datetime import date
from typing import Iterable, NamedTuple, Sequence, TextIO

from wcwidth import wcswidth

import canteen_data
from canteen_data import Canteen, Meal
from dates import format_date
from errors import MealFetchError, ServiceError

_logger = logging.getLogger(__name__)

WRAP_WIDTH = 10

# Box-drawing characters of the "modern" table style
_H, _V = '─', '│'
_TOP = ('┌', '┬', '┐')
_MID = ('├', '┼', '┤')
_BOTTOM = ('└', '┴', '┘')


class DisplayRow(NamedTuple):
    name: str
    category: str
    students: str
    employees: str
    notes: str


DISPLAY_HEADERS = ('Name', 'Category', 'Students', 'Employees', 'Notes')


def _format_price(value: float | None) -> str:
    if value is None:
        return '-'
    return f"{value:.2f} €"


def to_display_row(meal: Meal) -> DisplayRow:
    return DisplayRow(
        name=meal.name,
        category=meal.category or '',
        students=_format_price(meal.prices.get('students')),
        employees=_format_price(meal.prices.get('employees')),
        notes=', '.join(meal.notes),
    )


def display_width(text: str) -> int:
    """Terminal columns `text` occupies (wide glyphs count 2, combining marks 0)."""
    width = wcswidth(text)
    # wcswidth gives -1 for control characters
    return width if width >= 0 else len(text)


def _wrap(text: str, width: int) -> list[str]:
    """Greedy word wrap by display width; a word wider than `width` gets its own line."""
    lines: list[str] = []
    current = ''
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and display_width(candidate) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def _cell_lines(text: str, wrap: bool) -> list[str]:
    lines = _wrap(text, WRAP_WIDTH) if wrap else text.splitlines()
    return lines or ['']


def _pad(text: str, width: int) -> str:
    return text + ' ' * (width - display_width(text))


def _border(widths: Sequence[int], chars) -> str:
    left, sep, right = chars
    return left + sep.join(_H * (w + 2) for w in widths) + right


def format_table(rows: Iterable[Sequence[str]], headers: Sequence[str] = DISPLAY_HEADERS) -> str:
    """Render rows as a bordered text table.

    The first and last columns are word-wrapped to WRAP_WIDTH display
    columns; the columns in between keep their full width. Works for zero
    rows. Every row must have one cell per header.
    """
    ncols = len(headers)
    wrapped = {0, ncols - 1}

    def split(row):
        if len(row) != ncols:
            raise ValueError(f"Row has {len(row)} cells, expected {ncols}: {row!r}")
        return [_cell_lines(str(cell), i in wrapped) for i, cell in enumerate(row)]

    body = [split(headers)] + [split(row) for row in rows]

    widths = [0] * ncols
    for cells in body:
        for i, lines in enumerate(cells):
            widths[i] = max(widths[i], max(display_width(line) for line in lines))

    out = [_border(widths, _TOP)]
    for idx, cells in enumerate(body):
        if idx:
            out.append(_border(widths, _MID))
        height = max(len(lines) for lines in cells)
        for n in range(height):
            parts = []
            for i, lines in enumerate(cells):
                text = lines[n] if n < len(lines) else ''
                parts.append(f" {_pad(text, widths[i])} ")
            out.append(_V + _V.join(parts) + _V)
    out.append(_border(widths, _BOTTOM))
    return '\n'.join(out)


def render_meals(
    canteens: Sequence[Canteen],
    day: date,
    directory=canteen_data,
    out: TextIO | None = None,
) -> None:
    """Print a meal table per canteen, in order.

    Stops at the first canteen whose meals cannot be fetched; canteens
    printed before that stay printed.
    """
    out = out if out is not None else sys.stdout
    date_str = format_date(day)
    for canteen in canteens:
        _logger.debug("Fetching meals for %s (%s) on %s", canteen.name, canteen.id, date_str)
        try:
            meals = directory.get_meals(canteen, date_str)
        except ServiceError as e:
            raise MealFetchError(canteen.name, str(e)) from e
        rows = [to_display_row(m) for m in meals]
        print(canteen.name, file=out)
        print(format_table(rows), file=out)
