"""Text layout of month and year calendars."""

from __future__ import annotations

from typing import Optional

from hcal.historic import (
    HistoricDate,
    calendar_for_date,
    day_of,
    day_of_week,
    leap_year,
    nicene_day,
)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_HEADER = "Su Mo Tu We Th Fr Sa"
_COLUMN = 20
_WEEK_ROWS = 6
_MAX_DAYS = 33


def center(text: str, width: int = _COLUMN, fill: str = " ") -> str:
    """Center ``text`` in ``width`` columns: spaces on the left, ``fill`` on the right.

    Text longer than ``width`` is cut to ``width`` characters.
    """
    if len(text) > width:
        return text[:width]
    right = (width - len(text)) // 2
    left = width - len(text) - right
    return " " * left + text + fill * right


def _week_rows(
    locale: int, calendar: int, year: int, month: int, length: int
) -> list[str]:
    column = day_of_week(calendar, year, month, 1)
    row = "  " + "   " * (column - 1) if column > 0 else ""
    rows: list[str] = []
    nday = nicene_day(calendar, year, month, 1)
    firsts = 0
    for _ in range(_MAX_DAYS):
        current = day_of(locale, nday) or length
        if current == 1:
            # a second "1" means the next month has begun
            firsts += 1
        if firsts < 2 and current <= length:
            row += str(current).rjust(2 if column == 0 else 3)
        nday += 1
        if column >= 6:
            rows.append(row)
            row = ""
            column = 0
        else:
            column += 1
        if current >= length:
            break
    if len(rows) < _WEEK_ROWS:
        rows.append(row)
        rows.extend([""] * (_WEEK_ROWS - len(rows)))
    return rows


def _month_rows(date: HistoricDate, month: int, style: int) -> list[str]:
    if not 1 <= month <= 12:
        raise ValueError(f"month is invalid: {month}")
    year = date.year()
    name = _MONTH_NAMES[month - 1]
    title_text = f"{name} {year}" if style == 0 else name
    title = center(title_text, _COLUMN, "\n" if style == 1 else " ")
    calendar = calendar_for_date(date.locale, year, month, 1)
    length = _MONTH_LENGTHS[month - 1]
    if month == 2 and leap_year(calendar, year):
        length = 29
    return [title, _HEADER, *_week_rows(date.locale, calendar, year, month, length)]


def format_month(date: HistoricDate, month: Optional[int] = None, style: int = 0) -> str:
    """Render one month of the year of ``date`` as eight lines of text.

    ``month`` defaults to the month of ``date``.  Style 0 puts the year in the
    title; any other style shows the month name only, and style 1 pads the
    title's right side with newlines so that it fills exactly one 21-byte line.
    """
    if month is None:
        month = date.month()
    return "".join(row + "\n" for row in _month_rows(date, month, style))


def format_year(date: HistoricDate, single: bool = False) -> str:
    """Render the whole year of ``date``, in one column or in three."""
    year = str(date.year())
    if single:
        parts = [center(year, _COLUMN, " ") + "\n"]
        for month in range(1, 13):
            rows = _month_rows(date, month, 10)
            parts.append("\n".join(row.ljust(_COLUMN) for row in rows) + "\n")
        return "".join(parts)

    months = []
    for month in range(1, 13):
        rows = _month_rows(date, month, 1)
        rows[0] = rows[0].split("\n", 1)[0]
        months.append(rows)

    width = 3 * _COLUMN + 6
    parts = [center(year, width, " ") + "\n", center("", width, " ") + "\n"]
    for band in range(4):
        trio = months[band * 3 : band * 3 + 3]
        for line in zip(*trio):
            parts.append("   ".join(row.ljust(_COLUMN) for row in line) + "\n")
    return "".join(parts)