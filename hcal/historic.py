"""Day arithmetic for the Julian and Gregorian calendars and regional reforms.

Dates are counted in "Nicene days": day 0 is 1 March 200, the first day on
which the Julian and the proleptic Gregorian calendars agree.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import IntEnum


class CalendarSystem(IntEnum):
    """The calendars a date can be expressed in."""

    UNKNOWN = -999999
    GREGORIAN = -999998
    JULIAN = 999998
    REFORMATION = 0


class Locale(IntEnum):
    """Regions, valued by the first Nicene day they used the Gregorian calendar."""

    UNKNOWN = -999999
    GREGORIAN = -999998
    JULIAN = 999998
    ROME = 504993  # 5-14 October 1582 dropped
    FRANCE = 505059  # 10-19 December 1582 dropped
    BAVARIA = 505359  # 6-15 October 1583 dropped
    AUSTRIA = 505452  # 6-16 January 1584 dropped
    LUCERNE = 505457  # 12-21 January 1584 dropped
    HUNGARY = 506836  # 22-31 October 1587 dropped
    NORWAY = 547864  # 18-28 February 1700 dropped
    ZURICH = 548181  # 1-11 February 1701 dropped
    ENGLAND = 567054  # 3-13 September 1752 dropped
    RUSSIA = 627471  # 1-13 February 1918 dropped
    ROMANIA = 627895  # 1-13 April 1919 dropped
    GREECE = 629700  # 10-22 March 1924 dropped
    TURKEY = 630714  # 19-31 December 1926 dropped


# Days elapsed before the first of each month (index 1 = January).
_MONTH_START = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_LEAP_MONTH_START = (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)
_DECEMBER_LENGTH = 31

_CALENDAR_NAMES = {
    CalendarSystem.JULIAN: "Julian",
    CalendarSystem.GREGORIAN: "Gregorian",
    CalendarSystem.REFORMATION: "Reform Year",
}

_LOCALE_NAMES = {
    Locale.ROME: "Rome",
    Locale.FRANCE: "France",
    Locale.ENGLAND: "England",
}


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _validate(month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month is invalid: {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"day is invalid: {day}")


def leap_year(calendar: int, year: int) -> bool:
    """Return whether ``year`` is a leap year in ``calendar``."""
    if calendar == CalendarSystem.JULIAN:
        return year % 4 == 0
    if calendar == CalendarSystem.GREGORIAN:
        return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)
    raise ValueError(f"unknown calendar type: {calendar}")


def _month_table(calendar: int, year: int) -> tuple[int, ...]:
    return _LEAP_MONTH_START if leap_year(calendar, year) else _MONTH_START


def days_in_year(calendar: int, year: int) -> int:
    """Return the number of days in ``year`` of ``calendar``."""
    # Days before December plus the length of December.
    return _month_table(calendar, year)[12] + _DECEMBER_LENGTH


def day_of_year(calendar: int, year: int, month: int, day: int) -> int:
    """Return the zero-based day number within the year (1 January is 0)."""
    _validate(month, day)
    return _month_table(calendar, year)[month] + day - 1


def nicene_day(calendar: int, year: int, month: int, day: int) -> int:
    """Return the number of days since 1 March 200 for a date in ``calendar``."""
    _validate(month, day)
    elapsed = year - 1
    if calendar == CalendarSystem.JULIAN:
        return (
            elapsed * 365
            + _trunc_div(elapsed, 4)
            + day_of_year(calendar, year, month, day)
            - 72744
        )
    if calendar == CalendarSystem.GREGORIAN:
        return (
            elapsed * 365
            + _trunc_div(elapsed, 4)
            - _trunc_div(elapsed, 100)
            + _trunc_div(elapsed, 400)
            + day_of_year(calendar, year, month, day)
            - 72742
        )
    raise ValueError(f"unknown calendar style: {calendar}")


def day_of_week(calendar: int, year: int, month: int, day: int) -> int:
    """Return the weekday of a date: 0 = Sunday, 1 = Monday, ... 6 = Saturday."""
    return (nicene_day(calendar, year, month, day) - 1) % 7


def calendar_for_day(locale: int, nday: int) -> CalendarSystem:
    """Return the calendar ``locale`` used on Nicene day ``nday``."""
    if nday >= locale:
        return CalendarSystem.GREGORIAN
    return CalendarSystem.JULIAN


def calendar_for_date(locale: int, year: int, month: int, day: int) -> CalendarSystem:
    """Return the calendar ``locale`` used on a date given in Gregorian terms."""
    if locale == Locale.UNKNOWN:
        return CalendarSystem.UNKNOWN
    return calendar_for_day(locale, nicene_day(CalendarSystem.GREGORIAN, year, month, day))


def calendar_name(calendar: int) -> str:
    """Return the display name of a calendar."""
    return _CALENDAR_NAMES.get(calendar, "Unknown")


def locale_name(locale: int) -> str:
    """Return the display name of a locale."""
    return _LOCALE_NAMES.get(locale, "Unknown")


def year_of(locale: int, nday: int) -> int:
    """Return the year of Nicene day ``nday`` in ``locale``."""
    if calendar_for_day(locale, nday) == CalendarSystem.JULIAN:
        return int((nday + 72745) / 365.25 + 1)
    return int((nday + 72743) / 365.2425 + 1)


def _month_and_day(locale: int, nday: int) -> tuple[int, int]:
    calendar = calendar_for_day(locale, nday)
    year = year_of(locale, nday)
    offset = nday - nicene_day(calendar, year, 1, 1)
    table = _month_table(calendar, year)
    month = max(bisect_right(table, offset, 1, 13) - 1, 1)
    return month, offset - table[month] + 1


def month_of(locale: int, nday: int) -> int:
    """Return the month (1-12) of Nicene day ``nday`` in ``locale``."""
    return _month_and_day(locale, nday)[0]


def day_of(locale: int, nday: int) -> int:
    """Return the day of the month of Nicene day ``nday`` in ``locale``."""
    return _month_and_day(locale, nday)[1]


@dataclass(frozen=True)
class HistoricDate:
    """A day in the history of one locale."""

    locale: int
    nday: int

    @classmethod
    def from_date(cls, year: int, month: int, day: int, locale: int) -> HistoricDate:
        """Build a date written in whichever calendar ``locale`` used at the time."""
        if locale == Locale.UNKNOWN:
            raise ValueError("unknown locale type")
        calendar = calendar_for_date(locale, year, month, day)
        return cls(locale, nicene_day(calendar, year, month, day))

    @classmethod
    def from_gregorian(
        cls, year: int, month: int, day: int, locale: int = Locale.UNKNOWN
    ) -> HistoricDate:
        """Build a date written in the Gregorian calendar."""
        if locale == Locale.UNKNOWN:
            locale = Locale.GREGORIAN
        return cls(locale, nicene_day(CalendarSystem.GREGORIAN, year, month, day))

    @classmethod
    def from_julian(
        cls, year: int, month: int, day: int, locale: int = Locale.UNKNOWN
    ) -> HistoricDate:
        """Build a date written in the Julian calendar."""
        if locale == Locale.UNKNOWN:
            locale = Locale.JULIAN
        return cls(locale, nicene_day(CalendarSystem.JULIAN, year, month, day))

    def calendar(self) -> CalendarSystem:
        """Return the calendar in force on this day."""
        return calendar_for_day(self.locale, self.nday)

    def year(self) -> int:
        return year_of(self.locale, self.nday)

    def month(self) -> int:
        return month_of(self.locale, self.nday)

    def day(self) -> int:
        return day_of(self.locale, self.nday)

    def _span_calendar(self, start: HistoricDate, end: HistoricDate) -> CalendarSystem:
        first, second = start.calendar(), end.calendar()
        return first if first == second else CalendarSystem.REFORMATION

    def month_calendar(self) -> CalendarSystem:
        """Return the calendar of this month, or REFORMATION if it changed within it."""
        year, month = self.year(), self.month()
        # Protestant Switzerland never had a 1 January 1701.
        if self.locale == Locale.ZURICH and year == 1701 and month == 1:
            return CalendarSystem.REFORMATION
        if self.locale == Locale.ZURICH and year == 1700 and month == 12:
            return CalendarSystem.JULIAN
        start = HistoricDate.from_date(year, month, 1, self.locale)
        if month == 12:
            end = HistoricDate.from_date(year + 1, 1, 1, self.locale)
        else:
            end = HistoricDate.from_date(year, month + 1, 1, self.locale)
        return self._span_calendar(start, end)

    def year_calendar(self) -> CalendarSystem:
        """Return the calendar of this year, or REFORMATION if it changed within it."""
        year = self.year()
        if self.locale == Locale.ZURICH and year == 1701:
            return CalendarSystem.REFORMATION
        if self.locale == Locale.ZURICH and year == 1700:
            return CalendarSystem.JULIAN
        start = HistoricDate.from_date(year, 1, 1, self.locale)
        end = HistoricDate.from_date(year + 1, 1, 1, self.locale)
        return self._span_calendar(start, end)