"""Command-line entry point: print historic month and year calendars."""

from __future__ import annotations

import re
import sys
import textwrap
from dataclasses import dataclass
from typing import Optional, Sequence

from hcal.historic import HistoricDate, Locale, calendar_for_day, calendar_name
from hcal.layout import center, format_month, format_year
from hcal.options import Options
from hcal.optionspec import OptionError

PROGRAM = "hcal"

_YEAR_UNKNOWN = -999999
_MONTH_UNKNOWN = -999999
_DAY_UNKNOWN = -999999


@dataclass(frozen=True)
class _Region:
    """A region with its reform data and the option names that select it."""

    aliases: tuple[str, ...]
    locale: Locale
    dropped: str
    month: str
    year: int
    area: str
    note: str = ""

    @property
    def name(self) -> str:
        return self.aliases[0]

    @property
    def flag(self) -> str:
        return next(alias for alias in self.aliases if len(alias) == 1)

    @property
    def definition(self) -> str:
        return "|".join(self.aliases) + "=b"


def _with_lower(*names: str) -> tuple[str, ...]:
    """Return each name followed by its lower-case spelling."""
    return tuple(form for name in names for form in (name, name.lower()))


_REGIONS = (
    _Region(
        _with_lower("Rome", "Italy") + ("i",), Locale.ROME, "5-14", "October", 1582,
        "Rome (Italy) [also Portugal, Spain, and parts of Poland]",
        "Includes the rest of Italy, Spain, Portugal.",
    ),
    _Region(_with_lower("France") + ("f",), Locale.FRANCE, "10-19", "December", 1582,
            "France"),
    _Region(_with_lower("Bavaria") + ("b",), Locale.BAVARIA, "6-15", "October", 1583,
            "Bavaria and other South German provinces"),
    _Region(
        _with_lower("Austria", "Bohemia", "Slovakia") + ("a",), Locale.AUSTRIA,
        "7-16", "January", 1584, "Austria [also Bohemia and Slovakia]",
        "Includes Slovakia and Bohemia.",
    ),
    _Region(
        _with_lower("Lucerne", "Catholic-Switzerland") + ("l",), Locale.LUCERNE,
        "12-21", "January", 1584,
        "the Catholic cantons of Switzerland [e.g., Lucerne]",
    ),
    _Region(_with_lower("Hungary") + ("h",), Locale.HUNGARY, "22-31", "October", 1587,
            "Hungary [also parts of Poland]"),
    _Region(
        _with_lower("Norway", "Denmark", "Danmark") + ("n",), Locale.NORWAY,
        "19-28", "February", 1700,
        "Norway [also Denmark and many North German provinces]",
        "Includes Denmark.",
    ),
    _Region(
        _with_lower("Zurich", "Protestant-Switzerland") + ("z",), Locale.ZURICH,
        "1-11", "February", 1701,
        "the Protestant cantons of Switzerland [e.g., Zurich]",
        "The Protestant regions of Switzerland.",
    ),
    _Region(
        ("England", "england", "u", "UK", "uk") + _with_lower("Ireland", "Scotland"),
        Locale.ENGLAND, "3-13", "September", 1752,
        "the United Kingdom (England, Scotland, Wales, Ireland, and the "
        "British colonies) (default option)",
        "Includes Ireland and Scotland.",
    ),
    _Region(_with_lower("Russia") + ("r",), Locale.RUSSIA, "1-13", "February", 1918,
            "Russia and the other provinces of the former U.S.S.R."),
    _Region(_with_lower("Romania") + ("m",), Locale.ROMANIA, "1-13", "April", 1919,
            "Romania"),
    _Region(_with_lower("Greece", "Hellas") + ("e",), Locale.GREECE, "10-22", "March",
            1924, "Greece"),
    _Region(_with_lower("Turkey") + ("t",), Locale.TURKEY, "19-31", "December", 1926,
            "Turkey"),
)

# (aliases, locale, calendar shown in the usage text)
_PURE_CALENDARS = (
    (("gregorian", "Gregorian", "g"), Locale.GREGORIAN, "Gregorian"),
    (("julian", "Julian", "j"), Locale.JULIAN, "Julian"),
)

_DISPLAY_OPTIONS = ("s|single-column|single", "nicene", "label", "locales", "early")
_STANDARD_OPTIONS = ("author", "version", "help", "morehelp", "example")

_DEFINITIONS = (
    tuple("|".join(aliases) + "=b" for aliases, _, _ in _PURE_CALENDARS)
    + tuple(region.definition for region in _REGIONS)
    + tuple(name + "=b" for name in _DISPLAY_OPTIONS + _STANDARD_OPTIONS)
)

# Checked in order; the first option given decides the locale.
_LOCALE_OPTIONS = tuple(
    (aliases[1], locale) for aliases, locale, _ in _PURE_CALENDARS
) + tuple((region.name, region.locale) for region in _REGIONS)


def _locales_text() -> str:
    blocks = []
    for region in _REGIONS:
        line = (
            f"{region.name + ':':<20}{region.dropped:>5} "
            f"{region.month:<9} {region.year} dropped.\n"
        )
        if region.note:
            line += f"   {region.note}\n"
        blocks.append(line + "\n")
    return "".join(blocks) + "\n"


def _usage_entry(flag: str, text: str) -> str:
    lines = textwrap.wrap(
        text, width=72, initial_indent=f"-{flag}   ", subsequent_indent=" " * 8
    )
    return "".join(line + "\n" for line in lines)


def _usage_text() -> str:
    entries = [
        _usage_entry(aliases[-1], f"generates a {shown} calendar for the given date.")
        for aliases, _, shown in _PURE_CALENDARS
    ]
    entries.extend(
        _usage_entry(
            region.flag,
            f"generates a calendar for {region.area} by dropping the days "
            f"{region.dropped} {region.month} {region.year}.",
        )
        for region in _REGIONS
    )
    return "".join(entries) + "\n\n"


AUTHOR_TEXT = "Written 14 July 1999 (in the Gregorian calendar)\n"

VERSION_TEXT = f"{PROGRAM}, version 1.0 (14 July 1999)\n"

EXAMPLE_TEXT = "examples will go here" + "\n" * 5

HELP_TEXT = "Help goes here" + "\n" * 6

LOCALES_TEXT = _locales_text()

USAGE_TEXT = _usage_text()

_INFO_OPTIONS = (
    ("author", AUTHOR_TEXT),
    ("version", VERSION_TEXT),
    ("help", USAGE_TEXT),
    ("morehelp", HELP_TEXT),
    ("example", EXAMPLE_TEXT),
    ("locales", LOCALES_TEXT),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _scan_int(text: str, fallback: int) -> int:
    """Read a leading decimal integer, keeping ``fallback`` when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else fallback


def build_options() -> Options:
    """Return an option registry holding every option the command accepts."""
    options = Options()
    for definition in _DEFINITIONS:
        options.define(definition)
    return options


def choose_locale(options: Options) -> Locale:
    """Return the locale selected on a processed command line (England by default)."""
    for name, locale in _LOCALE_OPTIONS:
        if options.boolean(name):
            return locale
    return Locale.ENGLAND


def _render(options: Options, date: HistoricDate, count: int) -> str:
    label = options.boolean("label")
    if count == 1:
        single = options.boolean("single")
        head = ""
        if label:
            width = 20 if single else 66
            head = center(calendar_name(date.year_calendar()), width, " ") + "\n"
        return head + format_year(date, single)
    if count == 2:
        head = ""
        if label:
            head = center(calendar_name(date.month_calendar()), 20, " ") + "\n"
        return head + format_month(date)
    calendar = calendar_for_day(date.locale, date.nday)
    return f"Day number is: {date.nday} for {calendar_name(calendar)} calendar\n"


def _parse_date(words: Sequence[str]) -> tuple[int, int, int]:
    """Return (year, month, day) from the positional words, filling in defaults."""
    count = len(words)
    if count == 1:
        return _scan_int(words[0], _YEAR_UNKNOWN), 1, 1
    if count == 2:
        return _scan_int(words[1], _YEAR_UNKNOWN), _scan_int(words[0], _MONTH_UNKNOWN), 1
    return (
        _scan_int(words[2], _YEAR_UNKNOWN),
        _scan_int(words[1], _MONTH_UNKNOWN),
        _scan_int(words[0], _DAY_UNKNOWN),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command with ``argv`` (without the program name); return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    options = build_options()
    options.set_arguments([PROGRAM, *args])
    try:
        options.process()
    except OptionError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    locale = choose_locale(options)

    for name, text in _INFO_OPTIONS:
        if options.boolean(name):
            sys.stdout.write(text)
            return 0

    count = options.argument_count()
    if count not in (1, 2, 3):
        sys.stdout.write(USAGE_TEXT)
        return 1

    year, month, day = _parse_date(options.arguments()[1:])

    if year < 1:
        sys.stdout.write(f"Error: year {year} cannot be handled by this program\n")
        return 1
    if year < 100 and not options.boolean("early"):
        sys.stdout.write(
            f"Error: year {year} is too small.\n"
            "Either specify the century, or use the --early option\n"
        )
        return 1

    try:
        date = HistoricDate.from_date(year, month, day, locale)
    except ValueError as exc:
        sys.stdout.write(f"Error: {exc}\n")
        return 1

    sys.stdout.write(_render(options, date, count))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())