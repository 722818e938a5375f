# hcal

`hcal` prints month and year calendars the way they looked in a given
region. It switches from the Julian to the Gregorian calendar on the day
that region adopted the reform. The default region is England, which
dropped 3–13 September 1752.

## Installation

    pip install .

This installs the `hcal` command. `python -m hcal.cli` runs the same
program.

## Command line

The number of plain arguments decides what is printed.

Print a whole year, three months across:

    hcal 1752

Print one month (month, then year):

    hcal 9 1752

Show the day number of a date (day, month, year) and the calendar that
date falls in:

    hcal 14 9 1752

Years below 1 are rejected. Years below 100 are rejected unless you give
`--early`. Any other number of arguments prints the usage text and exits
with status 1.

### Options

- `--label` prints the calendar in use above the output: Julian,
  Gregorian or Reform Year.
- `-s`, `--single`, `--single-column` prints a year as a single column of
  months.
- `--early` allows years below 100.
- `--locales` lists the supported regions and the days each region dropped.
- `--help` prints the region options and their reform dates.
- `--version` and `--author` print short notices.
- `--options` lists every defined option and exits.

These options choose a region. Each region also has long names, such as
`--France` or `--england`:

| Option | Region | Days dropped |
|--------|--------|--------------|
| `-i` | Rome (Italy) | 5–14 October 1582 |
| `-f` | France | 10–19 December 1582 |
| `-b` | Bavaria | 6–15 October 1583 |
| `-a` | Austria | 7–16 January 1584 |
| `-l` | Lucerne | 12–21 January 1584 |
| `-h` | Hungary | 22–31 October 1587 |
| `-n` | Norway | 19–28 February 1700 |
| `-z` | Zurich | 1–11 February 1701 |
| `-u` | England (default) | 3–13 September 1752 |
| `-r` | Russia | 1–13 February 1918 |
| `-m` | Romania | 1–13 April 1919 |
| `-e` | Greece | 10–22 March 1924 |
| `-t` | Turkey | 19–31 December 1926 |

`-g` uses the Gregorian calendar for all dates, and `-j` uses the Julian
calendar for all dates. Short boolean options can be combined:

    hcal --label -f 12 1582

## Library

    from hcal.historic import HistoricDate, Locale
    from hcal.layout import format_month, format_year

    date = HistoricDate.from_date(1752, 9, 1, Locale.ENGLAND)
    print(date.month_calendar())      # CalendarSystem.REFORMATION
    print(format_month(date))
    print(format_year(date, single=True))

`hcal.historic` also provides day-level functions:

- `nicene_day`
- `day_of_week`
- `day_of_year`
- `leap_year`
- `days_in_year`
- `calendar_for_date`
- `calendar_for_day`
- `year_of`, `month_of`, `day_of`

It also provides the `CalendarSystem` and `Locale` enumerations. Days are
counted from 1 March 200, the first day on which the Julian calendar and
the proleptic Gregorian calendar agree.

`hcal.options.Options` is the command-line option registry that the
command uses. Options are defined with strings of the form
`name|alias=type[:default]`. `hcal.optionspec` holds the option
definition parser and `split_command_line`.