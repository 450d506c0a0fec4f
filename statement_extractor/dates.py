from __future__ import annotations

from datetime import date

MONTHS = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}


def month_from_abbreviation(name: str) -> int:
    """Return the month number for a three letter name such as ``Jan``."""
    try:
        return MONTHS[name]
    except KeyError:
        raise ValueError(f"Unknown month abbreviation: {name!r}") from None


def resolve_transaction_date(statement_date: date, month: int, day: int) -> date:
    """Attach a year to a bare ``month/day`` printed on a statement.

    Statements closing in January list trailing December transactions from
    the previous year. December 1st always stays in the statement's own year.
    """
    if statement_date.month == 1 and month == 12 and day != 1:
        year = statement_date.year - 1
    else:
        year = statement_date.year
    return date(year, month, day)
