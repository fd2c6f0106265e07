"""
Calendar arithmetic for nomination and voting periods.

Fiction runs monthly. Non-fiction runs bi-monthly over the pairs
Jan-Feb, Mar-Apr, ..., Nov-Dec, and a non-fiction period is always
addressed by the odd month that starts its pair.
"""

# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple

# Local application imports
from bookclub.models.books.enums import BookCategory

MONTH_NAMES = [
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
]


class MonthYear(NamedTuple):
    month: int
    year: int


class BiMonthlyPeriod(NamedTuple):
    start_month: int
    end_month: int
    year: int


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")


def month_name(month: int) -> str:
    _check_month(month)
    return MONTH_NAMES[month - 1]


def current_period(now: datetime) -> MonthYear:
    return MonthYear(month=now.month, year=now.year)


def next_period(month: int, year: int) -> MonthYear:
    """Return the month after (month, year), wrapping December into January."""
    _check_month(month)
    if month == 12:
        return MonthYear(month=1, year=year + 1)
    return MonthYear(month=month + 1, year=year)


def normalize_bi_monthly(month: int, year: int) -> BiMonthlyPeriod:
    _check_month(month)
    start_month = month - 1 if month % 2 == 0 else month
    return BiMonthlyPeriod(start_month=start_month, end_month=start_month + 1, year=year)


@dataclass(frozen=True)
class Period:
    category: BookCategory
    month: int
    year: int

    def __post_init__(self) -> None:
        _check_month(self.month)

    def normalize(self) -> "Period":
        if self.category == BookCategory.NON_FICTION:
            start_month = normalize_bi_monthly(self.month, self.year).start_month
            if start_month != self.month:
                return Period(category=self.category, month=start_month, year=self.year)
        return self

    @property
    def label(self) -> str:
        if self.category == BookCategory.NON_FICTION:
            bi_monthly = normalize_bi_monthly(self.month, self.year)
            return f"{month_name(bi_monthly.start_month)} - {month_name(bi_monthly.end_month)} {self.year}"
        return f"{month_name(self.month)} {self.year}"

    def __str__(self) -> str:
        return f"{self.category.value}:{self.year}-{self.month:02d}"


def nomination_period(category: BookCategory, now: datetime) -> Period:
    """
    The period members are nominating and voting for right now: the
    month after `now`, normalized for bi-monthly categories.
    """
    upcoming = next_period(now.month, now.year)
    return Period(category=category, month=upcoming.month, year=upcoming.year).normalize()


def upcoming_periods(now: datetime, count: int = 6) -> list[MonthYear]:
    """The `count` months following `now`, used to create portals ahead of time."""
    periods = []
    month, year = now.month, now.year
    for _ in range(count):
        month, year = next_period(month, year)
        periods.append(MonthYear(month=month, year=year))
    return periods
