"""Calendar dates held as day/month/year, as a day count, or both.

A date's day count ("julian" day) is the number of days since the start of
the proleptic Gregorian calendar: day 1 is 1 January of year 1. A date keeps
whichever representation it was set with and works out the other on demand.
"""

from __future__ import annotations

import enum
import functools
import time
from typing import Any

BAD_DAY = 0
BAD_MONTH = 0
BAD_YEAR = 0
BAD_JULIAN = 0

_DAYS_IN_MONTHS = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

_DAYS_BEFORE_MONTH = (
    (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)


class Weekday(enum.IntEnum):
    """Days of the week, Monday first."""

    BAD_WEEKDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


def valid_month(month: int) -> bool:
    return BAD_MONTH < month < 13


def valid_year(year: int) -> bool:
    return year > BAD_YEAR


def valid_day(day: int) -> bool:
    return BAD_DAY < day < 32


def valid_weekday(weekday: int) -> bool:
    return Weekday.BAD_WEEKDAY < weekday < 8


def valid_julian(julian: int) -> bool:
    return julian > BAD_JULIAN


def valid_dmy(day: int, month: int, year: int) -> bool:
    """Report whether day, month and year together name a real date."""
    return (
        valid_month(month)
        and day > BAD_DAY
        and valid_year(year)
        and day <= _DAYS_IN_MONTHS[_leap_index(year)][month]
    )


def _leap_index(year: int) -> int:
    return 1 if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0 else 0


def is_leap_year(year: int) -> bool:
    """Report whether ``year`` is a Gregorian leap year."""
    if not valid_year(year):
        raise ValueError(f"invalid year: {year}")
    return bool(_leap_index(year))


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not valid_year(year):
        raise ValueError(f"invalid year: {year}")
    if not valid_month(month):
        raise ValueError(f"invalid month: {month}")
    return _DAYS_IN_MONTHS[_leap_index(year)][month]


def _weeks_in_year(year: int, weekday: Weekday) -> int:
    if not valid_year(year):
        raise ValueError(f"invalid year: {year}")
    candidates = [(1, 1), (31, 12)]
    if is_leap_year(year):
        candidates += [(2, 1), (30, 12)]
    for day, month in candidates:
        if Date.from_dmy(day, month, year).weekday() == weekday:
            return 53
    return 52


def monday_weeks_in_year(year: int) -> int:
    """Return 53 if ``year`` holds 53 Mondays, otherwise 52."""
    return _weeks_in_year(year, Weekday.MONDAY)


def sunday_weeks_in_year(year: int) -> int:
    """Return 53 if ``year`` holds 53 Sundays, otherwise 52."""
    return _weeks_in_year(year, Weekday.SUNDAY)


def _check_count(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


@functools.total_ordering
class Date:
    """A mutable calendar date; a new ``Date()`` is invalid until set."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self.clear()

    @classmethod
    def from_dmy(cls, day: int, month: int, year: int) -> "Date":
        """Create a date from day, month and year."""
        date = cls()
        date.set_dmy(day, month, year)
        return date

    @classmethod
    def from_julian(cls, julian: int) -> "Date":
        """Create a date from its day count."""
        date = cls()
        date.set_julian(julian)
        return date

    def clear(self) -> None:
        """Make the date invalid."""
        self._julian_days = 0
        self._day = BAD_DAY
        self._month = BAD_MONTH
        self._year = BAD_YEAR
        self._has_julian = False
        self._has_dmy = False

    def is_valid(self) -> bool:
        return self._has_julian or self._has_dmy

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise ValueError("invalid date")

    def _update_julian(self) -> None:
        self._require_valid()
        if self._has_julian:
            return
        years = self._year - 1
        self._julian_days = (
            years * 365
            + years // 4
            - years // 100
            + years // 400
            + _DAYS_BEFORE_MONTH[_leap_index(self._year)][self._month]
            + self._day
        )
        self._has_julian = True

    def _update_dmy(self) -> None:
        self._require_valid()
        if self._has_dmy:
            return
        a = self._julian_days + 1721425 + 32045
        b = (4 * (a + 36524)) // 146097 - 1
        c = a - (146097 * b) // 4
        d = (4 * (c + 365)) // 1461 - 1
        e = c - (1461 * d) // 4
        m = (5 * (e - 1) + 2) // 153
        self._month = m + 3 - 12 * (m // 10)
        self._day = e - (153 * m + 2) // 5
        self._year = 100 * b + d - 4800 + m // 10
        self._has_dmy = True

    def weekday(self) -> Weekday:
        self._update_julian()
        return Weekday((self._julian_days - 1) % 7 + 1)

    def month(self) -> int:
        self._update_dmy()
        return self._month

    def year(self) -> int:
        self._update_dmy()
        return self._year

    def day(self) -> int:
        self._update_dmy()
        return self._day

    def julian(self) -> int:
        self._update_julian()
        return self._julian_days

    def day_of_year(self) -> int:
        """Return the day within the year, counting 1 January as 1."""
        self._update_dmy()
        return _DAYS_BEFORE_MONTH[_leap_index(self._year)][self._month] + self._day

    def monday_week_of_year(self) -> int:
        """Week number with Monday as first day; days before the first Monday are week 0."""
        self._update_dmy()
        first_weekday = Date.from_dmy(1, 1, self._year).weekday() - 1
        day = self.day_of_year() - 1
        return (day + first_weekday) // 7 + (1 if first_weekday == 0 else 0)

    def sunday_week_of_year(self) -> int:
        """Week number with Sunday as first day; days before the first Sunday are week 0."""
        self._update_dmy()
        first_weekday = int(Date.from_dmy(1, 1, self._year).weekday()) % 7
        day = self.day_of_year() - 1
        return (day + first_weekday) // 7 + (1 if first_weekday == 0 else 0)

    def set_time(self, timestamp: float) -> None:
        """Set the date to the local calendar day of a POSIX timestamp."""
        tm = time.localtime(timestamp)
        if not valid_dmy(tm.tm_mday, tm.tm_mon, tm.tm_year):
            raise ValueError(f"timestamp {timestamp} gives no valid date")
        self._has_julian = False
        self._day, self._month, self._year = tm.tm_mday, tm.tm_mon, tm.tm_year
        self._has_dmy = True

    def _set_field(self, name: str, value: int) -> None:
        if self._has_julian and not self._has_dmy:
            self._update_dmy()
        self._has_julian = False
        setattr(self, name, value)
        self._has_dmy = valid_dmy(self._day, self._month, self._year)

    def set_month(self, month: int) -> None:
        """Set the month; the date is valid only once day, month and year agree."""
        if not valid_month(month):
            raise ValueError(f"invalid month: {month}")
        self._set_field("_month", month)

    def set_day(self, day: int) -> None:
        """Set the day; the date is valid only once day, month and year agree."""
        if not valid_day(day):
            raise ValueError(f"invalid day: {day}")
        self._set_field("_day", day)

    def set_year(self, year: int) -> None:
        """Set the year; the date is valid only once day, month and year agree."""
        if not valid_year(year):
            raise ValueError(f"invalid year: {year}")
        self._set_field("_year", year)

    def set_dmy(self, day: int, month: int, year: int) -> None:
        if not valid_dmy(day, month, year):
            raise ValueError(f"invalid date: {day}/{month}/{year}")
        self._has_julian = False
        self._day, self._month, self._year = day, month, year
        self._has_dmy = True

    def set_julian(self, julian: int) -> None:
        if not valid_julian(julian):
            raise ValueError(f"invalid day count: {julian}")
        self._julian_days = julian
        self._has_julian = True
        self._has_dmy = False

    def is_first_of_month(self) -> bool:
        return self.day() == 1

    def is_last_of_month(self) -> bool:
        self._update_dmy()
        return self._day == _DAYS_IN_MONTHS[_leap_index(self._year)][self._month]

    def add_days(self, ndays: int) -> None:
        _check_count(ndays, "ndays")
        self._update_julian()
        self._julian_days += ndays
        self._has_dmy = False

    def subtract_days(self, ndays: int) -> None:
        _check_count(ndays, "ndays")
        self._update_julian()
        if self._julian_days <= ndays:
            raise ValueError("result would precede the first day of the calendar")
        self._julian_days -= ndays
        self._has_dmy = False

    def _clamp_day(self) -> None:
        limit = _DAYS_IN_MONTHS[_leap_index(self._year)][self._month]
        self._day = min(self._day, limit)
        self._has_julian = False

    def add_months(self, nmonths: int) -> None:
        """Move forward by months, clamping the day to the month's length."""
        _check_count(nmonths, "nmonths")
        self._update_dmy()
        years, months = divmod(nmonths + self._month - 1, 12)
        self._month = months + 1
        self._year += years
        self._clamp_day()

    def subtract_months(self, nmonths: int) -> None:
        """Move back by months, clamping the day to the month's length."""
        _check_count(nmonths, "nmonths")
        self._update_dmy()
        years, months = divmod(nmonths, 12)
        if self._year <= years:
            raise ValueError("result would precede year 1")
        year = self._year - years
        if self._month > months:
            month = self._month - months
        else:
            month = 12 - (months - self._month)
            year -= 1
        if not valid_year(year):
            raise ValueError("result would precede year 1")
        self._year, self._month = year, month
        self._clamp_day()

    def _fix_leap_day(self) -> None:
        if self._month == 2 and self._day == 29 and not is_leap_year(self._year):
            self._day = 28
        self._has_julian = False

    def add_years(self, nyears: int) -> None:
        """Move forward by years; 29 February becomes 28 in a common year."""
        _check_count(nyears, "nyears")
        self._update_dmy()
        self._year += nyears
        self._fix_leap_day()

    def subtract_years(self, nyears: int) -> None:
        """Move back by years; 29 February becomes 28 in a common year."""
        _check_count(nyears, "nyears")
        self._update_dmy()
        if self._year <= nyears:
            raise ValueError("result would precede year 1")
        self._year -= nyears
        self._fix_leap_day()

    def compare(self, other: "Date") -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        self._require_valid()
        other._require_valid()
        if self._has_julian and other._has_julian:
            mine, theirs = self._julian_days, other._julian_days
        elif self._has_dmy and other._has_dmy:
            mine = (self._year, self._month, self._day)
            theirs = (other._year, other._month, other._day)
        else:
            mine, theirs = self.julian(), other.julian()
        return (mine > theirs) - (mine < theirs)

    def to_struct_tm(self) -> time.struct_time:
        """Return the date as a ``time.struct_time`` at midnight, DST unknown."""
        self._update_dmy()
        return time.struct_time(
            (
                self._year,
                self._month,
                self._day,
                0,
                0,
                0,
                int(self.weekday()) - 1,
                self.day_of_year(),
                -1,
            )
        )

    def strftime(self, fmt: str) -> str:
        """Format the date with ``time.strftime`` directives."""
        if fmt is None:
            raise TypeError("format must be a string")
        return time.strftime(fmt, self.to_struct_tm())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        if not (self.is_valid() and other.is_valid()):
            return self.is_valid() == other.is_valid()
        return self.compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) < 0

    def __repr__(self) -> str:
        if not self.is_valid():
            return "Date()"
        return f"Date.from_dmy({self.day()}, {self.month()}, {self.year()})"