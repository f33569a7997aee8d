"""Parsing of dates written by people, following the current locale.

The parser learns the month names and the day/month/year order of the
current ``LC_TIME`` locale from ``strftime`` output, and relearns them
whenever that locale changes.
"""

from __future__ import annotations

import enum
import locale
import threading
from dataclasses import dataclass, field

from glibcore.date import BAD_DAY, BAD_MONTH, BAD_YEAR, Date, valid_dmy

_NUM_LEN = 10
_DIGITS = "0123456789"
_MAX_YEAR = 8000


class _Field(enum.Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass
class _Tokens:
    count: int = 0
    numbers: list[int] = field(default_factory=list)
    month: int = BAD_MONTH


def _fill_tokens(text: str, long_names: list[str | None], short_names: list[str | None]) -> _Tokens:
    """Split ``text`` into up to four digit runs and look for a month name."""
    runs: list[str] = []
    pos, end = 0, len(text)
    while pos < end and len(runs) < 4:
        start = pos
        while pos < end and text[pos] in _DIGITS and pos - start <= _NUM_LEN:
            pos += 1
        if pos > start:
            runs.append(text[start:pos])
        if pos >= end:
            break
        pos += 1

    tokens = _Tokens(count=len(runs), numbers=[int(run) for run in runs[:3]])
    if tokens.count < 3:
        lowered = text[:127].lower()
        for month in range(1, 13):
            for name in (long_names[month], short_names[month]):
                if name and name in lowered:
                    tokens.month = month
                    return tokens
    return tokens


class DateParser:
    """Turns free-form date text into a :class:`Date`.

    Two-digit years count from ``twodigit_start_year``: with the default
    1930, years 30 to 99 fall in the 1900s and 00 to 29 in the 2000s. They
    are used only when the locale itself writes two-digit years.
    """

    def __init__(self, twodigit_start_year: int = 1930) -> None:
        self.twodigit_start_year = twodigit_start_year
        self.using_twodigit_years = False
        self._locale: str | None = None
        self._long_names: list[str | None] = [None] * 13
        self._short_names: list[str | None] = [None] * 13
        self._order = [_Field.DAY, _Field.MONTH, _Field.YEAR]
        self._lock = threading.Lock()

    def _learn_locale(self) -> None:
        current = locale.setlocale(locale.LC_TIME)
        if current == self._locale:
            return
        self._locale = current
        for month in range(1, 13):
            sample = Date.from_dmy(1, month, 1)
            self._short_names[month] = sample.strftime("%b").lower()
            self._long_names[month] = sample.strftime("%B").lower()

        # 4 July 1976 tells the order apart and shows whether years have two digits.
        example = Date.from_dmy(4, 7, 1976).strftime("%x")
        tokens = _fill_tokens(example, [None] * 13, [None] * 13)
        for position, number in enumerate(tokens.numbers):
            if number == 7:
                self._order[position] = _Field.MONTH
            elif number == 4:
                self._order[position] = _Field.DAY
            elif number in (76, 1976):
                if number == 76:
                    self.using_twodigit_years = True
                self._order[position] = _Field.YEAR

    def _expand_year(self, year: int) -> int:
        if self.using_twodigit_years and year < 100:
            two = self.twodigit_start_year % 100
            century = (self.twodigit_start_year // 100) * 100
            if year < two:
                century += 100
            year += century
        return year

    def _interpret(self, tokens: _Tokens) -> tuple[int, int, int] | None:
        day, month, year = BAD_DAY, BAD_MONTH, BAD_YEAR
        numbers = tokens.numbers
        count = tokens.count

        if count == 4:
            return None

        if count > 1:
            i = j = 0
            while i < count and j < 3:
                slot = self._order[j]
                if slot is _Field.MONTH:
                    if count == 2 and tokens.month != BAD_MONTH:
                        month = tokens.month
                        j += 1
                        continue
                    month = numbers[i]
                elif slot is _Field.DAY:
                    if count == 2 and tokens.month == BAD_MONTH:
                        day = 1
                        j += 1
                        continue
                    day = numbers[i]
                else:
                    year = self._expand_year(numbers[i])
                i += 1
                j += 1

            if count == 3 and not valid_dmy(day, month, year):
                year, month, day = numbers
                if self.using_twodigit_years and year < 100:
                    year = BAD_YEAR
        elif count == 1:
            if tokens.month != BAD_MONTH:
                month, day, year = tokens.month, 1, numbers[0]
            else:
                value = numbers[0]
                month = (value // 100) % 100
                day = value % 100
                year = self._expand_year(value // 10000)

        if year < _MAX_YEAR and valid_dmy(day, month, year):
            return day, month, year
        return None

    def parse(self, text: str) -> Date:
        """Parse ``text``; the result is an invalid date when nothing fits."""
        if text is None:
            raise TypeError("text must be a string")
        with self._lock:
            self._learn_locale()
            tokens = _fill_tokens(text, self._long_names, self._short_names)
            found = self._interpret(tokens)
        date = Date()
        if found is not None:
            date.set_dmy(*found)
        return date


_default_parser = DateParser()


def parse_date(text: str) -> Date:
    """Parse ``text`` with the shared parser."""
    return _default_parser.parse(text)


def set_parse(date: Date, text: str) -> None:
    """Set ``date`` from ``text``; it is left invalid when the text is not a date."""
    date.clear()
    parsed = _default_parser.parse(text)
    if parsed.is_valid():
        date.set_dmy(parsed.day(), parsed.month(), parsed.year())