"""Decimal and calendar helpers used by the finance engines."""

import calendar
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple

ZERO = Decimal("0")
HUNDRED = Decimal("100")

RATIO_QUANT = Decimal("0.000001")
PERCENT_QUANT = Decimal("0.01")


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact decimal sum; zero for an empty iterable."""
    return sum(amounts, ZERO)


def round_money(value: Decimal) -> Decimal:
    """Round half-up to cents."""
    return value.quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP)


def to_percent(part: Decimal, whole: Decimal) -> Decimal:
    """
    Express part as a percentage of whole.

    The ratio is rounded half-up to 6 places before scaling, and the
    percentage is rounded half-up to 2 places.
    """
    ratio = (part / whole).quantize(RATIO_QUANT, rounding=ROUND_HALF_UP)
    return (ratio * HUNDRED).quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP)


def add_months(start: date, months: int) -> date:
    """Shift a date by whole calendar months, clamping to the month's end."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class YearMonth(NamedTuple):
    """A calendar month."""
    year: int
    month: int

    @classmethod
    def of(cls, day: date) -> "YearMonth":
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
