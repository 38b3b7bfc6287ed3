from __future__ import annotations

from datetime import date, MINYEAR, MAXYEAR
import calendar as pycal
from typing import List, Sequence, Tuple, TypeVar

from .core.errors import DateRangeError
from .core.types import MonthInfo

T = TypeVar("T")


def add_months(year: int, month: int, n: int) -> Tuple[int, int]:
    """(year, month) shifted by n months; raises DateRangeError outside years MINYEAR..MAXYEAR."""
    idx = year * 12 + (month - 1) + n
    y, m0 = divmod(idx, 12)
    if not MINYEAR <= y <= MAXYEAR:
        raise DateRangeError(f"{year}-{month:02d} + {n} months is outside years {MINYEAR}..{MAXYEAR}")
    return y, m0 + 1


def month_info(year: int, month: int) -> MonthInfo:
    first_weekday, days = pycal.monthrange(year, month)
    return MonthInfo(year=year, month=month, days=days, first_weekday=first_weekday)


def month_sequence(start: date, count: int) -> List[MonthInfo]:
    """The `count` consecutive months beginning with start's month."""
    if count < 0:
        raise ValueError("count must be >= 0")
    if count == 0:
        return []
    # Check the last month up front so nothing is built for an overflowing request.
    add_months(start.year, start.month, count - 1)

    out: List[MonthInfo] = []
    y, m = start.year, start.month
    for i in range(count):
        if i:
            y, m = add_months(y, m, 1)
        out.append(month_info(y, m))
    return out


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    if size < 1:
        raise ValueError("size must be >= 1")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]
