from __future__ import annotations
from dataclasses import dataclass
from datetime import date
import calendar as pycal

from .errors import ArgumentParseError

@dataclass(frozen=True)
class Config:
    start: date
    column_num: int
    month_num: int

    def __post_init__(self) -> None:
        if self.start.day != 1:
            raise ArgumentParseError(f"start must be the first day of a month, got {self.start}")
        if self.column_num < 1:
            raise ArgumentParseError(f"column count must be positive, got {self.column_num}")
        if self.month_num < 0:
            raise ArgumentParseError(f"month count must not be negative, got {self.month_num}")

@dataclass(frozen=True)
class MonthInfo:
    """One month to print."""
    year: int
    month: int
    days: int
    first_weekday: int  # Monday=0

    @property
    def first_date(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def title(self) -> str:
        return f"{pycal.month_name[self.month]} {self.year}"
