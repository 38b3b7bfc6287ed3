"""calprint public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .config import TokenReader, resolve
from .core.errors import (
    ArgumentParseError,
    CalprintError,
    ConfigError,
    DateRangeError,
    ErrorKind,
    InputError,
    MissingArgument,
    TooManyArguments,
)
from .core.types import Config, MonthInfo
from .months import add_months, month_info, month_sequence
from .printer import CalendarPrinter

__all__ = [
    "resolve",
    "TokenReader",
    "Config",
    "MonthInfo",
    "CalendarPrinter",
    "add_months",
    "month_info",
    "month_sequence",
    "ErrorKind",
    "CalprintError",
    "ConfigError",
    "MissingArgument",
    "TooManyArguments",
    "ArgumentParseError",
    "InputError",
    "DateRangeError",
]
