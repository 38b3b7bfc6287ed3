from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    MISSING_ARGUMENT = "missing argument"
    TOO_MANY_ARGUMENTS = "too many arguments"
    ARGUMENT_PARSE = "cannot parse argument"
    INPUT = "error reading input"
    DATE_RANGE = "date out of range"

    @property
    def message(self) -> str:
        return self.value


class CalprintError(Exception):
    """Base error."""

    kind: ErrorKind

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        msg = self.kind.message
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ConfigError(CalprintError):
    """Raised while turning command-line tokens into a Config."""


class MissingArgument(ConfigError):
    """Reserved for a flag whose required value is absent; resolve() prompts instead."""

    kind = ErrorKind.MISSING_ARGUMENT


class TooManyArguments(ConfigError):
    kind = ErrorKind.TOO_MANY_ARGUMENTS


class ArgumentParseError(ConfigError):
    kind = ErrorKind.ARGUMENT_PARSE


class InputError(ConfigError):
    """Raised when the interactive input source yields no token."""

    kind = ErrorKind.INPUT


class DateRangeError(CalprintError):
    """Raised when month arithmetic leaves the supported year range."""

    kind = ErrorKind.DATE_RANGE
