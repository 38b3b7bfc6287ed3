from __future__ import annotations

import logging
import re
import sys
from datetime import date
from typing import List, Optional, Sequence, TextIO

from .commander import Commander, Option
from .core.errors import ArgumentParseError, InputError, TooManyArguments
from .core.types import Config

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?[0-9]+$")

START_FLAGS = ("--start", "-s")
COLUMN_FLAGS = ("--column", "-c")
MONTH_NUM_FLAGS = ("--month-num", "-m")

PROMPT_START_YEAR = "Start year: "
PROMPT_START_MONTH = "Start month: "
PROMPT_COLUMN = "Months per row: "
PROMPT_MONTH_NUM = "Number of months: "


class TokenReader:
    """
    Whitespace-delimited tokens from a text stream, read lazily line by line.

    Several values may sit on one line ("2024 6") or be spread over lines.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending: List[str] = []
        self.requests = 0  # next_token calls, one per prompt

    def next_token(self) -> Optional[str]:
        self.requests += 1
        while not self._pending:
            try:
                line = self.stream.readline()
            except (OSError, ValueError) as e:
                raise InputError(str(e)) from e
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)


def _parse_int(s: str, what: str) -> int:
    if not _INT_RE.match(s):
        raise ArgumentParseError(f"{what} must be an integer, got {s!r}")
    return int(s)


def _make_start(year: int, month: int) -> date:
    try:
        return date(year, month, 1)
    except (ValueError, OverflowError) as e:
        raise ArgumentParseError(f"invalid start month {year}:{month} ({e})") from e


def _parse_start(s: str) -> date:
    parts = s.split(":")
    if len(parts) != 2:
        raise ArgumentParseError(f"start must look like YEAR:MONTH, got {s!r}")
    return _make_start(_parse_int(parts[0], "start year"), _parse_int(parts[1], "start month"))


def _check_column(n: int) -> int:
    if n <= 0:
        raise ArgumentParseError(f"column count must be positive, got {n}")
    return n


def _check_month_num(n: int) -> int:
    if n < 0:
        raise ArgumentParseError(f"month count must not be negative, got {n}")
    return n


class _Prompter:
    def __init__(self, reader: TokenReader, out: TextIO):
        self.reader = reader
        self.out = out

    def ask_int(self, label: str, what: str) -> int:
        self.out.write(label)
        self.out.flush()
        tok = self.reader.next_token()
        if tok is None:
            raise InputError(f"no value for {what}")
        return _parse_int(tok, what)


def _single(option: Option) -> Optional[str]:
    """The lone token given to an option, None if it got none."""
    if len(option.args) > 1:
        raise TooManyArguments(f"{option.flag} takes one value, got {len(option.args)}: {' '.join(option.args)}")
    if option.args:
        return option.args[0]
    logger.debug("%s not given on the command line; prompting", option.name)
    return None


def resolve(
    tokens: Sequence[str],
    *,
    reader: Optional[TokenReader] = None,
    out: Optional[TextIO] = None,
) -> Config:
    """
    Turn command-line tokens into a Config, prompting for anything missing.

    Fields are resolved in the order start, column count, month count, so
    prompts and errors always come out in that order.
    """
    if reader is None:
        reader = TokenReader(sys.stdin)
    if out is None:
        out = sys.stdout
    ask = _Prompter(reader, out)

    commander = Commander()
    start_opt = commander.add_option(*START_FLAGS)
    column_opt = commander.add_option(*COLUMN_FLAGS)
    month_num_opt = commander.add_option(*MONTH_NUM_FLAGS)
    commander.resolve(tokens)

    if commander.args:
        logger.debug("ignoring positional arguments: %s", commander.args)
    for opt in commander.options:
        logger.debug("option %s -> %s", opt.name, opt.args)

    tok = _single(start_opt)
    if tok is not None:
        start = _parse_start(tok)
    else:
        year = ask.ask_int(PROMPT_START_YEAR, "start year")
        month = ask.ask_int(PROMPT_START_MONTH, "start month")
        start = _make_start(year, month)

    tok = _single(column_opt)
    if tok is not None:
        column_num = _check_column(_parse_int(tok, "column count"))
    else:
        column_num = _check_column(ask.ask_int(PROMPT_COLUMN, "column count"))

    tok = _single(month_num_opt)
    if tok is not None:
        month_num = _check_month_num(_parse_int(tok, "month count"))
    else:
        month_num = _check_month_num(ask.ask_int(PROMPT_MONTH_NUM, "month count"))

    return Config(start=start, column_num=column_num, month_num=month_num)
