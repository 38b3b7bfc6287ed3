"""Minimal command-line flag matcher.

Usage:

  1. register options with ``add_option``, each listing every alias it answers to;
  2. ``resolve`` scans the tokens; when a token equals an alias of some option,
     all following tokens up to the next matching alias (or the end) are handed
     to that option;
  3. tokens seen before the first matching alias end up in ``Commander.args``.

Matching is exact and case-sensitive; there is no prefix matching and no
``--flag=value`` form.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class Option:
    flags: Tuple[str, ...]
    flag: Optional[str] = None  # alias that matched, None if absent
    args: List[str] = field(default_factory=list)

    def __contains__(self, token: str) -> bool:
        return token in self.flags

    @property
    def name(self) -> str:
        return self.flags[0]

    def reset(self) -> None:
        self.flag = None
        self.args = []


class Commander:
    def __init__(self) -> None:
        self.options: List[Option] = []
        self.args: List[str] = []

    def add_option(self, *flags: str) -> Option:
        if not flags:
            raise ValueError("an option needs at least one flag")
        for f in flags:
            if self.find_option(f) is not None:
                raise ValueError(f"flag '{f}' is already registered")
        option = Option(tuple(flags))
        self.options.append(option)
        return option

    def find_option(self, token: str) -> Optional[Option]:
        for option in self.options:
            if token in option:
                return option
        return None

    def resolve(self, tokens: Iterable[str]) -> None:
        self.args = []
        for option in self.options:
            option.reset()

        buf: List[str] = []
        current: Optional[Option] = None
        for token in tokens:
            match = self.find_option(token)
            if match is None:
                buf.append(token)
                continue
            self._assign(current, buf)
            current = match
            current.flag = token
            buf = []
        self._assign(current, buf)

    def _assign(self, option: Optional[Option], buf: List[str]) -> None:
        if option is None:
            self.args = buf
            return
        if option.args:
            logger.debug("%s given more than once; keeping the last occurrence", option.name)
        option.args = buf
