from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from .core.types import Config, MonthInfo
from .months import chunk, month_sequence

logger = logging.getLogger(__name__)

CELL_W = 2
GRID_W = 7 * CELL_W + 6  # seven cells, single-space separated
WEEK_ROWS = 6  # enough for any month


def dow_header() -> str:
    return "Mo Tu We Th Fr Sa Su"


def cell(day: Optional[int]) -> str:
    return f"{day:>{CELL_W}d}" if day else " " * CELL_W


def month_weeks(info: MonthInfo) -> List[List[Optional[int]]]:
    """Day numbers laid out Monday-first, None for padding cells."""
    weeks: List[List[Optional[int]]] = []
    wk: List[Optional[int]] = [None] * info.first_weekday
    for d in range(1, info.days + 1):
        wk.append(d)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk.extend([None] * (7 - len(wk)))
        weeks.append(wk)
    return weeks


def month_lines(info: MonthInfo) -> List[str]:
    """Title, weekday header and six week rows, every line exactly GRID_W wide."""
    lines = [info.title.center(GRID_W), dow_header()]
    for wk in month_weeks(info):
        lines.append(" ".join(cell(d) for d in wk))
    while len(lines) < WEEK_ROWS + 2:
        lines.append(" " * GRID_W)
    return lines


class CalendarPrinter:
    def __init__(self, config: Config, *, out: Optional[TextIO] = None, gap: int = 3):
        if gap < 0:
            raise ValueError("gap must be >= 0")
        self.config = config
        self.out = out
        self.gap = gap

    def render_lines(self) -> List[str]:
        months = month_sequence(self.config.start, self.config.month_num)
        rows = chunk(months, self.config.column_num)
        logger.debug("laying out %d months in %d rows of up to %d", len(months), len(rows), self.config.column_num)

        sep = " " * self.gap
        lines: List[str] = []
        for i, row in enumerate(rows):
            if i:
                lines.append("")
            grids = [month_lines(m) for m in row]
            for parts in zip(*grids):
                lines.append(sep.join(parts).rstrip())
        return lines

    def render(self) -> str:
        lines = self.render_lines()
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def print(self) -> None:
        text = self.render()
        out = self.out if self.out is not None else sys.stdout
        out.write(text)
        out.flush()
