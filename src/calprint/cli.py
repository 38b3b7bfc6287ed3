from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional, TextIO

from .config import TokenReader, resolve
from .core.errors import CalprintError, ConfigError
from .printer import CalendarPrinter

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CALPRINT_LOG_LEVEL"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def _log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    calprint [--start YEAR:MONTH] [--column N] [--month-num N]

    Any flag left out is asked for interactively.
    """
    if argv is None:
        argv = sys.argv[1:]
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    logging.basicConfig(level=_log_level(), stream=stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        reader = TokenReader(stdin)
        config = resolve(argv, reader=reader, out=stdout)
        logger.debug("resolved %s", config)
        if reader.requests:
            # end the prompt line so the first calendar row starts at column 0
            stdout.write("\n")
        CalendarPrinter(config, out=stdout).print()
    except ConfigError as e:
        print(f"calprint: {e}", file=stderr)
        return EXIT_USAGE
    except CalprintError as e:
        print(f"calprint: {e}", file=stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
