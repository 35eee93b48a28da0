# qif_reader/parsers/format_guesser.py
from __future__ import annotations

import logging
import re
from typing import Final

from qif_reader.data_model import DateFormat, EnumDateOrder

from .line_source import LineSource

log = logging.getLogger(__name__)

# D<1-2 digits><sep><1-2 digits><sep><2-4 digits>, any single non-digit as separator
_DATE_LINE: Final[re.Pattern[str]] = re.compile(r"^D(\d{1,2})\D(\d{1,2})\D(\d{2,4})")


def guess_date_format(source: LineSource) -> DateFormat | None:
    """
    Infer the day/month order of a QIF file from its first conclusive ``D`` line.

    Lines are read from the current position. A date whose first two numbers
    are both valid months says nothing about the order and is skipped. Returns
    None when the input runs out before a conclusive line; the caller picks
    the default. A read fault also gives None: the record scanner meets the
    same fault later and reports it. The source is rewound to its start in
    every case.
    """
    try:
        while (line := source.readline()) is not None:
            guessed = guess_from_line(line)
            if guessed is not None:
                log.debug(
                    "Guessed date format %s from line %d: %r",
                    guessed,
                    source.line_number,
                    line.strip(),
                )
                return guessed
        log.debug("No conclusive date line found; date format not guessed")
        return None
    except (OSError, ValueError) as e:
        log.debug(
            "Read fault at line %d while guessing the date format: %s",
            source.line_number,
            e,
        )
        return None
    finally:
        source.rewind()


def guess_from_line(line: str) -> DateFormat | None:
    """Return the format a single line proves, or None if it proves nothing."""
    match = _DATE_LINE.match(line.strip())
    if match is None:
        return None
    first, second, year = match.groups()
    if _is_month(first):
        if _is_month(second):
            return None
        order = EnumDateOrder.MONTH_DAY_YEAR
    else:
        order = EnumDateOrder.DAY_MONTH_YEAR
    return DateFormat(order, 2 if len(year) == 2 else 4)


def _is_month(token: str) -> bool:
    return 1 <= int(token) <= 12
