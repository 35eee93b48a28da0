# qif_reader/parsers/record_scanner.py
"""
Reads one QIF record at a time.

A record is a run of ``<tag><value>`` lines closed by a ``^`` line.
``RecordScanner.read_record`` returns one of three outcomes:

- a ``FieldRecord`` when the ``^`` line was reached,
- ``EndOfStream`` when the input ended first (normal end, lines of an
  unterminated record are dropped),
- ``TruncatedRead`` when reading failed for any other reason. Iteration stops
  either way, but the fault stays visible to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Final, TypeAlias, Union

from qif_reader.data_model import IDateFormat
from qif_reader.errors import RecordLimitExceeded

from .line_source import LineSource

log = logging.getLogger(__name__)

RECORD_END: Final = "^"
DATE_TAG: Final = "D"
AMOUNT_TAGS: Final = frozenset({"T", "U", "$"})
THOUSANDS_SEPARATOR: Final = ","

FieldRecord: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class EndOfStream:
    line_number: int


@dataclass(frozen=True)
class TruncatedRead:
    """Record scanning stopped on a fault instead of a clean end of input."""

    line_number: int
    error: Exception


ScanOutcome: TypeAlias = Union[FieldRecord, EndOfStream, TruncatedRead]


@dataclass(frozen=True)
class ReaderLimits:
    """
    Bounds on how much input one reader will consume.
    ``None`` switches a bound off.
    """

    max_record_lines: int | None = 10_000
    max_lines: int | None = None


class RecordScanner:
    def __init__(
        self,
        source: LineSource,
        date_format: IDateFormat,
        limits: ReaderLimits | None = None,
    ):
        self._source = source
        self._date_format = date_format
        self._limits = limits or ReaderLimits()

    def read_record(self) -> ScanOutcome:
        record: FieldRecord = {}
        record_lines = 0
        try:
            while (line := self._source.readline()) is not None:
                record_lines += 1
                self._check_limits(record_lines)
                stripped = line.strip()
                if not stripped:
                    continue
                if stripped.startswith(RECORD_END):
                    return self._finish(record)
                self._append(record, stripped[0], stripped[1:].strip())
        except (OSError, ValueError) as e:
            log.debug("Read fault at line %d: %s", self._source.line_number, e)
            return TruncatedRead(self._source.line_number, e)

        if record:
            log.debug(
                "Input ended inside a record; dropping %d tag(s): %r",
                len(record),
                sorted(record),
            )
        return EndOfStream(self._source.line_number)

    def _append(self, record: FieldRecord, tag: str, value: str) -> None:
        if tag in AMOUNT_TAGS:
            value = value.replace(THOUSANDS_SEPARATOR, "", 1)
        if tag in record:
            record[tag] = f"{record[tag]}\n{value}"
        else:
            record[tag] = value

    def _finish(self, record: FieldRecord) -> FieldRecord:
        if DATE_TAG in record:
            raw = record[DATE_TAG]
            try:
                record[DATE_TAG] = self._date_format.parse(raw)
            except ValueError as e:
                log.warning(
                    "Unreadable date %r in record ending at line %d: %s",
                    raw,
                    self._source.line_number,
                    e,
                )
                record[DATE_TAG] = None
        return record

    def _check_limits(self, record_lines: int) -> None:
        max_record = self._limits.max_record_lines
        if max_record is not None and record_lines > max_record:
            raise RecordLimitExceeded(
                "max_record_lines", max_record, self._source.line_number
            )
        max_lines = self._limits.max_lines
        if max_lines is not None and self._source.line_number > max_lines:
            raise RecordLimitExceeded("max_lines", max_lines, self._source.line_number)
