# qif_reader/parsers/qif_file_reader.py
from __future__ import annotations

import logging
import logging.config
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Final, TextIO

from qif_reader.data_model import (
    DateFormat,
    EnumAccountType,
    IDateFormat,
    QifHeader,
    QTransaction,
)
from qif_reader.utilities import LOGGING

from .format_guesser import guess_date_format
from .header_parser import parse_header
from .line_source import LineSource
from .record_scanner import (
    EndOfStream,
    FieldRecord,
    ReaderLimits,
    RecordScanner,
    TruncatedRead,
)

logging.config.dictConfig(LOGGING)

log = logging.getLogger(__name__)

# returned by _next_slot when the source has no more records
_END: Final = object()


class QifReader:
    """
    Reads a QIF account export and gives access to its transactions.

    Usage::

        reader = QifReader(open("/path/to/file.qif"), "dd/mm/yyyy")
        for txn in reader:
            print(txn.date, txn.amount)

    Without a ``date_format`` the day/month order is guessed from the first
    date that settles it, falling back to dd/mm/yyyy.

    Records are read lazily and cached, so iterating again, or calling
    ``transactions()`` after iterating, never reads the source twice. All
    iteration shares one cursor: starting a new pass restarts any pass in
    progress on the same reader. Not safe for concurrent use.
    """

    SUPPORTED_ACCOUNTS: Final[Mapping[str, str]] = {
        t.value: t.description for t in EnumAccountType
    }

    def __init__(
        self,
        data: str | TextIO,
        date_format: str | IDateFormat | None = None,
        *,
        limits: ReaderLimits | None = None,
        make_transaction: Callable[[FieldRecord], Any] = QTransaction.from_record,
    ):
        self._source = LineSource(data)

        forced = (
            DateFormat.from_pattern(date_format)
            if isinstance(date_format, str)
            else date_format
        )
        if forced is None:
            guessed = guess_date_format(self._source)
            self._date_format_guessed = guessed is not None
            self._date_format: IDateFormat = guessed or DateFormat.default()
        else:
            self._date_format_guessed = False
            self._date_format = forced

        self._header = parse_header(self._source)
        self._scanner = RecordScanner(self._source, self._date_format, limits)
        self._make_transaction = make_transaction

        self._cache: list[Any | None] = []
        self._exhausted = False
        self._truncated_read: TruncatedRead | None = None
        self.reset()

    # region Properties

    @property
    def header(self) -> QifHeader:
        return self._header

    @property
    def account_type(self) -> EnumAccountType:
        return self._header.account_type

    @property
    def date_format(self) -> IDateFormat:
        return self._date_format

    @property
    def date_format_guessed(self) -> bool:
        """True when the date format came from the data rather than the caller or the default."""
        return self._date_format_guessed

    @property
    def truncated_read(self) -> TruncatedRead | None:
        """The fault that ended reading early, if any."""
        return self._truncated_read

    @property
    def size(self) -> int:
        return self.count()

    # endregion Properties

    # region Public API

    def each(self, visit: Callable[[Any], None]) -> None:
        """
        Call ``visit`` with each transaction in file order. Transactions are
        read as they are visited, so this suits large files better than
        ``transactions()``.
        """
        for transaction in self:
            visit(transaction)

    def __iter__(self) -> Iterator[Any]:
        self.reset()
        while (slot := self._next_slot()) is not _END:
            if slot is not None:
                yield slot

    def transactions(self) -> list[Any]:
        """
        Return every transaction in the file. Reads the whole file first, so it
        may not be suitable for very large files.
        """
        self._read_all()
        return [t for t in self._cache if t is not None]

    all = transactions

    def count(self) -> int:
        """Number of records in the file, including ones that gave no transaction."""
        self._read_all()
        return len(self._cache)

    def reset(self) -> None:
        """Move the cursor before the first transaction; the cache is kept."""
        self._index = -1

    # endregion Public API

    # region Cache

    def _next_slot(self) -> Any:
        self._index = min(self._index + 1, len(self._cache))
        if self._index < len(self._cache):
            return self._cache[self._index]
        if self._scan_next():
            return self._cache[self._index]
        return _END

    def _read_all(self) -> None:
        while self._scan_next():
            pass

    def _scan_next(self) -> bool:
        """Scan one more record into the cache; False once the source is done."""
        if self._exhausted:
            return False

        outcome = self._scanner.read_record()
        if isinstance(outcome, EndOfStream):
            self._close()
            return False
        if isinstance(outcome, TruncatedRead):
            log.warning(
                "Stopped reading QIF data at line %d after %d record(s): %s",
                outcome.line_number,
                len(self._cache),
                outcome.error,
            )
            self._truncated_read = outcome
            self._close()
            return False

        transaction = self._make_transaction(outcome)
        if transaction is None:
            log.debug(
                "Record %d gave no transaction; caching an empty slot",
                len(self._cache),
            )
        self._cache.append(transaction)
        return True

    def _close(self) -> None:
        self._exhausted = True
        if not self._source.closed:
            self._source.close()

    # endregion Cache

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_type={self.account_type.name}, "
            f"date_format={self._date_format.pattern()!r}, cached={len(self._cache)})"
        )
