# qif_reader/errors.py
"""
Exceptions raised by the QIF reader.

Only configuration problems are raised out of the public API. Per-record
conditions are reported through the scanner outcomes in
``qif_reader.parsers.record_scanner``.
"""

from __future__ import annotations

from collections.abc import Iterable


class QifReaderError(ValueError):
    """Base class for every error raised by this package."""


class UnknownAccountType(QifReaderError):
    """The leading ``!Type:`` header is missing or not a supported account type."""

    def __init__(self, header: str | None, supported: Iterable[str]):
        self.header = header
        self.supported = tuple(supported)
        super().__init__(
            "Unknown account type "
            f"{header!r}. Should be one of:\n{list(self.supported)!r}"
        )


class RecordLimitExceeded(QifReaderError):
    """A record or the whole source grew past the configured line bound."""

    def __init__(self, limit_name: str, limit: int, line_number: int):
        self.limit_name = limit_name
        self.limit = limit
        self.line_number = line_number
        super().__init__(
            f"{limit_name} of {limit} exceeded at line {line_number}"
        )
