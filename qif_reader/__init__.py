"""
Read-only parser for QIF (Quicken Interchange Format) account exports.
"""

from .controllers import load_transactions, open_reader
from .data_model import (
    DateFormat,
    EnumAccountType,
    EnumClearedStatus,
    EnumDateOrder,
    QifHeader,
    QSplit,
    QTransaction,
)
from .errors import QifReaderError, RecordLimitExceeded, UnknownAccountType
from .parsers import QifReader, ReaderLimits, TruncatedRead, guess_date_format

__all__ = [
    "QifReader",
    "ReaderLimits",
    "TruncatedRead",
    "guess_date_format",
    "load_transactions",
    "open_reader",
    "DateFormat",
    "EnumAccountType",
    "EnumClearedStatus",
    "EnumDateOrder",
    "QifHeader",
    "QSplit",
    "QTransaction",
    "QifReaderError",
    "UnknownAccountType",
    "RecordLimitExceeded",
]
