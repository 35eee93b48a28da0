# qif_reader/parsers/__init__.py
from .format_guesser import guess_date_format
from .header_parser import parse_header
from .line_source import LineSource
from .qif_file_reader import QifReader
from .record_scanner import (
    EndOfStream,
    FieldRecord,
    ReaderLimits,
    RecordScanner,
    TruncatedRead,
)

__all__ = [
    "QifReader",
    "LineSource",
    "RecordScanner",
    "ReaderLimits",
    "FieldRecord",
    "EndOfStream",
    "TruncatedRead",
    "guess_date_format",
    "parse_header",
]
