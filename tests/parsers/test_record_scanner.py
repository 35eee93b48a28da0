# tests/parsers/test_record_scanner.py
from __future__ import annotations

import io
from datetime import date

import pytest

from qif_reader.data_model import DateFormat, EnumDateOrder
from qif_reader.errors import RecordLimitExceeded
from qif_reader.parsers import (
    EndOfStream,
    LineSource,
    ReaderLimits,
    RecordScanner,
    TruncatedRead,
)

DMY = DateFormat(EnumDateOrder.DAY_MONTH_YEAR, 4)


def _scanner(text: str, limits: ReaderLimits | None = None) -> RecordScanner:
    return RecordScanner(LineSource(text), DMY, limits)


def test_reads_tags_and_parses_date():
    # Arrange
    scanner = _scanner("D15/03/2023\nT-12.50\nPCoffee Shop\n^\n")
    # Act
    rec = scanner.read_record()
    # Assert
    assert rec == {"D": date(2023, 3, 15), "T": "-12.50", "P": "Coffee Shop"}


def test_repeated_tag_values_are_joined_with_newline():
    # Arrange
    scanner = _scanner("D01/01/2024\nMfirst line\nMsecond line\nA1 Main St\nASpringfield\n^\n")
    # Act
    rec = scanner.read_record()
    # Assert
    assert rec["M"] == "first line\nsecond line"
    assert rec["A"] == "1 Main St\nSpringfield"


@pytest.mark.parametrize(
    "line,tag,expected",
    [
        ("T1,234.56", "T", "1234.56"),
        ("U-1,234.56", "U", "-1234.56"),
        ("$2,000.00", "$", "2000.00"),
        ("T1,234,567.89", "T", "1234,567.89"),
        ("PSmith, John", "P", "Smith, John"),
    ],
)
def test_first_thousands_separator_removed_from_amount_tags_only(line, tag, expected):
    # Arrange
    scanner = _scanner(f"D01/01/2024\n{line}\n^\n")
    # Act
    rec = scanner.read_record()
    # Assert
    assert rec[tag] == expected


def test_each_split_amount_line_is_cleaned():
    # Arrange
    scanner = _scanner("D01/01/2024\n$1,000.00\n$2,500.00\n^\n")
    # Act
    rec = scanner.read_record()
    # Assert
    assert rec["$"] == "1000.00\n2500.00"


def test_immediate_terminator_gives_empty_record():
    # Act
    rec = _scanner("^\n").read_record()
    # Assert
    assert rec == {}, "An empty record is still a record; the transaction layer rejects it"


def test_blank_lines_are_ignored():
    # Act
    rec = _scanner("\nD01/01/2024\n\nT1.00\n^\n").read_record()
    # Assert
    assert rec == {"D": date(2024, 1, 1), "T": "1.00"}


def test_consecutive_records_then_end_of_stream():
    # Arrange
    scanner = _scanner("D01/01/2024\nT1.00\n^\nD02/01/2024\nT2.00\n^\n")
    # Act
    first = scanner.read_record()
    second = scanner.read_record()
    end = scanner.read_record()
    # Assert
    assert first["T"] == "1.00" and second["T"] == "2.00"
    assert isinstance(end, EndOfStream)
    assert end.line_number == 6


def test_unterminated_record_is_end_of_stream():
    # Act
    outcome = _scanner("D01/01/2024\nT1.00\n").read_record()
    # Assert
    assert isinstance(outcome, EndOfStream), "Missing terminator is a clean end, not a fault"


def test_unreadable_date_becomes_none_and_is_logged(caplog):
    # Arrange
    scanner = _scanner("D31/02/2024\nT1.00\n^\n")
    # Act
    with caplog.at_level("WARNING", logger="qif_reader"):
        rec = scanner.read_record()
    # Assert
    assert rec == {"D": None, "T": "1.00"}
    assert "Unreadable date" in caplog.text


class _FailingStream(io.StringIO):
    """Raises OSError once the given number of lines has been read."""

    def __init__(self, text: str, fail_after: int):
        super().__init__(text)
        self._remaining = fail_after

    def readline(self, *args):
        if self._remaining == 0:
            raise OSError("disk went away")
        self._remaining -= 1
        return super().readline(*args)


def test_io_fault_is_reported_as_truncated_read():
    # Arrange
    stream = _FailingStream("D01/01/2024\nT1.00\n^\nD02/01/2024\nT2.00\n^\n", fail_after=4)
    scanner = RecordScanner(LineSource(stream), DMY)
    # Act
    first = scanner.read_record()
    outcome = scanner.read_record()
    # Assert
    assert first["T"] == "1.00"
    assert isinstance(outcome, TruncatedRead)
    assert isinstance(outcome.error, OSError)
    assert outcome.line_number == 4


def test_record_line_limit_is_reported_as_truncated_read():
    # Arrange
    text = "D01/01/2024\n" + "Mmore\n" * 5 + "^\n"
    scanner = _scanner(text, ReaderLimits(max_record_lines=3))
    # Act
    outcome = scanner.read_record()
    # Assert
    assert isinstance(outcome, TruncatedRead)
    assert isinstance(outcome.error, RecordLimitExceeded)
    assert outcome.error.limit_name == "max_record_lines"


def test_total_line_limit_is_reported_as_truncated_read():
    # Arrange
    scanner = _scanner(
        "D01/01/2024\n^\nD02/01/2024\n^\n", ReaderLimits(max_record_lines=None, max_lines=3)
    )
    # Act
    first = scanner.read_record()
    outcome = scanner.read_record()
    # Assert
    assert first == {"D": date(2024, 1, 1)}
    assert isinstance(outcome, TruncatedRead)
    assert outcome.error.limit_name == "max_lines"
