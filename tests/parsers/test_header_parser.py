# tests/parsers/test_header_parser.py
from __future__ import annotations

import pytest

from qif_reader.data_model import EnumAccountType
from qif_reader.errors import UnknownAccountType
from qif_reader.parsers import LineSource, parse_header


def _source(*lines: str) -> LineSource:
    return LineSource("".join(f"{ln}\n" for ln in lines))


@pytest.mark.parametrize(
    "code,expected",
    [
        ("!Type:Bank", EnumAccountType.BANK),
        ("!type:cash", EnumAccountType.CASH),
        ("!TYPE:CCARD", EnumAccountType.CREDIT_CARD),
        ("!Type:Oth A", EnumAccountType.OTHER_ASSET),
        ("!type:oth l", EnumAccountType.OTHER_LIABILITY),
    ],
)
def test_supported_headers_are_matched_case_insensitively(code, expected):
    # Arrange
    src = _source(code, "D01/01/2024", "^")
    # Act
    header = parse_header(src)
    # Assert
    assert header.account_type is expected
    assert header.code == code, "The header line is kept as written"


@pytest.mark.parametrize(
    "text",
    ["!Type:Invst\nD01/01/2024\n^\n", "!Account\nNChecking\n^\n", "D01/01/2024\n^\n", ""],
)
def test_unsupported_or_missing_header_raises(text):
    # Act / Assert
    with pytest.raises(UnknownAccountType) as ei:
        parse_header(LineSource(text))
    assert "!Type:Bank" in str(ei.value), "Message must list the supported headers"
    assert set(ei.value.supported) == {t.value for t in EnumAccountType}


def test_cursor_left_on_first_data_line():
    # Arrange
    src = _source("!Type:Bank", "D01/01/2024", "T5.00", "^")
    # Act
    parse_header(src)
    # Assert
    assert src.readline() == "D01/01/2024\n", "The first data line must be read again"
    assert src.line_number == 2


def test_terminator_after_header_is_consumed():
    # Arrange
    src = _source("!Type:Bank", "^", "D01/01/2024", "^")
    # Act
    parse_header(src)
    # Assert
    assert src.readline() == "D01/01/2024\n"


def test_option_lines_are_all_kept_and_last_is_current():
    # Arrange
    src = _source("!Type:Bank", "!Option:MDY", "!Option:AutoSwitch", "D01/01/2024", "^")
    # Act
    header = parse_header(src)
    # Assert
    assert header.options == ["!Option:MDY", "!Option:AutoSwitch"]
    assert header.current_options == ["!Option", "AutoSwitch"]


def test_header_only_file_is_valid():
    # Arrange
    src = _source("!Type:Cash")
    # Act
    header = parse_header(src)
    # Assert
    assert header.account_type is EnumAccountType.CASH
    assert src.readline() is None


def test_byte_order_mark_before_header_is_ignored():
    # Arrange
    src = LineSource("\ufeff!Type:Bank\r\nD01/01/2024\r\n^\r\n")
    # Act
    header = parse_header(src)
    # Assert
    assert header.code == "!Type:Bank"
