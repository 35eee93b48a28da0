# qif_reader/utilities/converters_scalar.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Optional


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def to_decimal(value: Any) -> Decimal:
    """
    Convert a QIF amount to Decimal.

    QIF amounts use '.' as the decimal mark. Accepted string forms:
      - "1234", "-1234.50", "+12"
      - "1,234.56" and "1234,567.00" (every ',' is a thousands mark)
      - "(1,234.56)" and "1234.56-" (accounting negatives)
      - "$1,234.56" (currency symbols and spaces are ignored)

    Raises:
        ValueError: if no digits are present or the cleaned value is invalid.

    Examples:
        to_decimal("-3,188.32")   -> Decimal('-3188.32')
        to_decimal("(1,234.56)")  -> Decimal('-1234.56')
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("Unsupported type for Decimal conversion: bool")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return Decimal(str(value))
    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_amount_string(value)
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e


def clean_amount_string(value: str) -> str:
    s = value.strip().replace("\xa0", " ").replace(_UNICODE_MINUS, "-").strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()

    s = _NON_AMOUNT_CHARS.sub("", s)
    if s.startswith("+"):
        s = s[1:]
    if s.startswith("-"):
        neg = not neg
        s = s[1:]

    if not _DIGITS.search(s):
        raise ValueError(f"No digits found in input: {value!r}")

    s = s.replace(",", "")
    return f"-{s}" if neg else s


_DIGITS: Final[re.Pattern[str]] = re.compile(r"\d")
_NON_AMOUNT_CHARS: Final[re.Pattern[str]] = re.compile(r"[^\d,.\-+]+")
_UNICODE_MINUS = "\u2212"  # '−'
