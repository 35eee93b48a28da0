from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Final

from qif_reader.data_model.interfaces import EnumDateOrder, IDateFormat

_ORDER_BY_LETTERS: Final[dict[str, EnumDateOrder]] = {
    "dmy": EnumDateOrder.DAY_MONTH_YEAR,
    "mdy": EnumDateOrder.MONTH_DAY_YEAR,
    "ymd": EnumDateOrder.YEAR_MONTH_DAY,
}
_PATTERN_TOKEN: Final[re.Pattern[str]] = re.compile(r"d+|m+|y+")
_DIGIT_GROUP: Final[re.Pattern[str]] = re.compile(r"\d+")
# strptime("%y") pivot: 00-68 -> 20xx, 69-99 -> 19xx
_TWO_DIGIT_YEAR_PIVOT = 69


@dataclass(frozen=True)
class DateFormat:
    """
    Day/month/year ordering of the dates in a QIF file.

    ``year_digits`` records how the file writes years (2 or 4 digits).
    ``parse`` accepts any non-digit separator between the three components,
    which covers ``31/12/2024``, ``31.12.2024`` and Quicken's ``12/31'24``.
    """

    order: EnumDateOrder = EnumDateOrder.DAY_MONTH_YEAR
    year_digits: int = 4

    def __post_init__(self) -> None:
        if self.year_digits not in (2, 4):
            raise ValueError(f"year_digits must be 2 or 4, got {self.year_digits!r}")

    @classmethod
    def default(cls) -> DateFormat:
        """dd/mm/yyyy, used when the caller gives no format and none can be guessed."""
        return cls(EnumDateOrder.DAY_MONTH_YEAR, 4)

    @classmethod
    def from_pattern(cls, pattern: str) -> DateFormat:
        """
        Build a format from a pattern such as ``"dd/mm/yyyy"``, ``"mm/dd/yy"``
        or ``"yyyy-mm-dd"``. Separators in the pattern are ignored.

        Raises:
            ValueError: if the pattern does not name day, month and year
                exactly once in a supported order.
        """
        tokens = _PATTERN_TOKEN.findall(pattern.strip().lower())
        letters = "".join(t[0] for t in tokens)
        order = _ORDER_BY_LETTERS.get(letters)
        if order is None:
            raise ValueError(
                f"Unsupported date format {pattern!r}; "
                "expected day, month and year as dd/mm/yyyy, mm/dd/yyyy or yyyy/mm/dd"
            )
        year_token = tokens[letters.index("y")]
        return cls(order, 2 if len(year_token) <= 2 else 4)

    def pattern(self) -> str:
        year = "y" * self.year_digits
        if self.order is EnumDateOrder.MONTH_DAY_YEAR:
            return f"mm/dd/{year}"
        if self.order is EnumDateOrder.YEAR_MONTH_DAY:
            return f"{year}/mm/dd"
        return f"dd/mm/{year}"

    def parse(self, raw: str) -> date:
        groups = _DIGIT_GROUP.findall(raw)
        if len(groups) != 3:
            raise ValueError(f"Cannot read a {self.pattern()} date from {raw!r}")

        if self.order is EnumDateOrder.DAY_MONTH_YEAR:
            day, month, year = groups
        elif self.order is EnumDateOrder.MONTH_DAY_YEAR:
            month, day, year = groups
        else:
            year, month, day = groups

        try:
            return date(_expand_year(year), int(month), int(day))
        except ValueError as e:
            raise ValueError(
                f"Invalid {self.pattern()} date {raw!r}: {e}"
            ) from e

    def __str__(self) -> str:
        return self.pattern()


def _expand_year(token: str) -> int:
    year = int(token)
    if len(token) > 2:
        return year
    return year + (1900 if year >= _TWO_DIGIT_YEAR_PIVOT else 2000)


if TYPE_CHECKING:
    _is_i_date_format: type[IDateFormat] = DateFormat
