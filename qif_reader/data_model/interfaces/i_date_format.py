# qif_reader/data_model/interfaces/i_date_format.py
from __future__ import annotations

from datetime import date
from typing_extensions import Protocol, runtime_checkable

from .enum_date_order import EnumDateOrder


@runtime_checkable
class IDateFormat(Protocol):
    """Converts the text of a ``D`` line into a date for one fixed component order."""

    order: EnumDateOrder
    year_digits: int

    def parse(self, raw: str) -> date:
        """Return the date in ``raw``; raise ``ValueError`` when it cannot be read."""
        ...

    def pattern(self) -> str: ...
