from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from itertools import zip_longest
from typing import TYPE_CHECKING, Any

from qif_reader.data_model.interfaces import (
    EnumClearedStatus,
    ITransaction,
    IToDict,
    RecursiveDictStr,
)
from qif_reader.utilities import is_null_or_whitespace, to_decimal

from .q_split import QSplit

log = logging.getLogger(__name__)


@dataclass
class QTransaction:
    """
    Represents a single transaction of a QIF account export.
    """

    # region Core Fields

    date: date
    amount: Decimal = Decimal(0)
    cleared: EnumClearedStatus = EnumClearedStatus.NOT_CLEARED
    number: str = ""
    payee: str = ""
    memo: str = ""
    address: str = ""
    category: str = ""
    tag: str = ""
    splits: list[QSplit] = field(default_factory=list)

    # endregion Core Fields

    # every tag exactly as it came out of the record scanner
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def splits_exist(self) -> bool:
        return bool(self.splits)

    # region Construction

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> QTransaction | None:
        """
        Build a transaction from a scanned field record.

        Returns None when the record cannot describe a transaction: no parsed
        ``D`` date (this covers the empty record), or an amount that is not a
        number.
        """
        txn_date = record.get("D")
        if not isinstance(txn_date, date):
            log.debug("Record without a usable date: %r", record)
            return None

        try:
            amount = _amount(record.get("T") or record.get("U"))
            splits = _splits(record)
        except ValueError as e:
            log.debug("Record with an unreadable amount: %r (%s)", record, e)
            return None

        category, tag = _category_and_tag(record.get("L", ""))
        return cls(
            date=txn_date,
            amount=amount if amount is not None else Decimal(0),
            cleared=_cleared(record.get("C", "")),
            number=record.get("N", ""),
            payee=record.get("P", ""),
            memo=record.get("M", ""),
            address=record.get("A", ""),
            category=category,
            tag=tag,
            splits=splits,
            raw=dict(record),
        )

    # endregion Construction

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the transaction to a dictionary of strings, omitting empty fields.
        """
        d: dict[str, RecursiveDictStr] = {
            "date": self.date.isoformat(),
            "amount": str(self.amount),
            "cleared": self.cleared.name,
        }

        def _addif(key: str, value: str) -> None:
            if value:
                d[key] = value

        _addif("number", self.number)
        _addif("payee", self.payee)
        _addif("memo", self.memo)
        _addif("address", self.address)
        _addif("category", self.category)
        _addif("tag", self.tag)
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        return d


def _amount(value: str | None) -> Decimal | None:
    if is_null_or_whitespace(value):
        return None
    if "\n" in value:
        # repeated T/U lines, no single amount to pick
        raise ValueError(f"Several amounts in one field: {value!r}")
    return to_decimal(value)


def _cleared(value: str) -> EnumClearedStatus:
    try:
        return EnumClearedStatus.from_char(value)
    except ValueError:
        log.debug("Unknown cleared status %r", value)
        return EnumClearedStatus.UNKNOWN


def _category_and_tag(value: str) -> tuple[str, str]:
    # "Category/Class": the class is what Quicken shows as a tag
    category, _, tag = value.partition("/")
    return category.strip(), tag.strip()


def _splits(record: Mapping[str, Any]) -> list[QSplit]:
    # repeated S/E/$ lines arrive joined with "\n"; position i is split i
    categories = _lines(record.get("S"))
    memos = _lines(record.get("E"))
    amounts = _lines(record.get("$"))
    splits = []
    for category_line, memo, amount in zip_longest(
        categories, memos, amounts, fillvalue=""
    ):
        category, tag = _category_and_tag(category_line)
        splits.append(
            QSplit(category=category, tag=tag, memo=memo, amount=_amount(amount))
        )
    return splits


def _lines(value: str | None) -> list[str]:
    return value.split("\n") if value else []


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
