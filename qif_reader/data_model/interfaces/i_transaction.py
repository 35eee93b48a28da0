# qif_reader/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing_extensions import Protocol, runtime_checkable

from .enum_cleared_status import EnumClearedStatus
from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a transaction read from a QIF account export."""

    date: date
    amount: Decimal
    cleared: EnumClearedStatus
    number: str
    payee: str
    memo: str
    address: str
    category: str
    tag: str
    splits: list[ISplit]

    def splits_exist(self) -> bool: ...
