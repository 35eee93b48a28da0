# qif_reader/data_model/interfaces/i_split.py
from __future__ import annotations

from decimal import Decimal
from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IToDict, Protocol):
    category: str
    tag: str
    memo: str
    amount: Decimal | None
