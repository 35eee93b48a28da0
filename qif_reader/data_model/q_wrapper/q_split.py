from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from qif_reader.data_model.interfaces import ISplit, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QSplit:
    """
    One split line group (``S`` category, ``E`` memo, ``$`` amount) of a transaction.
    """

    category: str = ""
    tag: str = ""
    memo: str = ""
    amount: Decimal | None = None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {"category": self.category}
        if self.tag:
            d["tag"] = self.tag
        if self.memo:
            d["memo"] = self.memo
        if self.amount is not None:
            d["amount"] = str(self.amount)
        return d


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
