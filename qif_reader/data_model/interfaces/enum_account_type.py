from __future__ import annotations

from enum import Enum


class EnumAccountType(Enum):
    """
    Account types a QIF transaction export may declare in its ``!Type:`` header.
    The value is the sentinel line as Quicken writes it.
    """

    BANK = "!Type:Bank"
    CASH = "!Type:Cash"
    CREDIT_CARD = "!Type:CCard"
    OTHER_ASSET = "!Type:Oth A"
    OTHER_LIABILITY = "!Type:Oth L"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def from_header(cls, header: str) -> EnumAccountType | None:
        """Case-insensitive lookup of a header line; None when unsupported."""
        key = header.strip().lower()
        for account_type in cls:
            if account_type.value.lower() == key:
                return account_type
        return None


_DESCRIPTIONS = {
    EnumAccountType.BANK: "Bank account transactions",
    EnumAccountType.CASH: "Cash account transactions",
    EnumAccountType.CREDIT_CARD: "Credit card account transactions",
    EnumAccountType.OTHER_ASSET: "Asset account transactions",
    EnumAccountType.OTHER_LIABILITY: "Liability account transactions",
}
