from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from qif_reader.data_model.interfaces import (
    EnumAccountType,
    IHeader,
    IToDict,
    RecursiveDictStr,
)


@dataclass
class QifHeader:
    """
    The ``!``-prefixed block at the top of a QIF account export.

    ``code`` is the account-type line as written in the file; ``options`` holds
    every following ``!Option:...`` style line in file order.

    Two headers are equal when they declare the same account type and the same
    options. ``code`` is not compared, so ``!Type:Bank`` equals ``!type:bank``.
    """

    code: str
    account_type: EnumAccountType
    options: list[str] = field(default_factory=list)

    @property
    def current_options(self) -> list[str] | None:
        """The last option line split on ':' (older callers only ever saw this one)."""
        if not self.options:
            return None
        return self.options[-1].split(":")

    def qif_entry(self) -> str:
        return "\n".join([self.code, *self.options])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QifHeader):
            return False
        return (
            self.account_type == other.account_type
            and self.options == other.options
        )

    def __hash__(self) -> int:
        return hash((self.account_type, tuple(self.options)))

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "code": self.code,
            "account_type": self.account_type.name,
            "options": list(self.options),
        }


if TYPE_CHECKING:
    _is_i_header: type[IHeader] = QifHeader
    _is_IToDict: type[IToDict] = QifHeader
