# qif_reader/data_model/interfaces/i_header.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .enum_account_type import EnumAccountType
from .i_to_dict import IToDict


@runtime_checkable
class IHeader(IToDict, Protocol):
    # data attributes
    code: str
    account_type: EnumAccountType
    options: list[str]

    # behavior
    @property
    def current_options(self) -> list[str] | None: ...
    def qif_entry(self) -> str: ...
