# qif_reader/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the QIF reader data model.
"""

from .enum_account_type import EnumAccountType
from .enum_cleared_status import EnumClearedStatus
from .enum_date_order import EnumDateOrder
from .i_date_format import IDateFormat
from .i_header import IHeader
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "EnumAccountType",
    "EnumClearedStatus",
    "EnumDateOrder",
    "IDateFormat",
    "IHeader",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]
