# qif_reader/data_model/__init__.py
from .interfaces import (
    EnumAccountType, EnumClearedStatus, EnumDateOrder,
    IDateFormat, IHeader, ISplit, IToDict, ITransaction, RecursiveDictStr)
from .q_wrapper import DateFormat, QifHeader, QSplit, QTransaction
__all__ = [
    "EnumAccountType", "EnumClearedStatus", "EnumDateOrder", "IDateFormat",
    "IHeader", "ISplit", "IToDict", "ITransaction", "RecursiveDictStr",
    "DateFormat", "QifHeader", "QSplit", "QTransaction"]
