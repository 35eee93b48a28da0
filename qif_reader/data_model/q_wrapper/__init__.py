# qif_reader/data_model/q_wrapper/__init__.py

from .date_format import DateFormat
from .q_split import QSplit
from .q_transaction import QTransaction
from .qif_header import QifHeader

__all__ = [
    "DateFormat",
    "QifHeader",
    "QSplit",
    "QTransaction",
]
