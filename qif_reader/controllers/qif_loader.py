# qif_reader/controllers/qif_loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from qif_reader.data_model import IDateFormat, QTransaction
from qif_reader.parsers import QifReader, ReaderLimits
from qif_reader.utilities import open_for_read

log = logging.getLogger(__name__)


def open_reader(
    path: Path,
    date_format: str | IDateFormat | None = None,
    encoding: str = "utf-8",
    limits: ReaderLimits | None = None,
) -> QifReader:
    """
    Open a QIF file and return a reader over it.

    The reader owns the file from here on and closes it once every record has
    been read. Undecodable bytes are replaced rather than raised.
    """
    f = open_for_read(path=path, binary=False, encoding=encoding, errors="replace")
    try:
        return QifReader(f, date_format, limits=limits)
    except Exception:
        f.close()
        raise


def load_transactions(
    path: Path,
    date_format: str | IDateFormat | None = None,
    encoding: str = "utf-8",
) -> List[QTransaction]:
    """Return every transaction in the QIF file at ``path``."""
    reader = open_reader(path, date_format=date_format, encoding=encoding)
    transactions = reader.transactions()
    log.info(
        "Loaded %d transaction(s) from %s (%s, dates %s)",
        len(transactions),
        path,
        reader.account_type.name,
        reader.date_format.pattern(),
    )
    return transactions
