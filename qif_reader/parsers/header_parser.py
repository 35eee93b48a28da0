# qif_reader/parsers/header_parser.py
from __future__ import annotations

import logging

from qif_reader.data_model import EnumAccountType, QifHeader
from qif_reader.errors import UnknownAccountType

from .line_source import LineSource

log = logging.getLogger(__name__)

HEADER_MARKER = "!"
RECORD_END = "^"
_BOM = "\ufeff"


def parse_header(source: LineSource) -> QifHeader:
    """
    Consume the ``!`` lines at the current position and return the header.

    The first ``!`` line is the account type; later ones are kept as options.
    On return the source is positioned at the first data line: a ``^`` right
    after the header is consumed, any other line is left to be read again.

    Raises:
        UnknownAccountType: if there is no header or the account type is not
            one of ``EnumAccountType``.
    """
    headers: list[str] = []
    mark = source.mark()
    while (line := source.readline()) is not None:
        stripped = line.strip()
        if not headers:
            stripped = stripped.lstrip(_BOM)
        if not stripped.startswith(HEADER_MARKER):
            if not stripped.startswith(RECORD_END):
                source.reset(mark)
            break
        headers.append(stripped)
        mark = source.mark()

    code = headers[0] if headers else None
    account_type = EnumAccountType.from_header(code) if code else None
    if account_type is None:
        raise UnknownAccountType(code, (t.value for t in EnumAccountType))

    header = QifHeader(code=code, account_type=account_type, options=headers[1:])
    log.debug("Read header %r with %d option line(s)", code, len(header.options))
    return header
