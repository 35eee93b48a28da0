from __future__ import annotations

from enum import Enum


class EnumClearedStatus(Enum):
    """
    Enum representing the cleared status of a transaction.
    """
    CLEARED = '*'  # Cleared
    NOT_CLEARED = 'N'  # Not cleared
    RECONCILED = 'R'  # Reconciled
    UNKNOWN = '?'  # Unknown status

    @classmethod
    def from_char(cls, char: str) -> EnumClearedStatus:
        """
        Convert the value of a ``C`` line to a cleared status.
        Quicken writes ``*`` or ``c`` for cleared and ``X`` or ``R`` for reconciled.
        """
        char = char.strip()
        if char == "":
            return cls.NOT_CLEARED
        for status in cls:
            if status.value == char:
                return status
        if char.lower() == "c":
            return cls.CLEARED
        if char.lower() in ("x", "r"):
            return cls.RECONCILED
        raise ValueError(f"Unknown cleared status character: {char}")
