# qif_stream/data_model/interfaces/enum_cleared_status.py
from __future__ import annotations

from enum import Enum


class EnumClearedStatus(Enum):
    """
    Cleared status of a transaction (the ``C`` field).
    """

    NOT_CLEARED = ""
    CLEARED = "*"
    RECONCILED = "R"

    @classmethod
    def from_char(cls, char: str) -> EnumClearedStatus:
        """
        Convert the raw ``C`` value to a status.

        ``*`` and ``c`` mean cleared, ``R`` and ``X`` mean reconciled (either
        case), blank means not cleared.
        """
        c = (char or "").strip()
        if c == "":
            return cls.NOT_CLEARED
        if c == "*" or c.lower() == "c":
            return cls.CLEARED
        if c.lower() in ("r", "x"):
            return cls.RECONCILED
        raise ValueError(f"Unknown cleared status character: {char!r}")

    def __str__(self) -> str:
        return self.value
