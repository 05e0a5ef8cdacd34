# qif_stream/data_model/q_wrapper/qif_code.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    code: str
    description: str
    used_in: str
    example: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QifCode):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def line(self, value: object) -> str:
        """Render ``value`` as one field line, e.g. ``PGrocery Store``."""
        return f"{self.code}{value}"
