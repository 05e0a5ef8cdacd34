# qif_stream/data_model/interfaces/i_split.py
from __future__ import annotations

from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol

from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IToDict, Protocol):
    """Structural shape of a split row (S/E/$)."""

    category: str
    amount: Decimal
    memo: str
    tag: str

    def emit_qif(self) -> str: ...
