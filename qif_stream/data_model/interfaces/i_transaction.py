# qif_stream/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, runtime_checkable

from typing_extensions import Protocol

from .enum_cleared_status import EnumClearedStatus
from .i_split import ISplit
from .i_to_dict import IToDict

if TYPE_CHECKING:
    from ..qif_parsers_emitters.date_format import DateFormat


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a bank-style QIF transaction."""

    date: date
    amount: Decimal
    cleared: EnumClearedStatus
    number: str
    payee: str
    memo: str
    address: str
    category: str
    tag: str
    splits: list[ISplit]

    def splits_exist(self) -> bool: ...
    def emit_category(self) -> str: ...
    def emit_qif(self, date_format: DateFormat) -> str: ...
