# qif_stream/data_model/q_wrapper/q_transaction.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from . import qif_codes as emit_q
from ..interfaces import (
    EnumClearedStatus,
    IToDict,
    ITransaction,
    RecursiveDictStr,
)
from .q_split import QSplit

if TYPE_CHECKING:
    from ..qif_parsers_emitters.date_format import DateFormat

# sentinel for "not set"
_MISSING_DATE = date(1900, 1, 1)


def _multiline(code: emit_q.QifCode, value: str) -> list[str]:
    """One prefixed line per text line, e.g. MLine 1 / MLine 2."""
    if value == "":
        return []
    return [code.line(part) for part in value.split("\n")]


@total_ordering
@dataclass
class QTransaction:
    """
    Represents a single bank-style QIF transaction.
    """

    # region Core Fields

    date: date = _MISSING_DATE
    amount: Decimal = Decimal(0)
    cleared: EnumClearedStatus = EnumClearedStatus.NOT_CLEARED
    number: str = ""
    payee: str = ""
    memo: str = ""
    address: str = ""
    category: str = ""
    tag: str = ""

    # endregion Core Fields

    splits: list[QSplit] = field(default_factory=list)

    def splits_exist(self) -> bool:
        return bool(self.splits)

    # region IEquatable

    def _key(self) -> tuple:
        return (
            self.date,
            self.payee,
            self.amount,
            self.category,
            self.tag,
            self.memo,
            self.number,
            self.cleared.value,
            self.address,
            tuple(self.splits),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QTransaction):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # endregion IEquatable

    # region IComparable

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QTransaction):
            return NotImplemented
        return self._key()[:6] < other._key()[:6]

    # endregion IComparable

    # region Parser/Emitter

    def emit_category(self) -> str:
        """Return the QIF Category line, or "" when there is nothing to say."""
        category = self.category or ""
        tag = (self.tag or "").strip()
        if not category and not tag:
            return ""
        parts = [category]
        if tag:
            parts.append(tag)
        return emit_q.category().line("/".join(parts))

    def emit_qif(self, date_format: DateFormat) -> str:
        """
        Returns the record lines of this transaction, without the ``^`` terminator.
        """
        parts = [
            emit_q.date().line(date_format.format(self.date)),
            emit_q.amount().line(format(self.amount, "f")),
            (
                emit_q.cleared_status().line(self.cleared)
                if self.cleared != EnumClearedStatus.NOT_CLEARED
                else ""
            ),
            emit_q.check_number().line(self.number) if self.number else "",
            emit_q.payee().line(self.payee) if self.payee else "",
            *_multiline(emit_q.memo(), self.memo),
            *_multiline(emit_q.address(), self.address),
            self.emit_category(),
        ]
        lines = [p for p in parts if p]  # drop empties
        lines.extend(split.emit_qif() for split in self.splits)
        return "\n".join(lines)

    # endregion Parser/Emitter

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the transaction to a dictionary of strings; unset fields are left out.
        """
        d: dict[str, RecursiveDictStr] = {
            "date": self.date.isoformat(),
            "amount": format(self.amount, "f"),
        }
        if self.cleared != EnumClearedStatus.NOT_CLEARED:
            d["cleared"] = self.cleared.value
        for key in ("number", "payee", "memo", "address", "category", "tag"):
            value = getattr(self, key)
            if value:
                d[key] = value
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        return d


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
