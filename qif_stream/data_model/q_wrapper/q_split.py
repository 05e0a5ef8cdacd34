# qif_stream/data_model/q_wrapper/q_split.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from . import qif_codes as emit_q
from ..interfaces import ISplit, IToDict, RecursiveDictStr


@total_ordering
@dataclass
class QSplit:
    """
    One split row of a transaction: S (category[/tag]), E (memo), $ (amount).
    """

    category: str = ""
    amount: Decimal = Decimal(0)
    memo: str = ""
    tag: str = ""

    def emit_category(self) -> str:
        value = f"{self.category}/{self.tag}" if self.tag else self.category
        return emit_q.category_split().line(value)

    def emit_qif(self) -> str:
        """S line, E line when there is a memo, then the $ line."""
        rows = [self.emit_category()]
        if self.memo:
            rows.append(emit_q.memo_split().line(self.memo))
        rows.append(emit_q.amount_split().line(format(self.amount, "f")))
        return "\n".join(rows)

    # region IEquatable / IComparable

    def _key(self) -> tuple:
        return (self.category, self.tag, self.amount, self.memo)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ISplit):
            return NotImplemented
        return self._key() == (other.category, other.tag, other.amount, other.memo)

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ISplit):
            return NotImplemented
        return self._key() < (other.category, other.tag, other.amount, other.memo)

    # endregion IEquatable / IComparable

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        out: dict[str, RecursiveDictStr] = {
            "category": self.category,
            "amount": format(self.amount, "f"),
        }
        out.update({k: v for k, v in (("memo", self.memo), ("tag", self.tag)) if v})
        return out


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
