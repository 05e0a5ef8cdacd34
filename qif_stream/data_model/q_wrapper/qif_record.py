# qif_stream/data_model/q_wrapper/qif_record.py
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Sequence


class QifRecord(Mapping[str, object]):
    """
    One ``^``-terminated block, keyed by field code.

    Repeated codes are joined with ``"\\n"`` in the order they appeared.
    ``lines`` keeps every ``(code, value)`` pair as read, which is what split
    rows (S/E/$) are rebuilt from.
    """

    __slots__ = ("_data", "_lines")

    def __init__(
        self,
        data: Mapping[str, object],
        lines: Sequence[tuple[str, str]] = (),
    ):
        self._data = dict(data)
        self._lines = tuple(lines)

    @property
    def lines(self) -> tuple[tuple[str, str], ...]:
        return self._lines

    def __getitem__(self, code: str) -> object:
        return self._data[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QifRecord({self._data!r})"
