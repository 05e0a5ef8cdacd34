# qif_stream/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import runtime_checkable

from typing_extensions import Protocol, TypeAlias

RecursiveDictStr: TypeAlias = str | list["RecursiveDictStr"] | dict[str, "RecursiveDictStr"]


@runtime_checkable
class IToDict(Protocol):
    """Anything that can render itself as a plain, string-valued dictionary."""

    def to_dict(self) -> dict[str, RecursiveDictStr]: ...
