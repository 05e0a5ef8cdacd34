# qif_stream/data_model/q_wrapper/qif_header.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from ..interfaces import RecursiveDictStr

TYPE_PREFIX: Final[str] = "!Type:"
DEFAULT_ACCOUNT_TYPE: Final[str] = "Bank"

SUPPORTED_ACCOUNT_TYPES: Final[dict[str, str]] = {
    "!Type:Bank": "Bank account transactions",
    "!Type:Cash": "Cash account transactions",
    "!Type:CCard": "Credit card account transactions",
    "!Type:Oth A": "Asset account transactions",
    "!Type:Oth L": "Liability account transactions",
}

_SUPPORTED_LOWER: Final[dict[str, str]] = {
    k.lower(): k for k in SUPPORTED_ACCOUNT_TYPES
}


def is_supported_header(code: str) -> bool:
    """Case-insensitive membership test against SUPPORTED_ACCOUNT_TYPES."""
    return code.strip().lower() in _SUPPORTED_LOWER


@dataclass(frozen=True)
class QifHeader:
    """
    The leading ``!`` block of a QIF document.

    ``code`` is the first header line as written (``!Type:Bank``); ``options``
    holds the colon-separated tokens of the last extra ``!`` line, if any.
    """

    code: str
    options: tuple[str, ...] = field(default=())

    @classmethod
    def for_account_type(cls, account_type: str) -> QifHeader:
        return cls(code=f"{TYPE_PREFIX}{account_type}")

    @property
    def account_type(self) -> str:
        if self.code.lower().startswith(TYPE_PREFIX.lower()):
            return self.code[len(TYPE_PREFIX):]
        return self.code.lstrip("!")

    @property
    def description(self) -> str:
        canonical = _SUPPORTED_LOWER.get(self.code.lower(), "")
        return SUPPORTED_ACCOUNT_TYPES.get(canonical, "")

    def is_supported(self) -> bool:
        return is_supported_header(self.code)

    def qif_entry(self) -> str:
        return self.code

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "code": self.code,
            "account_type": self.account_type,
            "options": list(self.options),
        }
