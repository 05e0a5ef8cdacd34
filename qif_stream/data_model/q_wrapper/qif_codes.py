# qif_stream/data_model/q_wrapper/qif_codes.py
"""
Field codes of bank-style QIF records.
"""

from __future__ import annotations

from typing import Final

from .qif_code import QifCode

_BANK = "Bank, Cash, CCard, Oth A, Oth L"

_DATE = QifCode("D", "Date", _BANK, "D15/03/2020")
_AMOUNT = QifCode("T", "Amount", _BANK, "T-1,234.50")
_AMOUNT_ALT = QifCode("U", "Amount (duplicate of T)", _BANK, "U-1,234.50")
_CLEARED = QifCode("C", "Cleared status", _BANK, "C*")
_NUMBER = QifCode("N", "Num (check or reference number)", _BANK, "N1001")
_PAYEE = QifCode("P", "Payee", _BANK, "PGrocery Store")
_MEMO = QifCode("M", "Memo", _BANK, "MWeekly shop")
_ADDRESS = QifCode("A", "Address (up to five lines, sixth is a message)", _BANK, "A1 Main St")
_CATEGORY = QifCode("L", "Category (Category/Subcategory/Transfer/Class)", _BANK, "LFood:Groceries")
_CATEGORY_SPLIT = QifCode("S", "Category in split", _BANK, "SFood:Groceries")
_MEMO_SPLIT = QifCode("E", "Memo in split", _BANK, "EMilk")
_AMOUNT_SPLIT = QifCode("$", "Dollar amount of split", _BANK, "$-12.50")
_END = QifCode("^", "End of entry", "All", "^")

ALL_CODES: Final[tuple[QifCode, ...]] = (
    _DATE,
    _AMOUNT,
    _AMOUNT_ALT,
    _CLEARED,
    _NUMBER,
    _PAYEE,
    _MEMO,
    _ADDRESS,
    _CATEGORY,
    _CATEGORY_SPLIT,
    _MEMO_SPLIT,
    _AMOUNT_SPLIT,
    _END,
)

# Codes whose values are amounts: thousands separators are stripped on read.
AMOUNT_CODES: Final[frozenset[str]] = frozenset(
    c.code for c in (_AMOUNT, _AMOUNT_ALT, _AMOUNT_SPLIT)
)
DATE_CODE: Final[str] = _DATE.code
END_CODE: Final[str] = _END.code


def by_code(code: str) -> QifCode | None:
    return next((c for c in ALL_CODES if c.code == code), None)


def date() -> QifCode:
    return _DATE


def amount() -> QifCode:
    return _AMOUNT


def amount_alt() -> QifCode:
    return _AMOUNT_ALT


def cleared_status() -> QifCode:
    return _CLEARED


def check_number() -> QifCode:
    return _NUMBER


def payee() -> QifCode:
    return _PAYEE


def memo() -> QifCode:
    return _MEMO


def address() -> QifCode:
    return _ADDRESS


def category() -> QifCode:
    return _CATEGORY


def category_split() -> QifCode:
    return _CATEGORY_SPLIT


def memo_split() -> QifCode:
    return _MEMO_SPLIT


def amount_split() -> QifCode:
    return _AMOUNT_SPLIT


def end() -> QifCode:
    return _END
