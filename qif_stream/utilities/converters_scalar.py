# qif_stream/utilities/converters_scalar.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final

# Everything that is not a digit, a separator, a sign or a parenthesis.
_NOISE: Final[re.Pattern[str]] = re.compile(r"[^0-9,.()+\-]+")
_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_UNICODE_MINUS: Final[str] = "\u2212"


def to_decimal(value: Any) -> Decimal:
    """
    Convert an amount to ``Decimal``.

    Strings go through :func:`normalize_amount` with ``.`` as the decimal
    mark, so ``"-1,234.50"``, ``"(12.00)"``, ``"12.00-"`` and ``"$5"`` are all
    accepted. ``bool`` is rejected even though it is an ``int``.

    Raises:
        ValueError: the value is not an amount.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        text = normalize_amount(value, ".")
        try:
            return Decimal(text)
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount {value!r} (read as {text!r})") from e
    raise ValueError(f"Cannot convert {type(value).__name__} to Decimal")


def _guess_decimal_mark(s: str) -> str:
    last = max(s.rfind(","), s.rfind("."))
    if last < 0:
        return ""
    mark = s[last]
    if "," in s and "." in s:
        return mark
    # a single lone separator followed by 1-2 digits is a decimal mark
    if s.count(mark) == 1 and len(s) - last - 1 in (1, 2):
        return mark
    return ""


def normalize_amount(text: str, decimal_mark: str = "") -> str:
    """
    Reduce an amount as written in bank exports to ``[-]digits[.digits]``.

    Currency symbols, words and spaces are dropped. A leading or trailing
    minus, or surrounding parentheses, make the amount negative.

    ``decimal_mark`` forces ``"."`` or ``","`` as the decimal mark; the other
    separator is then a thousands mark. Left empty, the mark is guessed: the
    later of ``.`` and ``,`` when both occur, otherwise a single separator
    followed by one or two digits (``"12,5"``), otherwise none (``"1,234"``).
    """
    if decimal_mark not in ("", ".", ","):
        raise ValueError(f"Invalid decimal mark: {decimal_mark!r}")

    s = text.replace("\xa0", "").replace(_UNICODE_MINUS, "-").strip()
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    s = _NOISE.sub("", s)
    if s.endswith("-"):
        negative = not negative
        s = s[:-1]
    if s.startswith(("+", "-")):
        negative = negative != (s[0] == "-")
        s = s[1:]

    mark = decimal_mark or _guess_decimal_mark(s)
    whole, frac = s.rsplit(mark, 1) if mark and mark in s else (s, "")
    whole = whole.replace(",", "").replace(".", "")
    if not _DIGITS.fullmatch(whole + frac):
        raise ValueError(f"Not an amount: {text!r}")

    number = f"{whole or '0'}.{frac}" if frac else whole
    return f"-{number}" if negative else number
