# qif_stream/data_model/qif_parsers_emitters/date_format.py
"""
Date layouts used by QIF files and the heuristic that guesses them.

QIF never declares whether ``03/04/2020`` is the 3rd of April or the 4th of
March. A :class:`DateFormat` fixes one layout (``dd/mm/yyyy``, ``m/d'yy``,
...) for a whole document; :func:`guess_date_format` scans the document for a
date whose day-of-month is greater than 12, which settles the question.

Layout tags are built from the tokens ``d``, ``dd``, ``m``, ``mm``, ``yy`` and
``yyyy``; anything between them is a literal separator.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date
from typing import IO, Final, Iterable, Optional

import pyparsing as pp

log = logging.getLogger(__name__)

# region Layout grammar

_FIELD_TOKENS: Final[tuple[str, ...]] = ("d", "dd", "m", "mm", "yy", "yyyy")

_TOKEN = pp.one_of(" ".join(_FIELD_TOKENS))
_SEPARATOR = pp.Regex(r"[^dmy]+")
_LAYOUT = pp.OneOrMore(_TOKEN | _SEPARATOR).leave_whitespace()

# Padding only matters when formatting: dd and d parse the same way.
_TOKEN_PATTERNS: Final[dict[str, str]] = {
    "d": r"\s*(\d{1,2})",
    "dd": r"\s*(\d{1,2})",
    "m": r"\s*(\d{1,2})",
    "mm": r"\s*(\d{1,2})",
    "yy": r"(\d{2})",
    "yyyy": r"(\d{4})",
}


def _tokenize_layout(tag: str) -> tuple[str, ...]:
    try:
        return tuple(_LAYOUT.parse_string(tag, parse_all=True))
    except pp.ParseException as e:
        raise ValueError(f"Invalid date format {tag!r}: {e}") from e


# endregion Layout grammar

# Dates on or before this are not accepted as evidence while guessing.
EPOCH_SENTINEL: Final[date] = date(1900, 1, 1)


def _expand_two_digit_year(yy: int, today: Optional[date] = None) -> int:
    """Map ``yy`` to 20yy, or 19yy when 20yy is more than 50 years ahead."""
    current = (today or date.today()).year
    year = 2000 + yy
    if year > current + 50:
        year -= 100
    return year


class DateFormat:
    """
    One day/month/year layout with its parse and format functions.

    Instances are immutable and compare equal by tag.
    """

    __slots__ = ("_tag", "_tokens", "_regex", "_order")

    def __init__(self, tag: str):
        tokens = _tokenize_layout(tag)
        fields = [t for t in tokens if t in _FIELD_TOKENS]
        kinds = [t[0] for t in fields]
        if sorted(kinds) != ["d", "m", "y"]:
            raise ValueError(
                f"Invalid date format {tag!r}: needs exactly one day, month and year token"
            )
        pattern = "".join(
            _TOKEN_PATTERNS[t] if t in _FIELD_TOKENS else re.escape(t) for t in tokens
        )
        self._tag = tag
        self._tokens = tokens
        self._regex = re.compile(pattern)
        self._order = tuple(fields)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def day_first(self) -> bool:
        kinds = [t[0] for t in self._order]
        return kinds.index("d") < kinds.index("m")

    def try_parse(self, token: str) -> Optional[date]:
        """Return the date ``token`` names under this layout, or ``None``."""
        if not isinstance(token, str):
            return None
        m = self._regex.fullmatch(token.strip())
        if m is None:
            return None
        values = dict(zip((t[0] for t in self._order), (int(g) for g in m.groups())))
        year = values["y"]
        if "yy" in self._order:
            year = _expand_two_digit_year(year)
        month, day = values["m"], values["d"]
        if not (1 <= month <= 12) or year < 1:
            return None
        if not (1 <= day <= calendar.monthrange(year, month)[1]):
            return None
        return date(year, month, day)

    def parse(self, token: str) -> date:
        parsed = self.try_parse(token)
        if parsed is None:
            raise ValueError(f"{token!r} is not a date in format {self._tag!r}")
        return parsed

    def format(self, d: date) -> str:
        rendered = {
            "d": str(d.day),
            "dd": f"{d.day:02d}",
            "m": str(d.month),
            "mm": f"{d.month:02d}",
            "yy": f"{d.year % 100:02d}",
            "yyyy": f"{d.year:04d}",
        }
        return "".join(rendered.get(t, t) for t in self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateFormat):
            return NotImplemented
        return self._tag == other._tag

    def __hash__(self) -> int:
        return hash(self._tag)

    def __repr__(self) -> str:
        return f"DateFormat({self._tag!r})"

    def __str__(self) -> str:
        return self._tag


# Candidate layouts, in priority order.
SUPPORTED_DATE_FORMATS: Final[tuple[str, ...]] = (
    "dd/mm/yyyy",
    "d/mm/yyyy",
    "dd/m/yyyy",
    "d/m/yyyy",
    "dd/mm/yy",
    "d/mm/yy",
    "dd/m/yy",
    "d/m/yy",
    "mm/dd/yyyy",
    "m/dd/yyyy",
    "mm/d/yyyy",
    "m/d/yyyy",
    "mm/dd/yy",
    "m/dd/yy",
    "mm/d/yy",
    "m/d/yy",
    "m/d'yy",  # Quicken US exports: D1/ 2'25
)

DEFAULT_DATE_FORMAT: Final[str] = "dd/mm/yyyy"

_CANDIDATES: Final[tuple[DateFormat, ...]] = tuple(
    DateFormat(tag) for tag in SUPPORTED_DATE_FORMATS
)


def as_date_format(value: DateFormat | str | None) -> DateFormat:
    """Accept a tag, a ``DateFormat`` or ``None`` (the default layout)."""
    if isinstance(value, DateFormat):
        return value
    return DateFormat(value or DEFAULT_DATE_FORMAT)


def guess_date_format(lines: Iterable[str]) -> Optional[str]:
    """
    Guess the date layout used by ``lines``.

    Each line loses its one-character field code and the rest is tried
    against every candidate in :data:`SUPPORTED_DATE_FORMATS`. A candidate
    only counts when the parsed date is after :data:`EPOCH_SENTINEL`. The
    first candidate that counts *and* yields a day above 12 wins at once;
    otherwise the first candidate that ever counted is returned. ``None``
    means no line looked like a date at all.
    """
    fallback: Optional[str] = None
    for line in lines:
        token = line[1:].strip()
        if not token:
            continue
        for fmt in _CANDIDATES:
            parsed = fmt.try_parse(token)
            if parsed is None or parsed <= EPOCH_SENTINEL:
                continue
            if fallback is None:
                fallback = fmt.tag
            if parsed.day > 12:
                log.debug("Date format %s confirmed by %r", fmt.tag, token)
                return fmt.tag
    if fallback is not None:
        log.debug("No unambiguous date found, falling back to %s", fallback)
    return fallback


def guess_stream_date_format(stream: IO[str]) -> Optional[str]:
    """Run :func:`guess_date_format` over a seekable stream, then rewind it."""
    try:
        return guess_date_format(stream)
    finally:
        stream.seek(0)
