# qif_stream/data_model/qif_parsers_emitters/header_parser.py
from __future__ import annotations

import logging
from typing import Optional

from qif_stream.data_model.q_wrapper.qif_header import (
    SUPPORTED_ACCOUNT_TYPES,
    QifHeader,
    is_supported_header,
)
from qif_stream.errors import UnknownAccountTypeError, UnrecognizedDataError

from .line_reader import LineReader

log = logging.getLogger(__name__)

_HEADER_MARK = "!"
_SENTINEL = "^"
_BOM = "\ufeff"


def parse_header(reader: LineReader) -> QifHeader:
    """
    Consume the leading ``!`` lines of a document and return its header.

    Leading blank lines are skipped. The first ``!`` line names the account
    type; extra ``!`` lines are option lines and only the *last* one is kept
    (earlier ones are discarded). The line that ends the header block is
    pushed back onto ``reader`` unless it is a ``^`` terminator, so the record
    tokenizer sees it as the first line of the first record.

    Raises:
        UnrecognizedDataError: the first non-blank line is not a ``!`` line.
        UnknownAccountTypeError: the account type is not supported.
    """
    headers: list[str] = []
    raw: Optional[str] = None
    try:
        raw = reader.readline().lstrip(_BOM)
        while raw.strip() == "":
            raw = reader.readline()
        while raw.strip().startswith(_HEADER_MARK):
            headers.append(raw.strip())
            raw = reader.readline()
    except EOFError:
        raw = None

    if not headers:
        raise UnrecognizedDataError(
            "Provided data doesn't seem to represent a QIF file"
        )

    code = headers[0]
    if not is_supported_header(code):
        raise UnknownAccountTypeError(code, list(SUPPORTED_ACCOUNT_TYPES))

    extra = headers[1:]
    if len(extra) > 1:
        log.debug("Discarding options from %d earlier header lines", len(extra) - 1)
    options = tuple(extra[-1].split(":")) if extra else ()

    if raw is not None and not raw.strip().startswith(_SENTINEL):
        reader.push_back(raw)

    return QifHeader(code=code, options=options)
