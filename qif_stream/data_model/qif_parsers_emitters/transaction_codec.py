# qif_stream/data_model/qif_parsers_emitters/transaction_codec.py
from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from itertools import zip_longest
from typing import Any, Final, Optional

from qif_stream.data_model.interfaces import EnumClearedStatus
from qif_stream.data_model.q_wrapper import QSplit, QTransaction
from qif_stream.data_model.q_wrapper.qif_codes import DATE_CODE
from qif_stream.errors import MalformedRecordError
from qif_stream.utilities import is_null_or_whitespace, to_decimal

from .date_format import DateFormat, as_date_format
from .line_reader import LineReader
from .record_tokenizer import RecordTokenizer

log = logging.getLogger(__name__)


class TransactionCodec:
    """Convert records to transactions and transactions back to record text."""

    _FIELD_MAP: Final[dict[str, str]] = {
        "T": "amount",
        "U": "amount",
        "C": "cleared",
        "N": "number",
        "P": "payee",
        "M": "memo",
        "A": "address",
        "L": "category",
    }

    _SPLIT_MAP: Final[dict[str, str]] = {
        "S": "category",
        "E": "memo",
        "$": "amount",
    }

    # region decode

    def decode(self, record: Mapping[str, Any]) -> Optional[QTransaction]:
        """
        Build a transaction from ``record``.

        Returns ``None`` when the record carries no parsed date, which means
        it cannot be a transaction. Raises :class:`MalformedRecordError` when a
        field value cannot be interpreted.
        """
        txn_date = record.get(DATE_CODE)
        if not isinstance(txn_date, date):
            log.debug("Record without a date is not a transaction: %r", record)
            return None

        rec: dict[str, Any] = {"date": txn_date}
        for code, value in record.items():
            if code == DATE_CODE or code in self._SPLIT_MAP:
                continue
            mapping = self._FIELD_MAP.get(code)
            if mapping is None:
                log.debug("Ignoring unsupported field code %r", code)
                continue
            if code == "U" and "T" in record:
                continue
            text = str(value)
            if mapping == "amount":
                rec["amount"] = self._amount(text, record)
            elif mapping == "cleared":
                rec["cleared"] = self._cleared(text, record)
            elif mapping == "category":
                category, _, tag = text.partition("/")
                rec["category"], rec["tag"] = category, tag
            else:
                rec[mapping] = text

        splits = self._decode_splits(record)
        if splits:
            rec["splits"] = splits
        return QTransaction(**rec)

    def _amount(self, text: str, record: Mapping[str, Any]) -> Decimal:
        if is_null_or_whitespace(text):
            return Decimal(0)
        try:
            return to_decimal(text)
        except ValueError as e:
            raise MalformedRecordError(
                f"Invalid amount {text!r}: {e}", _record_lines(record)
            ) from e

    def _cleared(self, text: str, record: Mapping[str, Any]) -> EnumClearedStatus:
        try:
            return EnumClearedStatus.from_char(text)
        except ValueError as e:
            raise MalformedRecordError(str(e), _record_lines(record)) from e

    def _split_lines(self, record: Mapping[str, Any]) -> list[tuple[str, str]]:
        lines = getattr(record, "lines", None)
        if lines is not None:
            return [(c, v) for c, v in lines if c in self._SPLIT_MAP]
        # Plain mappings only keep the joined values: pair them up positionally.
        columns = [
            [(code, v) for v in str(record[code]).split("\n")] if code in record else []
            for code in self._SPLIT_MAP
        ]
        return [pair for row in zip_longest(*columns) for pair in row if pair]

    def _decode_splits(self, record: Mapping[str, Any]) -> list[QSplit]:
        splits: list[dict[str, Any]] = []
        pending: Optional[dict[str, Any]] = None
        for code, value in self._split_lines(record):
            mapping = self._SPLIT_MAP[code]
            if mapping == "category" or pending is None or mapping in pending:
                pending = {}
                splits.append(pending)
            if mapping == "category":
                pending["category"], _, pending["tag"] = value.partition("/")
            elif mapping == "amount":
                pending["amount"] = self._amount(value, record)
            else:
                pending[mapping] = value
        return [QSplit(**s) for s in splits]

    # endregion decode

    # region encode

    def encode(self, transaction: QTransaction, date_format: DateFormat | str) -> str:
        """Render ``transaction`` as record lines, without the ``^`` terminator."""
        return transaction.emit_qif(as_date_format(date_format))

    # endregion encode


def _record_lines(record: Mapping[str, Any]) -> list[str]:
    lines = getattr(record, "lines", None)
    if lines is not None:
        return [f"{c}{v}" for c, v in lines]
    return [f"{c}{v}" for c, v in record.items()]


def parse_record_text(
    text: str, date_format: DateFormat | str, codec: TransactionCodec | None = None
) -> Optional[QTransaction]:
    """Decode one record given as text (terminator optional)."""
    reader = LineReader(io.StringIO(f"{text}\n^\n"))
    record = RecordTokenizer(reader, as_date_format(date_format)).next_record()
    if record is None:
        return None
    return (codec or TransactionCodec()).decode(record)
