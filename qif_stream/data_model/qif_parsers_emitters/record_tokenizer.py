# qif_stream/data_model/qif_parsers_emitters/record_tokenizer.py
from __future__ import annotations

import logging
from typing import Optional

from qif_stream.data_model.q_wrapper.qif_codes import AMOUNT_CODES, DATE_CODE, END_CODE
from qif_stream.data_model.q_wrapper.qif_record import QifRecord
from qif_stream.errors import MalformedRecordError

from .date_format import DateFormat
from .line_reader import LineReader

log = logging.getLogger(__name__)


class RecordTokenizer:
    """
    Reads ``^``-terminated blocks from a :class:`LineReader` and turns them
    into :class:`QifRecord` mappings.

    Reading and normalizing are separate steps: :meth:`next_block` only
    deals with the stream, :meth:`build_record` may raise
    :class:`MalformedRecordError` for a block whose date does not parse.
    """

    def __init__(self, reader: LineReader, date_format: DateFormat):
        self._reader = reader
        self._date_format = date_format

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    def next_block(self) -> Optional[list[str]]:
        """
        Return the non-blank lines of the next block, or ``None`` at end of data.

        Running out of input before the terminator ends the data: the partial
        block is discarded and the reader is closed.
        """
        lines: list[str] = []
        try:
            while True:
                line = self._reader.readline().strip()
                if line.startswith(END_CODE):
                    return lines
                if line:
                    lines.append(line)
        except EOFError:
            if lines:
                log.debug("Discarding %d lines of an unterminated record", len(lines))
            self._reader.close()
            return None

    def build_record(self, lines: list[str]) -> QifRecord:
        data: dict[str, object] = {}
        pairs: list[tuple[str, str]] = []
        for line in lines:
            code, value = line[0], line[1:].strip()
            if code in AMOUNT_CODES:
                value = value.replace(",", "")
            pairs.append((code, value))
            data[code] = f"{data[code]}\n{value}" if code in data else value

        if DATE_CODE in data:
            raw = str(data[DATE_CODE])
            parsed = self._date_format.try_parse(raw)
            if parsed is None:
                raise MalformedRecordError(
                    f"Date {raw!r} does not match format {self._date_format.tag!r}",
                    lines,
                )
            data[DATE_CODE] = parsed
        return QifRecord(data, pairs)

    def next_record(self) -> Optional[QifRecord]:
        block = self.next_block()
        return None if block is None else self.build_record(block)
