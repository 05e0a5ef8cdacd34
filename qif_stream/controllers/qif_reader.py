# qif_stream/controllers/qif_reader.py
"""
Lazy, cached reading of a QIF document.

``QifReader`` resolves the date layout, parses the header once, then pulls
records on demand. Every decoded transaction is kept, so a second traversal
replays the cache and only reads the stream past the furthest point reached
so far.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Any, Iterator, Optional, overload

from qif_stream.data_model.q_wrapper import QifHeader, QTransaction
from qif_stream.data_model.qif_parsers_emitters import (
    DEFAULT_DATE_FORMAT,
    DateFormat,
    LineReader,
    RecordTokenizer,
    TransactionCodec,
    as_date_format,
    guess_stream_date_format,
    parse_header,
)
from qif_stream.errors import MalformedRecordError
from qif_stream.utilities import open_for_read

log = logging.getLogger(__name__)


def _as_text_stream(source: Any) -> IO[str]:
    """Wrap ``source`` (text, bytes or a stream) as a seekable text stream."""
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.StringIO(bytes(source).decode("utf-8"))
    if not hasattr(source, "read"):
        raise TypeError(
            f"Expected QIF text or a readable stream, got {type(source).__name__}"
        )
    stream = source
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream = io.TextIOWrapper(stream, encoding="utf-8")
    if not (hasattr(stream, "seekable") and stream.seekable()):
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        stream = io.StringIO(data)
    return stream


class QifReader:
    """
    Forward-iterable, re-traversable sequence of transactions in a QIF document.

    Args:
        source: QIF text, bytes, or a readable stream. Non-seekable streams
            are read into memory first.
        date_format: layout tag such as ``"mm/dd/yyyy"``. When omitted the
            layout is guessed from the data, falling back to
            ``DEFAULT_DATE_FORMAT``.
        strict: raise :class:`MalformedRecordError` (and I/O errors) instead
            of dropping the offending record.

    Raises:
        UnrecognizedDataError: the data does not start with a header line.
        UnknownAccountTypeError: the header names an unsupported account type.
    """

    def __init__(
        self,
        source: Any,
        date_format: DateFormat | str | None = None,
        *,
        strict: bool = False,
    ):
        stream = _as_text_stream(source)
        if date_format is None:
            date_format = guess_stream_date_format(stream) or DEFAULT_DATE_FORMAT
        self._date_format = as_date_format(date_format)
        log.debug("Reading QIF data with date format %s", self._date_format)

        self._reader = LineReader(stream)
        self._header = parse_header(self._reader)
        self._tokenizer = RecordTokenizer(self._reader, self._date_format)
        self._codec = TransactionCodec()
        self._strict = strict

        self._cache: list[QTransaction] = []
        self._exhausted = False
        self._index = -1

    @classmethod
    def open(
        cls,
        path: Path | str,
        date_format: DateFormat | str | None = None,
        *,
        strict: bool = False,
        encoding: str = "utf-8",
    ) -> QifReader:
        """Open ``path`` and read it; the file is closed once the data runs out."""
        f = open_for_read(Path(path), binary=False, encoding=encoding)
        try:
            return cls(f, date_format, strict=strict)
        except Exception:
            f.close()
            raise

    # region Properties

    @property
    def header(self) -> QifHeader:
        return self._header

    @property
    def account_type(self) -> str:
        return self._header.account_type

    @property
    def options(self) -> tuple[str, ...]:
        return self._header.options

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    @property
    def index(self) -> int:
        """Position of the last transaction handed out by ``next_transaction``."""
        return self._index

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def closed(self) -> bool:
        return self._reader.closed

    @property
    def lines_consumed(self) -> int:
        return self._reader.line_number

    # endregion Properties

    # region Traversal

    def next_transaction(self) -> Optional[QTransaction]:
        """Advance the cursor and return the transaction there, or ``None`` at the end."""
        self._index += 1
        if self._index < len(self._cache):
            return self._cache[self._index]
        txn = self._read_transaction()
        if txn is None:
            self._index = len(self._cache)
            return None
        self._cache.append(txn)
        return txn

    def restart_traversal(self) -> None:
        """Move the cursor before the first transaction; the cache is kept."""
        self._index = -1

    def __iter__(self) -> Iterator[QTransaction]:
        self.restart_traversal()
        while (txn := self.next_transaction()) is not None:
            yield txn

    def count(self) -> int:
        """Read every remaining record and return the number of transactions."""
        self._drain()
        return len(self._cache)

    def __len__(self) -> int:
        return self.count()

    def transactions(self) -> list[QTransaction]:
        """Read every remaining record and return all transactions in order."""
        self._drain()
        return list(self._cache)

    @overload
    def __getitem__(self, i: int) -> QTransaction: ...
    @overload
    def __getitem__(self, i: slice) -> list[QTransaction]: ...

    def __getitem__(self, i: int | slice) -> QTransaction | list[QTransaction]:
        if isinstance(i, slice) or i < 0:
            self._drain()
            return self._cache[i]
        while len(self._cache) <= i:
            txn = self._read_transaction()
            if txn is None:
                raise IndexError(f"Transaction index {i} out of range")
            self._cache.append(txn)
        return self._cache[i]

    # endregion Traversal

    # region Resources

    def close(self) -> None:
        self._exhausted = True
        self._reader.close()

    def __enter__(self) -> QifReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # endregion Resources

    def _drain(self) -> None:
        while (txn := self._read_transaction()) is not None:
            self._cache.append(txn)

    def _read_transaction(self) -> Optional[QTransaction]:
        """
        Pull records until one decodes to a transaction.

        This is the one place where per-record failures are absorbed: in
        lenient mode a malformed record is logged and skipped, and a read
        failure closes the stream and ends the data.
        """
        while not self._exhausted:
            try:
                block = self._tokenizer.next_block()
            except (OSError, UnicodeDecodeError) as e:
                self._exhausted = True
                log.warning("Stopped reading QIF data after a read failure: %s", e)
                self._reader.close()
                if self._strict:
                    raise
                return None
            if block is None:
                self._exhausted = True
                return None

            try:
                txn = self._codec.decode(self._tokenizer.build_record(block))
            except MalformedRecordError as e:
                if self._strict:
                    raise
                log.warning(
                    "Dropping malformed record ending at line %d: %s",
                    self._reader.line_number,
                    e,
                )
                continue
            if txn is None:
                log.debug(
                    "Skipping non-transaction record ending at line %d",
                    self._reader.line_number,
                )
                continue
            return txn
        return None
