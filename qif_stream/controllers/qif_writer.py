# qif_stream/controllers/qif_writer.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterable, Iterator

from qif_stream.data_model.q_wrapper import DEFAULT_ACCOUNT_TYPE, QifHeader, QTransaction
from qif_stream.data_model.qif_parsers_emitters import (
    DEFAULT_DATE_FORMAT,
    DateFormat,
    TransactionCodec,
    as_date_format,
)
from qif_stream.utilities import open_for_write

log = logging.getLogger(__name__)

_RECORD_END = "\n^\n"


class QifWriter:
    """
    Buffer transactions, then write them as one QIF document.

    ``sink`` is a writable text stream or a path; a path is created (or
    overwritten) as UTF-8 with ``\\n`` line endings. The account type label is
    written as given, without checking it against the supported set.

    Used as a context manager the writer flushes on exit, and closes the sink
    when it opened it from a path.
    """

    def __init__(
        self,
        sink: IO[str] | Path | str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
        date_format: DateFormat | str = DEFAULT_DATE_FORMAT,
    ):
        self._owns_sink = not hasattr(sink, "write")
        self._io: IO[str] = (
            open_for_write(Path(sink)) if self._owns_sink else sink  # type: ignore[arg-type]
        )
        self.account_type = account_type
        self.date_format = date_format
        self._transactions: list[QTransaction] = []
        self._codec = TransactionCodec()

    @classmethod
    @contextmanager
    def open(
        cls,
        path: Path | str,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
        date_format: DateFormat | str = DEFAULT_DATE_FORMAT,
    ) -> Iterator[QifWriter]:
        """
        Create ``path`` and yield a writer for it.

        The header and every appended transaction are written and the file is
        closed on every exit path, including when the block raises.
        """
        writer = cls(path, account_type, date_format)
        try:
            yield writer
        finally:
            try:
                writer.flush()
            finally:
                writer.close()

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    @date_format.setter
    def date_format(self, value: DateFormat | str) -> None:
        self._date_format = as_date_format(value)

    @property
    def transactions(self) -> list[QTransaction]:
        return list(self._transactions)

    def append(self, transaction: QTransaction) -> None:
        self._transactions.append(transaction)

    def extend(self, transactions: Iterable[QTransaction]) -> None:
        self._transactions.extend(transactions)

    def flush(self) -> None:
        """Write the header line, then every buffered transaction followed by ``^``."""
        self._write_header()
        for transaction in self._transactions:
            self._io.write(self._codec.encode(transaction, self._date_format))
            self._io.write(_RECORD_END)
        self._io.flush()
        log.debug(
            "Wrote %d transactions as !Type:%s", len(self._transactions), self.account_type
        )

    def close(self) -> None:
        self._io.close()

    def __enter__(self) -> QifWriter:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        try:
            self.flush()
        finally:
            if self._owns_sink:
                self.close()

    def _write_header(self) -> None:
        self._io.write(QifHeader.for_account_type(self.account_type).qif_entry() + "\n")
