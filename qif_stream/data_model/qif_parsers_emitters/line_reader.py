# qif_stream/data_model/qif_parsers_emitters/line_reader.py
from __future__ import annotations

from collections import deque
from typing import IO


class LineReader:
    """
    Line source with a pushback buffer.

    ``readline`` hands out lines without their trailing ``\\r\\n``/``\\n`` and
    raises ``EOFError`` once the stream is exhausted. ``push_back`` returns an
    over-read line so that the next ``readline`` yields it again.
    """

    def __init__(self, stream: IO[str]):
        self._stream = stream
        self._pending: deque[str] = deque()
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far (pushed-back lines excluded)."""
        return self._line_number

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def readline(self) -> str:
        if self._pending:
            line = self._pending.popleft()
        else:
            if self._stream.closed:
                raise EOFError("Stream is closed")
            raw = self._stream.readline()
            if raw == "":
                raise EOFError("End of QIF data")
            line = raw.rstrip("\r\n")
        self._line_number += 1
        return line

    def push_back(self, line: str) -> None:
        self._pending.appendleft(line)
        self._line_number -= 1

    def close(self) -> None:
        self._pending.clear()
        if not self._stream.closed:
            self._stream.close()
