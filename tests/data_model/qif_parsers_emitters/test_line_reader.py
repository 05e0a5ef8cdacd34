# tests/data_model/qif_parsers_emitters/test_line_reader.py
from __future__ import annotations

import io

import pytest

from qif_stream.data_model.qif_parsers_emitters.line_reader import LineReader


def test_readline_strips_crlf_and_lf():
    reader = LineReader(io.StringIO("!Type:Bank\r\nD15/03/2020\nT1.00"))
    assert reader.readline() == "!Type:Bank"
    assert reader.readline() == "D15/03/2020"
    assert reader.readline() == "T1.00"


def test_readline_raises_eof_at_end():
    reader = LineReader(io.StringIO("only\n"))
    reader.readline()
    with pytest.raises(EOFError):
        reader.readline()


def test_push_back_replays_line_and_adjusts_line_number():
    # Arrange
    reader = LineReader(io.StringIO("a\nb\n"))
    first = reader.readline()
    second = reader.readline()
    assert reader.line_number == 2

    # Act
    reader.push_back(second)

    # Assert
    assert reader.line_number == 1
    assert reader.readline() == "b", "Pushed-back line must be handed out again"
    assert first == "a"
    assert reader.line_number == 2


def test_push_back_works_after_end_of_stream():
    reader = LineReader(io.StringIO("x\n"))
    line = reader.readline()
    reader.push_back(line)
    assert reader.readline() == "x"
    with pytest.raises(EOFError):
        reader.readline()


def test_close_closes_stream_and_further_reads_end():
    stream = io.StringIO("a\nb\n")
    reader = LineReader(stream)
    reader.close()
    assert stream.closed and reader.closed
    with pytest.raises(EOFError):
        reader.readline()
    reader.close()  # second close is a no-op
