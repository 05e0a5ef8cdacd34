# tests/controllers/test_qif_reader.py
from __future__ import annotations

import io
import logging
from datetime import date
from decimal import Decimal

import pytest

from qif_stream.controllers import QifReader
from qif_stream.data_model.qif_parsers_emitters import DateFormat
from qif_stream.errors import (
    MalformedRecordError,
    UnknownAccountTypeError,
    UnrecognizedDataError,
)

THREE_RECORDS = (
    "!Type:Bank\n"
    "D15/03/2020\n"
    "T-42.50\n"
    "PGrocery Store\n"
    "^\n"
    "D16/03/2020\n"
    "T-1,234.50\n"
    "PLandlord\n"
    "^\n"
    "D17/03/2020\n"
    "T100.00\n"
    "PPayroll\n"
    "^\n"
)

AMBIGUOUS_SECOND_DATE = (
    "!Type:Bank\n"
    "D15/03/2020\n"
    "T-42.50\n"
    "PGrocery Store\n"
    "^\n"
    "D02/13/2020\n"
    "T100.00\n"
    "PPayroll\n"
    "^\n"
)


class _FlakyStream(io.StringIO):
    """StringIO whose readline fails after a number of calls."""

    def __init__(self, text: str, fail_after: int):
        super().__init__(text)
        self.calls = 0
        self.fail_after = fail_after

    def readline(self, *args):
        self.calls += 1
        if self.calls > self.fail_after:
            raise OSError("device went away")
        return super().readline(*args)


class _NonSeekable(io.StringIO):
    def seekable(self) -> bool:
        return False


# ---------- construction ----------

def test_header_and_guessed_format():
    # Arrange / Act
    reader = QifReader(THREE_RECORDS)

    # Assert
    assert reader.account_type == "Bank"
    assert reader.header.code == "!Type:Bank"
    assert reader.options == ()
    assert reader.date_format == DateFormat("dd/mm/yyyy")
    assert reader.index == -1
    assert reader.strict is False


def test_explicit_format_is_used_instead_of_guessing():
    reader = QifReader(AMBIGUOUS_SECOND_DATE, "mm/dd/yyyy")

    txns = reader.transactions()

    assert reader.date_format.tag == "mm/dd/yyyy"
    assert [t.payee for t in txns] == ["Payroll"]
    assert txns[0].date == date(2020, 2, 13)


def test_falls_back_to_default_format_without_dates():
    reader = QifReader("!Type:Cash\nPNo date\n^\n")
    assert reader.date_format.tag == "dd/mm/yyyy"
    assert reader.count() == 0


def test_rejects_data_without_header():
    with pytest.raises(UnrecognizedDataError):
        QifReader("D15/03/2020\nT1.00\n^\n")


def test_rejects_unsupported_account_type():
    with pytest.raises(UnknownAccountTypeError) as ei:
        QifReader("!Type:Invst\nD15/03/2020\n^\n")
    assert ei.value.header == "!Type:Invst"
    assert "!Type:Bank" in ei.value.supported


def test_rejects_unreadable_source():
    with pytest.raises(TypeError):
        QifReader(42)


# ---------- traversal ----------

def test_next_transaction_walks_forward_and_stays_at_end():
    reader = QifReader(THREE_RECORDS)

    payees = [reader.next_transaction().payee for _ in range(3)]

    assert payees == ["Grocery Store", "Landlord", "Payroll"]
    assert reader.index == 2
    assert reader.next_transaction() is None
    assert reader.next_transaction() is None
    assert reader.index == 3


def test_amount_thousands_separator_is_ignored():
    reader = QifReader(THREE_RECORDS)
    assert reader[1].amount == Decimal("-1234.50")


def test_restart_replays_cache_without_reading_more_lines():
    # Arrange
    reader = QifReader(THREE_RECORDS)
    first_pass = list(reader)
    consumed = reader.lines_consumed

    # Act
    reader.restart_traversal()
    second_pass = [reader.next_transaction() for _ in range(3)]

    # Assert
    assert reader.lines_consumed == consumed
    assert all(a is b for a, b in zip(first_pass, second_pass))


def test_partial_traversal_then_iteration_reads_only_what_is_missing():
    reader = QifReader(THREE_RECORDS)
    first = reader.next_transaction()

    everything = list(reader)

    assert everything[0] is first
    assert len(everything) == 3


def test_count_is_idempotent_and_keeps_cursor():
    reader = QifReader(THREE_RECORDS)
    reader.next_transaction()

    assert reader.count() == 3
    assert reader.count() == 3
    assert len(reader) == 3
    assert reader.index == 0
    assert reader.next_transaction().payee == "Landlord"


def test_getitem_reads_lazily():
    reader = QifReader(THREE_RECORDS)

    assert reader[0].payee == "Grocery Store"
    assert not reader.closed
    assert reader[-1].payee == "Payroll"
    assert [t.payee for t in reader[0:2]] == ["Grocery Store", "Landlord"]
    with pytest.raises(IndexError):
        reader[3]


def test_unterminated_last_record_is_dropped_and_stream_closed():
    reader = QifReader("!Type:Bank\nD15/03/2020\nT1\n^\nD16/03/2020\nT2\n")

    assert reader.count() == 1
    assert reader.closed


@pytest.mark.parametrize(
    "text,expected_format",
    [
        (
            "!Type:Bank\nD1/13/2020\nT1.00\n^\nD1/5/2020\nT2.00\n^\nD12/5/2020\nT3.00\n^\n",
            "mm/dd/yyyy",
        ),
        (
            "!Type:Bank\nD15/03/2020\nT1.00\n^\nD1/2/2020\nT2.00\n^\nD01/12/2020\nT3.00\n^\n",
            "dd/mm/yyyy",
        ),
    ],
)
def test_guessed_format_reads_padded_and_unpadded_dates(text, expected_format):
    # Arrange
    reader = QifReader(text)

    # Act
    amounts = [t.amount for t in reader]

    # Assert
    assert reader.date_format.tag == expected_format
    assert amounts == [Decimal("1.00"), Decimal("2.00"), Decimal("3.00")]


def test_blank_lines_and_crlf_are_tolerated():
    text = "!Type:Bank\r\n\r\nD15/03/2020\r\nT1\r\n\r\n^\r\n"
    assert QifReader(text).transactions()[0].amount == Decimal("1")


# ---------- lenient and strict decoding ----------

def test_malformed_date_drops_only_that_transaction(caplog):
    reader = QifReader(AMBIGUOUS_SECOND_DATE)

    with caplog.at_level(logging.WARNING, logger="qif_stream"):
        n = reader.count()

    assert n == 1
    assert reader[0].payee == "Grocery Store"
    assert "Dropping malformed record" in caplog.text


def test_iteration_continues_after_malformed_record():
    text = THREE_RECORDS.replace("T-1,234.50", "Tnot money")
    reader = QifReader(text)
    assert [t.payee for t in reader] == ["Grocery Store", "Payroll"]


def test_strict_mode_raises_malformed_record():
    reader = QifReader(AMBIGUOUS_SECOND_DATE, strict=True)

    assert reader.next_transaction().payee == "Grocery Store"
    with pytest.raises(MalformedRecordError) as ei:
        reader.next_transaction()
    assert ei.value.lines[0] == "D02/13/2020"


def test_read_failure_ends_data_and_closes_stream():
    # Arrange: header, pushed-back date line, amount, terminator, then failure
    stream = _FlakyStream(THREE_RECORDS, fail_after=5)
    reader = QifReader(stream, "dd/mm/yyyy")

    # Act
    n = reader.count()

    # Assert
    assert n == 1
    assert reader.closed
    assert stream.closed


def test_read_failure_is_raised_in_strict_mode():
    reader = QifReader(_FlakyStream(THREE_RECORDS, fail_after=5), "dd/mm/yyyy", strict=True)
    with pytest.raises(OSError):
        reader.count()
    assert reader.closed


# ---------- sources ----------

def test_reads_binary_stream():
    reader = QifReader(io.BytesIO(THREE_RECORDS.encode("utf-8")))
    assert reader.count() == 3


def test_reads_bytes():
    assert QifReader(THREE_RECORDS.encode("utf-8")).count() == 3


def test_reads_non_seekable_stream():
    reader = QifReader(_NonSeekable(THREE_RECORDS))
    assert reader.date_format.tag == "dd/mm/yyyy"
    assert reader.count() == 3


def test_open_path_and_context_manager(tmp_path):
    p = tmp_path / "bank.qif"
    p.write_text(THREE_RECORDS, encoding="utf-8")

    with QifReader.open(p) as reader:
        assert reader[2].payee == "Payroll"
    assert reader.closed


def test_open_closes_file_when_header_is_bad(tmp_path):
    p = tmp_path / "bad.qif"
    p.write_text("not a qif file\n", encoding="utf-8")
    with pytest.raises(UnrecognizedDataError):
        QifReader.open(p)
