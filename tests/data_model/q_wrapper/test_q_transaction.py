# tests/data_model/q_wrapper/test_q_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from qif_stream.data_model.interfaces import EnumClearedStatus, ITransaction
from qif_stream.data_model.q_wrapper import QSplit, QTransaction
from qif_stream.data_model.qif_parsers_emitters.date_format import DateFormat


def _mk_txn(**overrides) -> QTransaction:
    values = dict(
        date=date(2025, 1, 2),
        amount=Decimal("-12.34"),
        payee="Coffee Shop",
        memo="Latte",
        category="Food:Coffee",
    )
    values.update(overrides)
    return QTransaction(**values)


def test_emit_category_with_tag():
    assert _mk_txn(tag="Reimb").emit_category() == "LFood:Coffee/Reimb"


def test_emit_category_is_empty_without_category_or_tag():
    assert _mk_txn(category="").emit_category() == ""


def test_emit_qif_skips_unset_fields():
    # Arrange
    t = QTransaction(date=date(2025, 1, 2), amount=Decimal("5"))

    # Act
    text = t.emit_qif(DateFormat("dd/mm/yyyy"))

    # Assert
    assert text == "D02/01/2025\nT5"


def test_emit_qif_writes_reconciled_flag_as_r():
    t = _mk_txn(cleared=EnumClearedStatus.RECONCILED)
    assert "\nCR\n" in t.emit_qif(DateFormat("dd/mm/yyyy"))


def test_equality_and_hash_cover_all_fields():
    a, b = _mk_txn(), _mk_txn()
    assert a == b and hash(a) == hash(b)
    assert a != _mk_txn(memo="Mocha")
    assert a != _mk_txn(splits=[QSplit(category="x", amount=Decimal(1))])
    assert (a == "not a transaction") is False


def test_ordering_by_date_then_payee():
    early = _mk_txn(date=date(2025, 1, 1), payee="Z")
    late_a = _mk_txn(date=date(2025, 1, 3), payee="A")
    late_b = _mk_txn(date=date(2025, 1, 3), payee="B")
    assert sorted([late_b, early, late_a]) == [early, late_a, late_b]


def test_to_dict_leaves_out_unset_fields():
    t = _mk_txn(splits=[QSplit(category="Food", amount=Decimal("-12.34"), memo="m")])
    assert t.to_dict() == {
        "date": "2025-01-02",
        "amount": "-12.34",
        "payee": "Coffee Shop",
        "memo": "Latte",
        "category": "Food:Coffee",
        "splits": [{"category": "Food", "amount": "-12.34", "memo": "m"}],
    }


def test_satisfies_transaction_protocol():
    assert isinstance(_mk_txn(), ITransaction)
    assert _mk_txn().splits_exist() is False


def test_to_dict_writes_amounts_in_fixed_point():
    t = _mk_txn(amount=Decimal("1E+3"), splits=[QSplit(category="x", amount=Decimal("2E+1"))])
    d = t.to_dict()
    assert d["amount"] == "1000"
    assert d["splits"] == [{"category": "x", "amount": "20"}]
