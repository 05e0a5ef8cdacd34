# tests/data_model/q_wrapper/test_q_split.py
from decimal import Decimal

from qif_stream.data_model.interfaces import ISplit
from qif_stream.data_model.q_wrapper import QSplit


def test_emit_qif_with_memo_and_tag():
    s = QSplit(category="Food", amount=Decimal("-7.34"), memo="m1", tag="Trip")
    assert s.emit_qif() == "SFood/Trip\nEm1\n$-7.34"


def test_emit_qif_without_memo():
    s = QSplit(category="Rent", amount=Decimal("-5.00"))
    assert s.emit_qif() == "SRent\n$-5.00"


def test_equality_hash_and_ordering():
    a = QSplit(category="A", amount=Decimal("1"))
    b = QSplit(category="A", amount=Decimal("1.00"))
    c = QSplit(category="B", amount=Decimal("0"))
    assert a == b and hash(a) == hash(b)
    assert a < c
    assert isinstance(a, ISplit)


def test_to_dict_includes_optional_fields_only_when_set():
    assert QSplit(category="A", amount=Decimal("1")).to_dict() == {"category": "A", "amount": "1"}
    assert QSplit(category="A", amount=Decimal("1"), memo="m", tag="t").to_dict() == {
        "category": "A",
        "amount": "1",
        "memo": "m",
        "tag": "t",
    }
