from site_admin.core.classifier import classify, is_container
from site_admin.core.models import Kind


def test_primitive_kinds():
    assert classify("x") is Kind.STRING
    assert classify("") is Kind.STRING
    assert classify(3) is Kind.NUMBER
    assert classify(3.5) is Kind.NUMBER
    assert classify(None) is Kind.NULL


def test_bool_is_not_a_number():
    assert classify(True) is Kind.BOOLEAN
    assert classify(False) is Kind.BOOLEAN


def test_containers():
    assert classify({}) is Kind.OBJECT
    assert classify([]) is Kind.ARRAY
    assert is_container({"a": 1})
    assert is_container([1])
    assert not is_container("a")
    assert not Kind.OBJECT.is_leaf and Kind.NULL.is_leaf


def test_unknown_values_have_no_kind():
    assert classify(object()) is None
    assert classify((1, 2)) is None
    assert not is_container(object())
