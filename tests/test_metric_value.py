import pytest

from mzqc.core.exceptions import ParseError
from mzqc.interfaces.simple_enum import ValueKind
from mzqc.models.metric_value import MetricValue, decode_value, encode_value


def test_kinds_are_detected():
    assert MetricValue.of(None).kind == ValueKind.Null
    assert MetricValue.of(True).kind == ValueKind.Boolean
    assert MetricValue.of(3).kind == ValueKind.Integer
    assert MetricValue.of(3.5).kind == ValueKind.Float
    assert MetricValue.of("x").kind == ValueKind.String
    assert MetricValue.of([1, 2]).kind == ValueKind.List
    assert MetricValue.of({"a": 1}).kind == ValueKind.Object


def test_integer_float_and_boolean_are_distinct():
    assert MetricValue.of(1) != MetricValue.of(1.0)
    assert MetricValue.of(1) != MetricValue.of(True)
    assert MetricValue.of([1]) != MetricValue.of([1.0])
    assert MetricValue.of({"a": 0}) != MetricValue.of({"a": False})


def test_nested_equality():
    shape = {"RT": [1.5, 2.5], "ids": {"peptide": "PEPTIDE", "count": 2, "flags": [True, None]}}
    assert MetricValue.of(shape) == MetricValue.of(shape)
    assert MetricValue.of(shape).to_json() == shape


def test_object_key_order_matters():
    assert MetricValue.of({"a": 1, "b": 2}) != MetricValue.of({"b": 2, "a": 1})


def test_fragment_round_trip_keeps_numeric_type():
    original = MetricValue.of({"count": 10, "ratio": 10.0, "deep": [[[{"x": None}]]]})
    decoded = decode_value(encode_value(original))
    assert decoded == original
    assert decoded.data["count"].kind == ValueKind.Integer
    assert decoded.data["ratio"].kind == ValueKind.Float


def test_decode_malformed_fragment():
    with pytest.raises(ParseError):
        decode_value("{not json")


def test_unsupported_type():
    with pytest.raises(TypeError):
        MetricValue.of(object())


def nested_list(depth):
    value = 1
    for _ in range(depth):
        value = [value]
    return value


def test_deep_nesting_converts_without_recursion():
    value = MetricValue.of(nested_list(5000))
    assert value == MetricValue.of(nested_list(5000))
    assert value != MetricValue.of(nested_list(4999))
    plain = value.to_json()
    for _ in range(5000):
        assert isinstance(plain, list) and len(plain) == 1
        plain = plain[0]
    assert plain == 1


def test_deep_fragment_round_trip():
    fragment = "[" * 600 + "1.5" + "]" * 600
    decoded = decode_value(fragment)
    inner = decoded
    for _ in range(600):
        assert inner.kind == ValueKind.List
        inner = inner.data[0]
    assert inner == MetricValue.of(1.5)
    assert encode_value(decoded) == fragment
    assert decode_value(encode_value(decoded)) == decoded


def test_children_that_are_already_wrapped_are_kept():
    child = MetricValue.of({"a": 1})
    assert MetricValue.of([child, 2]).data[0] is child
