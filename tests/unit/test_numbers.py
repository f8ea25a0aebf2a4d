import math

import pytest

import json5_parser as jp

def parse_one(text, **kw):
    root = jp.Node()
    err = jp.parse(root, text, **kw)
    assert err == jp.ErrorCode.NONE, text
    assert len(root) == 1
    return root[0]

def multiply_loop(mantissa, exponent):
    # Reference for the exponent rule: one multiply per unit, never pow().
    factor = 0.1 if exponent < 0 else 10.0
    for _ in range(abs(exponent)):
        mantissa *= factor
    return mantissa

def test_decimal_integer():
    node = parse_one('{"a":1}')
    assert node.type == jp.NodeType.INTEGER
    assert node.integer == 1

def test_hex_integer():
    node = parse_one('{"a":0x1F}')
    assert node.type == jp.NodeType.INTEGER
    assert node.integer == 31

def test_hex_upper_prefix_and_sign():
    assert parse_one("{a: 0XfF}").integer == 255
    assert parse_one("{a: -0x10}").integer == -16

def test_signed_integers():
    assert parse_one("{a: +5}").integer == 5
    assert parse_one("{a: -7}").integer == -7

def test_exponent_is_real():
    node = parse_one('{"a":1e2}')
    assert node.type == jp.NodeType.REAL
    assert node.real == 100.0

@pytest.mark.parametrize("literal, mantissa, exponent", [
    ("1e0", 1.0, 0),
    ("1e1", 1.0, 1),
    ("1e-1", 1.0, -1),
    ("2.5e-3", 2.5, -3),
    ("1.5E+2", 1.5, 2),
    ("2.2239333e5", 2.2239333, 5),
    ("7e-12", 7.0, -12),
])
def test_exponent_matches_multiply_loop(literal, mantissa, exponent):
    node = parse_one("{a: %s}" % literal)
    assert node.type == jp.NodeType.REAL
    assert node.real == multiply_loop(mantissa, exponent)

def test_exponent_edge_values():
    assert parse_one("{a: 1e0}").real == 1.0
    assert parse_one("{a: 1e-1}").real == 0.1

def test_extreme_exponents_saturate():
    assert parse_one("{a: 1e400}").real == math.inf
    assert parse_one("{a: -1e400}").real == -math.inf
    assert parse_one("{a: 1e-400}").real == 0.0
    assert parse_one("{a: 1e99999999999}").real == math.inf

def test_fraction_forms():
    assert parse_one("{a: 3.25}").real == 3.25
    lead = parse_one("{a: .5}")
    assert lead.type == jp.NodeType.REAL and lead.real == 0.5
    assert parse_one("{a: -.5}").real == -0.5
    assert parse_one("{a: +.25}").real == 0.25
    bare = parse_one("{a: 5.}")
    assert bare.type == jp.NodeType.REAL and bare.real == 5.0

def test_integer_saturates_to_int64():
    assert parse_one("{a: 99999999999999999999999}").integer == jp.INT64_MAX
    assert parse_one("{a: -99999999999999999999999}").integer == jp.INT64_MIN
    assert parse_one("{a: 9223372036854775807}").integer == jp.INT64_MAX
    assert parse_one("{a: 0xFFFFFFFFFFFFFFFF}").integer == jp.INT64_MAX

def test_leading_zero_is_decimal():
    assert parse_one("{a: 017}").integer == 17

def test_special_reals():
    assert parse_one("{a: Infinity}").real == math.inf
    assert parse_one("{a: -Infinity}").real == -math.inf
    assert math.isnan(parse_one("{a: NaN}").real)
    neg = parse_one("{a: -NaN}")
    assert neg.type == jp.NodeType.REAL and math.isnan(neg.real)

def test_keywords():
    assert parse_one("{a: true}").type == jp.NodeType.TRUE
    assert parse_one("{a: false}").type == jp.NodeType.FALSE
    assert parse_one("{a: null}").type == jp.NodeType.NULL

@pytest.mark.parametrize("text", [
    "{a: tru}",
    "{a: nil}",
    "{a: -Inf}",
    "{a: 0x}",
    "{a: 0x1x}",
    "{a: +}",
    "{a: 1_000}",
    "{a: 12ab}",
])
def test_malformed_literals(text):
    root = jp.Node()
    assert jp.parse(root, text) == jp.ErrorCode.INVALID_VALUE

def test_number_at_end_of_input_is_invalid():
    root = jp.Node()
    assert jp.parse(root, "a: 1") == jp.ErrorCode.INVALID_VALUE
    assert jp.parse(root, "a: 1\n") == jp.ErrorCode.NONE
    assert root["a"].integer == 1

def test_minus_before_dot_is_a_number():
    node = parse_one("{a: -.25}")
    assert node.type == jp.NodeType.REAL
    assert node.real == -0.25
