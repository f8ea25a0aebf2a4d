import pytest

import json5_parser as jp

def parse_root(text, **kw):
    root = jp.Node()
    err = jp.parse(root, text, **kw)
    assert err == jp.ErrorCode.NONE, text
    return root

def test_double_and_single_quoted_values():
    root = parse_root("""{a: "dq", b: 'sq'}""")
    assert root["a"].type == jp.NodeType.STRING
    assert root["a"].string == "dq"
    assert root["b"].string == "sq"

def test_escaped_quote_is_unescaped():
    root = parse_root(r"""{s: 'it\'s', d: "say \"hi\""}""")
    assert root["s"].string == "it's"
    assert root["d"].string == 'say "hi"'

def test_other_quote_needs_no_escape():
    root = parse_root("""{s: "it's", d: 'say "hi"'}""")
    assert root["s"].string == "it's"
    assert root["d"].string == 'say "hi"'

@pytest.mark.parametrize("brk", ["\n", "\r\n", "\r"])
def test_escaped_line_break_becomes_space(brk):
    root = parse_root('{s: "first\\' + brk + 'second"}')
    assert root["s"].string == "first second"

def test_other_escapes_are_kept_verbatim():
    root = parse_root(r'{s: "tab\there\\"}')
    assert root["s"].string == r"tab\there\\"

def test_backtick_multistring_spans_lines():
    root = parse_root("{m: `line one\nline two`, n: 1\n}")
    assert root["m"].type == jp.NodeType.MULTISTRING
    assert root["m"].string == "line one\nline two"
    assert root["n"].integer == 1

def test_backtick_escape():
    root = parse_root(r"{m: `a\`b`}")
    assert root["m"].string == "a`b"

def test_non_ascii_content():
    root = parse_root('{"+ľščťžýáíé=": "ľščť"}')
    assert root[0].name == "+ľščťžýáíé="
    assert root[0].string == "ľščť"

def test_unterminated_string_reads_to_end():
    # Not detected as an error: the string simply runs to the end of input.
    root = parse_root('{s: "abc')
    assert root["s"].string == "abc"

def test_strings_do_not_alias_the_buffer():
    buf = bytearray(b'{s: "abc"}')
    root = parse_root(buf)
    buf[5:8] = b"xyz"
    assert root["s"].string == "abc"

# ---------------------------------------------------------------------------
# member names
# ---------------------------------------------------------------------------
def test_quote_styles_are_recorded():
    root = parse_root("""{"dq": 1, 'sq': 2, bare: 3}""")
    assert [n.quote_style for n in root] == [
        jp.QuoteStyle.DOUBLE_QUOTE,
        jp.QuoteStyle.SINGLE_QUOTE,
        jp.QuoteStyle.NO_QUOTES,
    ]
    assert [n.name for n in root] == ["dq", "sq", "bare"]

def test_bare_names_allow_underscore_dollar_and_digits():
    root = parse_root("{_a1: 1, $b: 2, c_2_d: 3}")
    assert [n.name for n in root] == ["_a1", "$b", "c_2_d"]

def test_space_before_colon():
    root = parse_root('{"a" : 1, b   :2}')
    assert root["a"].integer == 1
    assert root["b"].integer == 2

@pytest.mark.parametrize("text", [
    r'{"a\"b": 1}',
    r'{"a\\b": 1}',
    r'{"tab\t": 1}',
    r'{"e\u00e9": 1}',
    r'{"e\00e9": 1}',
])
def test_valid_name_escapes(text):
    parse_root(text)

def test_escaped_quote_stays_in_name():
    root = parse_root(r'{"a\"b": 1}')
    assert root[0].name == r'a\"b'

@pytest.mark.parametrize("text", [
    "{@bad:1}",
    "{1abc: 1}",
    r'{"bad\q": 1}',
    r'{"bad\u12": 1}',
    "{a b: 1}",
    '{"a" 1}',
    "{a-b: 1}",
    "{a",
])
def test_invalid_names(text):
    root = jp.Node()
    assert jp.parse(root, text) == jp.ErrorCode.INVALID_NAME

def test_invalid_name_reports_offset():
    with pytest.raises(jp.Json5Error) as ei:
        jp.parse_node(jp.Node(), r'{"ok": 1, "bad\q": 2}')
    assert ei.value.code == jp.ErrorCode.INVALID_NAME
    assert ei.value.position == 14
    assert "invalid escape in member name" in str(ei.value)
