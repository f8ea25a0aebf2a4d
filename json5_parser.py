# json5_parser.py
# Hand-rolled JSON5 reader: comment stripper plus recursive-descent parser
#
# =============================================================================
#  PARSER IMPLEMENTATION: IN-PLACE SCANNING, NO TOKENIZER
# =============================================================================
#
# The reader walks the decoded text with an integer cursor. Each grammar rule
# is one function that takes the node to populate and the current position,
# and returns the position just past what it consumed:
#
#   _parse_object  - member-or-end / separator / value loop
#   _parse_array   - comma separated values
#   _parse_value   - dispatch on one character of lookahead
#
# The top level is an implicit object, so `a: 1, b: 2` and `{a: 1, b: 2}`
# produce the same tree. A bare `[` in member position yields an unnamed
# member, which is how a document whose root is an array is represented.
#
# Errors raise Json5Error at the point of detection. The exception is the
# unwind: no enclosing rule consumes more input. parse() converts it back to
# an ErrorCode for callers that want the status-code interface.
#
# Comment stripping is a separate forward pass over a bytearray that
# overwrites comment bytes with spaces, so offsets are unchanged.
# =============================================================================

import argparse
import math
import string
import sys
import time
from enum import IntEnum
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

import json5_store
from json5_store import VectorStore

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 256       # Nested containers below the implicit root object
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_EXPONENT_CAP = 1 << 16         # Past this every mantissa has saturated to 0 or inf

# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
# frozensets, so the empty string returned past the end never matches.
_WHITESPACE      = frozenset(" \t\n\r\v\f")
_DIGITS          = frozenset(string.digits)
_HEX_DIGITS      = frozenset(string.hexdigits)
_HEX_CLASS       = frozenset(string.hexdigits + "xX")
_LETTERS         = frozenset(string.ascii_letters)
_IDENT_START     = frozenset(string.ascii_letters + "_$")
_IDENT_CHARS     = frozenset(string.ascii_letters + string.digits + "_")
_NUMBER_START    = frozenset(string.digits + "+-.")
_CONTROL_ESCAPES = frozenset("\"\\/bfnrt")
_LINE_BREAKS     = frozenset("\r\n")


# ---------------------------------------------------------------------------
# NODE MODEL
# ---------------------------------------------------------------------------
class NodeType(IntEnum):
    OBJECT = 0
    STRING = 1
    MULTISTRING = 2
    ARRAY = 3
    INTEGER = 4
    REAL = 5
    NULL = 6
    FALSE = 7
    TRUE = 8


class QuoteStyle(IntEnum):
    DOUBLE_QUOTE = 0
    SINGLE_QUOTE = 1
    NO_QUOTES = 2


class ErrorCode(IntEnum):
    NONE = 0
    INVALID_NAME = 1
    INVALID_VALUE = 2


_KEYWORDS = (
    ("true", NodeType.TRUE, None),
    ("false", NodeType.FALSE, None),
    ("null", NodeType.NULL, None),
    ("Infinity", NodeType.REAL, math.inf),
    ("-Infinity", NodeType.REAL, -math.inf),
    ("NaN", NodeType.REAL, math.nan),
    ("-NaN", NodeType.REAL, -math.nan),
)


class Node:
    """
    One parsed JSON5 value.

    `type` selects the live payload: `children` for objects and arrays,
    `string` for strings and multistrings, `integer` or `real` for numbers.
    null/true/false carry none. `name` is set only on object members;
    array elements, unnamed `[...]` members and the root have None.

    A default-constructed Node is the empty root: an object with no
    children and no backing store. It can be passed to parse() or free().
    """
    __slots__ = ("name", "quote_style", "type", "children", "string", "integer", "real")

    def __init__(self, name: Optional[str] = None,
                 quote_style: QuoteStyle = QuoteStyle.DOUBLE_QUOTE,
                 type: NodeType = NodeType.OBJECT):
        self.name = name
        self.quote_style = quote_style
        self.type = type
        self.children = None
        self.string: Optional[str] = None
        self.integer = 0
        self.real = 0.0

    @property
    def value(self):
        """Payload of a scalar node; None for containers and null."""
        if self.type in (NodeType.STRING, NodeType.MULTISTRING):
            return self.string
        if self.type == NodeType.INTEGER:
            return self.integer
        if self.type == NodeType.REAL:
            return self.real
        if self.type == NodeType.TRUE:
            return True
        if self.type == NodeType.FALSE:
            return False
        return None

    def __len__(self) -> int:
        return json5_store.count(self.children)

    def __iter__(self):
        return iter(self.children or ())

    def __getitem__(self, key: Union[int, str]) -> "Node":
        if isinstance(key, int):
            if self.children is None:
                raise IndexError("node has no children")
            return self.children[key]
        for child in self:
            if child.name == key:
                return child
        raise KeyError(key)

    def to_python(self):
        """
        Convert the subtree to plain Python values.

        Unnamed members of an object are gathered in a list under the
        None key, in document order.
        """
        if self.type == NodeType.OBJECT:
            result = {}
            for child in self:
                if child.name is None:
                    result.setdefault(None, []).append(child.to_python())
                else:
                    result[child.name] = child.to_python()
            return result
        if self.type == NodeType.ARRAY:
            return [child.to_python() for child in self]
        return self.value

    def __repr__(self):
        label = self.type.name.lower()
        if self.type in (NodeType.OBJECT, NodeType.ARRAY):
            body = f"{len(self)} children"
        else:
            body = repr(self.value)
        prefix = f"{self.name!r}: " if self.name is not None else ""
        return f"<Node {prefix}{label} {body}>"


# ---------------------------------------------------------------------------
# ERRORS
# ---------------------------------------------------------------------------
class Json5Error(SyntaxError):
    """Parse failure carrying an ErrorCode and the character offset of detection."""

    def __init__(self, code: ErrorCode, position: int, message: str):
        super().__init__(f"{message} at offset {position}")
        self.code = code
        self.position = position


class _Settings(NamedTuple):
    max_depth: int
    store: Callable[[], object]
    trap: Optional[Callable[[ErrorCode, int], object]]


def _fail(settings: _Settings, code: ErrorCode, pos: int, message: str):
    if settings.trap is not None:
        settings.trap(code, pos)
    raise Json5Error(code, pos, message)


# ---------------------------------------------------------------------------
# SCANNING PRIMITIVES
# ---------------------------------------------------------------------------
def _at(text: str, pos: int) -> str:
    """Character at pos, or '' past the end."""
    return text[pos:pos + 1]


def _trim(text: str, pos: int) -> int:
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _take(text: str, pos: int, allowed: frozenset) -> Tuple[int, str]:
    start = pos
    end = len(text)
    while pos < end and text[pos] in allowed:
        pos += 1
    return pos, text[start:pos]


def _skip_quoted(text: str, pos: int, quote: str) -> int:
    """Index of the closing quote (or the end); backslash escapes the next char."""
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == quote:
            return pos
        pos += 1
    return end


def _scan_string(text: str, pos: int, quote: str, fold_line_breaks: bool) -> Tuple[str, int]:
    """
    Read string content up to the unescaped closing quote.

    Returns (content, index of closing quote). An escaped quote becomes the
    quote; with fold_line_breaks an escaped line break becomes one space.
    Other escapes are kept verbatim. A missing closing quote reads to the
    end of the text.
    """
    parts: List[str] = []
    end = len(text)
    start = pos
    while pos < end:
        ch = text[pos]
        if ch == "\\" and pos + 1 < end:
            nxt = text[pos + 1]
            if nxt == quote:
                parts.append(text[start:pos])
                parts.append(quote)
                pos += 2
                start = pos
                continue
            if fold_line_breaks and nxt in _LINE_BREAKS:
                parts.append(text[start:pos])
                parts.append(" ")
                pos += 3 if text.startswith("\r\n", pos + 1) else 2
                start = pos
                continue
            pos += 2
            continue
        if ch == quote:
            break
        pos += 1
    pos = min(pos, end)
    parts.append(text[start:pos])
    return "".join(parts), pos


# ---------------------------------------------------------------------------
# COMMENT STRIPPER
# ---------------------------------------------------------------------------
_SLASH = ord("/")
_STAR = ord("*")
_BACKSLASH = ord("\\")
_NEWLINE = ord("\n")
_LITERAL_QUOTES = frozenset(b"\"'`")


def blank_comments(buf: bytearray) -> bytearray:
    """
    Overwrite `/* ... */` and `// ...` comments in buf with spaces, in place.

    Quote, apostrophe and backtick literals are skipped; inside them a
    backslash escapes the next byte. A block comment ends at the exact
    two-byte `*/`, or at the end of the buffer if unterminated. A line
    comment is blanked up to the newline, which is kept.
    """
    end = len(buf)
    pos = 0
    quote = None
    while pos < end:
        byte = buf[pos]
        if quote is not None:
            if byte == _BACKSLASH:
                pos += 2
                continue
            if byte == quote:
                quote = None
            pos += 1
            continue
        if byte in _LITERAL_QUOTES:
            quote = byte
            pos += 1
            continue
        if byte == _SLASH and pos + 1 < end:
            nxt = buf[pos + 1]
            if nxt == _STAR:
                close = buf.find(b"*/", pos + 2)
                stop = end if close == -1 else close + 2
                buf[pos:stop] = b" " * (stop - pos)
                pos = stop
                continue
            if nxt == _SLASH:
                close = buf.find(_NEWLINE, pos + 2)
                stop = end if close == -1 else close
                buf[pos:stop] = b" " * (stop - pos)
                pos = stop
                continue
        pos += 1
    return buf


# ---------------------------------------------------------------------------
# NUMBER PARSER
# ---------------------------------------------------------------------------
def _to_int64(digits: str, base: int, negative: bool) -> int:
    """Integer from a digit run, saturated to the signed 64-bit range."""
    significant = digits.lstrip("0")
    if len(significant) > 20:
        value = INT64_MAX + 1
    else:
        value = int(significant or "0", base)
    if negative:
        value = -value
    return max(INT64_MIN, min(INT64_MAX, value))


def _apply_exponent(value: float, exponent: int, factor: float) -> float:
    """Multiply by factor once per unit of exponent; stop once the value is fixed."""
    for _ in range(exponent):
        value *= factor
        if value == 0.0 or math.isinf(value) or math.isnan(value):
            break
    return value


def _parse_number(node: Node, text: str, pos: int, settings: _Settings) -> int:
    """
    Numeric literal: optional sign, then `.digits`, `0x` hex, or
    `digits[.digits]`, then an optional `e[+-]digits` exponent.

    A leading `.` gets a synthesized `0`; a bare trailing `.` gets a
    synthesized fractional `0`. Any fraction or exponent makes the value
    real. The exponent is applied by repeated multiplication, not pow().
    """
    start = pos
    negative = False
    if text[pos] == "+":
        pos += 1
    elif text[pos] == "-":
        negative = True
        pos += 1

    is_real = False
    mantissa = "-" if negative else ""
    integer = 0

    if _at(text, pos) == ".":
        is_real = True
        pos, fraction = _take(text, pos + 1, _DIGITS)
        mantissa += "0." + (fraction or "0")
    elif text.startswith(("0x", "0X"), pos):
        pos, digits = _take(text, pos + 2, _HEX_CLASS)
        if not digits or any(c not in _HEX_DIGITS for c in digits):
            _fail(settings, ErrorCode.INVALID_VALUE, start, f"malformed hex literal {text[start:pos]!r}")
        integer = _to_int64(digits, 16, negative)
    else:
        pos, digits = _take(text, pos, _DIGITS)
        if not digits:
            _fail(settings, ErrorCode.INVALID_VALUE, start, "digits expected in number")
        mantissa += digits
        if _at(text, pos) == ".":
            is_real = True
            pos, fraction = _take(text, pos + 1, _DIGITS)
            mantissa += "." + (fraction or "0")
        else:
            integer = _to_int64(digits, 10, negative)

    exponent = 0
    factor = 10.0
    # The hex class already swallows e/E, so only decimal mantissas get here.
    if _at(text, pos) in ("e", "E"):
        is_real = True
        pos += 1
        sign = _at(text, pos)
        if sign in ("+", "-"):
            if sign == "-":
                factor = 0.1
            pos += 1
        pos, exp_digits = _take(text, pos, _DIGITS)
        exp_digits = exp_digits.lstrip("0")
        exponent = _EXPONENT_CAP if len(exp_digits) > 5 else int(exp_digits or "0")

    if pos >= len(text):
        _fail(settings, ErrorCode.INVALID_VALUE, start, "number runs to end of input")

    if is_real:
        node.type = NodeType.REAL
        node.real = _apply_exponent(float(mantissa), exponent, factor)
    else:
        node.type = NodeType.INTEGER
        node.integer = integer
    return pos


# ---------------------------------------------------------------------------
# CORE VALUE PARSER
# ---------------------------------------------------------------------------
def _parse_value(node: Node, text: str, pos: int, depth: int, settings: _Settings) -> int:
    """
    Dispatch on one character of lookahead. `depth` is the nesting level of
    the container holding this value; entering a new container past
    max_depth fails.
    """
    ch = _at(text, pos)
    if not ch:
        _fail(settings, ErrorCode.INVALID_VALUE, pos, "unexpected end of input - value expected")

    if ch == "[" or ch == "{":
        if depth + 1 > settings.max_depth:
            _fail(settings, ErrorCode.INVALID_VALUE, pos, "depth limit exceeded")
        if ch == "[":
            pos = _parse_array(node, text, pos + 1, depth + 1, settings)
            if _at(text, pos) != "]":
                _fail(settings, ErrorCode.INVALID_VALUE, pos, "expected ']' to close array")
        else:
            pos = _parse_object(node, text, pos + 1, depth + 1, settings)
            if _at(text, pos) != "}":
                _fail(settings, ErrorCode.INVALID_VALUE, pos, "expected '}' to close object")
        return pos + 1

    if ch == '"' or ch == "'":
        node.type = NodeType.STRING
        node.string, pos = _scan_string(text, pos + 1, ch, fold_line_breaks=True)
        return pos + 1

    if ch == "`":
        node.type = NodeType.MULTISTRING
        node.string, pos = _scan_string(text, pos + 1, ch, fold_line_breaks=False)
        return pos + 1

    nxt = _at(text, pos + 1)
    # `-.5` is a number here; only `-` before a letter or other non-digit is a keyword.
    if ch in _LETTERS or (ch == "-" and nxt not in _DIGITS and nxt != "."):
        for word, node_type, real in _KEYWORDS:
            if text.startswith(word, pos):
                node.type = node_type
                if real is not None:
                    node.real = real
                return pos + len(word)
        _fail(settings, ErrorCode.INVALID_VALUE, pos, "invalid literal")

    if ch in _NUMBER_START:
        return _parse_number(node, text, pos, settings)

    _fail(settings, ErrorCode.INVALID_VALUE, pos, f"unexpected character {ch!r} - value expected")


# ---------------------------------------------------------------------------
# ARRAY PARSER
# ---------------------------------------------------------------------------
def _parse_array(node: Node, text: str, pos: int, depth: int, settings: _Settings) -> int:
    """
    Parse elements after the opening `[`; returns the position of the
    terminator, which the caller consumes. The `]` check at the top of the
    loop accepts empty arrays and a trailing comma.
    """
    node.type = NodeType.ARRAY
    node.children = settings.store()
    end = len(text)

    while pos < end:
        pos = _trim(text, pos)
        if _at(text, pos) == "]":
            return pos

        elem = Node()
        try:
            pos = _parse_value(elem, text, pos, depth, settings)
        except Json5Error:
            free(elem)
            raise
        json5_store.append(node.children, elem)

        pos = _trim(text, pos)
        if _at(text, pos) == ",":
            pos += 1
            continue
        return pos
    return pos


# ---------------------------------------------------------------------------
# OBJECT PARSER
# ---------------------------------------------------------------------------
def _validate_name(name: str, offset: int, settings: _Settings) -> None:
    """
    Reject a backslash unless it starts a control escape (`\\"`, `\\n`, ...),
    `\\uXXXX`, or four hex digits.
    """
    i = name.find("\\")
    while i != -1:
        nxt = name[i + 1:i + 2]
        if nxt in _CONTROL_ESCAPES:
            i = name.find("\\", i + 2)
            continue
        run = name[i + 2:i + 6] if nxt == "u" else name[i + 1:i + 5]
        if len(run) == 4 and all(c in _HEX_DIGITS for c in run):
            i = name.find("\\", i + 1 + len(run))
            continue
        _fail(settings, ErrorCode.INVALID_NAME, offset + i, f"invalid escape in member name {name!r}")


def _parse_member_name(member: Node, text: str, pos: int, settings: _Settings) -> int:
    """Read a quoted or bare member name; returns the position of the `:`."""
    ch = text[pos]
    if ch == '"' or ch == "'":
        member.quote_style = QuoteStyle.DOUBLE_QUOTE if ch == '"' else QuoteStyle.SINGLE_QUOTE
        name_start = pos + 1
        close = _skip_quoted(text, name_start, ch)
        member.name = text[name_start:close]
        pos = _trim(text, close + 1)
    elif ch in _IDENT_START:
        name_start = pos
        pos, _ = _take(text, pos + 1, _IDENT_CHARS)
        member.name = text[name_start:pos]
        member.quote_style = QuoteStyle.NO_QUOTES
        pos = _trim(text, pos)
    else:
        _fail(settings, ErrorCode.INVALID_NAME, pos, f"unexpected character {ch!r} - member name expected")

    if _at(text, pos) != ":":
        _fail(settings, ErrorCode.INVALID_NAME, pos, f"expected ':' after member name {member.name!r}")
    _validate_name(member.name, name_start, settings)
    return pos


def _parse_object(node: Node, text: str, pos: int, depth: int, settings: _Settings) -> int:
    """
    Parse members after the opening `{` (or from the start of the document
    for the implicit root). Returns at `}` or at the end of input; the
    caller decides whether that terminator is acceptable.
    """
    node.type = NodeType.OBJECT
    node.children = settings.store()
    end = len(text)

    while pos < end:
        pos = _trim(text, pos)
        if pos >= end or text[pos] == "}":
            return pos

        member = Node()
        try:
            if text[pos] == "[":
                pos = _parse_value(member, text, pos, depth, settings)
            else:
                pos = _parse_member_name(member, text, pos, settings)
                pos = _trim(text, pos + 1)
                pos = _parse_value(member, text, pos, depth, settings)
        except Json5Error:
            free(member)
            raise
        json5_store.append(node.children, member)

        pos = _trim(text, pos)
        ch = _at(text, pos)
        if ch == ",":
            pos += 1
            continue
        if not ch or ch == "}":
            return pos
        _fail(settings, ErrorCode.INVALID_VALUE, pos, f"unexpected character {ch!r} after member")
    return pos


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
Source = Union[str, bytes, bytearray, memoryview]


def _decode(source: Source, strip_comments: bool, settings: _Settings) -> str:
    """
    Produce the text to scan. A bytearray is stripped in place; other
    inputs are copied first, so the caller's object is never mutated.
    """
    if isinstance(source, str):
        if not strip_comments:
            return source
        try:
            buf = bytearray(source.encode("utf-8"))
        except UnicodeEncodeError as exc:
            _fail(settings, ErrorCode.INVALID_VALUE, exc.start, "unencodable character in input")
    elif isinstance(source, bytearray):
        buf = source
    elif isinstance(source, (bytes, memoryview)):
        buf = bytearray(source)
    else:
        raise TypeError(f"cannot parse {type(source).__name__}; expected str or bytes-like")

    if strip_comments:
        blank_comments(buf)
    try:
        return buf.decode("utf-8")
    except UnicodeDecodeError as exc:
        _fail(settings, ErrorCode.INVALID_VALUE, exc.start, "invalid UTF-8 in input")


def _reset(root: Node) -> None:
    free(root)
    root.name = None
    root.quote_style = QuoteStyle.DOUBLE_QUOTE
    root.type = NodeType.OBJECT
    root.string = None
    root.integer = 0
    root.real = 0.0


def parse_node(root: Node, source: Source, strip_comments: bool = False, *,
               max_depth: int = DEPTH_LIMIT_DEFAULT,
               store: Callable[[], object] = VectorStore,
               trap: Optional[Callable[[ErrorCode, int], object]] = None) -> Node:
    """
    Populate root from source, raising Json5Error on the first error.

    The top level is an implicit object with an optional outer brace. After
    an explicit closing `}` only whitespace may follow. On error root holds
    whatever members were completed; it is safe to free() but its content
    is meaningless.
    """
    settings = _Settings(max_depth, store, trap)
    _reset(root)
    text = _decode(source, strip_comments, settings)

    pos = _trim(text, 0)
    braced = _at(text, pos) == "{"
    if braced:
        pos += 1
    start = pos
    try:
        pos = _parse_object(root, text, pos, 0, settings)
    except RecursionError:
        # max_depth set above what the interpreter stack can hold
        _fail(settings, ErrorCode.INVALID_VALUE, start, "depth limit exceeded (interpreter stack)")

    if _at(text, pos) == "}":
        if not braced:
            _fail(settings, ErrorCode.INVALID_VALUE, pos, "unbalanced '}' at top level")
        pos = _trim(text, pos + 1)
        if pos < len(text):
            _fail(settings, ErrorCode.INVALID_VALUE, pos, "extra data after root object")
    return root


def parse(root: Node, source: Source, strip_comments: bool = False, **options) -> ErrorCode:
    """
    Status-code entry point: populate root in place and return
    ErrorCode.NONE, ErrorCode.INVALID_NAME or ErrorCode.INVALID_VALUE.
    Accepts the same keyword options as parse_node().
    """
    try:
        parse_node(root, source, strip_comments, **options)
    except Json5Error as exc:
        return exc.code
    return ErrorCode.NONE


def free(node: Node) -> None:
    """Release every children store in the subtree. Safe to repeat."""
    children = node.children
    if children is None:
        return
    for child in children:
        free(child)
    json5_store.release(children)
    node.children = None


def loads(text: Source, strip_comments: bool = True, **options):
    """Parse and convert to plain Python values; raises Json5Error."""
    root = Node()
    try:
        parse_node(root, text, strip_comments, **options)
        return root.to_python()
    finally:
        free(root)


# ---------------------------------------------------------------------------
# TREE FORMATTER
# ---------------------------------------------------------------------------
def _format_real(value: float) -> str:
    if math.isnan(value):
        return "-NaN" if math.copysign(1.0, value) < 0 else "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _format_name(node: Node) -> str:
    if node.quote_style == QuoteStyle.NO_QUOTES:
        return node.name
    quote = "'" if node.quote_style == QuoteStyle.SINGLE_QUOTE else '"'
    return f"{quote}{node.name}{quote}"


def _format_value(node: Node, level: int, indent: int) -> str:
    kind = node.type
    if kind in (NodeType.OBJECT, NodeType.ARRAY):
        opener, closer = ("{", "}") if kind == NodeType.OBJECT else ("[", "]")
        if not len(node):
            return opener + closer
        pad = " " * (indent * (level + 1))
        rows = []
        for child in node:
            body = _format_value(child, level + 1, indent)
            if child.name is not None:
                body = f"{_format_name(child)}: {body}"
            rows.append(pad + body)
        return opener + "\n" + ",\n".join(rows) + "\n" + " " * (indent * level) + closer
    if kind == NodeType.STRING:
        return '"' + node.string.replace('"', '\\"') + '"'
    if kind == NodeType.MULTISTRING:
        return "`" + node.string.replace("`", "\\`") + "`"
    if kind == NodeType.INTEGER:
        return str(node.integer)
    if kind == NodeType.REAL:
        return _format_real(node.real)
    return {NodeType.NULL: "null", NodeType.TRUE: "true", NodeType.FALSE: "false"}[kind]


def format_tree(node: Node, indent: int = 4) -> str:
    """Render a tree as indented JSON5 text. Reads the tree only."""
    return _format_value(node, 0, indent)


# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Command-line validator: 0 on success, 1 on a parse error, 2 when the
    file cannot be read.
    """
    ap = argparse.ArgumentParser(description="JSON5 validator")
    ap.add_argument("file", help="JSON5 file to verify")
    ap.add_argument("--keep-comments", action="store_true",
                    help="parse comments as document content instead of stripping them")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    ap.add_argument("--dump", action="store_true", help="print the parsed tree")
    ap.add_argument("--time", action="store_true", help="report parse time on stderr")
    args = ap.parse_args(argv)

    try:
        with open(args.file, "rb") as fh:
            data = bytearray(fh.read())
    except OSError as exc:
        print(f"error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 2

    root = Node()
    started = time.perf_counter()
    try:
        parse_node(root, data, not args.keep_comments, max_depth=args.max_depth)
    except Json5Error as exc:
        print(f"Json5Error: {exc}", file=sys.stderr)
        return 1
    finally:
        elapsed = time.perf_counter() - started
        if args.time:
            print(f"parsed in {elapsed * 1000:.3f} ms", file=sys.stderr)

    try:
        print(format_tree(root) if args.dump else "OK")
    finally:
        free(root)
    return 0


def main() -> None:
    sys.exit(_cli(sys.argv[1:]))


# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
