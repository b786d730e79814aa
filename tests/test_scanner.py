"""
Tests for the literal scanner
"""
import pytest

from fancy_ip.core import LiteralError
from fancy_ip.literal import scan, TokenKind, ErrorKind


def kinds(text):
    return [t.kind for t in scan(text)]


def test_scan_ipv4():
    tokens = scan("192.168.1.5")
    assert kinds("192.168.1.5") == [TokenKind.DECIMAL, TokenKind.DOT] * 3 + [TokenKind.DECIMAL]
    assert [t.value for t in tokens if t.is_group] == [192, 168, 1, 5]
    assert [t.digits for t in tokens if t.is_group] == [3, 3, 1, 1]


def test_scan_double_colon_is_one_token():
    assert kinds("::") == [TokenKind.DOUBLE_COLON]
    assert kinds("1::2") == [TokenKind.DECIMAL, TokenKind.DOUBLE_COLON, TokenKind.DECIMAL]
    # A third colon starts a new token
    assert kinds(":::") == [TokenKind.DOUBLE_COLON, TokenKind.COLON]


def test_scan_hex_groups():
    tokens = scan("fe80:DB8::a")
    assert [t.kind for t in tokens] == [TokenKind.HEX, TokenKind.COLON, TokenKind.HEX, TokenKind.DOUBLE_COLON,
                                        TokenKind.HEX]
    assert tokens[0].value == 0xfe80
    assert tokens[2].value == 0xdb8
    assert tokens[4].value == 0xa


def test_decimal_run_read_as_hex():
    token = scan("2001")[0]
    assert token.kind == TokenKind.DECIMAL
    assert token.value == 2001
    assert token.hex_value == 0x2001


@pytest.mark.parametrize("text", ["1.2.3.4", "::ffff:10.0.0.1", "2001:db8::1", "::", "a:b:c"])
def test_tokens_cover_literal(text):
    """
    Tokens are contiguous, in order, and reproduce the literal
    """
    tokens = scan(text)
    assert tokens[0].start == 0
    assert tokens[-1].end == len(text)
    for prev, nxt in zip(tokens, tokens[1:]):
        assert prev.end == nxt.start, f"Gap or overlap between {prev} and {nxt}"
    assert "".join(t.text for t in tokens) == text


def test_long_decimal_run_left_to_decoder():
    token = scan("12345")[0]
    assert token.kind == TokenKind.DECIMAL
    assert token.digits == 5


def test_empty_literal():
    with pytest.raises(LiteralError) as exc:
        scan("")
    assert exc.value.diagnostic.kind == ErrorKind.EMPTY_LITERAL
    assert exc.value.diagnostic.span == (0, 0)
    assert exc.value.diagnostic.message == "empty address literal"


@pytest.mark.parametrize("text, position", [
    ("1.2.3.x", 6),
    (" 1.2.3.4", 0),
    ("1.2.3.4/24", 7),
    ("fe80::1%eth0", 7),
    ("[::1]", 0),
    ("1.2.3.٤", 6),  # non-ASCII digit
])
def test_unexpected_character(text, position):
    with pytest.raises(LiteralError) as exc:
        scan(text)
    diagnostic = exc.value.diagnostic
    assert diagnostic.kind == ErrorKind.UNEXPECTED_CHARACTER
    assert diagnostic.span == (position, position + 1)
    assert diagnostic.message == "unexpected character in address literal"


def test_hex_group_too_long():
    with pytest.raises(LiteralError) as exc:
        scan("1:abcde::")
    assert exc.value.diagnostic.kind == ErrorKind.MALFORMED_GROUP
    assert exc.value.diagnostic.span == (2, 7)
