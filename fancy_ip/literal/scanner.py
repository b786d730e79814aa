"""
Methods for scanning an address literal into tokens
"""
from fancy_ip.core import LiteralError, IPV6
from fancy_ip.literal.diagnostics import Diagnostic, ErrorKind
from fancy_ip.literal.tokens import Token, TokenKind

__all__ = ["scan"]

DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def scan(text: str) -> list[Token]:
    """
    Given a literal, we return its tokens in order. The tokens cover the literal with no gaps.
    Raises LiteralError at the first character that cannot start a token.
    """
    length = len(text)
    if length == 0:
        raise LiteralError(Diagnostic.at(ErrorKind.EMPTY_LITERAL, 0, 0))

    pos = 0
    tokens = []

    while pos < length:
        char = text[pos]

        # Group: maximal run of hex digits
        if char in HEX_DIGITS:
            start = pos
            while pos < length and text[pos] in HEX_DIGITS:
                pos += 1
            run = text[start:pos]

            if all(c in DECIMAL_DIGITS for c in run):
                tokens.append(Token(TokenKind.DECIMAL, start, pos, run))
            elif len(run) > IPV6.MAX_DIGITS:
                raise LiteralError(Diagnostic.at(ErrorKind.MALFORMED_GROUP, start, pos))
            else:
                tokens.append(Token(TokenKind.HEX, start, pos, run))

        elif char == ".":
            tokens.append(Token(TokenKind.DOT, pos, pos + 1, char))
            pos += 1

        # "::" is one token, a third colon starts the next one
        elif char == ":":
            if pos + 1 < length and text[pos + 1] == ":":
                tokens.append(Token(TokenKind.DOUBLE_COLON, pos, pos + 2, "::"))
                pos += 2
            else:
                tokens.append(Token(TokenKind.COLON, pos, pos + 1, char))
                pos += 1

        else:
            raise LiteralError(Diagnostic.at(ErrorKind.UNEXPECTED_CHARACTER, pos, pos + 1))

    return tokens
