"""
Methods for decoding scanned tokens into an address

IPv6 compression is resolved in two passes: the token sequence is split at the "::" marker, each half is decoded
on its own, and the missing zero groups are inserted between the halves afterwards.
"""
from fancy_ip.core import LiteralError, IPV4, IPV6, MESSAGES
from fancy_ip.literal.address import Family, DecodedAddress, V4Address, V6Address
from fancy_ip.literal.diagnostics import Diagnostic, ErrorKind
from fancy_ip.literal.tokens import Token, TokenKind

__all__ = ["decode", "infer_family"]

SEPARATORS = (TokenKind.COLON, TokenKind.DOUBLE_COLON)


def _fail(kind: ErrorKind, start: int, end: int, message: str = None):
    raise LiteralError(Diagnostic.at(kind, start, end, message))


def infer_family(tokens: list[Token], text: str) -> Family:
    """
    Any colon means IPv6, otherwise any dot means IPv4. A bare run is neither.
    """
    if any(t.kind in SEPARATORS for t in tokens):
        return Family.V6
    if any(t.kind == TokenKind.DOT for t in tokens):
        return Family.V4
    _fail(ErrorKind.AMBIGUOUS_FAMILY, 0, len(text))


def decode(tokens: list[Token], text: str, family: Family = Family.INFER) -> DecodedAddress:
    """
    Given the scanner output for text, we return the decoded address or raise LiteralError
    """
    if family == Family.INFER:
        family = infer_family(tokens, text)

    if family == Family.V4:
        return V4Address(_decode_octets(tokens, text, embedded=False))
    return _decode_v6(tokens, text)


# --- IPv4 --- #

def _check_octet(token: Token) -> int:
    """
    Range and form checks shared by plain and embedded IPv4
    """
    if token.kind != TokenKind.DECIMAL or token.digits > IPV4.MAX_DIGITS:
        _fail(ErrorKind.MALFORMED_OCTET, token.start, token.end)
    if token.digits > 1 and token.text[0] == "0":
        _fail(ErrorKind.LEADING_ZERO, token.start, token.end)
    if token.value > IPV4.MAX_OCTET:
        _fail(ErrorKind.OCTET_OUT_OF_RANGE, token.start, token.end)
    return token.value


def _decode_octets(tokens: list[Token], text: str, embedded: bool) -> tuple[int, ...]:
    """
    Decode `octet (. octet){3}`. For an embedded suffix, structural failures are reported as
    MALFORMED_EMBEDDED_V4 spanning the suffix; octet failures keep their own kind.
    """
    region_start, region_end = tokens[0].start, tokens[-1].end

    def structural(kind: ErrorKind, start: int, end: int):
        if embedded:
            _fail(ErrorKind.MALFORMED_EMBEDDED_V4, region_start, region_end)
        _fail(kind, start, end)

    octets = []
    expect_octet = True
    last_dot = None

    for token in tokens:
        if token.kind in SEPARATORS:
            _fail(ErrorKind.FAMILY_MISMATCH, token.start, token.end, MESSAGES.EXPECTED_V4)

        if expect_octet:
            if token.kind == TokenKind.DOT:
                # Empty octet
                structural(ErrorKind.MALFORMED_OCTET, token.start, token.end)
            if len(octets) == IPV4.OCTETS:
                structural(ErrorKind.TOO_MANY_GROUPS, token.start, region_end)
            if token.kind == TokenKind.HEX and embedded:
                structural(ErrorKind.MALFORMED_OCTET, token.start, token.end)
            octets.append(_check_octet(token))
            expect_octet = False
        else:
            # Runs are maximal so only a dot can follow an octet
            last_dot = token
            expect_octet = True

    if expect_octet and last_dot is not None:
        structural(ErrorKind.TOO_FEW_GROUPS, last_dot.start, last_dot.end)
    if len(octets) < IPV4.OCTETS:
        structural(ErrorKind.TOO_FEW_GROUPS, 0, len(text))

    return tuple(octets)


# --- IPv6 --- #

def _decode_v6(tokens: list[Token], text: str) -> V6Address:
    if not any(t.kind in SEPARATORS for t in tokens):
        _fail(ErrorKind.FAMILY_MISMATCH, 0, len(text), MESSAGES.EXPECTED_V6)

    # Pass 1: split at the compression marker
    markers = [i for i, t in enumerate(tokens) if t.kind == TokenKind.DOUBLE_COLON]
    if len(markers) > 1:
        second = tokens[markers[1]]
        _fail(ErrorKind.MULTIPLE_COMPRESSION_MARKERS, second.start, second.end)

    if markers:
        left_tokens, right_tokens = tokens[:markers[0]], tokens[markers[0] + 1:]
        left, _ = _decode_half(left_tokens, allow_v4=False)
        right, mapped = _decode_half(right_tokens, allow_v4=True)
    else:
        left, mapped = _decode_half(tokens, allow_v4=True)
        right = []

    explicit = len(left) + len(right)

    # Pass 2: backfill the elided zero groups
    if not markers:
        if explicit > IPV6.GROUPS:
            _fail(ErrorKind.TOO_MANY_GROUPS, left[IPV6.GROUPS][1], len(text))
        if explicit < IPV6.GROUPS:
            _fail(ErrorKind.TOO_FEW_GROUPS, 0, len(text))
        groups = [value for value, _ in left]
    else:
        if explicit > IPV6.GROUPS - 1:
            _fail(ErrorKind.TOO_MANY_GROUPS, 0, len(text))
        zeros = [0] * (IPV6.GROUPS - explicit)
        groups = [value for value, _ in left] + zeros + [value for value, _ in right]

    return V6Address(tuple(groups), mapped)


def _decode_half(tokens: list[Token], allow_v4: bool) -> tuple[list[tuple[int, int]], bool]:
    """
    Decode `group (: group)*`, optionally ending in a dotted-decimal IPv4 suffix.
    Returns (value, start offset) per group, and whether the suffix was used.
    """
    if not tokens:
        return [], False

    suffix = []
    dots = [t for t in tokens if t.kind == TokenKind.DOT]
    if dots:
        if not allow_v4:
            _fail(ErrorKind.MALFORMED_EMBEDDED_V4, dots[0].start, dots[0].end)
        # Suffix begins after the last colon
        colons = [i for i, t in enumerate(tokens) if t.kind == TokenKind.COLON]
        split = colons[-1] + 1 if colons else 0
        suffix = tokens[split:]
        if any(t.kind == TokenKind.DOT for t in tokens[:split]):
            _fail(ErrorKind.MALFORMED_EMBEDDED_V4, dots[0].start, dots[0].end)
        if not suffix or suffix[0].kind == TokenKind.DOT:
            _fail(ErrorKind.MALFORMED_EMBEDDED_V4, dots[0].start, tokens[-1].end)
        tokens = tokens[:split]

    groups = []
    expect_group = True

    for token in tokens:
        if expect_group:
            if token.kind == TokenKind.COLON:
                _fail(ErrorKind.TOO_FEW_GROUPS, token.start, token.end)
            if token.digits > IPV6.MAX_DIGITS:
                _fail(ErrorKind.MALFORMED_GROUP, token.start, token.end)
            groups.append((token.hex_value, token.start))
            expect_group = False
        else:
            expect_group = True

    if suffix:
        octets = _decode_octets(suffix, "", embedded=True)
        start = suffix[0].start
        groups.append(((octets[0] << 8) | octets[1], start))
        groups.append(((octets[2] << 8) | octets[3], start))
        return groups, True

    # Half ending in a colon
    if expect_group:
        _fail(ErrorKind.TOO_FEW_GROUPS, tokens[-1].start, tokens[-1].end)

    return groups, False
