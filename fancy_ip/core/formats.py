"""
The address literal formats
"""
from typing import Final

__all__ = ["IPV4", "IPV6", "SOCKET", "LOGGING", "MESSAGES"]


class IPV4:
    """
    Dotted-decimal IPv4 constants
    """
    OCTETS: Final[int] = 4
    MAX_OCTET: Final[int] = 0xff
    MAX_DIGITS: Final[int] = 3
    BYTES: Final[int] = 4


class IPV6:
    """
    Colon-separated IPv6 constants. An embedded IPv4 suffix fills the last two groups.
    """
    GROUPS: Final[int] = 8
    MAX_GROUP: Final[int] = 0xffff
    MAX_DIGITS: Final[int] = 4
    GROUP_BYTES: Final[int] = 2
    BYTES: Final[int] = 16
    EMBEDDED_V4_GROUPS: Final[int] = 2


class SOCKET:
    MAX_PORT: Final[int] = 0xffff
    MAX_U32: Final[int] = 0xffffffff


class LOGGING:
    LEVEL: Final[str] = "WARNING"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


class MESSAGES:
    """
    Human-readable diagnostic messages
    """
    EMPTY_LITERAL: Final[str] = "empty address literal"
    UNEXPECTED_CHARACTER: Final[str] = "unexpected character in address literal"
    MALFORMED_OCTET: Final[str] = "malformed octet"
    OCTET_OUT_OF_RANGE: Final[str] = "octet out of range"
    LEADING_ZERO: Final[str] = "leading zero not permitted"
    TOO_MANY_GROUPS: Final[str] = "too many groups"
    TOO_FEW_GROUPS: Final[str] = "incomplete address"
    MULTIPLE_COMPRESSION_MARKERS: Final[str] = "multiple '::' not allowed"
    MALFORMED_EMBEDDED_V4: Final[str] = "malformed embedded IPv4 address"
    AMBIGUOUS_FAMILY: Final[str] = "cannot infer address family"
    MALFORMED_GROUP: Final[str] = "hex group exceeds four digits"
    EXPECTED_V4: Final[str] = "expected an IPv4 address"
    EXPECTED_V6: Final[str] = "expected an IPv6 address"
    MISSING_PORT: Final[str] = "missing port"
    MALFORMED_PORT: Final[str] = "malformed port"
    PORT_OUT_OF_RANGE: Final[str] = "port out of range"
    MISSING_OPEN_BRACKET: Final[str] = "expected '[' around IPv6 address"
    UNCLOSED_BRACKET: Final[str] = "unclosed '['"
    MALFORMED_SCOPE_ID: Final[str] = "malformed scope id"
