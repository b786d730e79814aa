"""
Socket address literals: an address and a port

    ---------------------------------------------------------
    |   Family  | Literal form                              |
    ---------------------------------------------------------
    |   IPv4    | a.b.c.d:port                              |
    |   IPv6    | [groups]:port  or  [groups%scope]:port    |
    ---------------------------------------------------------

Failures are returned as Diagnostics whose spans index into the full socket literal.
"""
import ipaddress
import json
from dataclasses import dataclass

from fancy_ip.core import SOCKET, MESSAGES
from fancy_ip.literal import Family, Diagnostic, ErrorKind
from fancy_ip.validation import validate

__all__ = ["SocketAddrV4", "SocketAddrV6", "validate_socketv4", "validate_socketv6"]

DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class SocketAddrV4:
    ip: ipaddress.IPv4Address
    port: int

    @property
    def sockaddr(self) -> tuple[str, int]:
        """The address tuple accepted by the socket module for AF_INET"""
        return str(self.ip), self.port

    def to_dict(self) -> dict:
        return {"ip": str(self.ip), "port": self.port}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self):
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class SocketAddrV6:
    ip: ipaddress.IPv6Address
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    @property
    def sockaddr(self) -> tuple[str, int, int, int]:
        """The address tuple accepted by the socket module for AF_INET6"""
        return str(self.ip), self.port, self.flowinfo, self.scope_id

    def to_dict(self) -> dict:
        return {"ip": str(self.ip), "port": self.port, "flowinfo": self.flowinfo, "scope_id": self.scope_id}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self):
        scope = f"%{self.scope_id}" if self.scope_id else ""
        return f"[{self.ip}{scope}]:{self.port}"


def _bounded_int(digits: str, maximum: int) -> int | None:
    """Value of a decimal run, or None above maximum. Runs of any length are safe."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(maximum)):
        return None
    value = int(significant)
    return value if value <= maximum else None


def _parse_u32(text: str, start: int, end: int, kind: ErrorKind, maximum: int) -> int | Diagnostic:
    """Unsigned decimal in text[start:end]; leading zeros allowed"""
    digits = text[start:end]
    if not digits or any(c not in DIGITS for c in digits):
        return Diagnostic.at(kind, start, end)
    value = _bounded_int(digits, maximum)
    if value is None:
        return Diagnostic.at(kind, start, end)
    return value


def _parse_port(text: str, colon: int) -> int | Diagnostic:
    start, end = colon + 1, len(text)
    if start == end:
        return Diagnostic.at(ErrorKind.MALFORMED_PORT, colon, end)
    digits = text[start:end]
    if any(c not in DIGITS for c in digits):
        return Diagnostic.at(ErrorKind.MALFORMED_PORT, start, end)
    port = _bounded_int(digits, SOCKET.MAX_PORT)
    if port is None:
        return Diagnostic.at(ErrorKind.PORT_OUT_OF_RANGE, start, end)
    return port


def validate_socketv4(text: str) -> SocketAddrV4 | Diagnostic:
    if not text:
        return Diagnostic.at(ErrorKind.EMPTY_LITERAL, 0, 0)

    colon = text.rfind(":")
    if colon == -1:
        return Diagnostic.at(ErrorKind.MISSING_PORT, 0, len(text))

    address = validate(text[:colon], Family.V4)
    if isinstance(address, Diagnostic):
        return address

    port = _parse_port(text, colon)
    if isinstance(port, Diagnostic):
        return port

    return SocketAddrV4(address.to_ip_address(), port)


def validate_socketv6(text: str) -> SocketAddrV6 | Diagnostic:
    if not text:
        return Diagnostic.at(ErrorKind.EMPTY_LITERAL, 0, 0)
    if text[0] != "[":
        return Diagnostic.at(ErrorKind.MISSING_BRACKET, 0, 1)

    close = text.find("]")
    if close == -1:
        return Diagnostic.at(ErrorKind.MISSING_BRACKET, 0, len(text), MESSAGES.UNCLOSED_BRACKET)

    # Optional numeric scope id inside the brackets, checked after the address before it
    percent = text.find("%", 1, close)
    address_end = percent if percent != -1 else close

    address = validate(text[1:address_end], Family.V6)
    if isinstance(address, Diagnostic):
        return address.shifted(1)

    scope_id = 0
    if percent != -1:
        scope_id = _parse_u32(text, percent + 1, close, ErrorKind.MALFORMED_SCOPE_ID, SOCKET.MAX_U32)
        if isinstance(scope_id, Diagnostic):
            return scope_id

    if close + 1 == len(text) or text[close + 1] != ":":
        return Diagnostic.at(ErrorKind.MISSING_PORT, close, min(close + 2, len(text)))

    port = _parse_port(text, close + 1)
    if isinstance(port, Diagnostic):
        return port

    return SocketAddrV6(address.to_ip_address(), port, 0, scope_id)
