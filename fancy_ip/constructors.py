"""
Build addresses from their standard textual representation

Each constructor takes the literal text and either returns the address object or raises AddressLiteralError
with the Diagnostic for the literal:

    >>> ipv4("192.168.1.5")
    IPv4Address('192.168.1.5')
    >>> ipv6("::1")
    IPv6Address('::1')
    >>> socketv4("192.168.1.5:3000").sockaddr
    ('192.168.1.5', 3000)
    >>> socketv6("[::]:8080", 58, 30).sockaddr
    ('::', 8080, 58, 30)
"""
import ipaddress
from dataclasses import replace
from typing import Optional

from fancy_ip.core import AddressLiteralError, LiteralArgumentError, SOCKET
from fancy_ip.core.logging import get_logger
from fancy_ip.literal import Family, Diagnostic
from fancy_ip.socket_address import SocketAddrV4, SocketAddrV6, validate_socketv4, validate_socketv6
from fancy_ip.validation import validate

logger = get_logger(__name__)

__all__ = ["ipv4", "ipv6", "socketv4", "socketv6"]


def _accept(text: str, result):
    """Raise for a Diagnostic, otherwise pass the value through"""
    if isinstance(result, Diagnostic):
        logger.warning(f"Rejected literal {text!r}: {result}")
        raise AddressLiteralError(result, text)
    logger.debug(f"Accepted literal {text!r}")
    return result


def _check_u32(value, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= SOCKET.MAX_U32:
        raise LiteralArgumentError(f"The {name} must be a 32 bit integer, received: {value!r}")
    return value


def ipv4(text: str) -> ipaddress.IPv4Address:
    """Generate an IPv4 address from its dotted-decimal literal"""
    return _accept(text, validate(text, Family.V4)).to_ip_address()


def ipv6(text: str) -> ipaddress.IPv6Address:
    """Generate an IPv6 address from its colon-separated literal"""
    return _accept(text, validate(text, Family.V6)).to_ip_address()


def socketv4(text: str) -> SocketAddrV4:
    """Generate an IPv4 socket address from "a.b.c.d:port" """
    return _accept(text, validate_socketv4(text))


def socketv6(text: str, flowinfo: Optional[int] = None, scope_id: Optional[int] = None) -> SocketAddrV6:
    """
    Generate an IPv6 socket address from "[addr]:port" or "[addr%scope]:port".

    flowinfo and scope_id, when given, override the values from the literal.
    """
    if flowinfo is not None:
        _check_u32(flowinfo, "flow info")
    if scope_id is not None:
        _check_u32(scope_id, "scope id")

    socket = _accept(text, validate_socketv6(text))

    if flowinfo is not None:
        socket = replace(socket, flowinfo=flowinfo)
    if scope_id is not None:
        socket = replace(socket, scope_id=scope_id)
    return socket
