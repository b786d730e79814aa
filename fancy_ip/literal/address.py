"""
The decoded address values

    V4Address: four octets, literal order
    V6Address: eight 16-bit groups, with a flag for a dotted-decimal IPv4 suffix

Both are immutable and can be turned into ipaddress objects without any further validation.
"""
import ipaddress
from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from io import BytesIO

from fancy_ip.core import IPV4, IPV6, Serializable, DecodedAddressError, get_stream, read_stream, read_big_int, \
    read_remaining, ReadError

__all__ = ["Family", "DecodedAddress", "V4Address", "V6Address"]


class Family(Enum):
    V4 = "v4"
    V6 = "v6"
    INFER = "infer"

    @classmethod
    def coerce(cls, family: "Family | str") -> "Family":
        """Accept a Family member or its name/value, case-insensitive"""
        if isinstance(family, cls):
            return family
        if isinstance(family, str):
            key = family.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown address family: {family!r}")


class DecodedAddress(Serializable):
    """
    Parent class for decoded addresses
    """

    @property
    @abstractmethod
    def family(self) -> Family:
        raise NotImplementedError

    @property
    @abstractmethod
    def expanded(self) -> str:
        """Canonical fully expanded text. Validating it yields an equal address."""
        raise NotImplementedError

    @abstractmethod
    def to_ip_address(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        raise NotImplementedError

    @property
    def packed(self) -> bytes:
        """Network-order bytes; subclasses provide octets"""
        return bytes(self.octets)

    def to_bytes(self) -> bytes:
        return self.packed

    def __str__(self):
        return self.expanded


def _check_components(components: tuple, count: int, maximum: int, name: str):
    if len(components) != count:
        raise DecodedAddressError(f"Expected {count} {name}s but received {len(components)}")
    for c in components:
        if not isinstance(c, int) or isinstance(c, bool) or not 0 <= c <= maximum:
            raise DecodedAddressError(f"{name.capitalize()} out of range: {c!r}")


def _read_exact(byte_stream: bytes | BytesIO, length: int, data_type: str) -> BytesIO:
    """Get a stream holding exactly length unread bytes"""
    stream = get_stream(byte_stream)
    remaining = read_remaining(stream)
    if remaining < length:
        raise ReadError(f"Error reading stream. Insufficient data. Data type: {data_type}")
    if remaining > length and not isinstance(byte_stream, BytesIO):
        raise ReadError(f"Expected {length} bytes for {data_type} but received {remaining}")
    return stream


@dataclass(frozen=True)
class V4Address(DecodedAddress):
    octets: tuple[int, int, int, int]

    def __post_init__(self):
        object.__setattr__(self, "octets", tuple(self.octets))
        _check_components(self.octets, IPV4.OCTETS, IPV4.MAX_OCTET, "octet")

    @classmethod
    def from_bytes(cls, byte_stream: bytes | BytesIO):
        stream = _read_exact(byte_stream, IPV4.BYTES, "ipv4")
        return cls(tuple(read_stream(stream, IPV4.BYTES, "ipv4")))

    @property
    def family(self) -> Family:
        return Family.V4

    @property
    def expanded(self) -> str:
        return ".".join(str(o) for o in self.octets)

    def to_ip_address(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(self.packed)

    def to_dict(self) -> dict:
        return {
            "family": self.family.value,
            "address": self.expanded,
            "octets": list(self.octets)
        }


@dataclass(frozen=True)
class V6Address(DecodedAddress):
    groups: tuple[int, int, int, int, int, int, int, int]
    ipv4_mapped: bool = False

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))
        _check_components(self.groups, IPV6.GROUPS, IPV6.MAX_GROUP, "group")

    @classmethod
    def from_bytes(cls, byte_stream: bytes | BytesIO, ipv4_mapped: bool = False):
        stream = _read_exact(byte_stream, IPV6.BYTES, "ipv6")
        groups = tuple(read_big_int(stream, IPV6.GROUP_BYTES, "ipv6 group") for _ in range(IPV6.GROUPS))
        return cls(groups, ipv4_mapped)

    @property
    def family(self) -> Family:
        return Family.V6

    @property
    def octets(self) -> tuple[int, ...]:
        return tuple(b for g in self.groups for b in g.to_bytes(IPV6.GROUP_BYTES, "big"))

    @property
    def embedded_ipv4(self) -> V4Address | None:
        """The trailing 32 bits as an IPv4 address, when written in dotted-decimal form"""
        return V4Address(self.octets[-IPV4.BYTES:]) if self.ipv4_mapped else None

    @property
    def expanded(self) -> str:
        if self.ipv4_mapped:
            head = ":".join(f"{g:04x}" for g in self.groups[:-IPV6.EMBEDDED_V4_GROUPS])
            return f"{head}:{self.embedded_ipv4.expanded}"
        return ":".join(f"{g:04x}" for g in self.groups)

    def to_ip_address(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(self.packed)

    def to_dict(self) -> dict:
        return {
            "family": self.family.value,
            "address": self.expanded,
            "compressed": self.to_ip_address().compressed,
            "groups": [f"{g:04x}" for g in self.groups],
            "ipv4_mapped": self.ipv4_mapped
        }
