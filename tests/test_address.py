"""
Tests for the decoded address values
"""
import ipaddress
import json
from io import BytesIO
from secrets import token_bytes

import pytest

from fancy_ip.core import DecodedAddressError, ReadError
from fancy_ip.literal import V4Address, V6Address, Family


def test_v4_address(rand_octets):
    address = V4Address(rand_octets)
    assert address.family == Family.V4
    assert address.packed == bytes(rand_octets)
    assert address.length == 4
    assert address.to_ip_address() == ipaddress.IPv4Address(bytes(rand_octets))
    assert str(address) == "{}.{}.{}.{}".format(*rand_octets)


def test_v6_address(rand_groups):
    address = V6Address(rand_groups)
    assert address.family == Family.V6
    assert address.length == 16
    assert address.to_ip_address() == ipaddress.IPv6Address(address.packed)
    assert address.expanded == ":".join(f"{g:04x}" for g in rand_groups)
    assert address.embedded_ipv4 is None


def test_v6_mapped_expanded_text():
    address = V6Address((0, 0, 0, 0, 0, 0xffff, 0xc0a8, 0x0101), ipv4_mapped=True)
    assert address.expanded == "0000:0000:0000:0000:0000:ffff:192.168.1.1"
    assert address.to_ip_address().ipv4_mapped == ipaddress.IPv4Address("192.168.1.1")


def test_mapped_flag_is_part_of_equality():
    groups = (0, 0, 0, 0, 0, 0xffff, 0x0102, 0x0304)
    assert V6Address(groups) != V6Address(groups, ipv4_mapped=True)
    assert V6Address(groups).packed == V6Address(groups, ipv4_mapped=True).packed


def test_from_bytes():
    """
    to_bytes -> from_bytes recovers the address
    """
    v4_bytes = token_bytes(4)
    v6_bytes = token_bytes(16)
    assert V4Address.from_bytes(v4_bytes).to_bytes() == v4_bytes, "from_bytes fails for V4Address"
    assert V6Address.from_bytes(v6_bytes).to_bytes() == v6_bytes, "from_bytes fails for V6Address"

    # Streams may hold more data
    stream = BytesIO(v4_bytes + v6_bytes)
    assert V4Address.from_bytes(stream).packed == v4_bytes
    assert V6Address.from_bytes(stream).packed == v6_bytes


@pytest.mark.parametrize("cls, data", [
    (V4Address, b"\x01\x02\x03"),
    (V4Address, b"\x01\x02\x03\x04\x05"),
    (V6Address, b"\x00" * 15),
    (V6Address, b"\x00" * 17),
])
def test_from_bytes_wrong_length(cls, data):
    with pytest.raises(ReadError):
        cls.from_bytes(data)


@pytest.mark.parametrize("cls, components", [
    (V4Address, (1, 2, 3)),
    (V4Address, (1, 2, 3, 256)),
    (V4Address, (1, 2, 3, -1)),
    (V6Address, (0,) * 7),
    (V6Address, (0,) * 7 + (0x10000,)),
    (V6Address, (0,) * 7 + (True,)),
])
def test_component_invariants(cls, components):
    with pytest.raises(DecodedAddressError):
        cls(components)


def test_to_json():
    data = json.loads(V6Address((0x2001, 0xdb8, 0, 0, 0, 0, 0, 1)).to_json())
    assert data["family"] == "v6"
    assert data["compressed"] == "2001:db8::1"
    assert data["groups"][1] == "0db8"
    assert data["ipv4_mapped"] is False

    data = json.loads(V4Address((10, 0, 0, 1)).to_json())
    assert data == {"family": "v4", "address": "10.0.0.1", "octets": [10, 0, 0, 1]}


def test_immutable():
    address = V4Address((1, 2, 3, 4))
    with pytest.raises(AttributeError):
        address.octets = (5, 6, 7, 8)  # type: ignore
