"""
Validate and decode IPv4/IPv6 address literals known ahead of time

fancy_ip:
    -validate(text, family) returns a decoded address or a Diagnostic
    -ipv4/ipv6/socketv4/socketv6 build address objects from literals, raising on bad input
"""
# fancy_ip/__init__.py
from fancy_ip.constructors import *
from fancy_ip.core.exceptions import *
from fancy_ip.literal import Family, DecodedAddress, V4Address, V6Address, Diagnostic, ErrorKind
from fancy_ip.socket_address import *
from fancy_ip.validation import *
