"""
The address literal parser: scanner, decoder, decoded values and diagnostics
"""

# literal/__init__.py
from fancy_ip.literal.address import *
from fancy_ip.literal.decoder import *
from fancy_ip.literal.diagnostics import *
from fancy_ip.literal.scanner import *
from fancy_ip.literal.tokens import *
