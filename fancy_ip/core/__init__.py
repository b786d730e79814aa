"""
Contains the core elements that are used within fancy_ip

Core:
    -Provides the address formats and diagnostic messages
    -Provides custom exceptions for the literal parser and constructors
    -Provides the stream helpers and Serializable base for decoded values
"""
# core/__init__.py
from fancy_ip.core.byte_stream import *
from fancy_ip.core.exceptions import *
from fancy_ip.core.formats import *
from fancy_ip.core.serializable import *
