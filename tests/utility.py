"""
Test utilities
"""
from random import randint

from fancy_ip.literal import Diagnostic


# --- RANDOM --- #
def random_octets():
    return tuple(randint(0, 0xff) for _ in range(4))


def random_groups():
    return tuple(randint(0, 0xffff) for _ in range(8))


# --- ASSERTIONS --- #
def assert_diagnostic(result, kind, span=None, text=None):
    assert isinstance(result, Diagnostic), f"Expected a Diagnostic but received {result!r}"
    assert result.kind == kind, f"Expected {kind} but received {result.kind}"
    if span is not None:
        assert result.span == span, f"Expected span {span} but received {result.span}"
    if text is not None:
        assert 0 <= result.start <= result.end <= len(text), "Diagnostic span out of bounds"
