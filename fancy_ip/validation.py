"""
The validate entry point: literal text in, decoded address or diagnostic out
"""
from fancy_ip.core import LiteralError
from fancy_ip.literal import Family, DecodedAddress, Diagnostic, scan, decode

__all__ = ["validate", "is_valid"]


def validate(text: str, family: Family | str = Family.INFER) -> DecodedAddress | Diagnostic:
    """
    Validate and decode an address literal.

    Args:
        text: the literal, e.g. "192.168.1.5" or "2001:db8::1"
        family: Family.V4, Family.V6 or Family.INFER (or their names)

    Returns:
        A V4Address/V6Address on success, otherwise the Diagnostic for the first failure.
        Bad literal text never raises.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str literal but received: {type(text)}")
    family = Family.coerce(family)

    try:
        tokens = scan(text)
        return decode(tokens, text, family)
    except LiteralError as e:
        return e.diagnostic


def is_valid(text: str, family: Family | str = Family.INFER) -> bool:
    return not isinstance(validate(text, family), Diagnostic)
