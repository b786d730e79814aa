"""
Diagnostics for rejected address literals

A Diagnostic is the data returned in place of a decoded address: the kind of failure, a human-readable
message and the half-open span [start, end) of the offending characters in the original literal.
"""
from dataclasses import dataclass
from enum import Enum

from fancy_ip.core import MESSAGES

__all__ = ["ErrorKind", "Diagnostic"]


class ErrorKind(Enum):
    EMPTY_LITERAL = "empty_literal"
    UNEXPECTED_CHARACTER = "unexpected_character"
    MALFORMED_OCTET = "malformed_octet"
    OCTET_OUT_OF_RANGE = "octet_out_of_range"
    LEADING_ZERO = "leading_zero"
    TOO_MANY_GROUPS = "too_many_groups"
    TOO_FEW_GROUPS = "too_few_groups"
    MULTIPLE_COMPRESSION_MARKERS = "multiple_compression_markers"
    MALFORMED_EMBEDDED_V4 = "malformed_embedded_v4"
    AMBIGUOUS_FAMILY = "ambiguous_family"
    MALFORMED_GROUP = "malformed_group"
    FAMILY_MISMATCH = "family_mismatch"
    # Socket literals
    MISSING_PORT = "missing_port"
    MALFORMED_PORT = "malformed_port"
    PORT_OUT_OF_RANGE = "port_out_of_range"
    MISSING_BRACKET = "missing_bracket"
    MALFORMED_SCOPE_ID = "malformed_scope_id"


# Default message for each kind; FAMILY_MISMATCH and MISSING_BRACKET carry a more specific one
DEFAULT_MESSAGES = {
    ErrorKind.EMPTY_LITERAL: MESSAGES.EMPTY_LITERAL,
    ErrorKind.UNEXPECTED_CHARACTER: MESSAGES.UNEXPECTED_CHARACTER,
    ErrorKind.MALFORMED_OCTET: MESSAGES.MALFORMED_OCTET,
    ErrorKind.OCTET_OUT_OF_RANGE: MESSAGES.OCTET_OUT_OF_RANGE,
    ErrorKind.LEADING_ZERO: MESSAGES.LEADING_ZERO,
    ErrorKind.TOO_MANY_GROUPS: MESSAGES.TOO_MANY_GROUPS,
    ErrorKind.TOO_FEW_GROUPS: MESSAGES.TOO_FEW_GROUPS,
    ErrorKind.MULTIPLE_COMPRESSION_MARKERS: MESSAGES.MULTIPLE_COMPRESSION_MARKERS,
    ErrorKind.MALFORMED_EMBEDDED_V4: MESSAGES.MALFORMED_EMBEDDED_V4,
    ErrorKind.AMBIGUOUS_FAMILY: MESSAGES.AMBIGUOUS_FAMILY,
    ErrorKind.MALFORMED_GROUP: MESSAGES.MALFORMED_GROUP,
    ErrorKind.FAMILY_MISMATCH: MESSAGES.EXPECTED_V6,
    ErrorKind.MISSING_PORT: MESSAGES.MISSING_PORT,
    ErrorKind.MALFORMED_PORT: MESSAGES.MALFORMED_PORT,
    ErrorKind.PORT_OUT_OF_RANGE: MESSAGES.PORT_OUT_OF_RANGE,
    ErrorKind.MISSING_BRACKET: MESSAGES.MISSING_OPEN_BRACKET,
    ErrorKind.MALFORMED_SCOPE_ID: MESSAGES.MALFORMED_SCOPE_ID,
}


@dataclass(frozen=True)
class Diagnostic:
    """
    Structured failure report for a single literal. Offsets are 0-based character positions, end exclusive.
    """
    kind: ErrorKind
    message: str
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid diagnostic span: ({self.start}, {self.end})")

    @classmethod
    def at(cls, kind: ErrorKind, start: int, end: int, message: str = None) -> "Diagnostic":
        """Build a diagnostic using the default message for the kind"""
        return cls(kind, message or DEFAULT_MESSAGES[kind], start, end)

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def excerpt(self, text: str) -> str:
        """The offending substring of the literal"""
        return text[self.start:self.end]

    def shifted(self, offset: int) -> "Diagnostic":
        """The same diagnostic with its span moved right by offset, for literals nested in a larger one"""
        return Diagnostic(self.kind, self.message, self.start + offset, self.end + offset)

    def render(self, text: str) -> str:
        """
        Format the diagnostic against the literal it was produced for, underlining the span:

            error: octet out of range
              | 256.0.0.1
              | ^^^
        """
        width = max(self.end - self.start, 1)
        underline = " " * self.start + "^" * width
        return f"error: {self.message}\n  | {text}\n  | {underline}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "start": self.start,
            "end": self.end
        }

    def __str__(self):
        return f"{self.message} at {self.start}..{self.end}"
