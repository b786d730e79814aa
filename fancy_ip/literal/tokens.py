"""
Tokens produced by the literal scanner
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["TokenKind", "Token"]


class TokenKind(Enum):
    DECIMAL = "decimal"
    HEX = "hex"
    DOT = "."
    COLON = ":"
    DOUBLE_COLON = "::"


@dataclass(frozen=True)
class Token:
    """A classified span [start, end) of the literal"""
    kind: TokenKind
    start: int
    end: int
    text: str

    @property
    def is_group(self) -> bool:
        return self.kind in (TokenKind.DECIMAL, TokenKind.HEX)

    @property
    def digits(self) -> int:
        """Digit count of a group; 0 for separators"""
        return len(self.text) if self.is_group else 0

    @property
    def value(self) -> Optional[int]:
        if self.kind == TokenKind.DECIMAL:
            return int(self.text, 10)
        if self.kind == TokenKind.HEX:
            return int(self.text, 16)
        return None

    @property
    def hex_value(self) -> int:
        """A decimal-looking run is still a hex group inside an IPv6 address"""
        return int(self.text, 16)
