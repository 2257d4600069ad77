from __future__ import annotations

class InvalidBase2String(ValueError):
    """Raised when a string contains a character other than '0' or '1'."""

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"Invalid base2 character {ascii(char)} at position {position}")
