from __future__ import annotations
from enum import Enum

class PaddingMode(str, Enum):
    """How leading zero bytes are written by the encoder.

    NONE drops every leading zero bit (smallest output, loses the byte count).
    ZEROES keeps leading zero bytes as whole 8-bit blocks (transparent).
    ALL writes every byte as 8 bits (length always a multiple of 8).
    """
    NONE = "none"
    ZEROES = "zeroes"
    ALL = "all"

DEFAULT_PADDING = PaddingMode.ZEROES

BITS_PER_BYTE = 8
BASE2_ALPHABET = "01"

class ExitCode:
    OK = 0
    INVALID_INPUT = 2
    SELF_CHECK_FAILED = 3
