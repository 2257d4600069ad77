from __future__ import annotations
import re
from typing import Union

from .constants import BASE2_ALPHABET, BITS_PER_BYTE, PaddingMode
from .errors import InvalidBase2String

BytesLike = Union[bytes, bytearray, memoryview]

_INVALID_CHAR = re.compile(f"[^{BASE2_ALPHABET}]")

def ensure_bytes(data: BytesLike, name: str = "data") -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be a bytes-like object, not {type(data).__name__}")
    return bytes(data)

def coerce_padding(padding: Union[PaddingMode, str]) -> PaddingMode:
    try:
        return PaddingMode(padding)
    except ValueError:
        choices = ", ".join(m.value for m in PaddingMode)
        raise ValueError(f"Unknown padding mode {padding!r}, expected one of: {choices}") from None

def validate_base2(s: Union[str, BytesLike]) -> str:
    """Return ``s`` as text, raising InvalidBase2String at the first non-binary character.

    ASCII bytes are accepted; a non-ASCII byte is reported as invalid at its offset.
    """
    if isinstance(s, (bytes, bytearray, memoryview)):
        raw = bytes(s)
        try:
            s = raw.decode("ascii")
        except UnicodeDecodeError as e:
            bad = _INVALID_CHAR.search(raw[:e.start].decode("ascii"))
            if bad:
                raise InvalidBase2String(bad.start(), bad.group()) from None
            raise InvalidBase2String(e.start, chr(raw[e.start])) from None
    elif not isinstance(s, str):
        raise TypeError(f"base2 input must be str or bytes-like, not {type(s).__name__}")

    bad = _INVALID_CHAR.search(s)
    if bad:
        raise InvalidBase2String(bad.start(), bad.group())
    return s

def is_base2(s: Union[str, BytesLike]) -> bool:
    try:
        validate_base2(s)
    except InvalidBase2String:
        return False
    return True

def count_leading_zero_bytes(s: str) -> int:
    """Number of whole "00000000" blocks at the start of an already validated string."""
    return (len(s) - len(s.lstrip("0"))) // BITS_PER_BYTE
