from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .constants import BITS_PER_BYTE, DEFAULT_PADDING, PaddingMode
from .errors import InvalidBase2String
from .validation import BytesLike, coerce_padding, count_leading_zero_bytes, ensure_bytes, validate_base2

def _bits_all(data: bytes) -> str:
    return format(int.from_bytes(data, "big"), f"0{len(data) * BITS_PER_BYTE}b")

def _bits_trimmed(data: bytes) -> str:
    # A zero value still yields "0".
    return format(int.from_bytes(data, "big"), "b")

def _unsigned_to_bytes(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")

def encode2(data: BytesLike, padding: Union[PaddingMode, str] = DEFAULT_PADDING) -> str:
    """Encode bytes as a string of '0'/'1' characters, most significant bit first.

    With ``zeroes`` (the default), input starting with a zero byte is written
    as whole 8-bit blocks so the leading zero bytes survive decoding; any other
    input drops the leading zero bits of its first byte. ``none`` drops every
    leading zero bit and ``all`` always writes 8 bits per byte.
    """
    data = ensure_bytes(data)
    mode = coerce_padding(padding)

    if not data:
        return ""
    if mode is PaddingMode.ALL:
        return _bits_all(data)
    if mode is PaddingMode.ZEROES:
        if data[0] == 0 and len(data) > 1:
            return _bits_all(data)
        return _bits_trimmed(data)
    if mode is PaddingMode.NONE:
        return _bits_trimmed(data)
    raise ValueError(f"Unhandled padding mode: {mode!r}")

def decode2_or_raise(s: Union[str, BytesLike]) -> bytes:
    """Decode a base2 string, raising InvalidBase2String if it is not one."""
    s = validate_base2(s)
    if not s:
        return b""

    zero_bytes = count_leading_zero_bytes(s)
    rest = s[zero_bytes * BITS_PER_BYTE:]
    if not rest:
        return bytes(zero_bytes)
    return bytes(zero_bytes) + _unsigned_to_bytes(int(rest, 2))

@dataclass(frozen=True)
class DecodeResult:
    ok: bool
    value: Optional[bytes] = None
    error: Optional[InvalidBase2String] = None

    def unwrap(self) -> bytes:
        if not self.ok:
            raise self.error
        return self.value

def decode2(s: Union[str, BytesLike]) -> DecodeResult:
    """Decode a base2 string without raising on invalid characters."""
    try:
        return DecodeResult(ok=True, value=decode2_or_raise(s))
    except InvalidBase2String as e:
        return DecodeResult(ok=False, error=e)
