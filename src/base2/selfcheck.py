from __future__ import annotations
import secrets
import sys

from .core.constants import PaddingMode
from .core.encoding import decode2, decode2_or_raise, encode2
from .core.errors import InvalidBase2String

KNOWN_VECTORS = [
    (b"hello", PaddingMode.ZEROES, "110100001100101011011000110110001101111"),
    (b"\x00\x01", PaddingMode.ZEROES, "0000000000000001"),
    (b"\x00", PaddingMode.ZEROES, "0"),
    (b"\x00\x01", PaddingMode.NONE, "1"),
    (b"\x01", PaddingMode.ALL, "00000001"),
    (b"", PaddingMode.ALL, ""),
]

def codec_self_check(logger):
    checks = []

    checks.append(("Python >= 3.9", sys.version_info >= (3, 9), "Python 3.9+ required"))

    for data, mode, expected in KNOWN_VECTORS:
        got = encode2(data, mode)
        checks.append((f"Encode vector {data!r} ({mode.value})", got == expected, f"got {got!r}"))

    sample = bytes(2) + secrets.token_bytes(30)
    for mode in (PaddingMode.ZEROES, PaddingMode.ALL):
        try:
            ok = decode2_or_raise(encode2(sample, mode)) == sample
            checks.append((f"Round trip ({mode.value})", ok, "Decoded bytes differ"))
        except Exception as e:
            checks.append((f"Round trip ({mode.value})", False, str(e)))

    result = decode2("101010101COMPUTERWELT101010101001")
    checks.append(("Invalid string rejected (result)", not result.ok, "Invalid base2 accepted"))

    try:
        decode2_or_raise("-1")
        checks.append(("Invalid string rejected (raise)", False, "Invalid base2 accepted"))
    except InvalidBase2String:
        checks.append(("Invalid string rejected (raise)", True, ""))

    all_ok = True
    for name, ok, reason in checks:
        all_ok = all_ok and ok
        if ok:
            logger.info("codec_check", check=name, status="OK")
        else:
            logger.error("codec_check", check=name, status="FAILED", reason=reason)

    if not all_ok:
        raise RuntimeError("Codec self-check failed")

    logger.info("codec_self_check_passed")
    return True
