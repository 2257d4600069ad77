from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Union

import structlog

from .core.constants import DEFAULT_PADDING, ExitCode, PaddingMode
from .core.encoding import decode2, encode2
from .selfcheck import codec_self_check

def _configure_logger():
    # stdout carries codec output only
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    return structlog.get_logger()

def _read_encode_input(args) -> bytes:
    if args.text is not None:
        return args.text.encode("utf-8")
    if args.hex is not None:
        return bytes.fromhex(args.hex)
    if args.input:
        with open(args.input, "rb") as f:
            return f.read()
    return sys.stdin.buffer.read()

def _read_decode_input(args) -> Union[str, bytes]:
    # Files and stdin stay bytes so non-ASCII input is reported by offset.
    if args.string is not None:
        return args.string.strip()
    if args.input:
        with open(args.input, "rb") as f:
            return f.read().strip()
    return sys.stdin.buffer.read().strip()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="base2", description="Base2 encoder and decoder")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode bytes as a base2 string")
    encode_parser.add_argument(
        "--padding",
        choices=[m.value for m in PaddingMode],
        default=DEFAULT_PADDING.value,
        help="none: smallest output; zeroes: keep leading zero bytes (default); all: 8 bits per byte",
    )
    source = encode_parser.add_mutually_exclusive_group()
    source.add_argument("--input", "-i", help="Read bytes from FILE instead of stdin")
    source.add_argument("--text", help="Encode TEXT as UTF-8")
    source.add_argument("--hex", help="Encode the bytes given as hex digits")

    decode_parser = subparsers.add_parser("decode", help="Decode a base2 string to bytes")
    decode_parser.add_argument("string", nargs="?", help="Base2 string (default: read stdin)")
    decode_parser.add_argument("--input", "-i", help="Read the base2 string from FILE")
    decode_parser.add_argument("--hex", action="store_true", help="Print decoded bytes as hex")

    subparsers.add_parser("check", help="Run codec self-check")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    logger = _configure_logger()
    args = build_parser().parse_args(argv)

    if args.command == "check":
        try:
            codec_self_check(logger)
        except RuntimeError as e:
            print(f"Error: {e}")
            return ExitCode.SELF_CHECK_FAILED
        print("✓ Codec self-check passed")
        return ExitCode.OK

    if args.command == "encode":
        try:
            data = _read_encode_input(args)
        except (OSError, ValueError) as e:
            logger.error("input_error", error=str(e))
            print(f"Error: {e}")
            return ExitCode.INVALID_INPUT
        encoded = encode2(data, args.padding)
        logger.info("encoded", padding=args.padding, bytes_in=len(data), chars_out=len(encoded))
        print(encoded)
        return ExitCode.OK

    if args.command == "decode":
        if args.string is not None and args.input:
            print("Error: give either a string or --input, not both")
            return ExitCode.INVALID_INPUT
        try:
            text = _read_decode_input(args)
        except OSError as e:
            logger.error("input_error", error=str(e))
            print(f"Error: {e}")
            return ExitCode.INVALID_INPUT

        result = decode2(text)
        if not result.ok:
            logger.error("decode_error", error=str(result.error), position=result.error.position)
            print(f"Error: {result.error}")
            return ExitCode.INVALID_INPUT

        logger.info("decoded", chars_in=len(text), bytes_out=len(result.value))
        if args.hex:
            print(result.value.hex())
        else:
            sys.stdout.flush()
            sys.stdout.buffer.write(result.value)
            sys.stdout.buffer.flush()
        return ExitCode.OK

    return ExitCode.OK
