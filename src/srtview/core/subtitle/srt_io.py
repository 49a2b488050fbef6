from __future__ import annotations

from pathlib import Path

from .models import DiagnosticKind, ParseResult
from .parser import parse_srt_text


def decode_srt_bytes(data: bytes, encoding: str = "utf-8") -> str:
    """
    Decode raw subtitle bytes the same way for every transport.

    - Undecodable bytes are replaced, never fatal.
    - Strips a leading UTF-8 BOM.
    """
    return data.decode(encoding, errors="replace").lstrip("\ufeff")


def parse_srt_bytes(data: bytes, encoding: str = "utf-8") -> ParseResult:
    return parse_srt_text(decode_srt_bytes(data, encoding=encoding))


def read_srt(path: str | Path, encoding: str = "utf-8") -> ParseResult:
    """
    Read a local .srt file into a ParseResult.

    An OS-level read error becomes an UpstreamIOFailure diagnostic
    (the message is passed through verbatim); it never raises.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        return ParseResult.failure(DiagnosticKind.UPSTREAM_IO_FAILURE, f"Error reading file: {e}")
    return parse_srt_bytes(data, encoding=encoding)

