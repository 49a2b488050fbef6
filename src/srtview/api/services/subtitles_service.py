from __future__ import annotations

from pathlib import Path
from typing import Optional

from srtview.api.metrics import inc_cues_parsed, inc_subtitles_parsed
from srtview.core.subtitle.models import DiagnosticKind, ParseResult
from srtview.core.subtitle.srt_io import parse_srt_bytes, read_srt
from srtview.utils.logger import get_logger

logger = get_logger("srtview.api")

NO_FILE_MESSAGE = "No file uploaded."
INVALID_TYPE_MESSAGE = "Invalid file type. Only .srt files are allowed."


def _record(result: ParseResult) -> None:
    if result.ok:
        inc_subtitles_parsed("ok")
        inc_cues_parsed(len(result.cues))
    elif result.has_error(DiagnosticKind.UPSTREAM_IO_FAILURE):
        inc_subtitles_parsed("io_error")
    else:
        inc_subtitles_parsed("invalid_format")


def is_srt_filename(filename: str) -> bool:
    return Path(filename).suffix.lower() == ".srt"


def parse_uploaded_srt(filename: Optional[str], data: bytes) -> ParseResult:
    """
    Request-boundary adapter over the shared parser.

    Upload policy (file present, .srt extension) is checked here; those
    rejections are UpstreamIOFailure results, same as a failed read.
    """
    if not filename and not data:
        inc_subtitles_parsed("rejected")
        return ParseResult.failure(DiagnosticKind.UPSTREAM_IO_FAILURE, NO_FILE_MESSAGE)

    if not is_srt_filename(filename or ""):
        inc_subtitles_parsed("rejected")
        logger.info(f"SRT_UPLOAD_REJECTED filename={filename!r}")
        return ParseResult.failure(DiagnosticKind.UPSTREAM_IO_FAILURE, INVALID_TYPE_MESSAGE)

    result = parse_srt_bytes(data)
    _record(result)
    logger.info(f"SRT_UPLOAD_PARSED filename={filename!r} bytes={len(data)} cues={len(result.cues)} ok={result.ok}")
    return result


def parse_srt_path(srt_path: str) -> ParseResult:
    """Parse a server-side file (path already validated by the path policy)."""
    if not is_srt_filename(srt_path):
        inc_subtitles_parsed("rejected")
        return ParseResult.failure(DiagnosticKind.UPSTREAM_IO_FAILURE, INVALID_TYPE_MESSAGE)

    result = read_srt(srt_path)
    _record(result)
    logger.info(f"SRT_PATH_PARSED path={srt_path} cues={len(result.cues)} ok={result.ok}")
    return result
