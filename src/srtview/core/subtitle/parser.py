from __future__ import annotations

from typing import List

from srtview.utils.logger import get_logger

from .models import (
    EMPTY_OR_INVALID_MESSAGE,
    Cue,
    DiagnosticKind,
    ParseDiagnostic,
    ParseResult,
)
from .timecode import parse_timecode_line

logger = get_logger("srtview.parser")


def normalize_newlines(raw: str) -> str:
    return raw.replace("\r\n", "\n").replace("\r", "\n")


def split_blocks(raw: str) -> List[str]:
    """
    Split a document into cue candidate blocks.

    The whole document is trimmed first, then split on exactly one blank
    line ("\n\n"). Runs of extra blank lines are not collapsed.
    """
    return normalize_newlines(raw).strip().split("\n\n")


def parse_srt_text(raw_text: str) -> ParseResult:
    """
    Parse SRT text into an ordered cue sequence.

    Permissive: a block without at least three lines, or whose second line
    has no 'HH:MM:SS,mmm --> HH:MM:SS,mmm' timecode, is skipped and reported
    only as a MalformedCueSkipped diagnostic. The call fails only when a
    non-blank document yields zero cues.
    """
    cues: List[Cue] = []
    skipped: List[ParseDiagnostic] = []

    for i, block in enumerate(split_blocks(raw_text)):
        lines = block.split("\n")

        if len(lines) < 3:
            if block.strip() != "":
                skipped.append(
                    ParseDiagnostic(
                        kind=DiagnosticKind.MALFORMED_CUE_SKIPPED,
                        message="not enough lines",
                        block_index=i,
                    )
                )
                logger.debug(f"SRT_BLOCK_SKIPPED block={i} reason=not_enough_lines")
            continue

        times = parse_timecode_line(lines[1].strip())
        if times is None:
            skipped.append(
                ParseDiagnostic(
                    kind=DiagnosticKind.MALFORMED_CUE_SKIPPED,
                    message=f"invalid timecode line: {lines[1]!r}",
                    block_index=i,
                )
            )
            logger.debug(f"SRT_BLOCK_SKIPPED block={i} reason=invalid_timecode line={lines[1]!r}")
            continue

        start_ms, end_ms = times
        cues.append(
            Cue(
                sequence=lines[0].strip(),
                start_ms=start_ms,
                end_ms=end_ms,
                text="\n".join(lines[2:]).strip(),
            )
        )

    if not cues and raw_text.strip() != "":
        logger.info(f"SRT_PARSE_FAILED skipped={len(skipped)}")
        return ParseResult.failure(DiagnosticKind.EMPTY_OR_INVALID_FORMAT, EMPTY_OR_INVALID_MESSAGE, skipped)

    logger.debug(f"SRT_PARSED cues={len(cues)} skipped={len(skipped)}")
    return ParseResult.success(cues, skipped)
