from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class Cue:
    """
    A single timed subtitle entry.

    Notes:
    - sequence is the label exactly as it appeared in the source (trimmed);
      it is not guaranteed numeric or contiguous and playback never reads it.
    - start_ms/end_ms are milliseconds from the track zero point.
      end_ms >= start_ms is expected but not enforced here.
    - text preserves line breaks with '\n'.
    """
    sequence: str
    start_ms: int
    end_ms: int
    text: str

    def contains(self, t_ms: int) -> bool:
        # Inclusive on both ends: adjacent cues share their boundary instant.
        return self.start_ms <= t_ms <= self.end_ms

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence": self.sequence,
            "startTime": self.start_ms,
            "endTime": self.end_ms,
            "text": self.text,
        }


class DiagnosticKind(str, Enum):
    EMPTY_OR_INVALID_FORMAT = "EmptyOrInvalidFormat"
    MALFORMED_CUE_SKIPPED = "MalformedCueSkipped"
    UPSTREAM_IO_FAILURE = "UpstreamIOFailure"


EMPTY_OR_INVALID_MESSAGE = "Could not parse subtitles. The file might be empty or in an invalid SRT format."


@dataclass(frozen=True)
class ParseDiagnostic:
    """
    block_index:
      - 0-based index of the offending block, or -1 for document-level issues
    """
    kind: DiagnosticKind
    message: str
    block_index: int = -1

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "block_index": self.block_index}


_FAILURE_KINDS = (DiagnosticKind.EMPTY_OR_INVALID_FORMAT, DiagnosticKind.UPSTREAM_IO_FAILURE)


@dataclass(frozen=True)
class ParseResult:
    cues: Tuple[Cue, ...] = ()
    diagnostics: Tuple[ParseDiagnostic, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls, cues: Sequence[Cue], skipped: Sequence[ParseDiagnostic] = ()) -> "ParseResult":
        return cls(cues=tuple(cues), diagnostics=tuple(skipped))

    @classmethod
    def failure(cls, kind: DiagnosticKind, message: str, skipped: Sequence[ParseDiagnostic] = ()) -> "ParseResult":
        return cls(cues=(), diagnostics=tuple(skipped) + (ParseDiagnostic(kind=kind, message=message),))

    @property
    def errors(self) -> List[ParseDiagnostic]:
        return [d for d in self.diagnostics if d.kind in _FAILURE_KINDS]

    @property
    def skipped(self) -> List[ParseDiagnostic]:
        return [d for d in self.diagnostics if d.kind == DiagnosticKind.MALFORMED_CUE_SKIPPED]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_messages(self) -> List[str]:
        return [d.message for d in self.errors]

    def has_error(self, kind: DiagnosticKind) -> bool:
        return any(d.kind == kind for d in self.errors)

    @property
    def total_duration_ms(self) -> int:
        return self.cues[-1].end_ms if self.cues else 0
