from .models import Cue, DiagnosticKind, ParseDiagnostic, ParseResult
from .parser import parse_srt_text
from .srt_io import parse_srt_bytes, read_srt
from .timecode import ms_to_timecode, timecode_to_ms

__all__ = [
    "Cue",
    "DiagnosticKind",
    "ParseDiagnostic",
    "ParseResult",
    "parse_srt_text",
    "parse_srt_bytes",
    "read_srt",
    "ms_to_timecode",
    "timecode_to_ms",
]
