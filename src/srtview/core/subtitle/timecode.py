from __future__ import annotations

import re
from typing import Optional, Tuple

# ASCII digits only: str.isdigit / \d would also accept other Unicode digits.
_TC = r"([0-9]{2}):([0-9]{2}):([0-9]{2}),([0-9]{3})"

TIMECODE_RE = re.compile(r"^" + _TC + r"$")

# Searched (not anchored) within the timecode line, like most SRT readers do,
# so trailing position hints after the end time are tolerated.
TIMECODE_LINE_RE = re.compile(_TC + r" --> " + _TC)


def _fields_to_ms(h: str, m: str, s: str, ms: str) -> int:
    return int(h) * 3_600_000 + int(m) * 60_000 + int(s) * 1_000 + int(ms)


def timecode_to_ms(timecode: str) -> int:
    """
    Convert HH:MM:SS,mmm into milliseconds.

    Raises ValueError for anything that is not exactly that shape.
    """
    m = TIMECODE_RE.match(timecode)
    if not m:
        raise ValueError(f"Invalid timecode format: {timecode!r}")
    return _fields_to_ms(*m.groups())


def ms_to_timecode(ms: int) -> str:
    if ms < 0:
        ms = 0
    total_s, milli = divmod(ms, 1000)
    total_m, sec = divmod(total_s, 60)
    hour, minute = divmod(total_m, 60)
    return f"{hour:02d}:{minute:02d}:{sec:02d},{milli:03d}"


def parse_timecode_line(line: str) -> Optional[Tuple[int, int]]:
    """
    Return (start_ms, end_ms) for a 'HH:MM:SS,mmm --> HH:MM:SS,mmm' line,
    or None when the line does not carry one.
    """
    m = TIMECODE_LINE_RE.search(line)
    if not m:
        return None
    g = m.groups()
    return _fields_to_ms(*g[:4]), _fields_to_ms(*g[4:])
