from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from srtview.core.playback.clock import Clock
from srtview.core.playback.engine import PlaybackEngine, PlaybackSnapshot, PlaybackState
from srtview.core.subtitle.models import Cue, DiagnosticKind, ParseResult
from srtview.core.subtitle.parser import parse_srt_text
from srtview.core.subtitle.srt_io import decode_srt_bytes
from srtview.utils.logger import get_logger

logger = get_logger("srtview.viewer")

NO_SUBTITLES_MESSAGE = "No subtitles found in the file or the file is invalid."
LOADING_MESSAGE = "Loading subtitles..."


@dataclass(frozen=True)
class LoadTicket:
    seq: int
    name: str


@dataclass(frozen=True)
class ViewState:
    """Everything a renderer needs for one frame (no DOM/terminal concerns)."""

    state: PlaybackState
    elapsed_ms: int
    total_duration_ms: int
    active_cue_index: int
    active_cue: Optional[Cue]
    can_play: bool
    can_pause: bool
    message: str = ""

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING


class ViewerSession:
    """
    Front-end controller around one PlaybackEngine.

    - Loads are cancelable by replacement: only the most recent ticket may
      complete; an older ticket's content is discarded.
    - Scrub policy (pause during a seek gesture, resume afterwards) lives
      here, built from the engine's pause/play primitives.
    """

    def __init__(self, clock: Optional[Clock] = None, engine: Optional[PlaybackEngine] = None) -> None:
        self.engine = engine or PlaybackEngine(clock)
        self._seq = 0
        self._pending: Optional[LoadTicket] = None
        self._scrub_resume = False
        self._scrubbing = False
        self.message = ""
        self.source_name = ""
        self.last_result: Optional[ParseResult] = None

    # -------------------------
    # Loading
    # -------------------------

    def begin_load(self, name: str = "") -> LoadTicket:
        self._seq += 1
        ticket = LoadTicket(seq=self._seq, name=name)
        self._pending = ticket
        self.engine.pause()
        self.message = LOADING_MESSAGE
        logger.debug(f"VIEWER_LOAD_BEGIN seq={ticket.seq} name={name!r}")
        return ticket

    def _claim(self, ticket: LoadTicket) -> bool:
        if self._pending is None or self._pending.seq != ticket.seq:
            logger.debug(f"VIEWER_LOAD_STALE seq={ticket.seq}")
            return False
        self._pending = None
        return True

    def complete_load(self, ticket: LoadTicket, raw_text: str) -> Optional[ParseResult]:
        if not self._claim(ticket):
            return None
        return self._apply_text(ticket, raw_text)

    def fail_load(self, ticket: LoadTicket, message: str) -> Optional[ParseResult]:
        """Upstream read/transport failure: surfaced verbatim, engine keeps its prior state."""
        if not self._claim(ticket):
            return None
        return self._apply_failure(ticket, message)

    def _apply_text(self, ticket: LoadTicket, raw_text: str) -> ParseResult:
        res = parse_srt_text(raw_text)
        self.last_result = res

        if res.has_error(DiagnosticKind.EMPTY_OR_INVALID_FORMAT) or not res.cues:
            # No partial state from a failed parse.
            self.engine.unload()
            self.message = NO_SUBTITLES_MESSAGE
            self.source_name = ticket.name
            logger.info(f"VIEWER_LOAD_EMPTY name={ticket.name!r}")
            return res

        self.engine.load(res.cues)
        self.message = ""
        self.source_name = ticket.name
        self._scrubbing = False
        self._scrub_resume = False
        logger.info(f"VIEWER_LOADED name={ticket.name!r} cues={len(res.cues)}")
        return res

    def _apply_failure(self, ticket: LoadTicket, message: str) -> ParseResult:
        res = ParseResult.failure(DiagnosticKind.UPSTREAM_IO_FAILURE, message)
        self.last_result = res
        self.message = message
        logger.info(f"VIEWER_LOAD_FAILED name={ticket.name!r} msg={message}")
        return res

    def load_file(self, path: str | Path, encoding: str = "utf-8") -> ParseResult:
        p = Path(path)
        ticket = self.begin_load(p.name)
        # Synchronous read: nothing can supersede the ticket before it completes.
        self._claim(ticket)
        try:
            data = p.read_bytes()
        except OSError as e:
            return self._apply_failure(ticket, f"Error reading file: {e}")
        return self._apply_text(ticket, decode_srt_bytes(data, encoding=encoding))

    # -------------------------
    # Transport
    # -------------------------

    def play(self) -> bool:
        return self.engine.play()

    def pause(self) -> bool:
        return self.engine.pause()

    def toggle(self) -> bool:
        if self.engine.is_playing():
            return self.engine.pause()
        return self.engine.play()

    def begin_scrub(self) -> None:
        if self._scrubbing:
            return
        self._scrubbing = True
        self._scrub_resume = self.engine.pause()

    def scrub_to(self, target_ms: int) -> bool:
        return self.engine.seek(target_ms)

    def end_scrub(self) -> None:
        if not self._scrubbing:
            return
        self._scrubbing = False
        if self._scrub_resume:
            self._scrub_resume = False
            self.engine.play()

    # -------------------------
    # Rendering
    # -------------------------

    def _view(self, snap: PlaybackSnapshot) -> ViewState:
        cues = self.engine.cues
        idx = snap.active_cue_index
        active = cues[idx] if 0 <= idx < len(cues) else None
        has_cues = snap.state != PlaybackState.EMPTY
        return ViewState(
            state=snap.state,
            elapsed_ms=snap.elapsed_ms,
            total_duration_ms=snap.total_duration_ms,
            active_cue_index=idx,
            active_cue=active,
            can_play=has_cues and not snap.is_playing,
            can_pause=snap.is_playing,
            message=self.message,
        )

    def tick(self) -> ViewState:
        return self._view(self.engine.tick())
