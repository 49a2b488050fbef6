from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from srtview.core.subtitle.timecode import ms_to_timecode
from srtview.core.viewer.session import ViewerSession, ViewState
from srtview.utils.logger import get_logger

logger = get_logger("srtview.player")


@dataclass(frozen=True)
class PlayerConfig:
    # Poll cadence; ~100 ms keeps progress smooth for a human reader.
    tick_interval_ms: int = field(default_factory=lambda: int(os.getenv("SRTVIEW_TICK_INTERVAL_MS", "100")))
    start_ms: int = 0


def render_line(view: ViewState) -> str:
    cue = view.active_cue
    if cue is None:
        return f"[{ms_to_timecode(view.elapsed_ms)}]"
    text = cue.text.replace("\n", " / ")
    return f"[{ms_to_timecode(cue.start_ms)} --> {ms_to_timecode(cue.end_ms)}] #{cue.sequence} {text}"


class TerminalPlayer:
    """
    Rendering collaborator for a terminal: owns the poll loop, the engine
    owns the position. Prints each cue once, when it becomes active.
    """

    def __init__(
        self,
        session: ViewerSession,
        *,
        cfg: Optional[PlayerConfig] = None,
        emit: Callable[[str], None] = print,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.session = session
        self.cfg = cfg or PlayerConfig()
        self.emit = emit
        self.sleep = sleep or time.sleep
        self._last_index = -1

    def step(self) -> ViewState:
        view = self.session.tick()
        if view.active_cue_index != self._last_index:
            self._last_index = view.active_cue_index
            if view.active_cue is not None:
                self.emit(render_line(view))
        return view

    def run(self) -> ViewState:
        if self.cfg.start_ms:
            self.session.scrub_to(self.cfg.start_ms)
        if not self.session.play():
            return self.step()

        interval_s = max(1, self.cfg.tick_interval_ms) / 1000.0
        logger.debug(f"PLAYER_RUN interval_ms={self.cfg.tick_interval_ms} start_ms={self.cfg.start_ms}")
        try:
            view = self.step()
            while view.is_playing:
                self.sleep(interval_s)
                view = self.step()
        except KeyboardInterrupt:
            self.session.pause()
            view = self.session.tick()
            logger.info(f"PLAYER_INTERRUPTED elapsed_ms={view.elapsed_ms}")
        return view
