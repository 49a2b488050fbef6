from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from srtview.core.subtitle.models import Cue
from srtview.utils.logger import get_logger

from .clock import Clock, MonotonicClock

logger = get_logger("srtview.playback")


class PlaybackState(str, Enum):
    EMPTY = "empty"
    PAUSED = "paused"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlaybackSnapshot:
    state: PlaybackState
    elapsed_ms: int
    active_cue_index: int
    total_duration_ms: int

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING


def resolve_active_cue(elapsed_ms: int, cues: Sequence[Cue]) -> int:
    """
    Index of the first cue with start_ms <= elapsed_ms <= end_ms, or -1.

    Linear first-match scan: with overlapping (or back-to-back) cues the
    earliest-appearing one wins. Cues need not be sorted.
    """
    for i, cue in enumerate(cues):
        if cue.contains(elapsed_ms):
            return i
    return -1


class PlaybackEngine:
    """
    Virtual playback clock over a loaded cue sequence.

    The engine owns no timer. A caller polls tick() (or any query) on its own
    schedule; elapsed time is derived from clock deltas since play(), so a
    late or skipped poll never causes drift.

    Every operation is total: invalid transport calls are no-ops that
    return False instead of raising.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or MonotonicClock()
        self._lock = threading.Lock()

        self._cues: Tuple[Cue, ...] = ()
        self._state = PlaybackState.EMPTY
        self._elapsed_ms = 0
        # Reference instant: elapsed = _anchor_elapsed_ms + (now - _anchor_clock_ms)
        self._anchor_clock_ms = 0
        self._anchor_elapsed_ms = 0
        # Set by end-of-track; pins the active cue to the last one.
        self._ended = False

    # -------------------------
    # Internals (caller holds the lock)
    # -------------------------

    def _total_ms(self) -> int:
        return self._cues[-1].end_ms if self._cues else 0

    def _advance(self) -> None:
        if self._state != PlaybackState.PLAYING:
            return

        now = self._clock.now_ms()
        self._elapsed_ms = max(0, self._anchor_elapsed_ms + (now - self._anchor_clock_ms))

        total = self._total_ms()
        if self._elapsed_ms >= total:
            self._elapsed_ms = total
            self._state = PlaybackState.PAUSED
            self._ended = True
            logger.debug(f"PLAYBACK_END elapsed_ms={total}")

    def _active_index(self) -> int:
        if self._ended:
            return len(self._cues) - 1
        return resolve_active_cue(self._elapsed_ms, self._cues)

    def _snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(
            state=self._state,
            elapsed_ms=self._elapsed_ms,
            active_cue_index=self._active_index(),
            total_duration_ms=self._total_ms(),
        )

    # -------------------------
    # Transport
    # -------------------------

    def load(self, cues: Sequence[Cue]) -> bool:
        """
        Replace the cue sequence and reset to PAUSED at 0.

        An empty sequence is a no-op (returns False): nothing to play.
        """
        new_cues = tuple(cues)
        if not new_cues:
            return False
        with self._lock:
            self._cues = new_cues
            self._state = PlaybackState.PAUSED
            self._elapsed_ms = 0
            self._anchor_clock_ms = 0
            self._anchor_elapsed_ms = 0
            self._ended = False
            logger.debug(f"PLAYBACK_LOAD cues={len(new_cues)} total_ms={self._total_ms()}")
        return True

    def unload(self) -> None:
        with self._lock:
            self._cues = ()
            self._state = PlaybackState.EMPTY
            self._elapsed_ms = 0
            self._ended = False

    def play(self) -> bool:
        with self._lock:
            if self._state != PlaybackState.PAUSED:
                return False
            # At (or past) the end: stays paused until a seek moves back.
            if self._elapsed_ms >= self._total_ms():
                return False
            self._anchor_clock_ms = self._clock.now_ms()
            self._anchor_elapsed_ms = self._elapsed_ms
            self._state = PlaybackState.PLAYING
            return True

    def pause(self) -> bool:
        with self._lock:
            if self._state != PlaybackState.PLAYING:
                return False
            self._advance()
            if self._state == PlaybackState.PLAYING:
                self._state = PlaybackState.PAUSED
            return True

    def seek(self, target_ms: int) -> bool:
        """
        Jump to target_ms (clamped to >= 0, not to the track end).

        While playing, playback continues from the target; a target past the
        end triggers end-of-track on the next recomputation.
        """
        with self._lock:
            if self._state == PlaybackState.EMPTY:
                return False
            self._elapsed_ms = max(0, int(target_ms))
            self._ended = False
            if self._state == PlaybackState.PLAYING:
                self._anchor_clock_ms = self._clock.now_ms()
                self._anchor_elapsed_ms = self._elapsed_ms
            return True

    def tick(self) -> PlaybackSnapshot:
        with self._lock:
            self._advance()
            return self._snapshot()

    # -------------------------
    # Queries
    # -------------------------

    def current_elapsed_ms(self) -> int:
        with self._lock:
            self._advance()
            return self._elapsed_ms

    def current_active_cue_index(self) -> int:
        with self._lock:
            self._advance()
            return self._active_index()

    def is_playing(self) -> bool:
        with self._lock:
            self._advance()
            return self._state == PlaybackState.PLAYING

    def total_duration_ms(self) -> int:
        with self._lock:
            return self._total_ms()

    @property
    def state(self) -> PlaybackState:
        with self._lock:
            self._advance()
            return self._state

    @property
    def cues(self) -> Tuple[Cue, ...]:
        return self._cues
