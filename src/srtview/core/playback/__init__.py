from .clock import Clock, ManualClock, MonotonicClock
from .engine import PlaybackEngine, PlaybackSnapshot, PlaybackState, resolve_active_cue

__all__ = [
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "PlaybackEngine",
    "PlaybackSnapshot",
    "PlaybackState",
    "resolve_active_cue",
]
