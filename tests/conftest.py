from __future__ import annotations

import pytest

from srtview.core.playback.clock import ManualClock

TWO_CUES_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,500\n"
    "Hello world\n"
    "\n"
    "2\n"
    "00:00:02,500 --> 00:00:04,000\n"
    "Second line\n"
)


@pytest.fixture()
def two_cues_srt() -> str:
    return TWO_CUES_SRT


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()
