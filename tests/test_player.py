from __future__ import annotations

from srtview.cli.player import PlayerConfig, TerminalPlayer, render_line
from srtview.core.playback.clock import ManualClock
from srtview.core.viewer.session import ViewerSession


def _session(clock: ManualClock, raw: str) -> ViewerSession:
    s = ViewerSession(clock)
    s.complete_load(s.begin_load("a.srt"), raw)
    return s


def test_player_prints_each_cue_once(clock: ManualClock, two_cues_srt: str) -> None:
    out: list[str] = []
    s = _session(clock, two_cues_srt)
    player = TerminalPlayer(
        s,
        cfg=PlayerConfig(tick_interval_ms=100),
        emit=out.append,
        sleep=lambda sec: clock.advance(int(sec * 1000)),
    )

    view = player.run()

    assert not view.is_playing
    assert view.elapsed_ms == 4000
    assert out == [
        "[00:00:01,000 --> 00:00:02,500] #1 Hello world",
        "[00:00:02,500 --> 00:00:04,000] #2 Second line",
    ]


def test_player_start_offset(clock: ManualClock, two_cues_srt: str) -> None:
    out: list[str] = []
    s = _session(clock, two_cues_srt)
    player = TerminalPlayer(
        s,
        cfg=PlayerConfig(tick_interval_ms=250, start_ms=3000),
        emit=out.append,
        sleep=lambda sec: clock.advance(int(sec * 1000)),
    )
    player.run()
    assert out == ["[00:00:02,500 --> 00:00:04,000] #2 Second line"]


def test_player_interrupt_pauses(clock: ManualClock, two_cues_srt: str) -> None:
    s = _session(clock, two_cues_srt)

    def _sleep(sec: float) -> None:
        clock.advance(int(sec * 1000))
        if clock.now_ms() >= 1500:
            raise KeyboardInterrupt

    view = TerminalPlayer(s, cfg=PlayerConfig(tick_interval_ms=100), emit=lambda _: None, sleep=_sleep).run()
    assert not view.is_playing
    assert view.elapsed_ms == 1500


def test_render_line_without_active_cue(clock: ManualClock, two_cues_srt: str) -> None:
    s = _session(clock, two_cues_srt)
    assert render_line(s.tick()) == "[00:00:00,000]"
