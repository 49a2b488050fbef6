from __future__ import annotations

from pathlib import Path

from srtview.core.playback.clock import ManualClock
from srtview.core.playback.engine import PlaybackState
from srtview.core.subtitle.models import DiagnosticKind
from srtview.core.viewer.session import LOADING_MESSAGE, NO_SUBTITLES_MESSAGE, ViewerSession


def test_load_and_play_through(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    t = s.begin_load("a.srt")
    res = s.complete_load(t, two_cues_srt)

    assert res is not None and res.ok
    view = s.tick()
    assert view.state == PlaybackState.PAUSED
    assert view.can_play and not view.can_pause
    assert view.active_cue is None
    assert view.total_duration_ms == 4000

    assert s.play()
    clock.advance(1200)
    view = s.tick()
    assert view.active_cue_index == 0
    assert view.active_cue is not None and view.active_cue.text == "Hello world"
    assert view.can_pause and not view.can_play

    clock.advance(3000)
    view = s.tick()
    assert not view.is_playing
    assert view.elapsed_ms == 4000
    assert view.active_cue_index == 1


def test_stale_load_is_discarded(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    first = s.begin_load("old.srt")
    second = s.begin_load("new.srt")

    assert s.complete_load(first, "1\n00:00:00,000 --> 00:00:09,000\nOld\n") is None
    assert s.engine.state == PlaybackState.EMPTY

    res = s.complete_load(second, two_cues_srt)
    assert res is not None and res.ok
    assert s.source_name == "new.srt"
    assert [c.text for c in s.engine.cues] == ["Hello world", "Second line"]

    # A late completion of the superseded load changes nothing.
    assert s.complete_load(first, "1\n00:00:00,000 --> 00:00:09,000\nOld\n") is None
    assert s.engine.total_duration_ms() == 4000


def test_invalid_format_unloads(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    s.complete_load(s.begin_load("a.srt"), two_cues_srt)

    res = s.complete_load(s.begin_load("b.srt"), "garbage\nwithout\nblocks")
    assert res is not None
    assert res.has_error(DiagnosticKind.EMPTY_OR_INVALID_FORMAT)
    view = s.tick()
    assert view.state == PlaybackState.EMPTY
    assert not view.can_play
    assert view.message == NO_SUBTITLES_MESSAGE


def test_io_failure_keeps_prior_state(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    s.complete_load(s.begin_load("a.srt"), two_cues_srt)
    s.scrub_to(3000)

    t = s.begin_load("b.srt")
    assert s.message == LOADING_MESSAGE
    res = s.fail_load(t, "Error reading file.")

    assert res is not None
    assert res.error_messages == ["Error reading file."]
    view = s.tick()
    assert view.message == "Error reading file."
    assert view.elapsed_ms == 3000
    assert view.active_cue_index == 1


def test_begin_load_pauses_playback(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    s.complete_load(s.begin_load("a.srt"), two_cues_srt)
    s.play()
    clock.advance(500)
    s.begin_load("b.srt")
    assert not s.engine.is_playing()


def test_scrub_resumes_only_if_playing(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    s.complete_load(s.begin_load("a.srt"), two_cues_srt)

    s.play()
    clock.advance(200)
    s.begin_scrub()
    assert not s.engine.is_playing()
    s.scrub_to(1500)
    clock.advance(1000)  # gesture takes time; position holds
    assert s.tick().elapsed_ms == 1500
    s.end_scrub()
    assert s.engine.is_playing()
    clock.advance(100)
    assert s.tick().elapsed_ms == 1600

    s.pause()
    s.begin_scrub()
    s.scrub_to(3000)
    s.end_scrub()
    assert not s.engine.is_playing()


def test_toggle(two_cues_srt: str, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    assert s.toggle() is False
    s.complete_load(s.begin_load("a.srt"), two_cues_srt)
    assert s.toggle() is True
    assert s.engine.is_playing()
    assert s.toggle() is True
    assert not s.engine.is_playing()


def test_load_file(tmp_path: Path, two_cues_srt: str, clock: ManualClock) -> None:
    p = tmp_path / "subs.srt"
    p.write_bytes(two_cues_srt.replace("\n", "\r\n").encode("utf-8"))

    s = ViewerSession(clock)
    res = s.load_file(p)
    assert res.ok
    assert s.source_name == "subs.srt"
    assert len(s.engine.cues) == 2

    missing = s.load_file(tmp_path / "missing.srt")
    assert missing.has_error(DiagnosticKind.UPSTREAM_IO_FAILURE)
    assert len(s.engine.cues) == 2


def test_load_file_supersedes_pending_load(tmp_path: Path, two_cues_srt: str, clock: ManualClock) -> None:
    p = tmp_path / "subs.srt"
    p.write_text(two_cues_srt, encoding="utf-8")

    s = ViewerSession(clock)
    stale = s.begin_load("slow.srt")
    res = s.load_file(p)
    assert res is not None and res.ok
    assert s.source_name == "subs.srt"
    assert s.message == ""
    assert s.complete_load(stale, "") is None
    assert len(s.engine.cues) == 2


def test_load_file_missing_on_empty_session(tmp_path: Path, clock: ManualClock) -> None:
    s = ViewerSession(clock)
    res = s.load_file(tmp_path / "nope.srt")
    assert res is not None
    assert res.has_error(DiagnosticKind.UPSTREAM_IO_FAILURE)
    assert res.error_messages[0].startswith("Error reading file:")
    assert s.message == res.error_messages[0]
    assert s.engine.state == PlaybackState.EMPTY
