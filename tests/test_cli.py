from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from srtview.cli import main as cli_main
from srtview.core.subtitle.models import EMPTY_OR_INVALID_MESSAGE

runner = CliRunner()


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch) -> list:
    calls: list = []
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kw: calls.append(kw))
    return calls


def test_parse_json(tmp_path: Path, two_cues_srt: str) -> None:
    p = tmp_path / "a.srt"
    p.write_text(two_cues_srt, encoding="utf-8")

    result = runner.invoke(cli_main.app, ["parse", str(p), "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["success"] is True
    assert [c["startTime"] for c in data["subtitles"]] == [1000, 2500]


def test_parse_invalid_exits_nonzero(tmp_path: Path) -> None:
    p = tmp_path / "bad.srt"
    p.write_text("garbage\nwithout\nblocks", encoding="utf-8")

    result = runner.invoke(cli_main.app, ["parse", str(p), "--json"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["errors"] == [EMPTY_OR_INVALID_MESSAGE]


def test_play_runs_to_end_without_real_waits(monkeypatch, tmp_path: Path, two_cues_srt: str) -> None:
    p = tmp_path / "a.srt"
    p.write_text(two_cues_srt, encoding="utf-8")

    from srtview.core.playback.clock import ManualClock
    from srtview.core.viewer.session import ViewerSession

    clock = ManualClock()
    monkeypatch.setattr(cli_main, "ViewerSession", lambda: ViewerSession(clock))
    monkeypatch.setattr("srtview.cli.player.time.sleep", lambda s: clock.advance(int(s * 1000)))

    result = runner.invoke(cli_main.app, ["play", str(p), "--interval", "100"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].endswith("#1 Hello world")
    assert lines[1].endswith("#2 Second line")
    assert lines[-1] == "-- stopped at 00:00:04,000 / 00:00:04,000"


def test_play_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(cli_main.app, ["play", str(tmp_path / "missing.srt")])
    assert result.exit_code == 1


def test_callback_configures_info_logging(tmp_path: Path, two_cues_srt: str, logging_calls: list) -> None:
    p = tmp_path / "a.srt"
    p.write_text(two_cues_srt, encoding="utf-8")

    result = runner.invoke(cli_main.app, ["parse", str(p)])
    assert result.exit_code == 0
    assert logging_calls == [{"logger_name": "srtview", "console_level": logging.INFO, "log_path": None}]


def test_verbose_flag_lowers_level(tmp_path: Path, two_cues_srt: str, logging_calls: list) -> None:
    p = tmp_path / "a.srt"
    p.write_text(two_cues_srt, encoding="utf-8")
    log = tmp_path / "srtview.log"

    result = runner.invoke(cli_main.app, ["--verbose", "--log-path", str(log), "parse", str(p)])
    assert result.exit_code == 0
    assert logging_calls[0]["console_level"] == logging.DEBUG
    assert logging_calls[0]["log_path"] == str(log)
