from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from srtview.cli.player import PlayerConfig, TerminalPlayer
from srtview.core.subtitle.srt_io import read_srt
from srtview.core.subtitle.timecode import ms_to_timecode
from srtview.core.viewer.session import ViewerSession
from srtview.utils.logger import configure_logging

app = typer.Typer(help="SubRip subtitle viewer: parse .srt files and play them on a virtual clock")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
    log_path: Optional[Path] = typer.Option(None, "--log-path", help="Also write DEBUG logs to this file"),
):
    # Logs go to stderr; stdout stays clean for --json output.
    configure_logging(
        logger_name="srtview",
        console_level=logging.DEBUG if verbose else logging.INFO,
        log_path=str(log_path) if log_path else None,
    )


@app.command()
def parse(
    input: Path = typer.Argument(..., help="Input .srt file"),
    as_json: bool = typer.Option(False, "--json", help="Print the parse result as JSON"),
):
    res = read_srt(input)

    if as_json:
        payload = {
            "success": res.ok,
            "subtitles": [c.to_dict() for c in res.cues],
            "errors": res.error_messages,
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for msg in res.error_messages:
            typer.echo(msg, err=True)
        for c in res.cues:
            typer.echo(f"{c.sequence}\t{ms_to_timecode(c.start_ms)} --> {ms_to_timecode(c.end_ms)}\t{c.text!r}")

    if not res.ok:
        raise typer.Exit(code=1)


@app.command()
def play(
    input: Path = typer.Argument(..., help="Input .srt file"),
    start: int = typer.Option(0, help="Start position in milliseconds"),
    interval: Optional[int] = typer.Option(None, help="Poll interval in milliseconds (default 100)"),
):
    session = ViewerSession()
    res = session.load_file(input)
    if not res.ok:
        typer.echo(session.message, err=True)
        raise typer.Exit(code=1)

    cfg = PlayerConfig(start_ms=start) if interval is None else PlayerConfig(tick_interval_ms=interval, start_ms=start)
    view = TerminalPlayer(session, cfg=cfg, emit=typer.echo).run()
    typer.echo(f"-- stopped at {ms_to_timecode(view.elapsed_ms)} / {ms_to_timecode(view.total_duration_ms)}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (default SRTVIEW_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default SRTVIEW_API_PORT)"),
):
    from srtview.api.main import run

    run(host=host, port=port)


if __name__ == "__main__":
    app()
