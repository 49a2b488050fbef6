from __future__ import annotations

from srtview.api.app import app  # noqa: F401
from srtview.api.config import load_config


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the subtitle API; `srtview serve` lands here. Unset host/port fall back to SRTVIEW_API_HOST/PORT."""
    import uvicorn

    cfg = load_config()
    uvicorn.run("srtview.api.main:app", host=host or cfg.host, port=port or cfg.port, reload=False)


if __name__ == "__main__":
    run()
