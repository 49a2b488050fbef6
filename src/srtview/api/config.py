from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


def _split_csv(v: str) -> List[str]:
    parts = [p.strip() for p in (v or "").split(",")]
    return [p for p in parts if p]


@dataclass(frozen=True)
class ApiConfig:
    """
    API runtime config (env-driven).
    Keep it dependency-light: read once per load_config() call.
    """

    # Default mount root for /v1/subtitles/parse_path (e.g. /data).
    data_root: str = os.getenv("SRTVIEW_DATA_ROOT", "/data")

    # Optional allowlist override. If empty -> [data_root].
    # Example: SRTVIEW_ALLOWED_ROOTS="/data,/mnt/share"
    allowed_roots: List[str] = None  # type: ignore[assignment]

    # CORS allowlist (CSV). Default "*": any origin may post uploads.
    cors_origins: List[str] = None  # type: ignore[assignment]

    # Upload limit for /v1/subtitles/parse. 0 = unlimited (the parser itself has no bound).
    max_upload_bytes: int = int(os.getenv("SRTVIEW_MAX_UPLOAD_BYTES", "0"))

    # Logging knobs
    log_level: str = os.getenv("SRTVIEW_API_LOG_LEVEL", "INFO")
    log_path: str = os.getenv("SRTVIEW_LOG_PATH", "")

    # Runner
    host: str = os.getenv("SRTVIEW_API_HOST", "0.0.0.0")
    port: int = int(os.getenv("SRTVIEW_API_PORT", "8000"))

    def __post_init__(self) -> None:
        # dataclass(frozen=True) + default None fields: use object.__setattr__
        roots_env = os.getenv("SRTVIEW_ALLOWED_ROOTS", "").strip()
        roots = _split_csv(roots_env) if roots_env else [self.data_root]
        object.__setattr__(self, "allowed_roots", roots)
        object.__setattr__(self, "cors_origins", _split_csv(os.getenv("SRTVIEW_CORS_ORIGINS", "*")))


def load_config() -> ApiConfig:
    return ApiConfig()
