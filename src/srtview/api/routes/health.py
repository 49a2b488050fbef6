from __future__ import annotations

from fastapi import APIRouter

from srtview.api import __version__
from srtview.api.config import load_config

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    """Liveness plus the upload and path limits a client needs before posting a file."""
    cfg = load_config()
    return {
        "ok": True,
        "service": "srtview-api",
        "version": __version__,
        "allowed_roots": cfg.allowed_roots,
        "max_upload_bytes": cfg.max_upload_bytes,
        "cors_origins": cfg.cors_origins,
    }


@router.get("/healthz")
def healthz() -> dict:
    return {"ok": True}


@router.get("/readyz")
def readyz() -> dict:
    return {"ok": True}
