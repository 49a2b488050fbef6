# src/srtview/api/app.py
from __future__ import annotations

import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from srtview.api import __version__
from srtview.api.config import load_config
from srtview.api.middlewares.access_log import AccessLogMiddleware
from srtview.api.middlewares.error_handler import install_error_handlers
from srtview.api.middlewares.request_context import RequestContextMiddleware
from srtview.api.routes import api_router
from srtview.utils.logger import configure_logging, get_logger

logger = get_logger("srtview")


def _parse_level(name: str) -> int:
    level = getattr(logging, (name or "").strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def create_app() -> FastAPI:
    cfg = load_config()

    app = FastAPI(
        title="srtview API",
        version=__version__,
    )

    # Added first = innermost: access log runs inside the request context.
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestContextMiddleware, header_name="X-Request-Id")
    # Outermost: browser viewers post uploads cross-origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    install_error_handlers(app)

    app.include_router(api_router)

    @app.on_event("startup")
    async def _startup() -> None:
        configure_logging(
            logger_name="srtview",
            console_level=_parse_level(cfg.log_level),
            file_level=logging.DEBUG,
            log_path=(cfg.log_path or None),
        )
        logger.info("API_STARTUP")

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        logger.info("API_SHUTDOWN")

    return app


app = create_app()
