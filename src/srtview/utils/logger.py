from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Optional

_TRACE_ID: ContextVar[str] = ContextVar("srtview_trace_id", default="")

_FORMAT = "[%(levelname)s] %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s trace=%(trace_id)s %(message)s"


class _TraceIdFilter(logging.Filter):
    """Injects the current trace id into every record (empty when unset)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = _TRACE_ID.get()
        return True


def set_trace_id(trace_id: str) -> None:
    _TRACE_ID.set(trace_id)


def clear_trace_id() -> None:
    _TRACE_ID.set("")


def get_trace_id() -> str:
    return _TRACE_ID.get()


def get_logger(name: str = "srtview") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    # Child loggers ("srtview.api") propagate to the configured root "srtview".
    if "." in name:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.addFilter(_TraceIdFilter())
    logger.addHandler(handler)
    return logger


def configure_logging(
    *,
    logger_name: str = "srtview",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_path: Optional[str] = None,
) -> logging.Logger:
    """
    Process-level logging baseline.

    - console -> stderr at console_level
    - optional file handler at file_level (includes timestamps and trace id)
    - safe to call more than once: previous handlers are replaced
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(min(console_level, file_level) if log_path else console_level)
    logger.propagate = False

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_FORMAT))
    console.addFilter(_TraceIdFilter())
    logger.addHandler(console)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT))
        fh.addFilter(_TraceIdFilter())
        logger.addHandler(fh)

    return logger
