from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SrtviewApiError(Exception):
    """
    Typed API error carrying a stable machine-readable code.

    Parse-level outcomes (invalid format, wrong extension) are NOT raised:
    they travel in the ParseResponse body. These are for request problems.
    """

    code: str
    message: str
    status_code: int = 400
    details: Optional[Dict[str, Any]] = None


class InvalidPathError(SrtviewApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="invalid_path", message=message, status_code=400, details=details)


class NotFoundError(SrtviewApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class PayloadTooLargeError(SrtviewApiError):
    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="payload_too_large", message=message, status_code=413, details=details)
