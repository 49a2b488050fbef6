from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, UploadFile

from srtview.api.config import load_config
from srtview.api.errors import PayloadTooLargeError
from srtview.api.schemas.subtitles import ErrorResponse, ParsePathRequest, ParseResponse
from srtview.api.services.subtitles_service import parse_srt_path, parse_uploaded_srt
from srtview.api.utils.path_policy import get_path_policy

router = APIRouter(prefix="/v1/subtitles", tags=["subtitles"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/parse", response_model=ParseResponse, response_model_by_alias=True, responses=_ERROR_RESPONSES)
async def parse(
    srtFile: Optional[UploadFile] = File(None, description="Subtitle file; its name must end with .srt"),
) -> ParseResponse:
    """
    Parse a subtitle file posted as multipart form field "srtFile".

    Parse failures are reported in the body (success=false), not as HTTP errors.
    """
    cfg = load_config()
    filename = srtFile.filename if srtFile is not None else None
    data = await srtFile.read() if srtFile is not None else b""
    if cfg.max_upload_bytes and len(data) > cfg.max_upload_bytes:
        raise PayloadTooLargeError(
            "upload exceeds max_upload_bytes",
            details={"size": len(data), "max_upload_bytes": cfg.max_upload_bytes},
        )

    res = parse_uploaded_srt(filename, data)
    return ParseResponse.from_result(res)


@router.post("/parse_path", response_model=ParseResponse, response_model_by_alias=True, responses=_ERROR_RESPONSES)
def parse_path(req: ParsePathRequest) -> ParseResponse:
    policy = get_path_policy()
    srt_path = policy.ensure_file_exists(req.srt_path)

    res = parse_srt_path(srt_path)
    return ParseResponse.from_result(res)
