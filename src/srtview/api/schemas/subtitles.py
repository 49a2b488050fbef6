from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from srtview.core.subtitle.models import Cue, ParseResult


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: str = ""


class ErrorResponse(BaseModel):
    error: ErrorBody


class CueOut(BaseModel):
    """Wire shape kept compatible with the original viewer: camelCase times in ms."""

    model_config = ConfigDict(populate_by_name=True)

    sequence: str
    start_time: int = Field(..., alias="startTime")
    end_time: int = Field(..., alias="endTime")
    text: str

    @classmethod
    def from_cue(cls, cue: Cue) -> "CueOut":
        return cls.model_validate(cue.to_dict())


class ParseResponse(BaseModel):
    success: bool
    subtitles: List[CueOut] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseResponse":
        if not result.ok:
            return cls(success=False, subtitles=[], errors=result.error_messages)
        return cls(success=True, subtitles=[CueOut.from_cue(c) for c in result.cues], errors=[])


class ParsePathRequest(BaseModel):
    srt_path: str = Field(..., description="Absolute path to a .srt file under the allowed roots")
