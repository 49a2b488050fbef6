from __future__ import annotations

from fastapi import APIRouter, Response

from srtview.api.metrics import metrics

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def subtitle_metrics() -> Response:
    """
    Request and parse counters in Prometheus text format
    (srtview_subtitles_parsed_total by outcome, srtview_cues_parsed_total).
    """
    body = metrics().to_prometheus_text()
    return Response(content=body, media_type="text/plain; version=0.0.4; charset=utf-8")
