"""
Export route writing the filtered event catalog as a JSON document or a CSV file, optionally together with the correlations found among the exported events.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, Response

from config import settings
from engine.analyzer import run_correlation
from engine.events.models import AstroEvent
from engine.events.registry import get_registry
from engine.params import CorrelationParams
from api.routes.exception import handle_exceptions
from api.requests import ExportRequest
from api.responses import EventOut

router = APIRouter(tags=["Export"])

log = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")
EXPORT_VERSION = "1.0"
CSV_COLUMNS = [
    "event_id",
    "source",
    "event_type",
    "ra",
    "dec",
    "time_utc",
    "confidence_score",
    "magnitude",
    "error_radius_deg",
]


def _events_csv(events: Sequence[AstroEvent]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for e in events:
        writer.writerow([
            e.id,
            e.source,
            e.raw_event_type or e.event_type.value,
            e.ra,
            e.dec,
            e.time_utc.isoformat(),
            "" if e.confidence_score is None else e.confidence_score,
            "" if e.magnitude is None else e.magnitude,
            "" if e.error_radius_deg is None else e.error_radius_deg,
        ])
    return buf.getvalue()


def _correlations(events: List[AstroEvent], req: ExportRequest) -> List[Dict[str, Any]]:
    if len(events) > settings.max_correlation_events:
        raise HTTPException(
            status_code=400,
            detail=f"too many events to correlate ({len(events)} > {settings.max_correlation_events})",
        )
    threshold = req.filter.confidence_threshold
    params = CorrelationParams(
        time_window_seconds=settings.default_time_window_seconds,
        angular_threshold_deg=settings.default_angular_threshold_deg,
        min_confidence_score=settings.default_min_confidence_score if threshold is None else threshold,
    )
    return [p.to_record() for p in run_correlation(events, params).correlations]


@router.post("/export", summary="Export cataloged events as JSON or CSV")
@handle_exceptions
async def export_events(req: ExportRequest) -> Response:
    fmt = req.format.strip().lower()
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail='Unsupported format. Use "csv" or "json"')

    time_range = req.filter.time_range
    events = get_registry().query(
        event_types=req.filter.event_types,
        sources=req.filter.sources,
        start=time_range.start if time_range else None,
        end=time_range.end if time_range else None,
        min_confidence=req.filter.confidence_threshold or 0.0,
    )
    stamp = datetime.now(timezone.utc)
    log.info("export: format=%s events=%d correlations=%s", fmt, len(events), req.include_correlations)

    if fmt == "csv":
        return Response(
            content=_events_csv(events),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="coincide_events_{stamp:%Y-%m-%d}.csv"'},
        )

    correlations = _correlations(events, req) if req.include_correlations else []
    body: Dict[str, Any] = {
        "metadata": {
            "exportDate": stamp.isoformat(),
            "format": fmt,
            "totalEvents": len(events),
            "totalCorrelations": len(correlations),
            "filters": req.filter.model_dump(mode="json", by_alias=True, exclude_none=True),
            "version": EXPORT_VERSION,
        },
        "events": [EventOut.from_event(e).model_dump(mode="json") for e in events],
    }
    if req.include_correlations:
        body["correlations"] = correlations
    return JSONResponse(
        content=body,
        headers={"Content-Disposition": f'attachment; filename="coincide_data_{stamp:%Y-%m-%d}.json"'},
    )
