"""
Correlation route running pairwise spatio-temporal correlation and clustering over inline events or events from the catalog.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from config import settings
from engine.analyzer import CorrelationReport, run_correlation
from engine.enums import ClusterAlgorithm
from engine.events.models import AstroEvent
from engine.events.registry import get_registry
from engine.params import CorrelationParams
from api.routes.exception import handle_exceptions
from api.requests import CorrelateRequest
from api.responses import CorrelationResponse

router = APIRouter(tags=["Correlation"])

log = logging.getLogger(__name__)

NOT_ENOUGH_EVENTS = "Need at least 2 events to find correlations"


def _resolve_events(req: CorrelateRequest) -> List[AstroEvent]:
    if req.events is not None:
        return [AstroEvent.from_record(item.to_record()) for item in req.events]
    registry = get_registry()
    if req.event_ids:
        return registry.get_many(req.event_ids)
    return registry.query()


@router.post("/correlate", summary="Pairwise spatio-temporal correlation and clustering of events")
@handle_exceptions
async def correlate_events(req: CorrelateRequest) -> Dict[str, Any]:
    params = CorrelationParams(
        time_window_seconds=req.time_window_seconds,
        angular_threshold_deg=req.angular_threshold_deg,
        min_confidence_score=req.min_confidence_score,
    )
    algorithm = req.cluster_algorithm or ClusterAlgorithm.from_settings()
    events = _resolve_events(req)

    if len(events) > settings.max_correlation_events:
        raise HTTPException(
            status_code=400,
            detail=f"too many events to correlate ({len(events)} > {settings.max_correlation_events})",
        )

    if len(events) < 2:
        log.info("correlate: %d event(s) supplied, nothing to correlate", len(events))
        report = CorrelationReport(params=params, algorithm=algorithm, total_events=len(events))
        response = CorrelationResponse.from_report(report, message=NOT_ENOUGH_EVENTS)
    else:
        response = CorrelationResponse.from_report(run_correlation(events, params, algorithm))

    return response.model_dump(mode="json", by_alias=True)
