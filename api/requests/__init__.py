from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config import settings
from engine.enums import ClusterAlgorithm


class EventIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(min_length=1, validation_alias=AliasChoices("id", "event_id"))
    source: str = Field(min_length=1)
    event_type: str = Field(min_length=1)
    ra: float = Field(ge=0.0, le=360.0)
    dec: float = Field(ge=-90.0, le=90.0)
    time_utc: datetime
    confidence_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    magnitude: Optional[float] = None
    error_radius_deg: Optional[float] = Field(default=None, ge=0.0)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_record(self) -> Dict[str, Any]:
        record = self.model_dump()
        record["id"] = record.pop("event_id")
        return record


class CorrelateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    time_window_seconds: float = Field(
        default_factory=lambda: settings.default_time_window_seconds,
        gt=0.0,
        alias="timeWindowSeconds",
    )
    angular_threshold_deg: float = Field(
        default_factory=lambda: settings.default_angular_threshold_deg,
        gt=0.0,
        le=180.0,
        alias="angularThresholdDeg",
    )
    min_confidence_score: Optional[float] = Field(
        default_factory=lambda: settings.default_min_confidence_score,
        ge=0.0,
        le=1.0,
        alias="minConfidenceScore",
    )
    event_ids: Optional[List[str]] = Field(default=None, alias="eventIds")
    events: Optional[List[EventIn]] = None
    cluster_algorithm: Optional[ClusterAlgorithm] = Field(default=None, alias="clusterAlgorithm")


class TimeRange(BaseModel):
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class ExportFilter(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    event_types: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    time_range: Optional[TimeRange] = None
    confidence_threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class ExportRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    format: str = "json"
    filter: ExportFilter = Field(default_factory=ExportFilter)
    include_correlations: bool = False
