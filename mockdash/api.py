from typing import Literal, Optional

from flask import Blueprint, request
from pydantic import BaseModel, Field, ValidationError, field_validator

from .cache import CacheFacade
from .config import Settings
from .service import MockDataService


class TimeSeriesQuery(BaseModel):
    metric: Literal["visitors", "signups", "revenue", "latencyMs", "errors"] = "visitors"
    interval: str = "day"
    range: str = "7d"


class BreakdownQuery(BaseModel):
    by: Literal["source", "region", "device"] = "source"
    range: str = "7d"


class EventsQuery(BaseModel):
    limit: int = Field(default=50, ge=0)
    severity: Optional[str] = None
    service: Optional[str] = None

    @field_validator("severity", "service", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s if s else None


def _error(message: str, status: int):
    return {"error": message}, status


def create_api(service: MockDataService, cache: CacheFacade, settings: Settings) -> Blueprint:
    """JSON API over the mock data service; responses cached per path + query."""
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.get("/kpis")
    @cache.cached()
    def kpis():
        # `range` only shifts the baselines; unknown values behave like 7d
        return service.kpis(request.args.get("range", "7d"))

    @api.get("/timeseries")
    @cache.cached()
    def timeseries():
        try:
            q = TimeSeriesQuery.model_validate(request.args.to_dict())
        except ValidationError:
            return _error("Invalid metric", 400)
        return service.time_series(q.metric, q.interval, q.range)

    @api.get("/breakdown")
    @cache.cached()
    def breakdown():
        try:
            q = BreakdownQuery.model_validate(request.args.to_dict())
        except ValidationError:
            return _error("Invalid breakdown category", 400)
        return service.breakdown(q.by)

    @api.get("/events")
    @cache.cached(timeout=settings.events_cache_timeout_seconds)
    def events():
        try:
            q = EventsQuery.model_validate(request.args.to_dict())
        except ValidationError:
            return _error("Invalid limit", 400)
        if q.limit > settings.events_max_limit:
            return _error("Invalid limit", 400)
        return service.events(q.limit, severity=q.severity, service=q.service)

    return api
