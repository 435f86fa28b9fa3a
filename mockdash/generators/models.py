from pydantic import BaseModel, ConfigDict, Field


class KpiSnapshot(BaseModel):
    """Point-in-time KPI record. Serialises with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    visitors: int = Field(ge=0)
    signups: int = Field(ge=0)
    conversion_rate: float = Field(ge=0, alias="conversionRate")
    revenue: int = Field(ge=0)
    avg_latency_ms: int = Field(ge=0, alias="avgLatencyMs")
    error_rate: float = Field(ge=0, alias="errorRate")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class BreakdownEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: int


class EventRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    time: str
    service: str
    severity: str
    message: str
