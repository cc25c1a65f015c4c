from __future__ import annotations
from datetime import date, datetime
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Region = Literal["APAC", "EMEA", "AMER"]
Shift = Literal["morning", "afternoon", "evening", "night"]
Momentum = Literal["up", "down", "steady"]
Severity = Literal["low", "medium", "high", "critical"]
AlertCategory = Literal["uptime", "incidents", "satisfaction"]

SHIFTS: tuple[str, ...] = ("morning", "afternoon", "evening", "night")
REGIONS: tuple[str, ...] = ("APAC", "EMEA", "AMER")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; accepts both on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OperationalRecord(CamelModel):
    id: str
    facility: str
    city: str
    region: Region
    vertical: str
    robot_model: str
    shift: Shift
    timestamp: datetime
    orders_served: int = Field(ge=0)
    avg_turn_time_seconds: int = Field(gt=0)
    uptime: float = Field(ge=0, le=100)
    nps: int
    incidents: int = Field(ge=0)
    energy_kwh: float
    staffing_delta: int


class KPICard(FrozenModel):
    id: str
    label: str
    value: str
    momentum: Momentum
    delta: str
    description: str


class TrendPoint(FrozenModel):
    week: str
    week_start: date
    throughput: int
    uptime: float
    satisfaction: float
    incidents: int
    records: int


class HeatmapCell(FrozenModel):
    facility: str
    shift: str
    demand_score: float = Field(ge=0, le=1)
    utilization: float = Field(ge=0)


class AlertInsight(FrozenModel):
    id: str
    title: str
    detail: str
    severity: Severity
    owner: str
    eta_hours: int
    facility: str
    category: AlertCategory


class FinancialSnapshot(FrozenModel):
    quarter: str
    arr_usd: int
    pipeline_usd: int
    gross_margin: float
    deployments: int
    note: str


class ApiSurface(FrozenModel):
    id: str
    name: str
    purpose: str
    availability: Literal["public", "beta", "internal"]
    latency_ms: int
    base_url: str


class KnowledgeSlice(FrozenModel):
    id: str
    topic: str
    summary: str
    sources: Tuple[str, ...] = Field(min_length=1)
    last_updated: date
    confidence: float = Field(ge=0, le=1)


class ModelBlueprint(FrozenModel):
    id: str
    name: str
    size: Literal["70B", "120B"]
    base_model: str
    objective: str
    datasets: Tuple[str, ...]
    tokens: str
    alignment: Tuple[str, ...]
    evaluation: Tuple[str, ...]
    deployment_target: str
    current_phase: Literal["dataset-curation", "alignment", "offline-eval", "ready"]


class TrainingMilestone(FrozenModel):
    label: str
    status: Literal["pending", "running", "complete"]
    summary: str


class TrainingTelemetry(FrozenModel):
    last_run: Optional[datetime] = None
    validation_score: float
    hallucination_rate: float


class TrainingPlan(FrozenModel):
    model: ModelBlueprint
    milestones: Tuple[TrainingMilestone, ...]
    telemetry: TrainingTelemetry


class CurationDiagnostics(FrozenModel):
    record_count: int = 0
    skipped_records: int = 0
    degraded_sections: Tuple[str, ...] = Field(default_factory=tuple)


class CurationSnapshot(FrozenModel):
    kpis: Tuple[KPICard, ...]
    trend: Tuple[TrendPoint, ...]
    heatmap: Tuple[HeatmapCell, ...]
    alerts: Tuple[AlertInsight, ...]
    financials: Tuple[FinancialSnapshot, ...]
    api_surfaces: Tuple[ApiSurface, ...]
    knowledge: Tuple[KnowledgeSlice, ...]
    training_plans: Tuple[TrainingPlan, ...]
    diagnostics: CurationDiagnostics = Field(default_factory=CurationDiagnostics)


# Live samples (not part of the snapshot)
class LiveMetrics(CamelModel):
    timestamp: datetime
    active_robots: int
    orders_per_minute: int
    avg_response_time: int
    system_uptime: float
    active_alerts: int
    energy_consumption: int


class TrainingUpdate(CamelModel):
    timestamp: datetime
    models_training: int
    avg_loss: float
    tokens_processed: int
    gpu_utilization: float
    estimated_completion: datetime


class EndpointMetrics(CamelModel):
    path: str
    avg_latency: int
    requests_per_min: int
    success_rate: float


class ApiMetrics(CamelModel):
    timestamp: datetime
    endpoints: List[EndpointMetrics]
