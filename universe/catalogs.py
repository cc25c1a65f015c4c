"""Static catalogs served alongside the computed metrics.

Entries are validated when this module is imported, so an authoring mistake
(missing field, bad enum value) stops the service at start-up instead of
serializing a half-filled card.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence, Type, TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from .data import OperationsFrame, as_operations
from .models import (
    ApiSurface, FinancialSnapshot, KnowledgeSlice, ModelBlueprint,
    TrainingMilestone, TrainingPlan, TrainingTelemetry,
)

M = TypeVar("M", bound=BaseModel)


class CatalogIntegrityError(ValueError):
    pass


FINANCIALS: List[Dict[str, Any]] = [
    {"quarter": "2024 Q4", "arrUsd": 142_000_000, "pipelineUsd": 51_000_000, "grossMargin": 63, "deployments": 980,
     "note": "APAC franchise deals closed; ramping Servi Suite production in Incheon."},
    {"quarter": "2025 Q1", "arrUsd": 158_000_000, "pipelineUsd": 72_500_000, "grossMargin": 65, "deployments": 1_120,
     "note": "Healthcare pilots in Seoul and Tokyo driving higher-margin subscriptions."},
    {"quarter": "2025 Q2", "arrUsd": 173_000_000, "pipelineUsd": 88_000_000, "grossMargin": 67, "deployments": 1_340,
     "note": "Servi Lift 2.0 ready for mixed-elevator environments; multi-floor dining wins."},
    {"quarter": "2025 Q3 (proj)", "arrUsd": 192_000_000, "pipelineUsd": 101_000_000, "grossMargin": 69, "deployments": 1_560,
     "note": "Conglomerate roll-out in Korea plus US stadium retrofits."},
]

KNOWLEDGE: List[Dict[str, Any]] = [
    {"id": "kb-vision", "topic": "Company Vision",
     "summary": "The fleet operator designs autonomous service robots that augment hospitality teams, pairing a Seoul R&D hub with a Redwood City software group.",
     "sources": ["Company site", "Press briefings 2024-11"], "lastUpdated": "2025-09-12", "confidence": 0.93},
    {"id": "kb-servi", "topic": "Servi Platform",
     "summary": "Servi, Servi Plus and Servi Lift move food, dishes, linens and supplies with centimetre-level navigation, integrating with elevator controls, POS and the fleet cloud.",
     "sources": ["Product pages", "Elevator integration notes (rev 3)"], "lastUpdated": "2025-08-22", "confidence": 0.9},
    {"id": "kb-market", "topic": "Market Footprint",
     "summary": "Over 1,200 deployments across Korea, Japan, Singapore and 15 US states in dining, healthcare and stadium venues.",
     "sources": ["Deployment tracker", "Public partner releases"], "lastUpdated": "2025-10-02", "confidence": 0.88},
    {"id": "kb-api", "topic": "Fleet Cloud API",
     "summary": "REST and WebSocket surfaces for telemetry, job queues and third-party orchestration with OAuth device grant and signed webhooks.",
     "sources": ["Cloud docs", "API changelog v3.4"], "lastUpdated": "2025-11-05", "confidence": 0.86},
    {"id": "kb-safety", "topic": "Safety & Compliance",
     "summary": "Robots certified under KC, CE and UL with redundant 3D LiDAR, depth cameras and intrusion slow zones; hospital workflow compliance completed 2025.",
     "sources": ["Compliance archive", "Regulatory filing 2025-04"], "lastUpdated": "2025-04-18", "confidence": 0.91},
]

API_SURFACES: List[Dict[str, Any]] = [
    {"id": "api-telemetry", "name": "Fleet Telemetry", "purpose": "Real-time robot vitals, routes and battery data streaming.",
     "availability": "public", "latencyMs": 320, "baseUrl": "https://api.fleet.example/v1/telemetry"},
    {"id": "api-orchestration", "name": "Mission Orchestration", "purpose": "Queue and monitor delivery missions; supports multi-robot swarms.",
     "availability": "beta", "latencyMs": 410, "baseUrl": "https://api.fleet.example/v1/missions"},
    {"id": "api-vision", "name": "Spatial Vision Stream", "purpose": "WebRTC scene graph feed for digital twin overlays.",
     "availability": "internal", "latencyMs": 210, "baseUrl": "https://vision.fleet.example/stream"},
    {"id": "api-knowledge", "name": "Fleet Knowledge Graph", "purpose": "GraphQL endpoint exposing configuration, playbooks and SOP links.",
     "availability": "beta", "latencyMs": 380, "baseUrl": "https://api.fleet.example/graph"},
]

BLUEPRINTS: List[Dict[str, Any]] = [
    {"id": "ursa-major-70b", "name": "Ursa Major Data Atlas", "size": "70B", "baseModel": "Llama 3.1 70B",
     "objective": "Summarize fleet telemetry, surface KPIs and auto-draft diagnostic briefs.",
     "datasets": ["Fleet telemetry lake (anonymized)", "Mission sensor bundles", "Ops postmortems 2023-2025"],
     "tokens": "0M tokens", "alignment": ["Goal-conditioned RLHF", "Tool-call graph", "Guardrails"],
     "evaluation": ["Telemetry summarization", "Fleet incident triage", "Regression harness"],
     "deploymentTarget": "KPI panels and automation planners", "currentPhase": "alignment"},
    {"id": "aurora-lore-120b", "name": "Aurora Lore", "size": "120B", "baseModel": "Mixtral 8x22B",
     "objective": "Institutional memory for products, partners, compliance and brand voice.",
     "datasets": ["Public site crawl", "Partner enablement wiki", "API docs & release notes", "Leadership townhalls"],
     "tokens": "0M tokens", "alignment": ["Constitutional policy tuned for Korean + English", "Long-horizon retrieval"],
     "evaluation": ["Brand tone", "Compliance Q/A", "Product marketing briefs"],
     "deploymentTarget": "Knowledge graph and customer copilots", "currentPhase": "dataset-curation"},
]

STAGES = ["Dataset Curation", "Pretraining & Adaptation", "Alignment", "Offline Evaluation"]
PHASE_STAGE = {"dataset-curation": "Dataset Curation", "alignment": "Alignment",
               "offline-eval": "Offline Evaluation", "ready": None}
STAGE_SUMMARIES = {
    "Dataset Curation": "Filtering sensitive PII, deduping missions, writing eval harnesses.",
    "Pretraining & Adaptation": "Warm-started on base weights, mixing mission-trace tokens.",
    "Alignment": "Preference optimization with ops SMEs and automated reward models.",
    "Offline Evaluation": "Shadow evals on golden datasets before exposure to crews.",
}


def _validated(model: Type[M], entries: Sequence[Dict[str, Any]], name: str) -> List[M]:
    try:
        return [model.model_validate(e) for e in entries]
    except ValidationError as e:
        raise CatalogIntegrityError(f"{name} catalog is incomplete: {e}") from e


def validate_catalogs() -> None:
    _validated(FinancialSnapshot, FINANCIALS, "financials")
    _validated(KnowledgeSlice, KNOWLEDGE, "knowledge")
    _validated(ApiSurface, API_SURFACES, "apiSurfaces")
    _validated(ModelBlueprint, BLUEPRINTS, "blueprints")


_FINANCIALS = _validated(FinancialSnapshot, FINANCIALS, "financials")
_KNOWLEDGE = _validated(KnowledgeSlice, KNOWLEDGE, "knowledge")
_API_SURFACES = _validated(ApiSurface, API_SURFACES, "apiSurfaces")
_BLUEPRINTS = _validated(ModelBlueprint, BLUEPRINTS, "blueprints")


def financial_snapshots() -> List[FinancialSnapshot]: return list(_FINANCIALS)
def knowledge_slices() -> List[KnowledgeSlice]: return list(_KNOWLEDGE)
def api_surfaces() -> List[ApiSurface]: return list(_API_SURFACES)


def total_tokens(docs: int, tokens_per_doc: int = 1200) -> str:
    return f"{round(docs * tokens_per_doc / 1_000_000)}M tokens"


def milestones_for(phase: str) -> List[TrainingMilestone]:
    current = PHASE_STAGE[phase]
    reached = STAGES.index(current) if current else len(STAGES)
    out = []
    for i, label in enumerate(STAGES):
        status = "running" if i == reached else "complete" if i < reached else "pending"
        out.append(TrainingMilestone(label=label, status=status, summary=STAGE_SUMMARIES[label]))
    return out


def _telemetry(blueprint: ModelBlueprint, docs: int, anchor: pd.Timestamp | None, days_ago: int) -> TrainingTelemetry:
    # coverage improves with corpus size and saturates; no clock or randomness involved
    base, spread = (0.91, 0.04) if blueprint.size == "70B" else (0.88, 0.05)
    coverage = min(1.0, docs / 500_000)
    hallucination = (0.018 if blueprint.size == "70B" else 0.024) + 0.004 * (1 - coverage)
    return TrainingTelemetry(
        last_run=(anchor - pd.Timedelta(days=days_ago)).to_pydatetime() if anchor is not None else None,
        validation_score=round(base + spread * coverage, 3),
        hallucination_rate=round(hallucination, 3),
    )


def assemble_training_plans(records: OperationsFrame | Sequence[Dict[str, Any]] = ()) -> List[TrainingPlan]:
    """Training plans sized by the record store and knowledge catalog volume."""
    ops = as_operations(records)
    anchor = ops.frame["timestamp"].max() if not ops.empty else None
    telemetry_docs = len(ops.frame)
    knowledge_docs = len(_KNOWLEDGE) * 120  # each slice stands in for an aggregated collection

    atlas, lore = _BLUEPRINTS
    return [
        TrainingPlan(
            model=atlas.model_copy(update={"tokens": total_tokens(telemetry_docs, 1800)}),
            milestones=milestones_for(atlas.current_phase),
            telemetry=_telemetry(atlas, telemetry_docs * 1800, anchor, 1),
        ),
        TrainingPlan(
            model=lore.model_copy(update={"tokens": total_tokens(knowledge_docs, 900)}),
            milestones=milestones_for(lore.current_phase),
            telemetry=_telemetry(lore, knowledge_docs * 900, anchor, 3),
        ),
    ]
