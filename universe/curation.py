# universe/curation.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional, TypeVar

from .alerts import build_alerts
from .catalogs import api_surfaces, assemble_training_plans, financial_snapshots, knowledge_slices
from .data import OperationsFrame, RecordRepository
from .heatmap import build_heatmap
from .kpis import curate_kpis, empty_kpis
from .mock_data import default_repository
from .models import CurationDiagnostics, CurationSnapshot
from .thresholds import DEFAULT_THRESHOLDS, CurationThresholds
from .trends import build_trend_series

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _section(name: str, build: Callable[[], T], fallback: Callable[[], T], degraded: List[str]) -> T:
    try:
        return build()
    except Exception:
        logger.exception("Curation section %r failed; serving its default", name)
        degraded.append(name)
        return fallback()


def compose_curation_response(repository: Optional[RecordRepository] = None,
                              thresholds: CurationThresholds = DEFAULT_THRESHOLDS) -> CurationSnapshot:
    """Build the snapshot every page and route renders.

    Never raises. A section that fails is replaced by its empty form and named
    in diagnostics.degradedSections. Output depends only on the repository
    contents and thresholds.
    """
    if repository is None:
        repository = default_repository()
    degraded: List[str] = []

    ops = _section("records", lambda: OperationsFrame.from_records(repository.get_records()),
                   lambda: OperationsFrame.from_records([]), degraded)

    snapshot = CurationSnapshot(
        kpis=_section("kpis", lambda: curate_kpis(ops, thresholds), empty_kpis, degraded),
        trend=_section("trend", lambda: build_trend_series(ops, thresholds.trend_max_points), list, degraded),
        heatmap=_section("heatmap", lambda: build_heatmap(ops, thresholds), list, degraded),
        alerts=_section("alerts", lambda: build_alerts(ops, thresholds), list, degraded),
        financials=financial_snapshots(),
        api_surfaces=api_surfaces(),
        knowledge=knowledge_slices(),
        training_plans=_section("trainingPlans", lambda: assemble_training_plans(ops), list, degraded),
        diagnostics=CurationDiagnostics(record_count=ops.total, skipped_records=ops.skipped,
                                        degraded_sections=degraded),
    )
    logger.debug("Composed curation snapshot: %d records, %d skipped, %d alerts",
                 ops.total, ops.skipped, len(snapshot.alerts))
    return snapshot
