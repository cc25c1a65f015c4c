# universe/thresholds.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class CurationThresholds:
    """Tunable constants shared by the aggregators.

    kpi_window_weeks       weekly buckets per KPI comparison window (shrinks on short datasets)
    momentum_epsilon_pct   |delta| at or below this is "steady"
    trend_max_points       keep only the most recent N trend points (None = full span)
    flat_demand_score      demandScore used when every heatmap cell has the same demand
    robots_per_shift       robots assumed on the floor per facility shift
    shift_hours            length of one shift
    utilization_display_ceiling  bar-width cap for display layers
    uptime_*_pct           uptime below the value triggers that severity
    incident_step          K: incidents >= K medium, >= 2K high, >= 3K critical
    nps_*                  mean NPS below the value triggers that severity
    alert_limit            max alerts per snapshot
    """
    kpi_window_weeks: int = 2
    momentum_epsilon_pct: float = 1.5
    trend_max_points: int | None = None
    flat_demand_score: float = 0.5
    robots_per_shift: int = 4
    shift_hours: float = 6.0
    utilization_display_ceiling: float = 100.0
    uptime_critical_pct: float = 70.0
    uptime_high_pct: float = 85.0
    uptime_medium_pct: float = 92.0
    incident_step: int = 6
    nps_high: float = 40.0
    nps_medium: float = 55.0
    alert_limit: int = 10


DEFAULT_THRESHOLDS = CurationThresholds()
