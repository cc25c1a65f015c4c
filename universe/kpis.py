from __future__ import annotations
from typing import List, Optional, Tuple

import pandas as pd

from .data import OperationsFrame, as_operations, safe_mean
from .models import KPICard
from .thresholds import DEFAULT_THRESHOLDS, CurationThresholds

KPI_IDS = ("kpi-orders", "kpi-uptime", "kpi-nps", "kpi-incidents")
KPI_CARD_COUNT = len(KPI_IDS)

_LABELS = {
    "kpi-orders": ("Orders Automated", "Tasks completed autonomously over the current window."),
    "kpi-uptime": ("Fleet Uptime", "Average shift uptime across all facilities."),
    "kpi-nps": ("Guest NPS", "Service satisfaction captured via post-visit surveys."),
    "kpi-incidents": ("Incidents / 1k Jobs", "Safety and interruption signals normalized to workload."),
}


def compare_delta(current: Optional[float], previous: Optional[float], epsilon_pct: float) -> Tuple[str, str]:
    """Return (delta, momentum). No prior value, or a zero one, reads as steady."""
    if current is None or not previous:
        return "n/a", "steady"
    delta = (current - previous) / previous * 100
    momentum = "up" if delta > epsilon_pct else "down" if delta < -epsilon_pct else "steady"
    return f"{'+' if delta >= 0 else ''}{delta:.1f}% vs prev", momentum


def comparison_windows(ops: OperationsFrame, window_weeks: int) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Split into (current, prior) windows of equal length, counted in calendar weeks."""
    span = ops.week_span()
    if len(span) == 0:
        return ops.frame, ops.frame
    n = max(1, min(window_weeks, len(span) // 2))
    df = ops.frame
    current_start = span[-n]
    prior_start = current_start - pd.Timedelta(weeks=n)
    current = df[df["week_start"] >= current_start]
    prior = df[(df["week_start"] >= prior_start) & (df["week_start"] < current_start)]
    return current, prior


def _orders(df: pd.DataFrame) -> Optional[float]:
    return float(df["orders_served"].sum()) if not df.empty else None


def _incident_rate(df: pd.DataFrame) -> Optional[float]:
    orders = df["orders_served"].sum()
    if df.empty or not orders:
        return None
    return float(df["incidents"].sum() / orders * 1000)


def _card(kpi_id: str, value: str, current, previous, epsilon: float) -> KPICard:
    label, description = _LABELS[kpi_id]
    delta, momentum = compare_delta(current, previous, epsilon)
    return KPICard(id=kpi_id, label=label, value=value, momentum=momentum, delta=delta, description=description)


def curate_kpis(records, thresholds: CurationThresholds = DEFAULT_THRESHOLDS) -> List[KPICard]:
    ops = as_operations(records)
    current, prior = comparison_windows(ops, thresholds.kpi_window_weeks)
    eps = thresholds.momentum_epsilon_pct

    orders_now, orders_prev = _orders(current), _orders(prior)
    uptime_now, uptime_prev = safe_mean(current["uptime"]), safe_mean(prior["uptime"])
    nps_now, nps_prev = safe_mean(current["nps"]), safe_mean(prior["nps"])
    rate_now, rate_prev = _incident_rate(current), _incident_rate(prior)

    return [
        _card("kpi-orders", f"{int(orders_now or 0):,}", orders_now, orders_prev, eps),
        _card("kpi-uptime", f"{uptime_now or 0:.1f}%", uptime_now, uptime_prev, eps),
        _card("kpi-nps", f"{nps_now or 0:.1f}", nps_now, nps_prev, eps),
        _card("kpi-incidents", f"{rate_now or 0:.2f}", rate_now, rate_prev, eps),
    ]


def empty_kpis() -> List[KPICard]:
    return curate_kpis([])
