# universe/alerts.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

import pandas as pd

from .data import as_operations
from .models import AlertInsight
from .thresholds import DEFAULT_THRESHOLDS, CurationThresholds

# (category, severity) -> (owner, eta hours)
ROUTING: Dict[Tuple[str, str], Tuple[str, int]] = {
    ("uptime", "critical"): ("Field Engineering Dispatch", 2),
    ("uptime", "high"): ("Fleet Reliability Pod", 6),
    ("uptime", "medium"): ("Fleet Reliability Pod", 24),
    ("incidents", "critical"): ("Safety & Compliance Desk", 2),
    ("incidents", "high"): ("Safety & Compliance Desk", 6),
    ("incidents", "medium"): ("Site Operations Lead", 24),
    ("satisfaction", "high"): ("Customer Success", 12),
    ("satisfaction", "medium"): ("Customer Success", 48),
}

_TITLES = {"uptime": "uptime drop", "incidents": "incident spike", "satisfaction": "satisfaction dip"}


@dataclass(frozen=True)
class AlertRule:
    category: str
    severity: str
    metric: str
    threshold: float
    below: bool

    def fires(self, value: float) -> bool:
        return value < self.threshold if self.below else value >= self.threshold


def alert_rules(t: CurationThresholds = DEFAULT_THRESHOLDS) -> List[AlertRule]:
    """Rules in evaluation order; the first one to fire for a facility+category wins."""
    k = t.incident_step
    return [
        AlertRule("uptime", "critical", "uptime", t.uptime_critical_pct, below=True),
        AlertRule("incidents", "critical", "incidents", 3 * k, below=False),
        AlertRule("uptime", "high", "uptime", t.uptime_high_pct, below=True),
        AlertRule("incidents", "high", "incidents", 2 * k, below=False),
        AlertRule("satisfaction", "high", "nps", t.nps_high, below=True),
        AlertRule("uptime", "medium", "uptime", t.uptime_medium_pct, below=True),
        AlertRule("incidents", "medium", "incidents", k, below=False),
        AlertRule("satisfaction", "medium", "nps", t.nps_medium, below=True),
    ]


def slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def facility_summary(latest: pd.DataFrame) -> pd.DataFrame:
    """Per-facility aggregates over the latest weekly bucket."""
    if latest.empty:
        return pd.DataFrame(columns=["facility", "uptime", "incidents", "nps", "shifts", "worst_shift"])
    g = latest.groupby("facility", sort=True)
    summary = g.agg(uptime=("uptime", "mean"), incidents=("incidents", "sum"), nps=("nps", "mean"), shifts=("shift", "size"))
    summary["worst_shift"] = latest.loc[g["uptime"].idxmin(), ["facility", "shift"]].set_index("facility")["shift"]
    return summary.reset_index()


def _detail(rule: AlertRule, row, week: str) -> str:
    if rule.category == "uptime":
        return (f"Uptime averaged {row.uptime:.1f}% over {row.shifts} shift(s) in the week of {week}, "
                f"below the {rule.threshold:.0f}% {rule.severity} band. Weakest shift: {row.worst_shift}.")
    if rule.category == "incidents":
        return (f"{int(row.incidents)} interruptions logged over {row.shifts} shift(s) in the week of {week} "
                f"(≥{int(rule.threshold)} is {rule.severity}).")
    return (f"Guest NPS averaged {row.nps:.1f} in the week of {week}, "
            f"below the {rule.threshold:.0f} {rule.severity} band.")


def build_alerts(records, thresholds: CurationThresholds = DEFAULT_THRESHOLDS) -> List[AlertInsight]:
    ops = as_operations(records)
    latest = ops.latest_week()
    if latest.empty:
        return []

    week = latest["week_start"].iloc[0].strftime("%b %d")
    summary = facility_summary(latest)
    seen = set()
    alerts: List[AlertInsight] = []
    for rule in alert_rules(thresholds):
        for row in summary.itertuples(index=False):
            key = (row.facility, rule.category)
            if key in seen or not rule.fires(float(getattr(row, rule.metric))):
                continue
            seen.add(key)
            owner, eta = ROUTING[(rule.category, rule.severity)]
            alerts.append(AlertInsight(
                id=f"alert-{slug(row.facility)}-{rule.category}",
                title=f"{row.facility} {_TITLES[rule.category]}",
                detail=_detail(rule, row, week),
                severity=rule.severity,
                owner=owner,
                eta_hours=eta,
                facility=row.facility,
                category=rule.category,
            ))
    return alerts[: thresholds.alert_limit]
