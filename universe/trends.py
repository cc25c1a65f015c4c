from __future__ import annotations
from typing import List, Optional

import pandas as pd

from .data import as_operations
from .models import TrendPoint


def build_trend_series(records, max_points: Optional[int] = None) -> List[TrendPoint]:
    """Weekly throughput/uptime/satisfaction/incidents, oldest first.

    Every week between the first and last record gets a point. Empty weeks
    report zero throughput and incidents and carry the previous uptime and
    satisfaction forward so chart series stay aligned.
    """
    ops = as_operations(records)
    span = ops.week_span()
    if len(span) == 0:
        return []

    weekly = ops.frame.groupby("week_start").agg(
        throughput=("orders_served", "sum"),
        uptime=("uptime", "mean"),
        satisfaction=("nps", "mean"),
        incidents=("incidents", "sum"),
        records=("orders_served", "size"),
    ).reindex(span)

    points: List[TrendPoint] = []
    uptime = satisfaction = 0.0
    for start, row in weekly.iterrows():
        n = 0 if pd.isna(row["records"]) else int(row["records"])
        if n:
            uptime = round(float(row["uptime"]), 2)
            satisfaction = round(float(row["satisfaction"]), 1)
        points.append(TrendPoint(
            week=start.strftime("%b %d"),
            week_start=start.date(),
            throughput=int(row["throughput"]) if n else 0,
            uptime=uptime,
            satisfaction=satisfaction,
            incidents=int(row["incidents"]) if n else 0,
            records=n,
        ))

    if max_points:
        points = points[-max_points:]
    return points
