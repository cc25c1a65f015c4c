from __future__ import annotations
from typing import List

from .data import as_operations
from .models import SHIFTS, HeatmapCell
from .thresholds import DEFAULT_THRESHOLDS, CurationThresholds


def build_heatmap(records, thresholds: CurationThresholds = DEFAULT_THRESHOLDS) -> List[HeatmapCell]:
    """One cell per facility x shift seen in the data.

    demandScore is orders per available hour, min-max scaled over this call's
    cells. utilization is busy robot-time over available robot-time and is
    left unclamped; over-utilized cells read above 100.
    """
    ops = as_operations(records)
    if ops.empty:
        return []

    df = ops.frame.copy()
    # a shift with no recorded uptime is measured against the nominal shift length
    available_hours = (thresholds.shift_hours * df["uptime"] / 100).where(df["uptime"] > 0, thresholds.shift_hours)
    df["demand"] = df["orders_served"] / available_hours
    capacity = thresholds.robots_per_shift * thresholds.shift_hours * 3600
    df["busy_pct"] = df["orders_served"] * df["avg_turn_time_seconds"] / capacity * 100

    cells = df.groupby(["facility", "shift"], sort=False).agg(
        demand=("demand", "mean"),
        utilization=("busy_pct", "mean"),
    ).reset_index()

    lo, hi = cells["demand"].min(), cells["demand"].max()
    if hi - lo > 1e-9:
        cells["demand_score"] = (cells["demand"] - lo) / (hi - lo)
    else:
        cells["demand_score"] = thresholds.flat_demand_score

    order = {s: i for i, s in enumerate(SHIFTS)}
    cells["shift_rank"] = cells["shift"].map(lambda s: order.get(s, len(order)))
    cells = cells.sort_values(["facility", "shift_rank", "shift"], kind="mergesort")

    return [
        HeatmapCell(
            facility=row.facility,
            shift=row.shift,
            demand_score=round(float(row.demand_score), 2),
            utilization=round(float(row.utilization), 2),
        )
        for row in cells.itertuples(index=False)
    ]
