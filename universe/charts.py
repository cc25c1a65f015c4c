
from typing import List

import pandas as pd
import streamlit as st

from .models import AlertInsight, HeatmapCell, KPICard, TrendPoint
from .thresholds import DEFAULT_THRESHOLDS

_MOMENTUM_COLOR = {"up": "normal", "down": "normal", "steady": "off"}
_SEVERITY_ICON = {"critical": "🛑", "high": "🔴", "medium": "🟠", "low": "🟢"}


def bar_width(utilization: float, ceiling: float = DEFAULT_THRESHOLDS.utilization_display_ceiling) -> float:
    """Display width for a utilization bar; stored values stay unclamped."""
    return max(0.0, min(float(utilization), ceiling))


def trend_frame(points: List[TrendPoint]) -> pd.DataFrame:
    df = pd.DataFrame([p.model_dump() for p in points])
    if df.empty:
        return df
    return df.set_index("week_start")[["throughput", "uptime", "satisfaction", "incidents"]]


def heatmap_frame(cells: List[HeatmapCell]) -> pd.DataFrame:
    df = pd.DataFrame([c.model_dump() for c in cells])
    if df.empty:
        return df
    df["bar"] = df["utilization"].map(bar_width)
    return df.pivot_table(index="facility", columns="shift", values="bar", aggfunc="first", sort=False)


def kpi_row(kpis: List[KPICard]):
    cols = st.columns(max(1, len(kpis)))
    for col, k in zip(cols, kpis):
        delta = None if k.delta == "n/a" else k.delta
        with col: st.metric(k.label, k.value, delta, delta_color=_MOMENTUM_COLOR[k.momentum], help=k.description)


def trend_chart(points: List[TrendPoint]):
    df = trend_frame(points)
    if df.empty:
        st.info("No trend data yet."); return
    c1, c2 = st.columns(2)
    with c1: st.line_chart(df[["throughput"]])
    with c2: st.line_chart(df[["uptime", "satisfaction"]])


def heatmap_table(cells: List[HeatmapCell]):
    df = heatmap_frame(cells)
    if df.empty:
        st.info("No utilization data yet."); return
    bars = {c: st.column_config.ProgressColumn(str(c), min_value=0, max_value=100, format="%.0f%%") for c in df.columns}
    st.dataframe(df, column_config=bars)


def alert_list(alerts: List[AlertInsight]):
    if not alerts:
        st.success("Fleet within guardrails for the latest week."); return
    for a in alerts:
        st.markdown(f"{_SEVERITY_ICON[a.severity]} **{a.title}** · {a.severity} · {a.owner} · ETA {a.eta_hours}h  \n{a.detail}")
