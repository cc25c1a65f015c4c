import streamlit as st

from universe.ai import draft_insight
from universe.charts import alert_list, heatmap_table, kpi_row, trend_chart
from universe.curation import compose_curation_response
from universe.models import CurationSnapshot
from universe import api as uapi

# Page config MUST be first before any output
st.set_page_config(page_title="Fleet Universe", page_icon="🤖", layout="wide")
st.markdown("## Fleet Universe")

snapshot = None
online = uapi.api_up()
if online:
    payload = uapi.get_curation()
    if payload: snapshot = CurationSnapshot.model_validate(payload)
if snapshot is None:
    snapshot = compose_curation_response()
if snapshot.diagnostics.degraded_sections:
    st.warning("Degraded sections: " + ", ".join(snapshot.diagnostics.degraded_sections))

kpi_row(snapshot.kpis)
live = uapi.get_live("metrics") if online else None
if live:
    m = live["data"]
    st.caption(f"Live: {m['activeRobots']:,} robots active · {m['ordersPerMinute']} orders/min · uptime {m['systemUptime']}%")
st.divider()
st.subheader("Weekly Trend")
trend_chart(snapshot.trend)
c1, c2 = st.columns([3, 2])
with c1:
    st.subheader("Shift Utilization")
    heatmap_table(snapshot.heatmap)
with c2:
    st.subheader("Alerts")
    alert_list(snapshot.alerts)

st.divider()
st.subheader("Training Programs")
for plan in snapshot.training_plans:
    t = plan.telemetry
    with st.expander(f"{plan.model.name} · {plan.model.current_phase}"):
        last = t.last_run.strftime("%Y-%m-%d %H:%M UTC") if t.last_run else "never"
        st.caption(f"Last run {last} · validation {t.validation_score:.2f} · hallucination {t.hallucination_rate:.1%}")
        for m in plan.milestones:
            st.markdown(f"- **{m.label}** ({m.status}): {m.summary}")

st.divider()
st.subheader("Daily Brief")
note = st.text_input("Notes (optional)", placeholder="Add any context...")
if online and st.button("Ask the orchestrator"):
    st.markdown(uapi.ask_insight(note))
else:
    st.markdown(draft_insight(snapshot, note or None))
