
from textwrap import dedent

from .models import CurationSnapshot


def _kpi(snapshot: CurationSnapshot, kpi_id: str) -> str:
    card = next((k for k in snapshot.kpis if k.id == kpi_id), None)
    return f"{card.value} ({card.delta}, {card.momentum})" if card else "NA"


def draft_insight(snapshot: CurationSnapshot, prompt: str | None = None) -> str:
    urgent = sum(1 for a in snapshot.alerts if a.severity in ("critical", "high"))
    phases = " | ".join(f"{p.model.name} → {p.model.current_phase}" for p in snapshot.training_plans) or "none"
    top = snapshot.alerts[0].title if snapshot.alerts else "no open alerts"
    asked = f"\n\n**Prompt:** {prompt}" if prompt else ""
    return dedent(f"""
    **Offline universe insight** (no language model configured)

    **Snapshot**
    - Orders automated: {_kpi(snapshot, "kpi-orders")}
    - Uptime: {_kpi(snapshot, "kpi-uptime")}
    - Guest NPS: {_kpi(snapshot, "kpi-nps")}
    - Incidents / 1k jobs: {_kpi(snapshot, "kpi-incidents")}
    - Active APIs: {len(snapshot.api_surfaces)}
    - Training phases: {phases}

    **Alerts**
    - Open: {len(snapshot.alerts)} ({urgent} high or critical); top: {top}.
    """).strip() + asked
