import pytest
from pydantic import ValidationError

from universe.curation import compose_curation_response
from universe.data import InMemoryRecordRepository
from conftest import WEEK_1, WEEK_2, make_record


class BrokenRepository:
    def get_records(self):
        raise OSError("store offline")


def test_snapshot_is_idempotent(repo):
    first = compose_curation_response(repo).model_dump(by_alias=True, mode="json")
    second = compose_curation_response(repo).model_dump(by_alias=True, mode="json")
    assert first == second


def test_end_to_end(repo):
    snap = compose_curation_response(repo)
    assert len(snap.kpis) == 4
    assert len(snap.trend) == 2
    assert [a.id for a in snap.alerts] == ["alert-seoul-uptime"]
    assert len(snap.training_plans) == 2
    assert snap.diagnostics.record_count == 4
    assert snap.diagnostics.degraded_sections == ()


def test_wire_format_is_camel_case(repo):
    data = compose_curation_response(repo).model_dump(by_alias=True, mode="json")
    assert {"kpis", "trend", "heatmap", "alerts", "financials", "apiSurfaces", "knowledge", "trainingPlans"} <= set(data)
    assert "demandScore" in data["heatmap"][0]
    assert "etaHours" in data["alerts"][0]


def test_failing_store_degrades_instead_of_raising():
    snap = compose_curation_response(BrokenRepository())
    assert "records" in snap.diagnostics.degraded_sections
    assert len(snap.kpis) == 4
    assert snap.alerts == () and snap.trend == ()
    assert snap.financials and snap.api_surfaces


def test_empty_store():
    snap = compose_curation_response(InMemoryRecordRepository([]))
    assert snap.diagnostics.record_count == 0
    assert snap.diagnostics.degraded_sections == ()
    assert snap.heatmap == () and snap.alerts == ()


def test_skipped_records_are_reported(two_week_records):
    bad = dict(two_week_records[0], uptime=-1)
    snap = compose_curation_response(InMemoryRecordRepository(two_week_records + [bad]))
    assert snap.diagnostics.skipped_records == 1
    assert snap.diagnostics.record_count == 5


def test_seoul_two_week_scenario():
    repo = InMemoryRecordRepository([
        make_record(WEEK_1, facility="Seoul", uptime=98, ordersServed=500, incidents=0),
        make_record(WEEK_2, facility="Seoul", uptime=60, ordersServed=100, incidents=5),
    ])
    snap = compose_curation_response(repo)
    assert [p.throughput for p in snap.trend] == [500, 100]
    uptime = next(k for k in snap.kpis if k.id == "kpi-uptime")
    assert uptime.momentum == "down" and uptime.delta.startswith("-")
    assert [(a.facility, a.category, a.severity) for a in snap.alerts] == [("Seoul", "uptime", "critical")]


def test_infinite_record_is_skipped_not_propagated(two_week_records):
    bad = make_record(WEEK_1, facility="Tokyo", city="Tokyo", ordersServed=float("inf"))
    snap = compose_curation_response(InMemoryRecordRepository(two_week_records + [bad]))
    assert snap.diagnostics.skipped_records == 1
    assert snap.diagnostics.degraded_sections == ()
    assert len(snap.trend) == 2
    assert snap.trend[0].throughput == 200
    assert "Tokyo" not in {c.facility for c in snap.heatmap}
    incidents = next(k for k in snap.kpis if k.id == "kpi-incidents")
    assert incidents.momentum == "up"


def test_snapshot_sections_cannot_be_changed(repo):
    snap = compose_curation_response(repo)
    assert isinstance(snap.alerts, tuple)
    with pytest.raises(AttributeError):
        snap.alerts.append(snap.alerts[0])
    with pytest.raises(ValidationError):
        snap.alerts = ()
    assert isinstance(snap.training_plans[0].milestones, tuple)
