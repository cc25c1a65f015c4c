from universe.live import (
    LiveSignalSource, generate_api_metrics, generate_live_data_batch, generate_live_data_point,
    generate_live_metrics, generate_training_update,
)
from universe.mock_data import FACILITIES, default_repository


def test_data_point_is_a_valid_record():
    rec = generate_live_data_point()
    assert rec.facility in FACILITIES
    assert rec.city == FACILITIES[rec.facility]["city"]
    assert 85 <= rec.uptime <= 99.9


def test_batch_size_and_unique_ids():
    batch = generate_live_data_batch(5)
    assert len(batch) == 5
    assert len({r.id for r in batch}) == 5


def test_live_samples_never_reach_the_store():
    before = default_repository().get_records()
    generate_live_data_batch(10)
    assert default_repository().get_records() == before


def test_metrics_shapes():
    m = generate_live_metrics().model_dump(by_alias=True)
    assert {"activeRobots", "ordersPerMinute", "systemUptime", "energyConsumption"} <= set(m)
    t = generate_training_update()
    assert t.estimated_completion > t.timestamp
    paths = [e.path for e in generate_api_metrics().endpoints]
    assert paths == ["/api/curation", "/api/insights", "/api/live"]


def test_seeded_source_repeats():
    a, b = LiveSignalSource(seed=7), LiveSignalSource(seed=7)
    ra, rb = a.data_point(), b.data_point()
    assert (ra.id, ra.facility, ra.orders_served) == (rb.id, rb.facility, rb.orders_served)
