import pytest

from universe.data import InMemoryRecordRepository

# Mondays, UTC
WEEK_1 = "2025-03-03"
WEEK_2 = "2025-03-10"
WEEK_4 = "2025-03-24"


def make_record(day=WEEK_2, hour=9, **overrides):
    rec = {
        "id": f"rec-{day}-{hour}-{overrides.get('facility', 'Busan')}-{overrides.get('shift', 'morning')}",
        "facility": "Busan",
        "city": "Busan",
        "region": "APAC",
        "vertical": "Hospitality",
        "robotModel": "Servi",
        "shift": "morning",
        "timestamp": f"{day}T{hour:02d}:00:00Z",
        "ordersServed": 100,
        "avgTurnTimeSeconds": 120,
        "uptime": 95.0,
        "nps": 80,
        "incidents": 1,
        "energyKwh": 20.0,
        "staffingDelta": 0,
    }
    rec.update(overrides)
    return rec


@pytest.fixture
def two_week_records():
    """Busan steady across two weeks; Seoul collapses to 60% uptime in the latest week."""
    return [
        make_record(WEEK_1, facility="Busan", uptime=96),
        make_record(WEEK_1, facility="Seoul", city="Seoul", uptime=95),
        make_record(WEEK_2, facility="Busan", uptime=96),
        make_record(WEEK_2, facility="Seoul", city="Seoul", uptime=60, incidents=5),
    ]


@pytest.fixture
def repo(two_week_records):
    return InMemoryRecordRepository(two_week_records)
