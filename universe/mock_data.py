# universe/mock_data.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, List, Optional

from faker import Faker

from .data import InMemoryRecordRepository
from .models import SHIFTS, OperationalRecord

SEED = 20251118
WEEKS_BACK = 16
RECORDS_PER_WEEK = 24

FACILITIES: Dict[str, Dict[str, str]] = {
    "Seoul HQ Automation Lab": {"city": "Seoul", "region": "APAC"},
    "Silicon Valley Command": {"city": "Redwood City", "region": "AMER"},
    "Tokyo Robotics Studio": {"city": "Tokyo", "region": "APAC"},
    "Seoul Servi Factory": {"city": "Incheon", "region": "APAC"},
    "Busan Pilot Cluster": {"city": "Busan", "region": "APAC"},
    "Singapore Experience Hub": {"city": "Singapore", "region": "APAC"},
}
VERTICALS = ["Hospitality", "Enterprise Dining", "Healthcare", "Stadiums", "Korean Franchises"]
ROBOT_MODELS = ["Servi", "Servi Lift", "Servi Plus", "Servi Suite"]
SHIFT_HOUR = {"morning": 8, "afternoon": 12, "evening": 18, "night": 23}


def generate_operations_dataset(anchor: Optional[datetime] = None, weeks_back: int = WEEKS_BACK,
                                seed: int = SEED) -> List[dict]:
    """Seeded demo history: the same anchor and seed always give the same rows."""
    fake = Faker()
    fake.seed_instance(seed)
    if anchor is None:
        anchor = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)

    rows = []
    for i in range(weeks_back * RECORDS_PER_WEEK):
        facility = fake.random_element(list(FACILITIES))
        shift = SHIFTS[i % len(SHIFTS)]
        day = anchor - timedelta(weeks=i % weeks_back, days=fake.random_int(0, 5))
        ts = day.replace(hour=SHIFT_HOUR[shift], minute=fake.random_int(0, 59))
        rec = OperationalRecord(
            id=f"ops-{i}",
            facility=facility,
            city=FACILITIES[facility]["city"],
            region=FACILITIES[facility]["region"],
            vertical=fake.random_element(VERTICALS),
            robot_model=fake.random_element(ROBOT_MODELS),
            shift=shift,
            timestamp=ts,
            orders_served=fake.random_int(180, 720),
            avg_turn_time_seconds=fake.random_int(90, 240),
            uptime=fake.pyfloat(min_value=94, max_value=99.7, right_digits=2),
            nps=fake.random_int(48, 92),
            incidents=fake.random_int(0, 4),
            energy_kwh=fake.pyfloat(min_value=12, max_value=36, right_digits=1),
            staffing_delta=fake.random_int(-6, 4),
        )
        rows.append(rec.model_dump(by_alias=True))
    return sorted(rows, key=lambda r: r["timestamp"])


@lru_cache(maxsize=1)
def default_repository() -> InMemoryRecordRepository:
    """Process-wide demo store, built once and never written to."""
    return InMemoryRecordRepository(generate_operations_dataset())
