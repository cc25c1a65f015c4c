"""Randomized one-shot samples that animate the "live" widgets.

Nothing here touches the record store; the curated snapshot never sees these
values.
"""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from faker import Faker

from .mock_data import FACILITIES, VERTICALS
from .models import SHIFTS, ApiMetrics, EndpointMetrics, LiveMetrics, OperationalRecord, TrainingUpdate

LIVE_ROBOT_MODELS = ["Servi Plus", "Carti 100", "Carti 600"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class LiveSignalSource:
    def __init__(self, seed: Optional[int] = None):
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def data_point(self) -> OperationalRecord:
        f = self.fake
        facility = f.random_element(list(FACILITIES))
        return OperationalRecord(
            id=f.uuid4(),
            facility=facility,
            city=FACILITIES[facility]["city"],
            region=FACILITIES[facility]["region"],
            vertical=f.random_element(VERTICALS),
            robot_model=f.random_element(LIVE_ROBOT_MODELS),
            shift=f.random_element(SHIFTS),
            timestamp=_now(),
            orders_served=f.random_int(80, 320),
            avg_turn_time_seconds=f.random_int(45, 180),
            uptime=f.pyfloat(min_value=85, max_value=99.9, right_digits=2),
            nps=f.random_int(60, 95),
            incidents=f.random_int(0, 3),
            energy_kwh=f.pyfloat(min_value=8, max_value=25, right_digits=2),
            staffing_delta=f.random_int(-3, 1),
        )

    def batch(self, count: int) -> List[OperationalRecord]:
        return [self.data_point() for _ in range(count)]

    def metrics(self) -> LiveMetrics:
        f = self.fake
        return LiveMetrics(
            timestamp=_now(),
            active_robots=f.random_int(1200, 1300),
            orders_per_minute=f.random_int(45, 85),
            avg_response_time=f.random_int(120, 180),
            system_uptime=f.pyfloat(min_value=98.5, max_value=99.9, right_digits=2),
            active_alerts=f.random_int(0, 5),
            energy_consumption=f.random_int(8500, 12000),
        )

    def training_update(self) -> TrainingUpdate:
        f = self.fake
        now = _now()
        return TrainingUpdate(
            timestamp=now,
            models_training=f.random_int(1, 3),
            avg_loss=f.pyfloat(min_value=0.1, max_value=0.4, right_digits=4),
            tokens_processed=f.random_int(100_000_000, 500_000_000),
            gpu_utilization=f.pyfloat(min_value=85, max_value=99, right_digits=1),
            estimated_completion=now + timedelta(hours=f.random_int(2, 48)),
        )

    def api_metrics(self) -> ApiMetrics:
        f = self.fake

        def endpoint(path, latency, rpm, success_floor):
            return EndpointMetrics(
                path=path,
                avg_latency=f.random_int(*latency),
                requests_per_min=f.random_int(*rpm),
                success_rate=f.pyfloat(min_value=success_floor, max_value=100, right_digits=2),
            )

        return ApiMetrics(timestamp=_now(), endpoints=[
            endpoint("/api/curation", (45, 120), (20, 80), 99.5),
            endpoint("/api/insights", (800, 2000), (5, 25), 98),
            endpoint("/api/live", (20, 60), (50, 150), 99.8),
        ])


_source = LiveSignalSource()


def generate_live_data_point() -> OperationalRecord: return _source.data_point()
def generate_live_data_batch(count: int) -> List[OperationalRecord]: return _source.batch(count)
def generate_live_metrics() -> LiveMetrics: return _source.metrics()
def generate_training_update() -> TrainingUpdate: return _source.training_update()
def generate_api_metrics() -> ApiMetrics: return _source.api_metrics()
