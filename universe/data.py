from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Protocol

import pandas as pd

from .models import REGIONS, SHIFTS

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
INF = float("inf")

# wire name -> frame column
COLUMNS = {
    "id": "id",
    "facility": "facility",
    "city": "city",
    "region": "region",
    "vertical": "vertical",
    "robotModel": "robot_model",
    "shift": "shift",
    "timestamp": "timestamp",
    "ordersServed": "orders_served",
    "avgTurnTimeSeconds": "avg_turn_time_seconds",
    "uptime": "uptime",
    "nps": "nps",
    "incidents": "incidents",
    "energyKwh": "energy_kwh",
    "staffingDelta": "staffing_delta",
}
NUMERIC = ["orders_served", "avg_turn_time_seconds", "uptime", "nps", "incidents", "energy_kwh", "staffing_delta"]
REQUIRED = ["facility", "shift", "timestamp", "orders_served", "avg_turn_time_seconds", "uptime", "nps", "incidents"]

Record = Mapping[str, Any]


class RecordRepository(Protocol):
    def get_records(self) -> List[Record]: ...


class InMemoryRecordRepository:
    """Read-only record store; callers get a fresh list each time."""

    def __init__(self, records: Iterable[Record] = ()):
        self._records = tuple(dict(r) for r in records)

    def get_records(self) -> List[Record]:
        return [dict(r) for r in self._records]

    def __len__(self) -> int:
        return len(self._records)


class CsvRecordRepository:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_records(self) -> List[Record]:
        df = load_csv(self.path)
        # NaN -> None so missing cells read as missing fields
        return df.astype(object).where(df.notna(), None).to_dict("records")


def load_csv(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        path = DATA_DIR / path
    df = pd.read_csv(path)
    for col in df.columns:
        if "timestamp" in col.lower() or "date" in col.lower():
            df[col] = pd.to_datetime(df[col], utc=True, errors="coerce", format="ISO8601")
    return df


def week_start(ts: pd.Series) -> pd.Series:
    """Monday 00:00 UTC of each timestamp's calendar week."""
    day = ts.dt.floor("D")
    return day - pd.to_timedelta(ts.dt.weekday, unit="D")


@dataclass(frozen=True)
class OperationsFrame:
    frame: pd.DataFrame
    total: int
    skipped: int

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "OperationsFrame":
        rows = list(records)
        df = pd.DataFrame.from_records(rows) if rows else pd.DataFrame()
        df = df.rename(columns=COLUMNS)
        for col in COLUMNS.values():
            if col not in df.columns:
                df[col] = None
        df = df[list(COLUMNS.values())].copy()

        for col in NUMERIC:
            values = pd.to_numeric(df[col], errors="coerce")
            # infinities read as missing
            df[col] = values.mask(values.isin([INF, -INF]))
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, errors="coerce", format="ISO8601")
        for col in ("facility", "shift"):
            present = df[col].map(lambda v: isinstance(v, str) and v.strip() != "").astype(bool)
            df[col] = df[col].where(present)

        valid = df[REQUIRED].notna().all(axis=1)
        valid &= df["uptime"].between(0, 100)
        valid &= (df["orders_served"] >= 0) & (df["incidents"] >= 0) & (df["avg_turn_time_seconds"] > 0)
        valid &= df["shift"].isin(SHIFTS)
        valid &= df["region"].isna() | df["region"].isin(REGIONS)
        skipped = int((~valid).sum())
        if skipped:
            logger.warning("Skipped %d malformed operational record(s) of %d", skipped, len(df))

        df = df[valid].copy()
        df["week_start"] = week_start(df["timestamp"])
        df = df.sort_values("timestamp", kind="mergesort").reset_index(drop=True)
        return cls(frame=df, total=len(rows), skipped=skipped)

    @property
    def empty(self) -> bool:
        return self.frame.empty

    def week_span(self) -> pd.DatetimeIndex:
        """Every weekly bucket from the earliest to the latest record, gaps included."""
        if self.empty:
            return pd.DatetimeIndex([], tz="UTC")
        return pd.date_range(self.frame["week_start"].min(), self.frame["week_start"].max(), freq="7D")

    def latest_week(self) -> pd.DataFrame:
        if self.empty:
            return self.frame
        return self.frame[self.frame["week_start"] == self.frame["week_start"].max()]


def safe_mean(values: pd.Series) -> float | None:
    if values.empty:
        return None
    m = float(values.mean())
    return None if pd.isna(m) else m


def as_operations(data: OperationsFrame | Iterable[Record]) -> OperationsFrame:
    if isinstance(data, OperationsFrame):
        return data
    return OperationsFrame.from_records(data)
