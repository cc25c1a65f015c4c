import pandas as pd

from universe.data import CsvRecordRepository, InMemoryRecordRepository, OperationsFrame, week_start
from conftest import WEEK_1, WEEK_2, make_record


def test_malformed_records_are_skipped_and_counted():
    ops = OperationsFrame.from_records([
        make_record(),
        make_record(uptime=120),
        make_record(ordersServed=-4),
        make_record(avgTurnTimeSeconds=0),
        make_record(timestamp="not a date"),
        make_record(facility=""),
        {k: v for k, v in make_record().items() if k != "nps"},
    ])
    assert ops.total == 7
    assert ops.skipped == 6
    assert len(ops.frame) == 1


def test_numeric_strings_are_coerced():
    ops = OperationsFrame.from_records([make_record(ordersServed="250", uptime="97.5")])
    assert ops.skipped == 0
    assert ops.frame.loc[0, "orders_served"] == 250


def test_week_start_is_monday_utc():
    ts = pd.to_datetime(pd.Series(["2025-03-09T23:30:00Z", "2025-03-10T00:00:00Z"]), utc=True)
    starts = week_start(ts)
    assert starts.iloc[0] == pd.Timestamp("2025-03-03", tz="UTC")
    assert starts.iloc[1] == pd.Timestamp("2025-03-10", tz="UTC")


def test_week_span_includes_gaps():
    ops = OperationsFrame.from_records([make_record(WEEK_1), make_record("2025-03-24")])
    assert len(ops.week_span()) == 4


def test_empty_records():
    ops = OperationsFrame.from_records([])
    assert ops.empty and ops.total == 0 and ops.skipped == 0
    assert len(ops.week_span()) == 0


def test_in_memory_repository_hands_out_copies():
    repo = InMemoryRecordRepository([make_record()])
    first = repo.get_records()
    first[0]["uptime"] = 1
    assert repo.get_records()[0]["uptime"] == 95.0
    assert len(repo) == 1


def test_csv_repository_reads_records(tmp_path):
    rows = [make_record(WEEK_1), make_record(WEEK_2, nps=None)]
    path = tmp_path / "ops.csv"
    pd.DataFrame(rows).to_csv(path, index=False)

    records = CsvRecordRepository(path).get_records()
    assert len(records) == 2
    assert records[1]["nps"] is None

    ops = OperationsFrame.from_records(records)
    assert ops.skipped == 1
    assert ops.frame.loc[0, "facility"] == "Busan"


def test_infinite_numbers_are_skipped():
    ops = OperationsFrame.from_records([
        make_record(),
        make_record(ordersServed=float("inf")),
        make_record(uptime=float("-inf")),
        make_record(incidents="inf"),
    ])
    assert ops.skipped == 3
    assert len(ops.frame) == 1


def test_infinite_optional_field_reads_as_missing():
    ops = OperationsFrame.from_records([make_record(energyKwh=float("inf"))])
    assert ops.skipped == 0
    assert pd.isna(ops.frame.loc[0, "energy_kwh"])


def test_inf_cell_in_csv_is_skipped(tmp_path):
    path = tmp_path / "ops.csv"
    pd.DataFrame([make_record(WEEK_1), make_record(WEEK_2, ordersServed="inf")]).to_csv(path, index=False)
    ops = OperationsFrame.from_records(CsvRecordRepository(path).get_records())
    assert ops.skipped == 1
    assert ops.frame["orders_served"].tolist() == [100]


def test_unknown_shift_or_region_is_skipped():
    ops = OperationsFrame.from_records([
        make_record(),
        make_record(shift="Breakfast"),
        make_record(region="LATAM"),
        {k: v for k, v in make_record(hour=15).items() if k != "region"},
    ])
    assert ops.skipped == 2
    assert set(ops.frame["shift"]) == {"morning"}
