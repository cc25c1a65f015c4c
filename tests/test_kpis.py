from universe.kpis import KPI_CARD_COUNT, KPI_IDS, compare_delta, curate_kpis, empty_kpis
from universe.mock_data import generate_operations_dataset
from conftest import WEEK_1, WEEK_2, WEEK_4, make_record


def by_id(cards):
    return {c.id: c for c in cards}


def test_four_cards_in_fixed_order(two_week_records):
    cards = curate_kpis(two_week_records)
    assert len(cards) == KPI_CARD_COUNT == 4
    assert tuple(c.id for c in cards) == KPI_IDS
    assert all(c.momentum in ("up", "down", "steady") for c in cards)


def test_uptime_collapse_reads_down(two_week_records):
    cards = by_id(curate_kpis(two_week_records))
    assert cards["kpi-uptime"].value == "78.0%"
    assert cards["kpi-uptime"].momentum == "down"
    assert cards["kpi-uptime"].delta == "-18.3% vs prev"
    assert cards["kpi-orders"].value == "200"
    assert cards["kpi-orders"].momentum == "steady"
    assert cards["kpi-incidents"].value == "30.00"
    assert cards["kpi-incidents"].momentum == "up"


def test_empty_input_still_gives_four_steady_cards():
    cards = empty_kpis()
    assert len(cards) == 4
    assert {c.momentum for c in cards} == {"steady"}
    assert {c.delta for c in cards} == {"n/a"}


def test_single_week_has_no_prior():
    cards = curate_kpis([make_record(WEEK_1), make_record(WEEK_1, hour=15)])
    assert all(c.delta == "n/a" and c.momentum == "steady" for c in cards)
    assert by_id(cards)["kpi-orders"].value == "200"


def test_gap_week_counts_toward_window():
    # span is four weeks, so two-week windows compare weeks 3-4 against 1-2
    cards = by_id(curate_kpis([make_record(WEEK_1, ordersServed=100), make_record(WEEK_2, ordersServed=100),
                               make_record(WEEK_4, ordersServed=300)]))
    assert cards["kpi-orders"].value == "300"
    assert cards["kpi-orders"].delta == "+50.0% vs prev"
    assert cards["kpi-orders"].momentum == "up"


def test_compare_delta_epsilon():
    assert compare_delta(101.0, 100.0, 1.5) == ("+1.0% vs prev", "steady")
    assert compare_delta(98.0, 100.0, 1.5) == ("-2.0% vs prev", "down")
    assert compare_delta(5.0, 0.0, 1.5) == ("n/a", "steady")
    assert compare_delta(None, 10.0, 1.5) == ("n/a", "steady")


def test_demo_dataset_is_stable():
    from datetime import datetime, timezone
    anchor = datetime(2025, 6, 2, tzinfo=timezone.utc)
    a = generate_operations_dataset(anchor)
    b = generate_operations_dataset(anchor)
    assert a == b
    assert [c.model_dump() for c in curate_kpis(a)] == [c.model_dump() for c in curate_kpis(b)]
