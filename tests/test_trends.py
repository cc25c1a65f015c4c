from datetime import date

from universe.trends import build_trend_series
from conftest import WEEK_1, WEEK_2, WEEK_4, make_record


def test_gap_weeks_are_filled():
    points = build_trend_series([
        make_record(WEEK_1, uptime=90, nps=70, incidents=2),
        make_record(WEEK_4, uptime=96, nps=80, incidents=1),
    ])
    assert [p.week_start for p in points] == [date(2025, 3, 3), date(2025, 3, 10), date(2025, 3, 17), date(2025, 3, 24)]
    gap = points[1]
    assert gap.records == 0
    assert gap.throughput == 0 and gap.incidents == 0
    assert gap.uptime == 90 and gap.satisfaction == 70
    assert points[-1].uptime == 96


def test_weekly_aggregation(two_week_records):
    points = build_trend_series(two_week_records)
    assert len(points) == 2
    assert points[0].week == "Mar 03"
    assert points[1].throughput == 200
    assert points[1].uptime == 78
    assert points[1].incidents == 6
    assert points[1].records == 2


def test_single_record_single_point():
    points = build_trend_series([make_record(WEEK_2)])
    assert len(points) == 1
    assert points[0].throughput == 100


def test_unsorted_input_comes_out_oldest_first():
    points = build_trend_series([make_record(WEEK_4), make_record(WEEK_1), make_record(WEEK_2)])
    assert [p.week_start for p in points] == sorted(p.week_start for p in points)


def test_max_points_keeps_latest():
    points = build_trend_series([make_record(WEEK_1), make_record(WEEK_4)], max_points=2)
    assert [p.week_start for p in points] == [date(2025, 3, 17), date(2025, 3, 24)]


def test_empty():
    assert build_trend_series([]) == []
