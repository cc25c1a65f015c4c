from universe.charts import bar_width, heatmap_frame, trend_frame
from universe.heatmap import build_heatmap
from universe.trends import build_trend_series
from conftest import WEEK_1, WEEK_4, make_record


def test_bar_width_clamps_for_display():
    assert bar_width(138.9) == 100.0
    assert bar_width(-3) == 0.0
    assert bar_width(42.5) == 42.5


def test_heatmap_frame_pivots_clamped_bars():
    cells = build_heatmap([
        make_record(facility="Busan", shift="morning", ordersServed=1000),
        make_record(facility="Busan", shift="night", ordersServed=100),
    ])
    df = heatmap_frame(cells)
    assert list(df.columns) == ["morning", "night"]
    assert df.loc["Busan", "morning"] == 100.0
    assert df.loc["Busan", "night"] < 100.0
    # model values stay unclamped
    assert max(c.utilization for c in cells) > 100


def test_trend_frame_is_indexed_by_week():
    df = trend_frame(build_trend_series([make_record(WEEK_4), make_record(WEEK_1)]))
    assert df.index.is_monotonic_increasing
    assert len(df) == 4


def test_empty_frames():
    assert heatmap_frame([]).empty
    assert trend_frame([]).empty
