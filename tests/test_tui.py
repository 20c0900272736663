import asyncio
import math

import pytest

from ivfit.data import REFERENCE_MEASUREMENTS, measurements_from_pairs
from ivfit.tui.app import IVFitApp, parse_args
from ivfit.tui.screens.graph import GraphScreen
from ivfit.tui.widgets import (
    CalculationNote,
    FitSummaryWidget,
    IVPlotWidget,
    LogWidget,
    PointsTable,
    SeriesLegend,
)


def _run(app: IVFitApp, check) -> None:
    """Mount the app headless, let the screen settle, then run `check`."""

    async def scenario() -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            await pilot.pause()
            check(app.screen)

    asyncio.run(scenario())


def test_graph_screen_shows_reference_fit() -> None:
    def check(screen) -> None:
        assert isinstance(screen, GraphScreen)

        summary = screen.query_one("#summary", FitSummaryWidget)
        assert summary.result is not None
        assert summary.result.slope == pytest.approx(24.7656667, abs=1e-6)
        assert screen.query_one("#method", CalculationNote).result == summary.result

        chart = screen.query_one("#chart", IVPlotWidget)
        segment = chart.segment
        assert [p.voltage for p in segment] == [0.0, 4.0]

        legend = screen.query_one("#legend", SeriesLegend)
        assert legend.fit_available
        assert [name for name, _ in legend.series] == ["Data Line", "Best Fit Line"]

        points = screen.query_one("#points", PointsTable)
        assert len(points.rows) == 9
        assert points.rows[1] == ("0.5 V", "9.33 A")

        log = screen.query_one("#log", LogWidget)
        assert any("Loaded 9 measurements" in entry for entry in log.entries)
        assert any("0.04 Ω" in entry for entry in log.entries)

    _run(IVFitApp(), check)


def test_degenerate_data_is_reported_not_raised() -> None:
    app = IVFitApp(measurements=measurements_from_pairs([(1.0, 2.0)]))

    def check(screen) -> None:
        summary = screen.query_one("#summary", FitSummaryWidget)
        assert math.isnan(summary.result.slope)

        # Segment exists but holds nan, which the chart skips
        assert len(screen.query_one("#chart", IVPlotWidget).segment) == 2

        log = screen.query_one("#log", LogWidget)
        assert any("Degenerate data" in entry for entry in log.entries)

    _run(app, check)


def test_empty_data_keeps_placeholders() -> None:
    app = IVFitApp(measurements=())

    def check(screen) -> None:
        assert screen.query_one("#summary", FitSummaryWidget).result is None
        assert not screen.query_one("#legend", SeriesLegend).fit_available
        assert screen.query_one("#chart", IVPlotWidget).segment == []

        log = screen.query_one("#log", LogWidget)
        assert any("Fit failed" in entry for entry in log.entries)

    _run(app, check)


def test_app_defaults_to_reference_measurements() -> None:
    app = IVFitApp()
    assert app.measurements == REFERENCE_MEASUREMENTS


def test_chart_limits_take_in_best_fit_segment() -> None:
    def check(screen) -> None:
        chart = screen.query_one("#chart", IVPlotWidget)
        start, end = chart.segment
        (x_low, x_high), (y_low, y_high) = chart.limits

        assert (x_low, x_high) == (0.0, 4.0)
        # Fitted line runs from -3.128 A to about 95.93 A, past both reading extremes
        assert y_low == start.current
        assert y_high == end.current
        assert y_low < 0.0 < 95.66 < y_high

    _run(IVFitApp(), check)


def test_chart_limits_ignore_non_finite_segment() -> None:
    app = IVFitApp(measurements=measurements_from_pairs([(1.0, 2.0)]))

    def check(screen) -> None:
        assert screen.query_one("#chart", IVPlotWidget).limits == ((0.0, 1.0), (0.0, 2.0))

    _run(app, check)


def test_light_flag_starts_in_light_theme() -> None:
    args = parse_args(["--light", "--log-level", "DEBUG"])
    assert args.light
    assert args.log_level == "DEBUG"
    assert not args.force_unicode

    app = IVFitApp(light=args.light)

    def check(screen) -> None:
        assert app.theme == "textual-light"
        assert isinstance(screen, GraphScreen)

    _run(app, check)


def test_default_flags() -> None:
    args = parse_args([])
    assert not args.light
    assert args.log_level == "WARNING"
