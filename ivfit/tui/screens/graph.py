"""Graph Screen - Voltage vs current chart with the fitted line and its numbers."""

import logging
from typing import Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ivfit.config import SETTINGS, Settings
from ivfit.science.display import format_r_squared, format_resistance
from ivfit.science.regression import FitResult, Measurement, fit, is_degenerate
from ivfit.tui.screens.help import HelpScreen
from ivfit.tui.widgets.iv_chart import IVPlotWidget
from ivfit.tui.widgets.legend import SeriesLegend
from ivfit.tui.widgets.log import LogWidget
from ivfit.tui.widgets.points import PointsTable
from ivfit.tui.widgets.summary import CalculationNote, FitSummaryWidget


class GraphScreen(Screen):
    """Main screen: chart on the left, fit summary on the right."""

    DEFAULT_CSS = """
    GraphScreen {
        layout: vertical;
        padding: 0;
    }
    """

    BINDINGS = [
        ("q", "app.quit", "Quit"),
        ("d", "app.toggle_dark", "Theme"),
        ("?", "help", "Help"),
    ]

    def __init__(
        self,
        measurements: Sequence[Measurement],
        settings: Settings = SETTINGS,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.measurements = tuple(measurements)
        self.settings = settings
        self.result: FitResult | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main"):
            with Vertical(id="left"):
                yield Static(self.settings.description, id="description")
                yield IVPlotWidget(self.measurements, settings=self.settings, id="chart")
                yield SeriesLegend(settings=self.settings, id="legend")
            with VerticalScroll(id="right"):
                yield FitSummaryWidget(settings=self.settings, id="summary")
                yield CalculationNote(settings=self.settings, id="method")
                points = PointsTable(self.measurements, settings=self.settings, id="points")
                points.border_title = "Readings"
                yield points
                log_widget = LogWidget(id="log")
                log_widget.border_title = "Event Log"
                yield log_widget
        yield Footer()

    def on_mount(self) -> None:
        """Compute the fit once, then hand it to every widget."""
        log = self.query_one("#log", LogWidget)
        log.log_info(f"Loaded {len(self.measurements)} measurements")

        try:
            self.result = fit(self.measurements)
        except ValueError as e:
            logging.error(f"Fit failed: {e}")
            log.log_error(f"Fit failed: {e}")
            return

        # Segment depends on the fit, so the chart is updated after it exists
        self.query_one("#chart", IVPlotWidget).set_fit(self.result)
        self.query_one("#legend", SeriesLegend).fit_available = True
        self.query_one("#summary", FitSummaryWidget).result = self.result
        self.query_one("#method", CalculationNote).result = self.result

        if is_degenerate(self.result):
            log.log_warning("Degenerate data: gradient or R² is undefined (nan/inf)")
        else:
            log.log_success(
                f"Fit: R = {format_resistance(self.result, self.settings)}, "
                f"R² = {format_r_squared(self.result, self.settings)}"
            )

    def action_help(self) -> None:
        """Show the help screen."""
        self.app.push_screen(HelpScreen())
