"""IV Chart Widget - Voltage vs current plot with best-fit overlay, using textual-plotext."""

import math
from typing import Sequence

from textual_plotext import PlotextPlot

from ivfit.config import SETTINGS, Settings, hex_to_rgb
from ivfit.science.regression import FitResult, Measurement, best_fit_segment


class IVPlotWidget(PlotextPlot):
    """Plots the measurements in sequence order and the fitted line over their voltage range."""

    MARKER = "braille"

    def __init__(
        self,
        measurements: Sequence[Measurement],
        *,
        settings: Settings = SETTINGS,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self._measurements = tuple(measurements)
        self._settings = settings
        # Empty until the fit has been computed
        self._segment: list[Measurement] = []

    @property
    def measurements(self) -> tuple[Measurement, ...]:
        return self._measurements

    @property
    def segment(self) -> list[Measurement]:
        """The best-fit segment currently drawn (0 or 2 points)."""
        return list(self._segment)

    def set_fit(self, result: FitResult | None) -> None:
        """Overlay the best-fit line for a result, or remove it with None."""
        if result is None:
            self._segment = best_fit_segment(self._measurements, None, None)
        else:
            self._segment = best_fit_segment(self._measurements, result.slope, result.intercept)
        self.replot()

    def on_mount(self) -> None:
        """Configure the plot when mounted."""
        self.watch(self.app, "theme", lambda: self.call_after_refresh(self.replot))
        self.replot()

    def replot(self) -> None:
        """Redraw data line and best-fit segment."""
        self.plt.clear_data()
        s = self._settings

        if self._measurements:
            x_values = [p.voltage for p in self._measurements]
            y_values = [p.current for p in self._measurements]

            # Connected line through the readings, in the order given
            data_color = hex_to_rgb(s.data_series_color)
            self.plt.plot(x_values, y_values, marker=self.MARKER, color=data_color)
            self.plt.scatter(x_values, y_values, marker="dot", color=data_color)

            seg = self._drawn_segment()
            if seg:
                self.plt.plot(
                    [p.voltage for p in seg],
                    [p.current for p in seg],
                    marker=self.MARKER,
                    color=hex_to_rgb(s.fit_series_color),
                )

            x_limits, y_limits = self.limits
            self.plt.xlim(*x_limits)
            self.plt.ylim(*y_limits)
            self.plt.title(s.title)
        else:
            self.plt.title(f"{s.title}  |  No data")

        self.plt.xlabel(s.x_label)
        self.plt.ylabel(s.y_label)

        self.refresh()

    def _drawn_segment(self) -> list[Measurement]:
        """The best-fit segment if both ends are finite, else []."""
        if all(math.isfinite(p.voltage) and math.isfinite(p.current) for p in self._segment):
            return list(self._segment)
        return []

    @property
    def limits(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """(x, y) axis limits covering the readings and the drawn best-fit segment."""
        points = list(self._measurements) + self._drawn_segment()
        if not points:
            return (0.0, 1.0), (0.0, 1.0)
        return (
            self._axis_limits([p.voltage for p in points]),
            self._axis_limits([p.current for p in points]),
        )

    @staticmethod
    def _axis_limits(values: list[float]) -> tuple[float, float]:
        # From 0 up to the largest value, widened to take in anything below 0
        low = min(0.0, min(values))
        high = max(values)
        if high <= low:
            high = low + 1.0
        return low, high
