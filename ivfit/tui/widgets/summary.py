"""Summary Widgets - Fit result cards and the worked resistance calculation."""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from ivfit.config import SETTINGS, Settings
from ivfit.science.display import (
    format_intercept,
    format_method,
    format_r_squared,
    format_resistance,
)
from ivfit.science.regression import FitResult


class FitSummaryWidget(Widget):
    """Three cards: gradient (as resistance), y-intercept and R²."""

    DEFAULT_CSS = """
    FitSummaryWidget {
        height: auto;
        padding: 0 1;
    }
    """

    # None until the fit has been computed
    result: reactive[FitResult | None] = reactive(None)

    def __init__(
        self,
        *,
        settings: Settings = SETTINGS,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self._settings = settings

    def _card(self, title: str, value: str, note: str = "") -> Panel:
        body = Text()
        style = "dim" if self.result is None else "bold"
        body.append(value, style=style)
        if note:
            body.append("\n")
            body.append(note, style="dim")
        return Panel(body, title=title, title_align="left", border_style="cyan")

    def render(self) -> RenderableType:
        s = self._settings
        grid = Table.grid(expand=True, padding=(0, 1))
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(
            self._card("Gradient (Resistance)", format_resistance(self.result, s), "Resistance = ΔV/ΔI"),
            self._card("Y-Intercept", format_intercept(self.result, s)),
            self._card("R² Value", format_r_squared(self.result, s), "Goodness of fit (1.0 = perfect)"),
        )
        return grid


class CalculationNote(Widget):
    """Explains how the resistance is derived from the fitted gradient."""

    DEFAULT_CSS = """
    CalculationNote {
        height: auto;
        padding: 0 1;
    }
    """

    result: reactive[FitResult | None] = reactive(None)

    def __init__(
        self,
        *,
        settings: Settings = SETTINGS,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self._settings = settings

    def render(self) -> RenderableType:
        intro = Text(
            "The gradient is calculated using linear regression across all data points. "
            "Since this is a voltage-current relationship, the resistance (R) is given by:"
        )
        method = Text(format_method(self.result, self._settings), style="bold")
        note = Text(
            "Note: In Ohm's law (V = IR), the gradient of a V-I graph is R, but since "
            "we're plotting I vs V, the gradient is 1/R.",
            style="dim",
        )
        return Panel(
            Group(intro, Text(), method, Text(), note),
            title="Calculation Method",
            title_align="left",
            border_style="dim",
        )
