"""Points Widget - The readings behind the chart."""

from typing import Sequence

from rich.console import RenderableType
from rich.table import Table
from textual.widget import Widget

from ivfit.config import SETTINGS, Settings
from ivfit.science.display import format_point
from ivfit.science.regression import Measurement


class PointsTable(Widget):
    """Lists each reading with its units, in the order it is plotted."""

    DEFAULT_CSS = """
    PointsTable {
        height: auto;
        padding: 0 1;
    }
    """

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

    @property
    def rows(self) -> list[tuple[str, str]]:
        return [format_point(p, self._settings) for p in self._measurements]

    def render(self) -> RenderableType:
        table = Table(box=None, padding=(0, 1), expand=True, header_style="bold cyan")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Voltage", justify="right")
        table.add_column("Current", justify="right")

        for i, (voltage, current) in enumerate(self.rows, start=1):
            table.add_row(str(i), voltage, current)

        if not self._measurements:
            table.add_row("", "---", "---")

        return table
