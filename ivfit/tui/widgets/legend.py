"""Series Legend Widget - Names the plotted series in their colours."""

from rich.console import RenderableType
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from ivfit.config import SETTINGS, Settings


class SeriesLegend(Widget):
    """A compact legend bar for the data line and the best-fit line."""

    DEFAULT_CSS = """
    SeriesLegend {
        height: 1;
        width: 100%;
        padding: 0 1;
    }
    """

    # The best-fit series is only listed once it is drawn
    fit_available: reactive[bool] = reactive(False)

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

    @property
    def series(self) -> list[tuple[str, str]]:
        """(name, colour) of each series currently shown."""
        s = self._settings
        entries = [(s.data_series_name, s.data_series_color)]
        if self.fit_available:
            entries.append((s.fit_series_name, s.fit_series_color))
        return entries

    def render(self) -> RenderableType:
        text = Text()
        for i, (name, color) in enumerate(self.series):
            if i > 0:
                text.append("  ")
            text.append("━━ ", style=f"bold {color}")
            text.append(name, style=color)
        if not self.fit_available:
            text.append("  |  ", style="dim")
            text.append(self._settings.placeholder, style="dim italic")
        return text
