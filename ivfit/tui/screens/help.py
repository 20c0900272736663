"""Help Screen - Explains the graph and the fit."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static, Footer


HELP_TEXT = """
[bold cyan]══════════════════════════════════════════════════════════════[/bold cyan]
[bold white]                       IV Fit Help[/bold white]
[bold cyan]══════════════════════════════════════════════════════════════[/bold cyan]

[bold yellow]▶ THE GRAPH[/bold yellow]

Current (A) is plotted against voltage (V). The [bold #8884d8]Data Line[/bold #8884d8]
joins the readings in the order they were taken. The [bold #ff7300]Best Fit Line[/bold #ff7300]
is the least-squares line drawn across the measured voltage range.

[bold yellow]▶ THE NUMBERS[/bold yellow]

[bold]Gradient (Resistance)[/bold]  The fitted gradient is dI/dV = 1/R,
                        so the resistance shown is 1 / gradient.
[bold]Y-Intercept[/bold]            Fitted current at 0 V.
[bold]R² Value[/bold]               Share of the current's variance explained
                        by the line. 1.0 is a perfect fit.

[italic]If every reading has the same voltage (or there is only one),
the gradient is undefined and shows as nan or inf.[/italic]

[bold yellow]▶ KEYBOARD SHORTCUTS[/bold yellow]

[bold cyan]d[/bold cyan]       Toggle dark/light theme
[bold cyan]?[/bold cyan]       This help
[bold cyan]q[/bold cyan]       Quit application

[bold cyan]══════════════════════════════════════════════════════════════[/bold cyan]
[dim]Press Escape to close this help screen[/dim]
"""


class HelpScreen(ModalScreen):
    """Modal help screen for the IV graph."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("?", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 70;
        height: 80%;
        border: solid $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)
        yield Footer()

    def on_key(self, event) -> None:
        """Handle 'q' to dismiss without quitting app."""
        if event.key == "q":
            event.stop()  # Prevent propagation
            self.dismiss()
