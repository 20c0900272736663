#!/usr/bin/env python3
"""
IV Fit - Textual Application
Voltage vs current graph with a least-squares best-fit line.

Features:
- Data line and best-fit overlay with textual-plotext
- Resistance, intercept and R² summary cards
- Keyboard bindings and theming
"""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from textual.app import App
from textual.logging import TextualHandler

from ivfit.config import SETTINGS, Settings
from ivfit.data import REFERENCE_MEASUREMENTS
from ivfit.science.regression import Measurement
from ivfit.tui.screens.graph import GraphScreen


class IVFitApp(App):
    """Main IV Fit Terminal User Interface Application."""

    TITLE = "IV Fit"
    SUB_TITLE = SETTINGS.title

    CSS_PATH = Path(__file__).parent / "styles.tcss"

    BINDINGS = [
        ("d", "toggle_dark", "Dark/Light"),
        ("ctrl+c", "quit", None),  # Always quit, even in modals
    ]

    def __init__(
        self,
        measurements: Sequence[Measurement] = REFERENCE_MEASUREMENTS,
        settings: Settings = SETTINGS,
        force_unicode: bool = False,
        light: bool = False,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.measurements = tuple(measurements)
        self.settings = settings
        self.force_unicode = force_unicode
        self.light = light

    def on_mount(self) -> None:
        """Show the graph on startup."""
        if self.light:
            self.theme = "textual-light"
        self.push_screen(GraphScreen(self.measurements, settings=self.settings))

    def action_toggle_dark(self) -> None:
        """Toggle dark/light mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Command line flags for the IV Fit application."""
    parser = argparse.ArgumentParser(description="IV Fit - voltage vs current best-fit graph")
    parser.add_argument("--force-unicode", action="store_true", help="Force usage of Unicode symbols even on Windows")
    parser.add_argument("--light", action="store_true", help="Start in the light theme")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (sent to the Textual devtools console)",
    )

    # Use parse_known_args to avoid conflict if Textual consumes args
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Entry point for the IV Fit application."""
    args = parse_args()

    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    app = IVFitApp(force_unicode=args.force_unicode, light=args.light)
    app.run()


if __name__ == "__main__":
    main()
