"""IV Fit TUI Screens Package."""

from .graph import GraphScreen
from .help import HelpScreen

__all__ = ["GraphScreen", "HelpScreen"]
