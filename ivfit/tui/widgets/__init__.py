"""IV Fit TUI Widgets Package."""

from .iv_chart import IVPlotWidget
from .summary import FitSummaryWidget, CalculationNote
from .legend import SeriesLegend
from .points import PointsTable
from .log import LogWidget

__all__ = [
    "IVPlotWidget",
    "FitSummaryWidget",
    "CalculationNote",
    "SeriesLegend",
    "PointsTable",
    "LogWidget",
]
