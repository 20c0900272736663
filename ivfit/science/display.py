"""Text shown for a fit result. `None` means the fit has not been computed yet."""

from typing import Optional, Tuple

from ivfit.config import SETTINGS, Settings
from ivfit.science.regression import FitResult, Measurement, resistance


def format_resistance(result: Optional[FitResult], settings: Settings = SETTINGS) -> str:
    if result is None:
        return settings.placeholder
    value = resistance(result.slope)
    return f"{value:.{settings.quantity_decimals}f} {settings.resistance_unit}"


def format_intercept(result: Optional[FitResult], settings: Settings = SETTINGS) -> str:
    if result is None:
        return settings.placeholder
    return f"{result.intercept:.{settings.quantity_decimals}f} {settings.current_unit}"


def format_r_squared(result: Optional[FitResult], settings: Settings = SETTINGS) -> str:
    if result is None:
        return settings.placeholder
    return f"{result.r_squared:.{settings.r_squared_decimals}f}"


def format_method(result: Optional[FitResult], settings: Settings = SETTINGS) -> str:
    """
    The worked resistance line, e.g. 'R = ΔV/ΔI = 1/24.77 = 0.04 Ω'.

    The gradient is 1/R because current is plotted against voltage.
    """
    if result is None:
        return f"R = ΔV/ΔI = {settings.placeholder.lower()}"
    places = settings.quantity_decimals
    return (
        f"R = ΔV/ΔI = 1/{result.slope:.{places}f} = "
        f"{resistance(result.slope):.{places}f} {settings.resistance_unit}"
    )


def format_point(point: Measurement, settings: Settings = SETTINGS) -> Tuple[str, str]:
    """Tooltip labels for a point: ('0.5 V', '9.33 A')."""
    return (
        f"{point.voltage:g} {settings.voltage_unit}",
        f"{point.current:g} {settings.current_unit}",
    )
