"""
Display configuration for IV Fit.

Fixed presentation parameters (precision, units, colours, labels) live here so
the widgets and the formatters agree on them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # Precision
    quantity_decimals: int = 2       # resistance, intercept, gradient
    r_squared_decimals: int = 4

    # Units
    voltage_unit: str = "V"
    current_unit: str = "A"
    resistance_unit: str = "Ω"

    # Shown until the fit exists
    placeholder: str = "Calculating..."

    # Series (name, hex colour)
    data_series_name: str = "Data Line"
    data_series_color: str = "#8884d8"
    fit_series_name: str = "Best Fit Line"
    fit_series_color: str = "#ff7300"

    # Chart text
    title: str = "Voltage vs Current Graph"
    description: str = "Plotting the relationship between voltage (V) and current (A)"
    x_label: str = "Voltage (V)"
    y_label: str = "Current (A)"


SETTINGS = Settings()


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """'#8884d8' -> (136, 132, 216), the form plotext expects."""
    color = color.lstrip("#")
    return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))
