import math

from ivfit.config import Settings, hex_to_rgb
from ivfit.data import REFERENCE_MEASUREMENTS
from ivfit.science.display import (
    format_intercept,
    format_method,
    format_point,
    format_r_squared,
    format_resistance,
)
from ivfit.science.regression import FitResult, Measurement, fit


def _reference() -> FitResult:
    return fit(REFERENCE_MEASUREMENTS)


def test_reference_values_are_formatted_to_fixed_places() -> None:
    result = _reference()

    assert format_resistance(result) == "0.04 Ω"
    assert format_intercept(result) == "-3.13 A"
    assert format_r_squared(result) == "0.9885"


def test_method_line_shows_reciprocal() -> None:
    assert format_method(_reference()) == "R = ΔV/ΔI = 1/24.77 = 0.04 Ω"


def test_placeholder_before_fit() -> None:
    assert format_resistance(None) == "Calculating..."
    assert format_intercept(None) == "Calculating..."
    assert format_r_squared(None) == "Calculating..."
    assert format_method(None) == "R = ΔV/ΔI = calculating..."


def test_non_finite_values_do_not_raise() -> None:
    result = FitResult(slope=math.nan, intercept=math.nan, r_squared=math.nan)

    assert format_resistance(result) == "nan Ω"
    assert format_intercept(result) == "nan A"
    assert format_r_squared(result) == "nan"

    flat = FitResult(slope=0.0, intercept=3.0, r_squared=math.nan)
    assert format_resistance(flat) == "inf Ω"
    assert format_method(flat) == "R = ΔV/ΔI = 1/0.00 = inf Ω"


def test_point_labels_carry_units() -> None:
    assert format_point(Measurement(0.5, 9.33)) == ("0.5 V", "9.33 A")
    assert format_point(Measurement(0.0, 0.0)) == ("0 V", "0 A")
    assert format_point(Measurement(4.0, 95.66)) == ("4 V", "95.66 A")


def test_settings_control_precision_and_units() -> None:
    settings = Settings(quantity_decimals=3, r_squared_decimals=2, current_unit="mA", placeholder="Wait")
    result = _reference()

    assert format_intercept(result, settings) == "-3.128 mA"
    assert format_r_squared(result, settings) == "0.99"
    assert format_r_squared(None, settings) == "Wait"


def test_hex_colours_convert_for_plotext() -> None:
    assert hex_to_rgb("#8884d8") == (136, 132, 216)
    assert hex_to_rgb("#ff7300") == (255, 115, 0)
