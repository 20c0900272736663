import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Measurement:
    voltage: float      # x (V)
    current: float      # y (A)


@dataclass(frozen=True)
class FitResult:
    slope: float        # dI/dV (conductance)
    intercept: float    # Current at 0 V (A)
    r_squared: float    # Coefficient of determination (0-1)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: 0/0 -> nan, x/0 -> +/-inf instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _sum(values) -> float:
    """Exactly rounded sum; plain float sum once the terms overflow to inf/nan."""
    values = list(values)
    try:
        return math.fsum(values)
    except (OverflowError, ValueError):
        return sum(values)


def fit(points: Sequence[Measurement]) -> FitResult:
    """
    Ordinary Least Squares fit of current against voltage.

    Args:
        points: Measurements, in any order.

    Returns:
        FitResult. Degenerate input (one point, repeated x, constant y)
        yields nan/inf fields rather than an exception.
    """
    points = tuple(points)
    n = len(points)
    if n == 0:
        raise ValueError("fit() needs at least one measurement")

    x = [p.voltage for p in points]
    y = [p.current for p in points]

    # fsum is exactly rounded, so the result does not depend on point order
    sum_x = _sum(x)
    sum_y = _sum(y)
    sum_xy = _sum(xi * yi for xi, yi in zip(x, y))
    sum_xx = _sum(xi * xi for xi in x)

    slope = _divide(n * sum_xy - sum_x * sum_y, n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    # R-squared
    # SST = sum((y - mean_y)^2)
    # SSR = sum((y_hat - mean_y)^2)  (explained)
    mean_y = sum_y / n
    total_variation = _sum((yi - mean_y) * (yi - mean_y) for yi in y)
    explained_variation = _sum(
        (slope * xi + intercept - mean_y) * (slope * xi + intercept - mean_y) for xi in x
    )
    r_squared = _divide(explained_variation, total_variation)

    result = FitResult(slope=slope, intercept=intercept, r_squared=r_squared)
    if is_degenerate(result):
        logging.warning(f"Degenerate fit over {n} points: {result}")
    else:
        logging.debug(f"Fit over {n} points: {result}")
    return result


def best_fit_segment(
    points: Sequence[Measurement],
    slope: Optional[float],
    intercept: Optional[float],
) -> List[Measurement]:
    """Two points spanning the observed voltage range, or [] if not yet computed."""
    if slope is None or intercept is None or not points:
        return []

    min_x = min(p.voltage for p in points)
    max_x = max(p.voltage for p in points)

    return [
        Measurement(min_x, slope * min_x + intercept),
        Measurement(max_x, slope * max_x + intercept),
    ]


def resistance(slope: float) -> float:
    """
    Resistance from the fitted slope.

    Current is plotted against voltage, so the slope is 1/R.
    """
    return _divide(1.0, slope)


def is_degenerate(result: FitResult) -> bool:
    return not all(math.isfinite(v) for v in (result.slope, result.intercept, result.r_squared))
