"""Reference voltage/current readings."""

from typing import Iterable, Tuple

from ivfit.science.regression import Measurement


# (voltage V, current A), in bench order
REFERENCE_PAIRS = (
    (0.0, 0.0),
    (0.5, 9.33),
    (1.0, 23.0),
    (1.5, 24.66),
    (2.0, 47.66),
    (2.5, 60.66),
    (3.0, 71.66),
    (3.5, 85.0),
    (4.0, 95.66),
)


def measurements_from_pairs(pairs: Iterable[Tuple[float, float]]) -> Tuple[Measurement, ...]:
    """Build Measurements from (voltage, current) pairs, keeping their order."""
    return tuple(Measurement(float(v), float(i)) for v, i in pairs)


REFERENCE_MEASUREMENTS = measurements_from_pairs(REFERENCE_PAIRS)
