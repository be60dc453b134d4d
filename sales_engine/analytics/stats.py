"""Descriptive statistics over Decimal samples.

Degenerate inputs do not raise: the mean of no samples and the standard
deviation of fewer than two samples are both 0.00.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence, Union

Number = Union[int, Decimal]

CENT = Decimal("0.01")
ZERO = Decimal("0")


def round2(value: Number) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def total(values: Iterable[Number]) -> Decimal:
    """Exact Decimal sum."""
    return sum((Decimal(v) for v in values), ZERO)


def mean(values: Sequence[Number]) -> Decimal:
    """Exact arithmetic mean, ZERO for no samples."""
    if not values:
        return ZERO
    return total(values) / len(values)


def average(values: Sequence[Number]) -> Decimal:
    """Arithmetic mean rounded to 2 places."""
    return round2(mean(values))


def sample_std_dev(values: Sequence[Number]) -> Decimal:
    """
    Bessel-corrected standard deviation rounded to 2 places.

    sqrt(sum((x - mean)^2) / (n - 1)), using the unrounded mean.
    """
    n = len(values)
    if n <= 1:
        return round2(ZERO)

    center = mean(values)
    squares = total((Decimal(v) - center) ** 2 for v in values)
    return round2((squares / (n - 1)).sqrt())


def ratio(part: Number, whole: Number) -> Decimal:
    """part / whole rounded to 2 places, ZERO when whole is 0."""
    if not whole:
        return round2(ZERO)
    return round2(Decimal(part) / Decimal(whole))
