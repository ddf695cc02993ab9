"""Miles/kilometers conversion."""

from __future__ import annotations

from core.domain.errors import ValidationError

KM_PER_MILE = 1.60934
KM_PRECISION = 4


def miles_to_km(miles: float) -> float:
    """Convert miles to kilometers, rounded to 4 decimal places."""

    if miles < 0:
        raise ValidationError("Miles cannot be negative")
    return round(miles * KM_PER_MILE, KM_PRECISION)


def km_to_miles(km: float) -> float:
    """Convert kilometers to miles (unrounded)."""

    if km < 0:
        raise ValidationError("Kilometers cannot be negative")
    return km / KM_PER_MILE
