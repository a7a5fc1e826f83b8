"""Constants and field-layout conventions."""

from .constants import (
    EPS_CLOSE,
    ROUND_TRIP_TOL,
    FFT_NORM,
)
