"""
GRID_MATH - Pure periodic-grid numerics
=======================================

NO physics. NO plotting.

Structure:
    spec/         - Tolerances and field-layout / transform conventions
    transforms    - Forward/inverse FFT pair over spatial axes
    tensors       - Metric contraction, inner product, delta seed
    reciprocal    - Reciprocal vectors G and real-space positions r

All fields are component-first: (N,) + dims for vectors,
(N, N) + dims for tensors.

Jan 2026
"""

from . import spec

from .transforms import (
    spatial_axes,
    forward_transform,
    inverse_transform,
    round_trip_error,
)

from .tensors import (
    contract,
    inner_product,
    delta_field,
    identity_tensor_field,
)

from .reciprocal import (
    reciprocal_vectors,
    real_space_coordinates,
)
