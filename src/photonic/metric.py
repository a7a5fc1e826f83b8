"""
Metric Providers
================

A metric supplies the (possibly indefinite) inner product used by the
Haydock recurrence, one N×N tensor per reciprocal vector G:

    <u, v>_g = Σ_G Σ_ij conj(u_i(G)) g_ij(G) v_j(G)

Every provider exposes the interface consumed by RetardedOneH:

    ndims                 - N
    dims                  - grid shape (d_1, ..., d_N)
    characteristic_field  - real (d_1, ..., d_N), from the geometry
    tensor_field          - (N, N) + dims, read-only

PROVIDERS:
    ArrayMetric    - wraps a precomputed tensor field (validated)
    RetardedMetric - retarded (finite wavenumber) metric of a host medium

THEORY (retarded metric):
    For host dielectric function ε, wavenumber q = ω/c and Bloch vector k,

        g_ij(G) = (ε q² δ_ij - (k+G)_i (k+G)_j) / (ε q² - |k+G|²)

    Along (k+G) the eigenvalue is 1; transverse to it the eigenvalue is
    ε q² / (ε q² - |k+G|²), negative outside the light cone. The metric is
    therefore INDEFINITE for all but the lowest G, which is what the sign
    bookkeeping g_n = ±1 of the recurrence handles.

    At G = 0 and k -> 0 the metric reduces to δ_ij (nonretarded limit).

Jan 2026
"""

import numpy as np
from typing import Sequence

from grid_math.tensors import identity_tensor_field

from .constants import DEFAULT_EPSILON, LIGHT_CONE_MARGIN
from .errors import InvalidArgumentError
from .geometry import Geometry


class ArrayMetric:
    """Metric given directly as a tensor field over the geometry's grid."""

    def __init__(self, geometry: Geometry, tensor_field: np.ndarray):
        """
        Args:
            geometry: Geometry providing dims and the characteristic function
            tensor_field: (N, N) + dims real or complex array
        """
        self.geometry = geometry
        tensor_field = np.array(tensor_field)
        expected = (geometry.ndims, geometry.ndims) + geometry.dims
        if tensor_field.shape != expected:
            raise InvalidArgumentError(
                f"Metric tensor field has shape {tensor_field.shape}, expected {expected}")
        if not np.all(np.isfinite(tensor_field)):
            raise InvalidArgumentError("Metric tensor field has non-finite values")
        tensor_field.setflags(write=False)
        self._tensor_field = tensor_field

    @property
    def ndims(self) -> int:
        return self.geometry.ndims

    @property
    def dims(self) -> tuple:
        return self.geometry.dims

    @property
    def characteristic_field(self) -> np.ndarray:
        return self.geometry.B

    @property
    def tensor_field(self) -> np.ndarray:
        return self._tensor_field


def identity_metric(geometry: Geometry) -> ArrayMetric:
    """Euclidean metric δ_ij at every G (nonretarded limit)."""
    return ArrayMetric(geometry, identity_tensor_field(geometry.ndims, geometry.dims))


def scaled_metric(geometry: Geometry, weights: np.ndarray) -> ArrayMetric:
    """
    Diagonal metric w(G) δ_ij.

    Args:
        geometry: Geometry
        weights: scalar or array of shape dims; negative entries make the
            metric indefinite
    """
    weights = np.broadcast_to(np.asarray(weights), geometry.dims)
    eye = identity_tensor_field(geometry.ndims, geometry.dims)
    return ArrayMetric(geometry, eye * weights)


class RetardedMetric(ArrayMetric):
    """
    Retarded metric of a homogeneous host at wavenumber q and wavevector k.

    The tensor field is computed once at construction.
    """

    def __init__(self, geometry: Geometry,
                 wavenumber: float,
                 wavevector: Sequence[float],
                 epsilon: float = DEFAULT_EPSILON):
        """
        Initialize retarded metric.

        Args:
            geometry: Geometry (sets G vectors through its period L)
            wavenumber: q = ω/c > 0
            wavevector: (N,) Bloch vector k, must satisfy |k|² < ε q²
            epsilon: real positive host dielectric function
        """
        if np.iscomplexobj(epsilon) or not np.isfinite(epsilon) or epsilon <= 0:
            raise InvalidArgumentError(f"Host epsilon must be real and > 0, got {epsilon}")
        if not np.isfinite(wavenumber) or wavenumber <= 0:
            raise InvalidArgumentError(f"wavenumber must be > 0, got {wavenumber}")
        k = np.asarray(wavevector, dtype=float)
        if k.shape != (geometry.ndims,):
            raise InvalidArgumentError(
                f"wavevector must have {geometry.ndims} components, got shape {k.shape}")

        self.wavenumber = float(wavenumber)
        self.wavevector = k
        self.epsilon = float(epsilon)

        k02 = self.epsilon * self.wavenumber ** 2
        if np.dot(k, k) >= k02:
            raise InvalidArgumentError(
                f"Wave vector |k|²={np.dot(k, k):.6g} must be smaller than "
                f"ε q²={k02:.6g} (propagating in the host)")

        spatial = (slice(None),) + (None,) * geometry.ndims
        kPG = geometry.G + k[spatial]
        den = k02 - np.sum(kPG * kPG, axis=0)
        if np.any(np.abs(den) < LIGHT_CONE_MARGIN * k02):
            raise InvalidArgumentError(
                "Some k+G lies on the light cone |k+G|² = ε q²; metric is singular")

        num = k02 * identity_tensor_field(geometry.ndims, geometry.dims) \
            - np.einsum('i...,j...->ij...', kPG, kPG)
        super().__init__(geometry, num / den)
