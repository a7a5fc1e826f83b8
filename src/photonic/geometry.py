"""
Geometry of a Periodic Two-Component Medium
===========================================

The geometry is the characteristic function B(r) of one phase sampled on a
real-space grid of one periodic cell:

    B(r) = 1   inside the inclusion (phase "b")
    B(r) = 0   in the host          (phase "a")

Fractional values are allowed (smoothed interfaces); B must be real.

The grid shape fixes dims and ndims for everything built on top: metric
tensor fields have shape (N, N) + dims and Haydock states (N,) + dims.

BUILDERS:
    build_inclusion_geometry - centered disk / sphere / hyper-sphere
    build_layered_geometry   - slab along one axis (1D multilayer)

Jan 2026
"""

import numpy as np
from typing import Sequence, Tuple

from grid_math.reciprocal import reciprocal_vectors, real_space_coordinates

from .errors import InvalidArgumentError


class Geometry:
    """
    Characteristic function on a periodic grid, plus its cell.

    Attributes:
        B: (d_1, ..., d_N) read-only real array
        L: (N,) cell period
        dims: grid shape
        ndims: N
        G: (N,) + dims reciprocal vectors (FFT ordering, G[:, 0, ..., 0] = 0)
        r: (N,) + dims real-space positions (cell origin at index 0)
    """

    def __init__(self, B: np.ndarray, L: Sequence[float] = None):
        """
        Initialize geometry.

        Args:
            B: characteristic function sampled on the grid (real, ndim >= 1)
            L: period along each axis (default: unit cell, all ones)
        """
        B = np.asarray(B)
        if B.ndim == 0 or B.size == 0:
            raise InvalidArgumentError(
                f"Characteristic function must be a non-empty array, got shape {B.shape}")
        if np.iscomplexobj(B):
            raise InvalidArgumentError("Characteristic function must be real")
        if not np.all(np.isfinite(B)):
            raise InvalidArgumentError("Characteristic function has non-finite values")

        self.B = np.array(B, dtype=float)
        self.B.setflags(write=False)
        self.dims = tuple(self.B.shape)
        self.ndims = self.B.ndim

        if L is None:
            L = np.ones(self.ndims)
        L = np.asarray(L, dtype=float)
        if L.shape != (self.ndims,):
            raise InvalidArgumentError(
                f"Period L must have {self.ndims} entries, got shape {L.shape}")
        if np.any(L <= 0):
            raise InvalidArgumentError(f"Period L must be > 0, got {L}")
        self.L = L

        self.G = reciprocal_vectors(self.dims, self.L)
        self.r = real_space_coordinates(self.dims, self.L)

    @property
    def fill_fraction(self) -> float:
        """Filling fraction f = <B> of the inclusion phase."""
        return float(np.mean(self.B))

    @property
    def cell_volume(self) -> float:
        return float(np.prod(self.L))

    def __repr__(self):
        return (f"Geometry(dims={self.dims}, L={self.L.tolist()}, "
                f"f={self.fill_fraction:.4f})")


def build_inclusion_geometry(dims: Tuple[int, ...], radius: float,
                             L: Sequence[float] = None) -> Geometry:
    """
    Centered (hyper)spherical inclusion in an orthorhombic cell.

    A grid point is inside when Σ_a (r_a / L_a)² <= radius², with r measured
    from the cell center. For a cubic cell radius is in units of the
    lattice constant.

    Args:
        dims: grid shape; len(dims) sets the dimension
        radius: inclusion radius in cell units (0 < radius)
        L: cell period (default: ones)

    Returns:
        Geometry whose characteristic function is rolled so the inclusion
        is centered on the cell origin (index 0). Rolling keeps the
        inclusion symmetric under r -> -r on the FFT grid.
    """
    dims = tuple(int(d) for d in dims)
    if radius <= 0:
        raise InvalidArgumentError(f"radius must be > 0, got {radius}")
    if L is None:
        L = np.ones(len(dims))
    L = np.asarray(L, dtype=float)
    try:
        r = real_space_coordinates(dims, L, centered=True)
    except ValueError as exc:
        raise InvalidArgumentError(str(exc)) from exc

    scaled2 = sum((r[a] / L[a]) ** 2 for a in range(len(dims)))
    B = (scaled2 <= radius ** 2).astype(float)
    B = np.roll(B, shift=[-(d // 2) for d in dims], axis=tuple(range(len(dims))))
    return Geometry(B, L)


def build_layered_geometry(dims: Tuple[int, ...], fraction: float,
                           axis: int = 0, L: Sequence[float] = None) -> Geometry:
    """
    Slab of phase "b" occupying the first `fraction` of the cell along `axis`.

    Args:
        dims: grid shape
        fraction: thickness of the slab as a fraction of the period, in [0, 1]
        axis: stacking axis
        L: cell period (default: ones)
    """
    dims = tuple(int(d) for d in dims)
    if not 0.0 <= fraction <= 1.0:
        raise InvalidArgumentError(f"fraction must be in [0, 1], got {fraction}")
    if not 0 <= axis < len(dims):
        raise InvalidArgumentError(f"axis {axis} out of range for {len(dims)} dimensions")
    if any(d < 1 for d in dims):
        raise InvalidArgumentError(f"Grid dimensions must be positive, got {dims}")

    n_layer = int(round(fraction * dims[axis]))
    B = np.zeros(dims)
    index = [slice(None)] * len(dims)
    index[axis] = slice(0, n_layer)
    B[tuple(index)] = 1.0
    return Geometry(B, L)
