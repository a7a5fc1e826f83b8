"""
Reciprocal Lattice Grids
========================

Wave vectors G and positions r for an orthorhombic periodic cell of
period L = (L_1, ..., L_N) sampled on a grid of shape dims.

    r_a[n] = n_a * L_a / d_a                     n_a = 0 .. d_a - 1
    G_a[m] = 2π * m_a / L_a                      m_a in FFT ordering
                                                 (0, 1, .., -1)

With this ordering G[:, 0, ..., 0] = 0 matches the delta seed of
grid_math.tensors.delta_field and the index-0 convention of
grid_math.transforms.

Jan 2026
"""

import numpy as np
from typing import Sequence, Tuple


def _check_cell(dims: Sequence[int], L: Sequence[float]) -> Tuple[Tuple[int, ...], np.ndarray]:
    dims = tuple(int(d) for d in dims)
    L = np.asarray(L, dtype=float)
    if len(dims) == 0:
        raise ValueError("Grid must have at least one dimension")
    if any(d < 1 for d in dims):
        raise ValueError(f"Grid dimensions must be positive, got {dims}")
    if L.shape != (len(dims),):
        raise ValueError(f"Period L must have {len(dims)} entries, got shape {L.shape}")
    if np.any(L <= 0):
        raise ValueError(f"Period L must be > 0, got {L}")
    return dims, L


def reciprocal_vectors(dims: Sequence[int], L: Sequence[float]) -> np.ndarray:
    """
    Reciprocal lattice vectors on the FFT grid.

    Args:
        dims: grid shape (d_1, ..., d_N)
        L: (N,) cell period along each axis

    Returns:
        G: (N,) + dims real array, G[:, 0, ..., 0] = 0
    """
    dims, L = _check_cell(dims, L)
    axes = [2 * np.pi * np.fft.fftfreq(d, d=L[a] / d) for a, d in enumerate(dims)]
    return np.stack(np.meshgrid(*axes, indexing='ij'))


def real_space_coordinates(dims: Sequence[int], L: Sequence[float],
                           centered: bool = False) -> np.ndarray:
    """
    Grid positions inside one periodic cell.

    Args:
        dims: grid shape
        L: (N,) cell period
        centered: if True, shift so the cell center sits at r = 0
            (positions run over [-L/2, L/2))

    Returns:
        r: (N,) + dims real array
    """
    dims, L = _check_cell(dims, L)
    axes = []
    for a, d in enumerate(dims):
        x = np.arange(d) * L[a] / d
        if centered:
            x = x - (d // 2) * L[a] / d
        axes.append(x)
    return np.stack(np.meshgrid(*axes, indexing='ij'))
