"""
Grid Transforms
===============

Forward/inverse multidimensional discrete Fourier transforms between real
space and reciprocal space on a periodic grid.

CONVENTION:
    Only the trailing `ndims` axes are transformed. A vector field of shape
    (N,) + dims keeps its component axis untouched, so the same pair works
    for scalar, vector and tensor fields.

    forward_transform:  unscaled     (real space -> reciprocal space)
    inverse_transform:  scaled 1/n   (reciprocal space -> real space)

    inverse_transform(forward_transform(x)) == x up to rounding.

Backed by scipy.fft (pocketfft), fixed to FFT_NORM for the whole package.

Jan 2026
"""

import numpy as np
import scipy.fft

from .spec.constants import FFT_NORM


def spatial_axes(field: np.ndarray, ndims: int) -> tuple:
    """
    Axes of `field` that carry the grid (the trailing `ndims` axes).

    Args:
        field: array of shape (..., d_1, ..., d_N)
        ndims: number of spatial dimensions N

    Returns:
        axes: tuple of N negative axis indices
    """
    if ndims < 1:
        raise ValueError(f"ndims must be >= 1, got {ndims}")
    if field.ndim < ndims:
        raise ValueError(
            f"Field with {field.ndim} axes cannot carry a {ndims}-dimensional grid"
        )
    return tuple(range(-ndims, 0))


def forward_transform(field: np.ndarray, ndims: int) -> np.ndarray:
    """
    Real space -> reciprocal space over the trailing `ndims` axes.

    Args:
        field: real or complex array (..., d_1, ..., d_N)
        ndims: number of spatial dimensions

    Returns:
        complex array of the same shape
    """
    field = np.asarray(field)
    return scipy.fft.fftn(field, axes=spatial_axes(field, ndims), norm=FFT_NORM)


def inverse_transform(field: np.ndarray, ndims: int) -> np.ndarray:
    """
    Reciprocal space -> real space over the trailing `ndims` axes.

    Args:
        field: complex array (..., d_1, ..., d_N)
        ndims: number of spatial dimensions

    Returns:
        complex array of the same shape
    """
    field = np.asarray(field)
    return scipy.fft.ifftn(field, axes=spatial_axes(field, ndims), norm=FFT_NORM)


def round_trip_error(field: np.ndarray, ndims: int) -> float:
    """
    Max |inverse(forward(x)) - x| over all entries.

    Used as a sanity gate on the transform pair before trusting any
    recurrence built on top of it.
    """
    field = np.asarray(field)
    if field.size == 0:
        return 0.0
    back = inverse_transform(forward_transform(field, ndims), ndims)
    return float(np.max(np.abs(back - field)))
