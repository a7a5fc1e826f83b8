"""
Haydock Operator Application
============================

Applies the physical operator of a two-component medium to a reciprocal
space Haydock state ψ(G):

    gψ   = g · ψ                          metric contraction
    ψ(r) = F⁻¹[gψ]                        to real space (spatial axes only)
    ψ(r) <- B(r) ψ(r)                     characteristic function
    Oψ   = F[B F⁻¹[g ψ]]                  back to reciprocal space
    gOψ  = g · Oψ                         second metric contraction

The recurrence needs gψ and Oψ for the diagonal coefficient
a_n = g_n Re<gψ, Oψ> and Oψ, gOψ for the raw norm Re<Oψ, gOψ>.

Pure function: no state, no side effects. Each call costs one
forward/inverse transform pair.

Jan 2026
"""

import numpy as np
from typing import Tuple

from grid_math.tensors import contract
from grid_math.transforms import forward_transform, inverse_transform

from .errors import InvalidArgumentError


def check_metric_shapes(metric) -> None:
    """
    Verify the provider's outputs agree with its declared dims and are finite.

    Raises:
        InvalidArgumentError on any mismatch
    """
    ndims = int(metric.ndims)
    dims = tuple(metric.dims)
    if len(dims) != ndims:
        raise InvalidArgumentError(
            f"Metric declares ndims={ndims} but dims={dims}")
    B = np.asarray(metric.characteristic_field)
    if B.shape != dims:
        raise InvalidArgumentError(
            f"Characteristic field has shape {B.shape}, expected {dims}")
    if np.iscomplexobj(B):
        raise InvalidArgumentError("Characteristic field must be real")
    if not np.all(np.isfinite(B)):
        raise InvalidArgumentError("Characteristic field has non-finite values")
    g = np.asarray(metric.tensor_field)
    if g.shape != (ndims, ndims) + dims:
        raise InvalidArgumentError(
            f"Metric tensor field has shape {g.shape}, "
            f"expected {(ndims, ndims) + dims}")
    if not np.all(np.isfinite(g)):
        raise InvalidArgumentError("Metric tensor field has non-finite values")


def apply_operator(psi: np.ndarray, metric) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Apply the medium operator to a Haydock state.

    Args:
        psi: (N,) + dims complex state in reciprocal space
        metric: provider with ndims, dims, characteristic_field, tensor_field

    Returns:
        gpsi:  (N,) + dims  g · ψ
        opsi:  (N,) + dims  F[B F⁻¹[g ψ]]
        gopsi: (N,) + dims  g · Oψ
    """
    check_metric_shapes(metric)
    ndims = int(metric.ndims)
    expected = (ndims,) + tuple(metric.dims)
    psi = np.asarray(psi)
    if psi.shape != expected:
        raise InvalidArgumentError(
            f"State has shape {psi.shape}, expected {expected}")

    g = metric.tensor_field
    gpsi = contract(g, psi)

    # Component axis stays in front; only the grid axes are transformed
    gpsi_r = inverse_transform(gpsi, ndims)
    opsi_r = gpsi_r * np.asarray(metric.characteristic_field)[np.newaxis]
    opsi = forward_transform(opsi_r, ndims)

    gopsi = contract(g, opsi)
    return gpsi, opsi, gopsi
