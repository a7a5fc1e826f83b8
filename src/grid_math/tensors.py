"""
Tensor Field Operations
=======================

Pointwise linear algebra on fields laid out component-first:

    vector field  v[i, r]       shape (N,) + dims
    tensor field  g[i, j, r]    shape (N, N) + dims

OPERATIONS:
    contract(g, v)[i, r] = Σ_j g[i, j, r] v[j, r]     (full tensor-vector product)
    inner_product(u, v)  = Σ_{i, r} conj(u[i, r]) v[i, r]
    delta_field(e, dims)[:, 0, ..., 0] = e, zero elsewhere

The delta field at index 0 is the zero-wavevector (G = 0) state in
reciprocal space, i.e. a uniform macroscopic field.

Jan 2026
"""

import numpy as np
from typing import Sequence, Tuple


def contract(tensor_field: np.ndarray, vector_field: np.ndarray) -> np.ndarray:
    """
    Contract a rank-2 tensor field with a vector field at every grid point.

    Args:
        tensor_field: (N, N) + dims
        vector_field: (N,) + dims

    Returns:
        (N,) + dims array, dtype promoted from the inputs
    """
    tensor_field = np.asarray(tensor_field)
    vector_field = np.asarray(vector_field)
    if tensor_field.ndim < 2 or tensor_field.shape[0] != tensor_field.shape[1]:
        raise ValueError(
            f"Tensor field must have shape (N, N, ...), got {tensor_field.shape}"
        )
    if tensor_field.shape[1:] != vector_field.shape:
        raise ValueError(
            f"Tensor field {tensor_field.shape} does not match vector field "
            f"{vector_field.shape}"
        )
    return np.einsum('ij...,j...->i...', tensor_field, vector_field)


def inner_product(u: np.ndarray, v: np.ndarray) -> complex:
    """
    Euclidean inner product <u, v> over components AND grid points.

    The first argument is conjugated. Metric-weighted products are formed by
    the caller as inner_product(u, contract(g, v)).
    """
    u = np.asarray(u)
    v = np.asarray(v)
    if u.shape != v.shape:
        raise ValueError(f"Shape mismatch in inner product: {u.shape} vs {v.shape}")
    return np.vdot(u, v)


def delta_field(vector: Sequence[complex], dims: Tuple[int, ...]) -> np.ndarray:
    """
    Dense vector field equal to `vector` at grid index 0 and zero elsewhere.

    Args:
        vector: (N,) components
        dims: grid shape (d_1, ..., d_N)

    Returns:
        complex array (N,) + dims
    """
    vector = np.asarray(vector, dtype=complex)
    dims = tuple(int(d) for d in dims)
    if vector.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {vector.shape}")
    field = np.zeros((vector.shape[0],) + dims, dtype=complex)
    field[(slice(None),) + (0,) * len(dims)] = vector
    return field


def identity_tensor_field(ndims: int, dims: Tuple[int, ...]) -> np.ndarray:
    """δ_ij at every grid point, shape (N, N) + dims."""
    dims = tuple(int(d) for d in dims)
    eye = np.eye(ndims)
    return np.broadcast_to(eye.reshape((ndims, ndims) + (1,) * len(dims)),
                           (ndims, ndims) + dims).copy()
