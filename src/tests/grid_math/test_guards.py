"""
Guard and Edge Case Tests for grid_math
=======================================

Boundary conditions for the transform pair and tensor helpers, kept apart
from the main suites so those stay focused on invariants.

Run: python -m pytest tests/grid_math/test_guards.py -v
"""

import numpy as np
import pytest

from grid_math.tensors import delta_field, identity_tensor_field, contract
from grid_math.transforms import forward_transform, inverse_transform


# =============================================================================
# P1: single-point and degenerate grids
# =============================================================================

def test_single_point_grid_transform_is_identity():
    """P1.1: A 1-point grid transforms to itself exactly."""
    x = np.array([[2.0 + 1.0j]])
    assert forward_transform(x, 1)[0, 0] == x[0, 0]
    assert inverse_transform(x, 1)[0, 0] == x[0, 0]


def test_two_point_grid_is_exact():
    """P1.2: Size-2 transforms are a sum/difference, no rounding."""
    x = np.array([1.0, 0.0], dtype=complex)
    back = inverse_transform(x, 1)
    assert np.array_equal(back, np.array([0.5, 0.5], dtype=complex))
    assert np.array_equal(forward_transform(back * 0.5, 1), np.array([0.5, 0.0], dtype=complex))


# =============================================================================
# P2: tensor helpers
# =============================================================================

def test_identity_tensor_field_is_writable_copy():
    """P2.1: identity_tensor_field returns an independent array."""
    g = identity_tensor_field(2, (3,))
    g[0, 0, 0] = 5.0
    assert identity_tensor_field(2, (3,))[0, 0, 0] == 1.0


def test_contract_promotes_to_complex():
    """P2.2: Real metric times complex state stays complex."""
    g = identity_tensor_field(1, (2,))
    v = delta_field([1j], (2,))
    assert np.iscomplexobj(contract(g, v))


def test_delta_field_accepts_list_dims():
    """P2.3: dims given as a list behaves like a tuple."""
    assert delta_field([1.0, 0.0], [2, 2]).shape == (2, 2, 2)


@pytest.mark.parametrize("ndims", [1, 2, 3])
def test_identity_tensor_field_shape(ndims):
    """P2.4: (N, N) + dims layout."""
    dims = (2,) * ndims
    assert identity_tensor_field(ndims, dims).shape == (ndims, ndims) + dims
