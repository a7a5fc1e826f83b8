"""
Metric Provider Tests
=====================

Pytest tests for photonic/metric.py. Covers the provider interface consumed
by RetardedOneH and the retarded metric formula

    g_ij(G) = (ε q² δ_ij - (k+G)_i (k+G)_j) / (ε q² - |k+G|²)

Jan 2026
"""

import numpy as np
import pytest

from photonic.errors import InvalidArgumentError
from photonic.geometry import Geometry, build_inclusion_geometry
from photonic.metric import (
    ArrayMetric,
    RetardedMetric,
    identity_metric,
    scaled_metric,
)


class TestArrayMetric:
    """Provider interface and shape validation."""

    def test_interface(self, golden_metric, alternating_geometry):
        assert golden_metric.ndims == 1
        assert golden_metric.dims == (4,)
        assert np.array_equal(golden_metric.characteristic_field, alternating_geometry.B)
        assert golden_metric.tensor_field.shape == (1, 1, 4)

    def test_tensor_field_read_only(self, golden_metric):
        with pytest.raises(ValueError):
            golden_metric.tensor_field[0, 0, 0] = 2.0

    def test_wrong_shape_raises(self, alternating_geometry):
        with pytest.raises(InvalidArgumentError, match="expected"):
            ArrayMetric(alternating_geometry, np.ones((2, 2, 4)))

    def test_non_finite_raises(self, alternating_geometry):
        g = np.ones((1, 1, 4))
        g[0, 0, 2] = np.inf
        with pytest.raises(InvalidArgumentError, match="non-finite"):
            ArrayMetric(alternating_geometry, g)

    def test_scaled_metric_weights(self, disk_geometry):
        weights = np.linspace(-1.0, 1.0, 64).reshape(8, 8)
        metric = scaled_metric(disk_geometry, weights)
        assert np.allclose(metric.tensor_field[0, 0], weights)
        assert np.allclose(metric.tensor_field[1, 1], weights)
        assert np.allclose(metric.tensor_field[0, 1], 0.0)

    def test_identity_metric(self, disk_geometry):
        g = identity_metric(disk_geometry).tensor_field
        assert np.allclose(g[:, :, 3, 5], np.eye(2))


class TestRetardedMetric:
    """Retarded metric of a homogeneous host."""

    def test_symmetric(self, retarded_metric):
        g = retarded_metric.tensor_field
        assert np.allclose(g, np.swapaxes(g, 0, 1))

    def test_long_wavelength_limit(self):
        """At G = 0, k = 0 the metric is δ_ij."""
        geometry = build_inclusion_geometry((4, 4), radius=0.3)
        metric = RetardedMetric(geometry, wavenumber=1.0, wavevector=[0.0, 0.0])
        assert np.allclose(metric.tensor_field[:, :, 0, 0], np.eye(2))

    def test_formula_at_one_point(self, retarded_metric):
        geometry = retarded_metric.geometry
        k02 = retarded_metric.epsilon * retarded_metric.wavenumber ** 2
        kPG = geometry.G[:, 1, 2] + retarded_metric.wavevector
        expected = (k02 * np.eye(2) - np.outer(kPG, kPG)) / (k02 - kPG @ kPG)
        assert np.allclose(retarded_metric.tensor_field[:, :, 1, 2], expected)

    def test_longitudinal_eigenvalue_is_one(self, retarded_metric):
        """g (k+G) = k+G at every G."""
        geometry = retarded_metric.geometry
        kPG = geometry.G + retarded_metric.wavevector[:, None, None]
        gk = np.einsum('ij...,j...->i...', retarded_metric.tensor_field, kPG)
        assert np.allclose(gk, kPG)

    def test_indefinite_outside_light_cone(self, retarded_metric):
        """Transverse eigenvalue is negative for G != 0."""
        eigs = np.linalg.eigvalsh(retarded_metric.tensor_field[:, :, 1, 0])
        assert eigs.min() < 0 < eigs.max()

    def test_positive_definite_at_G0(self, retarded_metric):
        eigs = np.linalg.eigvalsh(retarded_metric.tensor_field[:, :, 0, 0])
        assert np.all(eigs > 0)

    def test_wavevector_outside_light_cone_raises(self):
        geometry = Geometry(np.zeros((4, 4)))
        with pytest.raises(InvalidArgumentError, match="propagating"):
            RetardedMetric(geometry, wavenumber=1.0, wavevector=[1.0, 0.5])

    def test_light_cone_crossing_raises(self):
        """|k+G|² = ε q² for G = 2π makes the metric singular."""
        geometry = Geometry(np.zeros(4))
        with pytest.raises(InvalidArgumentError, match="light cone"):
            RetardedMetric(geometry, wavenumber=2 * np.pi, wavevector=[0.0])

    @pytest.mark.parametrize("kwargs", [
        dict(wavenumber=0.0, wavevector=[0.0]),
        dict(wavenumber=-1.0, wavevector=[0.0]),
        dict(wavenumber=1.0, wavevector=[0.0, 0.0]),
        dict(wavenumber=1.0, wavevector=[0.0], epsilon=-1.0),
        dict(wavenumber=1.0, wavevector=[0.0], epsilon=1.0 + 1.0j),
    ])
    def test_bad_parameters(self, kwargs):
        geometry = Geometry(np.zeros(4))
        with pytest.raises(InvalidArgumentError):
            RetardedMetric(geometry, **kwargs)
