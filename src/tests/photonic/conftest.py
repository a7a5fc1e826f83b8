"""Pytest configuration for photonic tests: path setup and metric fixtures."""
import sys
from pathlib import Path

import numpy as np
import pytest

src_root = Path(__file__).parent.parent.parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from photonic.geometry import Geometry, build_inclusion_geometry
from photonic.metric import RetardedMetric, identity_metric, scaled_metric


@pytest.fixture
def golden_metric(alternating_geometry):
    """Identity metric over B = [1, 0, 1, 0]."""
    return identity_metric(alternating_geometry)


@pytest.fixture
def negative_metric(alternating_geometry):
    """-δ_ij everywhere: every norm flips sign."""
    return scaled_metric(alternating_geometry, -1.0)


@pytest.fixture
def disk_metric(disk_geometry):
    """Nonretarded (identity) metric over the 8x8 disk."""
    return identity_metric(disk_geometry)


@pytest.fixture
def retarded_metric():
    """Indefinite retarded metric for a 2D disk, small q and k."""
    geometry = build_inclusion_geometry((8, 8), radius=0.3)
    return RetardedMetric(geometry, wavenumber=1.5, wavevector=[0.4, 0.1], epsilon=2.0)


@pytest.fixture
def unit_point_metric():
    """1-point grid with B = 1: the operator is the identity."""
    return identity_metric(Geometry(np.array([1.0])))


@pytest.fixture
def graded_metric(graded_geometry):
    """Identity metric over a graded characteristic function."""
    return identity_metric(graded_geometry)
