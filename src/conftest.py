"""
Pytest Configuration
====================

Automatically loaded by pytest. Puts src/ on sys.path so grid_math and
photonic import without installation, and provides the small geometries
shared by the grid_math and photonic suites.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import numpy as np
import pytest

src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


def pytest_configure(config):
    """Add src/ to path before any test imports happen."""
    if str(src_root) not in sys.path:
        sys.path.insert(0, str(src_root))


@pytest.fixture
def alternating_geometry():
    """1D, 4-point cell with B = [1, 0, 1, 0]."""
    from photonic.geometry import Geometry
    return Geometry(np.array([1.0, 0.0, 1.0, 0.0]))


@pytest.fixture
def disk_geometry():
    """2D 8x8 cell with a centered disk of radius 0.3."""
    from photonic.geometry import build_inclusion_geometry
    return build_inclusion_geometry((8, 8), radius=0.3)


@pytest.fixture
def rng():
    """Seeded generator for reproducible random fields."""
    return np.random.default_rng(42)


@pytest.fixture
def graded_geometry():
    """2D 8x8 cell with B uniformly random in [0, 1] (rich spectrum)."""
    from photonic.geometry import Geometry
    return Geometry(np.random.default_rng(7).uniform(0.0, 1.0, (8, 8)))
