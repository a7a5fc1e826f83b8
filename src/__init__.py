"""
Haydock Retarded Source Code
============================

Generalized Haydock (Lanczos) recurrence for the retarded response of a
two-component periodic medium. The states live on a reciprocal-space grid
and are orthogonalized under a possibly indefinite metric g(k+G).

Layers (imports only flow downward):
    grid_math - Periodic-grid numerics, NO physics
                (FFT pair over spatial axes, tensor fields, G vectors)
    photonic  - Physics layer
                (geometry B(r), metric providers, operator F[B F⁻¹[g ψ]],
                 RetardedOneH single-step engine, AllH collector)
    scripts   - Runnable studies (01_haydock_coefficients.py)
    tests     - Test suite (run_tests.py)

Requirements:
    Python >= 3.9
    numpy >= 1.20   (np.random.Generator fixtures, einsum over '...')
    scipy >= 1.11   (scipy.fft fftn/ifftn with axes= and norm=)
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"haydock-retarded requires Python >= 3.9, got {sys.version}")


def _version(text):
    return tuple(int(p) for p in text.split('.')[:2] if p.isdigit())


# scipy version check (reciprocal-space transforms go through scipy.fft)
import scipy
if _version(scipy.__version__) < (1, 11):
    raise ImportError(
        f"haydock-retarded requires scipy >= 1.11 for scipy.fft, got {scipy.__version__}")

# numpy version check
import numpy as np
if _version(np.__version__) < (1, 20):
    raise ImportError(
        f"haydock-retarded requires numpy >= 1.20 for the grid arrays, got {np.__version__}")
