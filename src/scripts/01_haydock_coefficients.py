#!/usr/bin/env python3
"""
HAYDOCK COEFFICIENTS - Inclusion in a Periodic Cell
===================================================

Goal: Generate the retarded Haydock coefficients (a_n, b²_n, c_n, g_n) for
      a (hyper)spherical inclusion in a cubic cell and print them as a
      table, together with the Ritz values of the Haydock matrix.

SETUP
-----
    Geometry:  centered inclusion of radius R (cell units) on a grid
               of shape dims, cell period 1 along every axis
    Metric:    retarded, host ε, wavenumber q, wavevector k = 0
               (or the identity metric with --nonretarded)
    Seed:      uniform field along x (first axis)

WHAT TO LOOK FOR
----------------
    - a_0 equals the filling fraction f under the identity metric
    - g_n flips sign only for the retarded metric (indefinite inner product)
    - the recurrence stops early (b² <= small) for binary B under the
      identity metric: O is then a projector and the Krylov space is
      two dimensional

USAGE
-----
    python3 scripts/01_haydock_coefficients.py --dims 16 16 --radius 0.3
    python3 scripts/01_haydock_coefficients.py --dims 8 8 8 --nonretarded

Jan 2026
"""

import sys
import warnings
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from photonic import (
    AllH,
    NumericalPrecisionWarning,
    RetardedMetric,
    build_inclusion_geometry,
    identity_metric,
)
from photonic.constants import DEFAULT_EPSILON, DEFAULT_NH, DEFAULT_SMALL


def build_metric(args):
    """Geometry and metric from command-line arguments."""
    geometry = build_inclusion_geometry(tuple(args.dims), radius=args.radius)
    if args.nonretarded:
        return geometry, identity_metric(geometry)
    metric = RetardedMetric(geometry,
                            wavenumber=args.wavenumber,
                            wavevector=np.zeros(geometry.ndims),
                            epsilon=args.epsilon)
    return geometry, metric


def run(args):
    geometry, metric = build_metric(args)
    polarization = np.zeros(geometry.ndims, dtype=complex)
    polarization[0] = 1.0

    print("=" * 72)
    print("HAYDOCK COEFFICIENTS")
    print("=" * 72)
    print(f"Geometry: {geometry}")
    if args.nonretarded:
        print("Metric:   identity (nonretarded)")
    else:
        print(f"Metric:   retarded, ε={args.epsilon}, q={args.wavenumber}, k=0")
    print(f"nh={args.nh}, small={args.small:g}")
    print()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", NumericalPrecisionWarning)
        ah = AllH(metric, polarization, nh=args.nh, small=args.small)
        ah.run()

    print(f"{'n':>4} {'a_n':>14} {'b2_n+1':>14} {'c_n+1':>14} {'g_n+1':>6}")
    print("-" * 56)
    for n, a in enumerate(ah.as_):
        print(f"{n:>4} {a:>14.8f} {ah.b2s[n + 1]:>14.6e} "
              f"{ah.cs[n + 1]:>14.6e} {ah.gs[n + 1]:>+6d}")
    print()

    if ah.converged:
        print(f"Recurrence terminated after {ah.iteration} steps (b² <= small)")
    else:
        print(f"Stopped at nh={ah.nh} steps")
    precision = [w for w in caught if issubclass(w.category, NumericalPrecisionWarning)]
    if precision:
        print(f"NumericalPrecisionWarning raised {len(precision)} time(s)")

    T = ah.tridiagonal()
    if T.size:
        ritz = np.sort(np.linalg.eigvals(T).real)
        print(f"Ritz values: min={ritz[0]:.6f}  max={ritz[-1]:.6f}")
    print(f"Filling fraction f = {geometry.fill_fraction:.6f}")
    return ah


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description="Haydock coefficients for a periodic inclusion")
    parser.add_argument("--dims", type=int, nargs="+", default=[16, 16], help="Grid shape")
    parser.add_argument("--radius", type=float, default=0.3, help="Inclusion radius (cell units)")
    parser.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON, help="Host dielectric function")
    parser.add_argument("--wavenumber", type=float, default=1.0, help="q = ω/c")
    parser.add_argument("--nh", type=int, default=DEFAULT_NH, help="Maximum Haydock steps")
    parser.add_argument("--small", type=float, default=DEFAULT_SMALL, help="Termination tolerance")
    parser.add_argument("--nonretarded", action="store_true", help="Use the identity metric")
    run(parser.parse_args())
