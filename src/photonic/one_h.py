"""
Retarded Haydock Recurrence, One Step at a Time
===============================================

Generates the Haydock coefficients and states for the retarded dielectric
function of a periodic two-component medium, in any number of dimensions,
one coefficient at a time.

THEORY:
    With a possibly indefinite metric g, the Haydock states satisfy

        b_{n+1} ψ_{n+1} = Oψ_n - a_n ψ_n - c_n ψ_{n-1}

    with <ψ_n, ψ_n>_g = g_n = ±1 and

        a_n     = g_n Re<gψ_n, Oψ_n>
        b²_{n+1} = Re<Oψ_n, gOψ_n> - g_n a_n² - g_{n-1} b²_n
        g_{n+1} = sign(b²_{n+1}),  b²_{n+1} <- |b²_{n+1}|
        c_{n+1} = g_{n+1} g_n b_{n+1}

    The recurrence starts from the zero-wavevector state ψ_0 = e δ_{G0}
    (uniform macroscopic field along the polarization e), normalized
    under the metric.

TERMINATION:
    b²_{n+1} <= small means the generated state is numerically null; the
    next state becomes None and step() returns False from then on. This is
    the normal end of a recurrence, not an error.

    A raw (pre sign-correction) b²_{n+1} < -small is reported as
    NumericalPrecisionWarning and the recurrence continues.

Usage:
    oh = RetardedOneH(metric, polarization=[1, 0, 0])
    while oh.step():
        print(oh.iteration, oh.current_a, oh.next_b2)

Jan 2026
"""

import warnings
import numpy as np
from typing import Optional, Sequence

from grid_math.tensors import contract, delta_field, inner_product

from .constants import DEFAULT_SMALL
from .errors import (
    InvalidArgumentError,
    DegenerateInputError,
    NumericalPrecisionWarning,
)
from .operator import apply_operator, check_metric_shapes


def _frozen(field: Optional[np.ndarray]) -> Optional[np.ndarray]:
    if field is not None:
        field.setflags(write=False)
    return field


class RetardedOneH:
    """
    Incremental Haydock recurrence over one metric and one polarization.

    Read-only surface; step() is the only mutating call.

    Window after each successful step():
        previous_state = state that was current before the call
        current_state  = state that was next before the call (ψ_n)
        next_state     = ψ_{n+1}, or None once terminated
    Scalars follow the same window: current_* belong to ψ_n, next_* to
    ψ_{n+1}; current_a is a_n.
    """

    def __init__(self, metric, polarization: Sequence[complex],
                 small: float = DEFAULT_SMALL):
        """
        Initialize recurrence and build the normalized seed state.

        Args:
            metric: provider with ndims, dims, characteristic_field, tensor_field
            polarization: (N,) non-null complex direction of the macroscopic field
            small: tolerance >= 0 ending the recurrence

        Raises:
            InvalidArgumentError: wrong polarization, bad tolerance or
                inconsistent metric shapes
            DegenerateInputError: seed has zero norm under the metric
        """
        check_metric_shapes(metric)
        if not np.isfinite(small) or small < 0:
            raise InvalidArgumentError(f"small must be a finite number >= 0, got {small}")

        ndims = int(metric.ndims)
        dims = tuple(metric.dims)
        e = np.array(polarization, dtype=complex)
        if e.shape != (ndims,):
            raise InvalidArgumentError(
                f"Polarization has wrong dimensions {e.shape}. "
                f"Should be a {ndims}-dimensional complex vector.")
        if not np.all(np.isfinite(e)):
            raise InvalidArgumentError("Polarization has non-finite components")
        modulus2 = float(np.sum(np.abs(e) ** 2))
        if not modulus2 > 0:
            raise InvalidArgumentError("Polarization should be non null")
        e = e / np.sqrt(modulus2)

        phi = delta_field(e, dims)
        gphi = contract(metric.tensor_field, phi)
        b2 = inner_product(phi, gphi).real
        if b2 == 0:
            raise DegenerateInputError(
                "Seed state has zero norm under the metric; cannot normalize")
        g = 1
        if b2 < 0:
            g, b2 = -1, -b2
        b = np.sqrt(b2)

        self._metric = metric
        self._polarization = _frozen(e)
        self._small = float(small)
        self._ndims = ndims
        self._dims = dims

        self._previous_state = _frozen(np.zeros_like(phi))
        self._current_state = _frozen(np.zeros_like(phi))
        self._next_state = _frozen(phi / b)

        self._current_a = None
        self._current_b2 = None
        self._current_b = None
        self._current_c = None
        self._current_g = None
        self._next_b2 = float(b2)
        self._next_b = float(b)
        self._next_c = 0.0
        self._next_g = g
        self._iteration = 0

    # -----------------------------------------------------------------
    # Read-only accessors
    # -----------------------------------------------------------------

    @property
    def metric(self):
        return self._metric

    @property
    def polarization(self) -> np.ndarray:
        """Unit (Euclidean) polarization used to build the seed."""
        return self._polarization

    @property
    def small(self) -> float:
        return self._small

    @property
    def ndims(self) -> int:
        return self._ndims

    @property
    def dims(self) -> tuple:
        return self._dims

    @property
    def iteration(self) -> int:
        """Number of completed steps."""
        return self._iteration

    @property
    def previous_state(self) -> np.ndarray:
        return self._previous_state

    @property
    def current_state(self) -> np.ndarray:
        return self._current_state

    @property
    def next_state(self) -> Optional[np.ndarray]:
        return self._next_state

    @property
    def current_a(self) -> Optional[float]:
        return self._current_a

    @property
    def current_b2(self) -> Optional[float]:
        return self._current_b2

    @property
    def next_b2(self) -> float:
        return self._next_b2

    @property
    def current_b(self) -> Optional[float]:
        return self._current_b

    @property
    def next_b(self) -> float:
        return self._next_b

    @property
    def current_c(self) -> Optional[float]:
        return self._current_c

    @property
    def next_c(self) -> float:
        return self._next_c

    @property
    def current_g(self) -> Optional[int]:
        return self._current_g

    @property
    def next_g(self) -> int:
        return self._next_g

    @property
    def terminated(self) -> bool:
        """True once no next state can be generated."""
        return self._next_state is None

    # -----------------------------------------------------------------
    # Recurrence
    # -----------------------------------------------------------------

    def step(self) -> bool:
        """
        Perform a single Haydock iteration.

        Computes a_n, b²_{n+1}, b_{n+1}, c_{n+1}, g_{n+1} and ψ_{n+1} from
        the current window, then shifts the window.

        Returns:
            True if the recurrence advanced, False if there was no next
            state (nothing changes in that case).
        """
        if self._next_state is None:
            return False

        # Shifted window, held in locals until everything is computed
        psi_nm1 = self._current_state
        psi_n = self._next_state
        b2_n, b_n = self._next_b2, self._next_b
        c_n, g_n = self._next_c, self._next_g
        # No state precedes the seed, so its g contributes nothing
        g_nm1 = 0 if self._current_g is None else self._current_g

        gpsi_n, opsi_n, gopsi_n = apply_operator(psi_n, self._metric)

        a_n = g_n * inner_product(gpsi_n, opsi_n).real
        norm2 = inner_product(opsi_n, gopsi_n).real

        # Three-term orthogonalization under the indefinite metric
        b2_np1 = norm2 - g_n * a_n ** 2 - g_nm1 * b2_n
        g_np1 = 1
        if b2_np1 < 0:
            if b2_np1 < -self._small:
                warnings.warn(
                    f"next_b2={b2_np1:.6g} is too negative (small={self._small:.3g}) "
                    f"at iteration {self._iteration}",
                    NumericalPrecisionWarning,
                    stacklevel=2
                )
            g_np1, b2_np1 = -1, -b2_np1
        b_np1 = np.sqrt(b2_np1)
        c_np1 = g_np1 * g_n * b_np1

        next_state = None
        if b2_np1 > self._small:
            next_state = (opsi_n - a_n * psi_n - c_n * psi_nm1) / b_np1

        # Commit
        self._previous_state = psi_nm1
        self._current_state = psi_n
        self._next_state = _frozen(next_state)
        self._current_b2, self._current_b = b2_n, b_n
        self._current_c, self._current_g = c_n, g_n
        self._current_a = float(a_n)
        self._next_b2 = float(b2_np1)
        self._next_b = float(b_np1)
        self._next_c = float(c_np1)
        self._next_g = g_np1
        self._iteration += 1
        return True

    def __repr__(self):
        return (f"RetardedOneH(dims={self._dims}, iteration={self._iteration}, "
                f"terminated={self.terminated})")
