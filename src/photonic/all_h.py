"""
Haydock Coefficient Collector
=============================

Drives RetardedOneH for up to nh steps and keeps the whole coefficient
sequence in memory (RetardedOneH itself only keeps current/next values).

Stored sequences (numpy arrays after run()):
    as_  : a_0 .. a_{n-1}                 (n = steps performed)
    b2s  : b²_0 .. b²_n                   (b²_0 is the seed norm)
    bs   : b_0  .. b_n
    cs   : c_0 = 0, c_1 .. c_n
    gs   : g_0 .. g_n
    states (optional): ψ_0 .. ψ_{n-1}

The last b²/b/c/g entry belongs to the step that ended the recurrence
when `converged` is True; it is kept so callers can see how small it was.

Jan 2026
"""

import numpy as np
from typing import List, Sequence

from .constants import DEFAULT_NH, DEFAULT_SMALL
from .errors import InvalidArgumentError
from .one_h import RetardedOneH


class AllH:
    """
    Full Haydock sequence for one metric and one polarization.

    Attributes:
        nh: maximum number of steps
        keep_states: whether ψ_n are stored
        one_h: the underlying RetardedOneH
    """

    def __init__(self, metric, polarization: Sequence[complex],
                 nh: int = DEFAULT_NH,
                 small: float = DEFAULT_SMALL,
                 keep_states: bool = False):
        if int(nh) < 1:
            raise InvalidArgumentError(f"nh must be >= 1, got {nh}")
        self.nh = int(nh)
        self.keep_states = keep_states
        self.one_h = RetardedOneH(metric, polarization, small=small)

        self._as: List[float] = []
        self._b2s: List[float] = [self.one_h.next_b2]
        self._bs: List[float] = [self.one_h.next_b]
        self._cs: List[float] = [self.one_h.next_c]
        self._gs: List[int] = [self.one_h.next_g]
        self._states: List[np.ndarray] = []

    def run(self) -> int:
        """
        Iterate until nh steps are done or the recurrence terminates.

        Returns:
            number of steps performed by this call
        """
        done = 0
        while self.one_h.iteration < self.nh and self.one_h.step():
            oh = self.one_h
            self._as.append(oh.current_a)
            self._b2s.append(oh.next_b2)
            self._bs.append(oh.next_b)
            self._cs.append(oh.next_c)
            self._gs.append(oh.next_g)
            if self.keep_states:
                self._states.append(oh.current_state)
            done += 1
        return done

    @property
    def iteration(self) -> int:
        return self.one_h.iteration

    @property
    def converged(self) -> bool:
        """True if the recurrence ended on its own (b² <= small)."""
        return self.one_h.terminated

    @property
    def as_(self) -> np.ndarray:
        return np.array(self._as, dtype=float)

    @property
    def b2s(self) -> np.ndarray:
        return np.array(self._b2s, dtype=float)

    @property
    def bs(self) -> np.ndarray:
        return np.array(self._bs, dtype=float)

    @property
    def cs(self) -> np.ndarray:
        return np.array(self._cs, dtype=float)

    @property
    def gs(self) -> np.ndarray:
        return np.array(self._gs, dtype=int)

    @property
    def states(self) -> List[np.ndarray]:
        if not self.keep_states:
            raise AttributeError("States were not kept; construct with keep_states=True")
        return list(self._states)

    def tridiagonal(self) -> np.ndarray:
        """
        Haydock matrix of the operator in the generated basis.

            T[n, n]     = a_n
            T[n + 1, n] = b_{n+1}
            T[n, n + 1] = c_{n+1}

        so that O ψ_n = c_n ψ_{n-1} + a_n ψ_n + b_{n+1} ψ_{n+1} becomes
        column n of T. For a positive definite metric c = b and T is the
        usual symmetric Lanczos matrix.

        Returns:
            (n, n) real array, n = steps performed
        """
        n = len(self._as)
        T = np.zeros((n, n))
        for i in range(n):
            T[i, i] = self._as[i]
            if i + 1 < n:
                T[i + 1, i] = self._bs[i + 1]
                T[i, i + 1] = self._cs[i + 1]
        return T
