# realqsim/state.py
import logging
import math
import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
from .errors import InvalidState, IndexOutOfRange, CollapseError
from .matrix import Matrix

logger = logging.getLogger(__name__)

EPSILON = 1e-3          # normalization / default equality tolerance
COLLAPSE_FLOOR = 1e-12  # smallest surviving squared norm we renormalize by

_rng = np.random.default_rng()


def seed(value: Optional[int] = None):
    """Reseed the process-wide generator used by measure() when no rng is given."""
    global _rng
    _rng = np.random.default_rng(value)


@dataclass(eq=False)
class StateVector:
    psi: np.ndarray  # shape (2**n,), dtype float64

    def __post_init__(self):
        self.psi = np.array(self.psi, dtype=np.float64)
        self.check_valid()

    @classmethod
    def from_computed(cls, amplitudes: Union[Sequence[float], np.ndarray]) -> "StateVector":
        return cls(amplitudes)

    @classmethod
    def from_row(cls, row: Union[Matrix, Sequence[float]]) -> "StateVector":
        """Build a state from a 1 x N matrix (or a flat row of amplitudes)."""
        if isinstance(row, Matrix):
            if row.rows != 1:
                raise InvalidState(f"Expected a 1 x N row matrix, got shape {row.shape}")
            row = row.m[0]
        return cls(row)

    @staticmethod
    def zero(n: int) -> "StateVector":
        psi = np.zeros(1 << n, dtype=np.float64)
        psi[0] = 1.0
        return StateVector(psi)

    def check_valid(self, tol: float = EPSILON):
        """Raise InvalidState unless the amplitudes are normalized and 2**n long."""
        if self.psi.ndim != 1:
            raise InvalidState(f"Invalid Quantum State Vector! Expected a flat vector, got shape {self.psi.shape}")
        N = self.psi.shape[0]
        if N & (N - 1) != 0:
            raise InvalidState(f"Invalid Quantum State Vector! Length {N} is not a power of two.")
        n2 = self.norm2()
        if not abs(n2 - 1.0) < tol:
            logger.debug("rejected state: norm is %s", n2)
            raise InvalidState(f"Invalid Quantum State Vector! The sum of states^2 is not 1 (norm is {n2}).")

    @property
    def n(self) -> int:
        return len(self.psi).bit_length() - 1

    def __len__(self):
        return self.psi.shape[0]

    def length(self) -> int:
        return len(self)

    def __getitem__(self, i):
        return float(self.psi[i])

    def norm2(self) -> float:
        return float(np.dot(self.psi, self.psi))

    def probabilities(self) -> np.ndarray:
        return self.psi ** 2

    def copy(self) -> "StateVector":
        return StateVector(self.psi)

    def as_numpy(self) -> np.ndarray:
        return self.psi

    def swap_basis(self, i: int, j: int):
        """Exchange amplitudes i and j in place. Gates call this on their own copy."""
        self.psi[i], self.psi[j] = self.psi[j], self.psi[i]

    def to_row_matrix(self) -> Matrix:
        return Matrix([self.psi])

    def isclose(self, other: "StateVector", tol: float = EPSILON) -> bool:
        """Element-wise comparison; every amplitude must differ by less than tol."""
        if len(self) != len(other):
            return False
        return bool(np.all(np.abs(self.psi - other.psi) < tol))

    def __eq__(self, other):
        if not isinstance(other, StateVector):
            return NotImplemented
        return self.isclose(other)

    __hash__ = None

    def measure(self, target: int, rng=None) -> Tuple[int, "StateVector"]:
        """Measure qubit `target` and collapse.

        Returns (bit, state). The returned state keeps all 2**n amplitudes:
        the branch that was not observed is zeroed and the rest renormalized.
        `rng` is anything with a ``random()`` method returning a float in
        [0, 1); the module generator (see ``seed``) is used when omitted.
        """
        N = len(self)
        # NOTE: bound is target**2, not target >= n
        if target < 0 or target ** 2 >= N:
            raise IndexOutOfRange(f"Target index out of bounds: {target}")

        idx = np.arange(N)
        ones = ((idx >> target) & 1).astype(bool)
        probs = self.probabilities()
        p0 = float(probs[~ones].sum())
        p1 = float(probs[ones].sum())

        r = float((rng if rng is not None else _rng).random())
        bit = 0 if r < p0 else 1

        keep = ones if bit else ~ones
        psi = np.where(keep, self.psi, 0.0)
        total = float(np.dot(psi, psi))
        if total < COLLAPSE_FLOOR:
            raise CollapseError(
                f"Cannot renormalize after measuring qubit {target} = {bit}: surviving norm is {total}"
            )
        psi /= math.sqrt(total)
        logger.debug("measured qubit %d -> %d (p0=%.5f, p1=%.5f, r=%.5f)", target, bit, p0, p1, r)
        return bit, StateVector.from_computed(psi)

    def __str__(self):
        N = len(self)
        width = math.ceil(math.log2(N)) if N > 1 else 0
        terms = [f"({a:.5f})|{format(i, 'b').zfill(width)}>" for i, a in enumerate(self.psi)]
        return "ψ = " + "   ".join(terms)
