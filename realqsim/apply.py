# realqsim/apply.py
import logging
from .errors import IndexOutOfRange
from .matrix import dot_product, transpose
from .state import StateVector
from . import gates as G

logger = logging.getLogger(__name__)


def _check_qubit(state: StateVector, k: int, what: str = "qubit"):
    if not 0 <= k < state.n:
        raise IndexOutOfRange(f"{what} index {k} out of range for a {state.n}-qubit register")


def apply_H(state: StateVector, k: int) -> StateVector:
    """Hadamard on qubit k (little-endian: bit k). Returns a new state."""
    _check_qubit(state, k)
    op = G.expand(G.H(), k, state.n)
    logger.debug("H on qubit %d via %dx%d operator", k, op.rows, op.cols)
    col = dot_product(op, transpose(state.to_row_matrix()))
    return StateVector.from_row(transpose(col))


def apply_CNOT(state: StateVector, control: int, target: int) -> StateVector:
    """Flip `target` on every basis state whose `control` bit is 1. Returns a new state."""
    _check_qubit(state, control, "control")
    _check_qubit(state, target, "target")
    if control == target:
        raise IndexOutOfRange(f"control and target must differ, both are {control}")
    out = state.copy()
    mt = 1 << target
    for i in range(len(out)):
        if (i >> control) & 1:
            j = i ^ mt
            if i < j:
                out.swap_basis(i, j)
    return out
