# realqsim/tests/test_measure.py
import numpy as np
import pytest
from realqsim import state as state_mod
from realqsim.apply import apply_H, apply_CNOT
from realqsim.errors import IndexOutOfRange, CollapseError
from realqsim.state import StateVector

S = 1 / np.sqrt(2)

class FixedRNG:
    def __init__(self, r):
        self.r = r
    def random(self):
        return self.r

def bell():
    return apply_CNOT(apply_H(StateVector.zero(2), 1), 1, 0)

def test_outcome_follows_sample():
    psi = apply_H(StateVector.zero(2), 0)
    bit, after = psi.measure(0, rng=FixedRNG(0.25))
    assert bit == 0
    assert np.allclose(after.as_numpy(), [1.0, 0.0, 0.0, 0.0])
    bit, after = psi.measure(0, rng=FixedRNG(0.75))
    assert bit == 1
    assert np.allclose(after.as_numpy(), [0.0, 1.0, 0.0, 0.0])

def test_collapse_keeps_full_length_and_renormalizes():
    psi = StateVector([0.5, 0.5, 0.5, 0.5])
    bit, after = psi.measure(1, rng=FixedRNG(0.9))
    assert bit == 1
    assert len(after) == 4
    assert np.allclose(after.as_numpy(), [0.0, 0.0, S, S])
    assert abs(after.norm2() - 1.0) < 1e-12

def test_measure_does_not_mutate_input():
    psi = apply_H(StateVector.zero(1), 0)
    before = psi.as_numpy().copy()
    psi.measure(0, rng=FixedRNG(0.1))
    assert np.array_equal(psi.as_numpy(), before)

def test_bell_qubits_always_agree():
    rng = np.random.default_rng(2024)
    psi = bell()
    seen = set()
    for _ in range(200):
        b1, after = psi.measure(1, rng=rng)
        b0, _ = after.measure(0, rng=rng)
        assert b1 == b0
        seen.add(b1)
    assert seen == {0, 1}

def test_seeded_default_generator_is_reproducible():
    psi = apply_H(StateVector.zero(3), 2)
    state_mod.seed(7)
    first = [psi.measure(2)[0] for _ in range(20)]
    state_mod.seed(7)
    second = [psi.measure(2)[0] for _ in range(20)]
    assert first == second

def test_outcome_frequencies():
    rng = np.random.default_rng(0)
    psi = StateVector([0.6, 0.8])
    ones = sum(psi.measure(0, rng=rng)[0] for _ in range(2000))
    assert abs(ones / 2000 - 0.64) < 0.05

def test_bound_check_uses_square_of_target():
    with pytest.raises(IndexOutOfRange):
        StateVector.zero(2).measure(2)
    with pytest.raises(IndexOutOfRange):
        StateVector.zero(3).measure(3)
    with pytest.raises(IndexOutOfRange):
        StateVector.zero(2).measure(-1)
    # 5**2 < 32: accepted even though a 5-qubit register has no qubit 5
    psi = StateVector.zero(5)
    bit, after = psi.measure(5, rng=FixedRNG(0.99))
    assert bit == 0
    assert after == psi

def test_zero_denominator_is_an_error():
    # a sampler returning 1.0 picks the empty branch
    with pytest.raises(CollapseError):
        StateVector([1.0, 0.0]).measure(0, rng=FixedRNG(1.0))

def test_outcome_compares_sample_to_raw_p0():
    # p0 = 0.9998**2 ~ 0.9996, accepted as normalized
    psi = StateVector([0.9998, 0.0])
    bit, after = psi.measure(0, rng=FixedRNG(0.5))
    assert bit == 0
    assert np.allclose(after.as_numpy(), [1.0, 0.0])
    # a sample above p0 lands on the empty branch
    with pytest.raises(CollapseError):
        psi.measure(0, rng=FixedRNG(0.9997))
