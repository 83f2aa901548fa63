# realqsim/demo.py
import argparse, logging
from collections import Counter
import numpy as np
from .state import StateVector
from .apply import apply_H, apply_CNOT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------

def bell_state() -> StateVector:
    # |00> -> H on qubit 1 -> CNOT(1 -> 0) = (|00> + |11>)/sqrt(2)
    psi = apply_H(StateVector.zero(2), 1)
    return apply_CNOT(psi, 1, 0)

def run_hadamard(n, target, rng):
    psi = apply_H(StateVector.zero(n), target)
    print(f"Hadamard on |{'0' * n}>: {psi}")
    bit, psi = psi.measure(target, rng=rng)
    print(f"Measured bit: {bit}")
    print(f"Post-measurement state: {psi}")
    return 0

def run_bell(trials, rng):
    psi = bell_state()
    print(f"Bell state: {psi}")
    tally = Counter()
    for _ in range(trials):
        b1, after = psi.measure(1, rng=rng)
        b0, _ = after.measure(0, rng=rng)
        tally[(b1, b0)] += 1
    for (b1, b0), count in sorted(tally.items()):
        print(f"  q1={b1} q0={b0}: {count}")
    mismatched = sum(c for (b1, b0), c in tally.items() if b1 != b0)
    if mismatched:
        logger.error("%d of %d Bell trials disagreed", mismatched, trials)
        return 1
    print(f"✓ {trials} trials, qubits always agreed.")
    return 0

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="realqsim demo circuits")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_h = sub.add_parser("hadamard")
    p_h.add_argument("--qubits", type=int, default=2)
    p_h.add_argument("--target", type=int, default=0)
    p_h.add_argument("--seed", type=int, default=None)

    p_bell = sub.add_parser("bell")
    p_bell.add_argument("--trials", type=int, default=100)
    p_bell.add_argument("--seed", type=int, default=None)

    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    rng = np.random.default_rng(args.seed)

    if args.cmd == "hadamard":
        return run_hadamard(args.qubits, args.target, rng)
    elif args.cmd == "bell":
        return run_bell(args.trials, rng)

if __name__ == "__main__":
    raise SystemExit(main())
