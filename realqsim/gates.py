# realqsim/gates.py
from .matrix import Matrix, tensor_product

def H() -> Matrix:
    return Matrix.hadamard()

def I() -> Matrix:
    return Matrix.identity(2)

def expand(U2: Matrix, k: int, n: int) -> Matrix:
    """Lift 2x2 gate U2 on qubit k to the full 2**n x 2**n operator.

    Factors are folded from qubit n-1 down to 0 so the Kronecker row index
    bits line up with little-endian basis indices.
    """
    op = Matrix([[1.0]])
    for q in reversed(range(n)):
        op = tensor_product(op, U2 if q == k else I())
    return op
