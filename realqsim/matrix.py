# realqsim/matrix.py
import numpy as np
from typing import Sequence, Union
from .errors import InvalidShape, DimensionMismatch

Rows = Union[Sequence[Sequence[float]], np.ndarray]


def _check_rows(rows: Rows) -> np.ndarray:
    if isinstance(rows, Matrix):
        return rows.m
    if not isinstance(rows, np.ndarray):
        try:
            rows = [list(r) for r in rows]
        except TypeError as e:
            raise InvalidShape("Invalid Matrix! Expected a sequence of rows.") from e
        width = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != width:
                raise InvalidShape(
                    f"Invalid Matrix! All rows must have the same length "
                    f"(row 0 has {width}, row {i} has {len(r)})."
                )
    try:
        m = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidShape("Invalid Matrix! Entries must be real numbers.") from e
    if m.ndim != 2 or m.shape[0] == 0 or m.shape[1] == 0:
        raise InvalidShape(f"Invalid Matrix! Expected a non-empty 2-D array, got shape {m.shape}")
    return m


class Matrix:
    """Dense real matrix, row-major. Immutable: operations return new matrices."""

    __slots__ = ("m",)

    def __init__(self, rows: Rows):
        m = _check_rows(rows)
        m.setflags(write=False)
        self.m = m

    @staticmethod
    def identity(size: int) -> "Matrix":
        if size < 1:
            raise InvalidShape(f"identity size must be >= 1, got {size}")
        return Matrix(np.eye(size, dtype=np.float64))

    @staticmethod
    def hadamard() -> "Matrix":
        s = np.sqrt(0.5)
        return Matrix([[s, s],
                       [s, -s]])

    @property
    def shape(self):
        return self.m.shape

    @property
    def rows(self) -> int:
        return self.m.shape[0]

    @property
    def cols(self) -> int:
        return self.m.shape[1]

    def __getitem__(self, idx):
        out = self.m[idx]
        return float(out) if np.ndim(out) == 0 else out

    def tolist(self):
        return self.m.tolist()

    def as_numpy(self) -> np.ndarray:
        return self.m

    def isclose(self, other: "Matrix", tol: float = 1e-9) -> bool:
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self.m, other.m, atol=tol, rtol=0))

    def __repr__(self):
        return f"Matrix({self.tolist()!r})"

    def __str__(self):
        return "\n".join(" ".join(f"{v:.2f}" for v in row) for row in self.m)


def tensor_product(a: Matrix, b: Matrix) -> Matrix:
    """Kronecker product: a[i][j]*b[k][l] lands at (i*r2 + k, j*c2 + l)."""
    return Matrix(np.kron(a.m, b.m))


def dot_product(a: Matrix, b: Matrix) -> Matrix:
    if a.cols != b.rows:
        raise DimensionMismatch(
            f"The number of columns in a ({a.cols}) must match the number of rows in b ({b.rows})."
        )
    return Matrix(a.m @ b.m)


def transpose(a: Matrix) -> Matrix:
    return Matrix(a.m.T)
