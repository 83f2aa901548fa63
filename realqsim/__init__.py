# realqsim/__init__.py
"""Dense real-amplitude state-vector simulator: matrices, H/CNOT, measurement."""

__version__ = "0.1.0"

from .errors import (QsimError, InvalidShape, DimensionMismatch, InvalidState,
                     IndexOutOfRange, CollapseError)
from .matrix import Matrix, tensor_product, dot_product, transpose
from .state import StateVector, EPSILON, seed
from .apply import apply_H, apply_CNOT
