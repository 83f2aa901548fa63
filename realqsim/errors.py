# realqsim/errors.py

class QsimError(Exception):
    """Base class for every error raised by realqsim."""

class InvalidShape(QsimError, ValueError):
    """Matrix is empty or its rows have unequal lengths."""

class DimensionMismatch(QsimError, ValueError):
    """Matrix product operands have incompatible inner dimensions."""

class InvalidState(QsimError, ValueError):
    """Amplitudes are not normalized or their count is not a power of two."""

class IndexOutOfRange(QsimError, IndexError):
    """A gate or measurement got a qubit index outside the register."""

class CollapseError(QsimError, ArithmeticError):
    """Post-measurement renormalization hit a zero denominator."""
