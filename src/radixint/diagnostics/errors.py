"""radixint exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also subclasses the builtin exception a caller would
expect from the equivalent builtin operation (ValueError for a bad base,
ZeroDivisionError for a zero divisor, and so on).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DivisionByZeroError",
    "InputTypeError",
    "InvalidBaseError",
    "InvalidDigitError",
    "OperandTypeError",
    "RadixIntError",
]


class RadixIntError(Exception):
    """Base exception for all radixint errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RadixIntError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidBaseError(RadixIntError, ValueError):
    """Base outside the range accepted by an operation.

    Never clamped: the operation fails before any computation.

    Attributes:
        base: The rejected base value
        minimum: Smallest base the operation accepts
        maximum: Largest base the operation accepts, or None if unbounded
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        base: object,
        minimum: int,
        maximum: int | None = None,
    ) -> None:
        super().__init__(message)
        self.base = base
        self.minimum = minimum
        self.maximum = maximum


class InvalidDigitError(RadixIntError, ValueError):
    """Digit value in a digit sequence is not valid for the base.

    Attributes:
        digit: The offending digit value
        base: The base of the digit sequence
    """

    def __init__(self, message: str | Diagnostic, *, digit: object, base: int) -> None:
        super().__init__(message)
        self.digit = digit
        self.base = base


class DivisionByZeroError(RadixIntError, ZeroDivisionError):
    """Zero divisor in floor_div, mod or a truncating primitive.

    Attributes:
        dividend: The dividend of the rejected operation
    """

    def __init__(self, message: str | Diagnostic, *, dividend: int) -> None:
        super().__init__(message)
        self.dividend = dividend


class OperandTypeError(RadixIntError, ArithmeticError, TypeError):
    """Arithmetic operand is not an integer.

    Catchable both as ArithmeticError and as TypeError.

    Attributes:
        operand: The rejected operand
    """

    def __init__(self, message: str | Diagnostic, *, operand: object) -> None:
        super().__init__(message)
        self.operand = operand


class InputTypeError(RadixIntError, TypeError):
    """Parser input is neither str nor bytes."""
