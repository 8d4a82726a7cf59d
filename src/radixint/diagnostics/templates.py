"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _describe(value: object) -> str:
    """Short type-qualified description of a rejected value."""
    text = repr(value)
    if len(text) > 40:
        text = text[:37] + "..."
    return f"{type(value).__name__} {text}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://en.wikipedia.org/wiki"

    # =========================================================================
    # Radix errors
    # =========================================================================

    @staticmethod
    def invalid_base(
        base: int, function_name: str, minimum: int, maximum: int | None = None
    ) -> Diagnostic:
        """Base outside the range accepted by an operation.

        Args:
            base: The rejected base
            function_name: Public function that received the base
            minimum: Smallest accepted base
            maximum: Largest accepted base, or None when unbounded

        Returns:
            Diagnostic for INVALID_BASE
        """
        msg = f"invalid base {base}"
        if maximum is None:
            expected = f"integer >= {minimum}"
            hint = f"Pass a base of at least {minimum}"
        else:
            expected = f"integer in {minimum}..{maximum}"
            hint = f"Pass a base between {minimum} and {maximum}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BASE,
            message=msg,
            hint=hint,
            help_url=f"{ErrorTemplate._DOCS_BASE}/Radix",
            function_name=function_name,
            argument_name="base",
            expected_type=expected,
            received_type=str(base),
        )

    @staticmethod
    def base_not_integer(base: object, function_name: str) -> Diagnostic:
        """Base is not an int.

        Args:
            base: The rejected base value
            function_name: Public function that received the base

        Returns:
            Diagnostic for BASE_NOT_INTEGER
        """
        msg = f"invalid base {base!r}: base must be an integer"
        return Diagnostic(
            code=DiagnosticCode.BASE_NOT_INTEGER,
            message=msg,
            hint="Convert the base to int before calling",
            function_name=function_name,
            argument_name="base",
            expected_type="int",
            received_type=_describe(base),
        )

    # =========================================================================
    # Digit errors
    # =========================================================================

    @staticmethod
    def invalid_digit(digit: int, base: int) -> Diagnostic:
        """Digit value not representable in the base.

        Args:
            digit: The offending digit value
            base: The base of the digit sequence

        Returns:
            Diagnostic for INVALID_DIGIT
        """
        msg = f"invalid digit {digit} in base {base}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGIT,
            message=msg,
            hint=f"Every digit in base {base} must be less than {base}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/Positional_notation",
            function_name="undigits",
            argument_name="digits",
            expected_type=f"digit < {base}",
            received_type=str(digit),
        )

    @staticmethod
    def digit_not_integer(digit: object) -> Diagnostic:
        """Digit sequence element is not an int.

        Args:
            digit: The rejected element

        Returns:
            Diagnostic for DIGIT_NOT_INTEGER
        """
        msg = f"invalid digit {digit!r}: digits must be integers"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_NOT_INTEGER,
            message=msg,
            hint="Pass a sequence of int digit values",
            function_name="undigits",
            argument_name="digits",
            expected_type="int",
            received_type=_describe(digit),
        )

    @staticmethod
    def digits_not_iterable(value: object) -> Diagnostic:
        """Digit argument is not an iterable of digits.

        Args:
            value: The rejected argument

        Returns:
            Diagnostic for DIGITS_NOT_ITERABLE
        """
        msg = f"cannot read digits from {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.DIGITS_NOT_ITERABLE,
            message=msg,
            hint="Pass a list or other iterable of int digit values",
            function_name="undigits",
            argument_name="digits",
            expected_type="Iterable[int]",
            received_type=_describe(value),
        )

    # =========================================================================
    # Arithmetic errors
    # =========================================================================

    @staticmethod
    def division_by_zero(dividend: int, function_name: str) -> Diagnostic:
        """Zero divisor passed to a division or modulo operation.

        Args:
            dividend: The dividend of the rejected operation
            function_name: Public function that received the divisor

        Returns:
            Diagnostic for DIVISION_BY_ZERO
        """
        msg = f"bad argument in arithmetic expression: {function_name}({dividend}, 0)"
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message=msg,
            hint="The divisor must be a non-zero integer",
            help_url=f"{ErrorTemplate._DOCS_BASE}/Modulo_operation",
            function_name=function_name,
            argument_name="divisor",
            expected_type="non-zero int",
            received_type="0",
        )

    @staticmethod
    def operand_not_integer(
        operand: object, argument_name: str, function_name: str
    ) -> Diagnostic:
        """Arithmetic operand is not an int.

        Args:
            operand: The rejected operand
            argument_name: Name of the argument that held the operand
            function_name: Public function that received the operand

        Returns:
            Diagnostic for OPERAND_NOT_INTEGER
        """
        msg = f"bad argument in arithmetic expression: {argument_name}={operand!r} is not an integer"
        return Diagnostic(
            code=DiagnosticCode.OPERAND_NOT_INTEGER,
            message=msg,
            hint="Integer operations accept int operands only (bool is rejected)",
            function_name=function_name,
            argument_name=argument_name,
            expected_type="int",
            received_type=_describe(operand),
        )

    # =========================================================================
    # Parsing errors
    # =========================================================================

    @staticmethod
    def input_not_text(value: object) -> Diagnostic:
        """Parser input is neither str nor bytes.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for INPUT_NOT_TEXT
        """
        msg = f"cannot parse an integer from {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_TEXT,
            message=msg,
            hint="Pass a str or bytes buffer",
            function_name="parse_integer",
            argument_name="text",
            expected_type="str | bytes",
            received_type=_describe(value),
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character read past the end of the input buffer.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before reading cursor.current",
        )
