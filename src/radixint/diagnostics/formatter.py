"""Render Diagnostic objects as text for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_ERROR = "\033[1;31m"
_ANSI_WARNING = "\033[1;33m"
_ANSI_RESET = "\033[0m"

# (attribute, rust label, sanitized)
_DETAIL_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("function_name", "function", False),
    ("argument_name", "argument", False),
    ("expected_type", "expected", False),
    ("received_type", "received", True),
    ("hint", "help", True),
)


class OutputFormat(StrEnum):
    """Output styles understood by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Format diagnostics raised by radixint operations.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate user-supplied text longer than max_content_length
        color: Wrap the severity in ANSI color codes
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> from radixint.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.invalid_digit(10, 10)
        >>> print(formatter.format(diagnostic))
        error[INVALID_DIGIT]: invalid digit 10 in base 10
          = function: undigits
          = argument: digits
          = expected: digit < 10
          = received: 10
          = help: Every digit in base 10 must be less than 10
          = note: see https://en.wikipedia.org/wiki/Positional_notation

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        INVALID_DIGIT: invalid digit 10 in base 10
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            ansi = _ANSI_WARNING if severity == "warning" else _ANSI_ERROR
            severity = f"{ansi}{severity}{_ANSI_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._maybe_sanitize(diagnostic.message)}"]
        for attribute, label, sanitized in _DETAIL_FIELDS:
            value = getattr(diagnostic, attribute)
            if value:
                text = self._maybe_sanitize(value) if sanitized else value
                lines.append(f"  = {label}: {text}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._maybe_sanitize(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }
        for attribute, _label, sanitized in _DETAIL_FIELDS:
            value = getattr(diagnostic, attribute)
            if value:
                data[attribute] = self._maybe_sanitize(value) if sanitized else value
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
