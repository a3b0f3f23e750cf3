"""
Diagnostics
===========

Structured diagnostics produced while scanning, plus the collector that
accumulates them and the protocol a diagnostic sink must implement.

The scanner never writes to a terminal itself. It produces Diagnostic
values; whoever drives the scan decides whether to log them, print
them, or turn them into an exception.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from loxlang.errors import (
    CompileErrorKind,
    LoxCompilationError,
    LoxSyntaxError,
    SourceLocation,
)


# =============================================================================
# Severity
# =============================================================================

class Severity(Enum):
    """How serious a diagnostic is. Only ERROR sets the error flag."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def log_level(self) -> int:
        """The logging level a diagnostic of this severity is emitted at."""
        return {
            Severity.ERROR: logging.ERROR,
            Severity.WARNING: logging.WARNING,
            Severity.INFO: logging.INFO,
        }[self]


# =============================================================================
# Diagnostic Record
# =============================================================================

@dataclass(frozen=True)
class Diagnostic:
    """
    One message about the source, tied to a location.

    Attributes:
        severity: ERROR, WARNING or INFO
        message: Human-readable description
        location: Where in the source the message applies
        kind: Error classification (None for hints and warnings)
    """
    severity: Severity
    message: str
    location: SourceLocation
    kind: Optional[CompileErrorKind] = None

    @property
    def position(self) -> str:
        """'line:column' string passed to a diagnostic sink."""
        return self.location.position

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        label = self.severity.value
        if self.kind is not None:
            label = f"{label} [{self.kind}]"
        return f"{self.location}: {label}: {self.message}"


class DiagnosticSink(Protocol):
    """
    Protocol for the external object that receives scanner diagnostics.

    The scanner sets has_error on every error it reports and never reads
    any other state from the sink.
    """
    has_error: bool

    def log(self, severity: Severity, message: str, position: str) -> None:
        """Record or display one diagnostic."""
        ...


# =============================================================================
# Collector
# =============================================================================

class DiagnosticCollector:
    """
    Collects diagnostics for batch reporting.

    The scanner uses this to continue after a lexical error, gathering
    every problem in the file before anything is reported.

    Example:
        collector = DiagnosticCollector()
        try:
            scan_one_token()
        except LoxSyntaxError as e:
            collector.add_error(e)

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, diagnostics: Optional[List[Diagnostic]] = None) -> None:
        self.diagnostics: List[Diagnostic] = list(diagnostics or [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic to the collection."""
        self.diagnostics.append(diagnostic)

    def add_error(self, error: LoxSyntaxError) -> List[Diagnostic]:
        """
        Record a syntax error, followed by an INFO hint when it has one.

        Returns:
            The diagnostics that were added, in order
        """
        location = error.location or SourceLocation("<input>", 0, 0)
        added = [Diagnostic(Severity.ERROR, error.message, location, error.kind)]
        if error.hint:
            added.append(Diagnostic(Severity.INFO, error.hint, location))
        self.diagnostics.extend(added)
        return added

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return any(d.is_error for d in self.diagnostics)

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all diagnostics for display, ending in a summary line."""
        lines = [str(d) for d in self.diagnostics]

        errors = self.error_count()
        warnings = self.warning_count()
        error_word = "error" if errors == 1 else "errors"
        warning_word = "warning" if warnings == 1 else "warnings"
        lines.append(f"{errors} {error_word}, {warnings} {warning_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected diagnostics."""
        self.diagnostics.clear()

    def raise_if_errors(self) -> None:
        """Raise a LoxCompilationError if any errors were collected."""
        if self.has_errors():
            raise LoxCompilationError(self.report())

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)
