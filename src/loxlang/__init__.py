"""
loxlang - Front End for the Lox Scripting Language
==================================================

This package provides the lexical front end of Lox, a small dynamically
typed scripting language: the scanner that turns source text into
tokens, the diagnostics it reports, and the driver that loads files and
decides whether a run may continue after errors.

Main Components
---------------
- **scanner**: Lox tokenizer (loxscan)
    Converts source text into an ordered token sequence ending in EOF

- **diagnostics**: Structured error and hint records
    Collected during a scan and forwarded to a diagnostic sink

- **driver**: File loading and the shared error flag

Quick Start
-----------
Scan a string:
    >>> from loxlang import scan
    >>> result = scan("var x = 10;")
    >>> [t.type.name for t in result.tokens]
    ['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']

Scan a file through a driver:
    >>> from loxlang import Driver
    >>> driver = Driver()
    >>> result = driver.run_file("hello.lox")
    >>> if not driver.should_continue():
    ...     print(result.report())

Or use the command-line tool:
    $ loxscan hello.lox
    $ loxscan --json hello.lox
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loxlang.errors import (
    LoxError,
    LoxSyntaxError,
    LoxCompilationError,
    SourceReadError,
    SourceLocation,
    CompileErrorKind,
    UnterminatedCommentError,
    UnterminatedStringError,
    UnexpectedCharacterError,
    DuplicateTerminatorError,
)
from loxlang.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticSink,
    Severity,
)
from loxlang.scanner import (
    Scanner,
    ScanResult,
    scan,
    Token,
    TokenType,
    LiteralKind,
    KEYWORDS,
)
from loxlang.config import LoxConfig
from loxlang.driver import Driver, read_source

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan",
    "Token",
    "TokenType",
    "LiteralKind",
    "KEYWORDS",
    # Driver and configuration
    "Driver",
    "read_source",
    "LoxConfig",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "Severity",
    # Exception hierarchy
    "LoxError",
    "LoxSyntaxError",
    "LoxCompilationError",
    "SourceReadError",
    "SourceLocation",
    "CompileErrorKind",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    "UnexpectedCharacterError",
    "DuplicateTerminatorError",
]
