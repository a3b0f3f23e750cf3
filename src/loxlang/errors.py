"""
Lox Error Hierarchy
===================

This module defines the exception hierarchy for the Lox front end.
All exceptions inherit from LoxError, allowing callers to catch every
front-end error with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
├── LoxSyntaxError - lexical errors found by the scanner
│   ├── UnterminatedCommentError - /* without a closing */
│   ├── UnterminatedStringError - missing closing quote
│   ├── UnexpectedCharacterError - character outside the language
│   └── DuplicateTerminatorError - ';' repeated at the end of a line
├── LoxCompilationError - aggregate report of many errors
└── SourceReadError - source file could not be read

Recoverable vs. Fatal
---------------------
Syntax errors are raised inside the scanner's sub-tokenizers and caught
by its main loop, which records them and keeps scanning. They never
escape a scan. SourceReadError is the only fatal error: it is raised by
the driver before any scanning starts.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all Lox front-end errors.

        try:
            driver.run_file("program.lox")
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"

    @property
    def position(self) -> str:
        """Bare 'line:column' string handed to the diagnostic sink."""
        return f"{self.line}:{self.column}"


# =============================================================================
# Error Kinds
# =============================================================================

class CompileErrorKind(Enum):
    """
    Classification of compile-time errors.

    The scanner only ever reports SYNTAX_ERROR. The finer kinds are
    reserved for the parser, which can tell an unterminated string from
    a missing token once it knows the grammar.
    """
    SYNTAX_ERROR = "SyntaxError"
    UNTERMINATED_STRING = "UnterminatedString"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    MISSING_TOKEN = "MissingToken"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Syntax Errors (Scanner)
# =============================================================================

class LoxSyntaxError(LoxError):
    """
    Lexical error in Lox source code.

    Carries the location, an optional hint and the offending source line
    so the error can be rendered with a caret under the culprit.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    kind = CompileErrorKind.SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            hello.lox:3:5: error: Unexpected character: @
                var @x = 1;
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedCommentError(LoxSyntaxError):
    """Input ended before a multi-line comment was closed with */."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated multi-line comment",
            location=location,
            source_line=source_line,
        )


class UnterminatedStringError(LoxSyntaxError):
    """
    Unterminated string literal.

    Strings may span lines, so this is only raised when the input ends
    before a closing quote of the same kind as the opening one.

    Example:
        var s = "hello;    // no closing quote anywhere after this
    """

    def __init__(
        self,
        quote: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.quote = quote
        super().__init__(
            f"Unexpected character: `{quote}` String must have pairs of `{quote}`",
            location=location,
            source_line=source_line,
        )


class UnexpectedCharacterError(LoxSyntaxError):
    """A character that starts no token in the language."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"Unexpected character: {char}",
            location=location,
            source_line=source_line,
        )


class DuplicateTerminatorError(LoxSyntaxError):
    """
    Statement terminator repeated at the end of a line.

    Example:
        print a;;
    """

    HINT = "Please make sure the end of your expression is followed by a single semicolon."

    def __init__(
        self,
        snippet: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.snippet = snippet
        super().__init__(
            f"Expect ';' after expression. Found ';{snippet}' instead.",
            location=location,
            hint=self.HINT,
            source_line=source_line,
        )


# =============================================================================
# Aggregate and Fatal Errors
# =============================================================================

class LoxCompilationError(LoxError):
    """
    Aggregate error carrying a pre-formatted report of many diagnostics.

    Raised by ScanResult.raise_if_errors() and the diagnostic collector
    when the caller wants a failed scan to become an exception.
    """

    def __init__(self, report: str):
        self.report = report
        super().__init__(report)


class SourceReadError(LoxError):
    """Source file could not be read; compilation cannot start."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read file '{path}': {reason}")
