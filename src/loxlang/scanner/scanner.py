"""
Lox Scanner (Tokenizer)
=======================

This module converts Lox source text into the ordered token sequence
consumed by the parser.

Scanning is a single left-to-right pass. Each iteration marks the start
of a token, consumes one character and dispatches on it:

| Input            | Result                                           |
|------------------|--------------------------------------------------|
| ( ) { } ,        | single-character token                           |
| ;                | SEMICOLON, or an error for ';;' at end of line   |
| .                | DOT, or a NUMBER when a digit follows (.5)       |
| - * + %          | arithmetic token                                 |
| /                | // line comment, /* block comment */, or DIVIDE  |
| ! = < >          | two-character form when '=' follows              |
| space \\r \\t \\n    | nothing (newline bumps the line counter)         |
| " ' `            | STRING, closed by the same quote character       |
| letter or _      | IDENTIFIER or keyword (maximal munch)            |
| digit            | NUMBER with at most one decimal point            |
| anything else    | "Unexpected character" error                     |

Error Recovery
--------------
Lexical errors never stop a scan. Sub-tokenizers raise a LoxSyntaxError
subclass; the main loop records it, drops the partial token and carries
on from the next unconsumed character. The result always ends with an
EOF token, whether or not errors were found.

Example Usage
-------------
>>> from loxlang.scanner import scan
>>> result = scan("var x = 10;")
>>> [t.type.name for t in result.tokens]
['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']
>>> result.has_errors
False
"""

import logging
import string
from dataclasses import dataclass, field
from typing import List, Optional

from loxlang.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticSink
from loxlang.errors import (
    DuplicateTerminatorError,
    LoxSyntaxError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from loxlang.scanner.cursor import SourceCursor
from loxlang.scanner.literals import finalize_lexeme
from loxlang.scanner.tokens import KEYWORDS, Token, TokenType, literal_kind_for

logger = logging.getLogger(__name__)


# =============================================================================
# Scan Result
# =============================================================================

@dataclass
class ScanResult:
    """
    Outcome of scanning one source text.

    Attributes:
        tokens: Tokens in source order, always ending with EOF
        diagnostics: Every error and hint reported during the scan
        filename: Name of the scanned source
    """
    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    filename: str = "<input>"

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    def report(self) -> str:
        """Format the diagnostics for display."""
        return DiagnosticCollector(self.diagnostics).report()

    def raise_if_errors(self) -> None:
        """Raise LoxCompilationError if the scan found any lexical error."""
        DiagnosticCollector(self.diagnostics).raise_if_errors()


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A Scanner is built for one source text and scanned once; calling
    scan() again returns the same result.

    Usage:
        scanner = Scanner(source_text, "main.lox")
        result = scanner.scan(driver)
        tokens = result.tokens

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    IDENT_START = string.ascii_letters + "_"
    IDENT_CHARS = string.ascii_letters + string.digits + "_"
    DIGITS = string.digits
    QUOTES = "\"'`"
    WHITESPACE = " \r\t"

    SINGLE_CHAR_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        "-": TokenType.MINUS,
        "*": TokenType.STAR,
        "+": TokenType.PLUS,
        "%": TokenType.MODULUS,
    }

    # first character -> (type when followed by '=', type otherwise)
    EQUAL_OPERATORS = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._cursor = SourceCursor(source)
        self._tokens: List[Token] = []
        self._diagnostics = DiagnosticCollector()
        self._result: Optional[ScanResult] = None

        # Position of the character that started the current token
        self._start_line = 1
        self._start_column = 0

    def scan(self, driver: Optional[DiagnosticSink] = None) -> ScanResult:
        """
        Scan the whole source.

        Args:
            driver: Optional diagnostic sink. Every diagnostic is forwarded
                    to driver.log() and driver.has_error is set on errors.

        Returns:
            ScanResult with the tokens and collected diagnostics
        """
        if self._result is not None:
            return self._result

        cursor = self._cursor
        while not cursor.is_at_end():
            cursor.mark_start()
            try:
                token_type = self._scan_token()
            except LoxSyntaxError as e:
                self._report(e, driver)
                continue

            if token_type is not None:
                self._emit(token_type)

        self._add_token(TokenType.EOF, "EOF")

        self._result = ScanResult(
            tokens=self._tokens,
            diagnostics=list(self._diagnostics),
            filename=self.filename,
        )
        logger.debug(
            f"Scanned {self.filename}: {len(self._tokens)} tokens, "
            f"{self._diagnostics.error_count()} errors"
        )
        return self._result

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> Optional[TokenType]:
        """
        Consume one token's worth of input.

        Returns:
            The token type to emit, or None when nothing is emitted
        """
        cursor = self._cursor
        char = cursor.advance()
        self._start_line = cursor.line
        self._start_column = cursor.column

        if char in self.SINGLE_CHAR_TOKENS:
            return self.SINGLE_CHAR_TOKENS[char]

        if char == ".":
            return self._scan_dot()

        if char == "/":
            return self._scan_slash()

        if char == ";":
            return self._scan_semicolon()

        if char in self.EQUAL_OPERATORS:
            double, single = self.EQUAL_OPERATORS[char]
            if cursor.match_char("="):
                cursor.advance()
                return double
            return single

        if char in self.WHITESPACE:
            return None

        if char == "\n":
            cursor.newline()
            return None

        if char in self.QUOTES:
            return self._scan_string(char)

        if char in self.IDENT_START:
            return self._scan_identifier()

        if char in self.DIGITS:
            return self._scan_number()

        raise UnexpectedCharacterError(char, self._location(), cursor.line_text())

    # =========================================================================
    # Sub-tokenizers
    # =========================================================================

    def _scan_dot(self) -> TokenType:
        """A '.' is a DOT unless a digit follows, making it a number like .5"""
        if self._cursor.peek() in self.DIGITS:
            self._consume_digits()
            return TokenType.NUMBER
        return TokenType.DOT

    def _scan_slash(self) -> TokenType:
        """Scan '/', a // line comment, or a /* block comment */."""
        cursor = self._cursor

        if cursor.match_char("/"):
            while cursor.peek() != "\n" and not cursor.is_at_end():
                cursor.advance()
            return TokenType.COMMENT

        if cursor.match_char("*"):
            location = self._location()
            source_line = cursor.line_text()
            cursor.advance()  # consume *

            while not cursor.is_at_end():
                if cursor.peek() == "*" and cursor.peek_next() == "/":
                    cursor.advance()  # consume *
                    cursor.advance()  # consume /
                    return TokenType.COMMENT
                if cursor.advance() == "\n":
                    cursor.newline()

            raise UnterminatedCommentError(location, source_line)

        return TokenType.DIVIDE

    def _scan_semicolon(self) -> Optional[TokenType]:
        """
        Scan ';'.

        A ';' that ends a line right after another ';' token is reported
        as a malformed terminator and produces no token.
        """
        cursor = self._cursor
        previous = self._tokens[-1] if self._tokens else None

        if cursor.match_char("\n") and previous is not None and previous.type is TokenType.SEMICOLON:
            snippet = cursor.current_lexeme() + cursor.rest_of_line()
            raise DuplicateTerminatorError(snippet, self._location(), cursor.line_text())

        return TokenType.SEMICOLON

    def _scan_string(self, quote: str) -> TokenType:
        """
        Scan a string literal opened by `quote`.

        Only the same quote character closes it. Strings may span lines.
        """
        cursor = self._cursor
        location = self._location()
        source_line = cursor.line_text()

        while not cursor.is_at_end():
            char = cursor.advance()
            if char == quote:
                return TokenType.STRING
            if char == "\n":
                cursor.newline()

        raise UnterminatedStringError(quote, location, source_line)

    def _scan_identifier(self) -> TokenType:
        """
        Scan an identifier or keyword.

        The whole run of letters, digits and underscores is consumed before
        the keyword lookup, so `or_not` is one identifier, never `or`
        followed by `_not`.
        """
        cursor = self._cursor
        while cursor.peek() in self.IDENT_CHARS:
            cursor.advance()

        return KEYWORDS.get(cursor.current_lexeme(), TokenType.IDENTIFIER)

    def _scan_number(self) -> TokenType:
        """Scan digits, then at most one '.' and the digits after it."""
        cursor = self._cursor
        self._consume_digits()

        if cursor.match_char("."):
            cursor.advance()
            self._consume_digits()

        return TokenType.NUMBER

    def _consume_digits(self) -> None:
        cursor = self._cursor
        while cursor.peek() in self.DIGITS:
            cursor.advance()

    # =========================================================================
    # Token Creation and Reporting
    # =========================================================================

    def _emit(self, token_type: TokenType) -> None:
        """Append the token just scanned, dropping comments."""
        lexeme = self._cursor.current_lexeme()

        if token_type is TokenType.COMMENT:
            logger.debug(f"Discarded comment at {self._location()}: {lexeme!r}")
            return

        self._add_token(token_type, finalize_lexeme(token_type, lexeme))

    def _add_token(self, token_type: TokenType, lexeme: str) -> None:
        cursor = self._cursor
        self._tokens.append(
            Token(
                type=token_type,
                lexeme=lexeme,
                literal=literal_kind_for(token_type),
                line=cursor.line,
                column=cursor.column + 1,
                filename=self.filename,
            )
        )

    def _location(self) -> SourceLocation:
        """Location of the character that started the current token."""
        return SourceLocation(self.filename, self._start_line, self._start_column)

    def _report(self, error: LoxSyntaxError, driver: Optional[DiagnosticSink]) -> None:
        """Record a recovered error and forward it to the driver, if any."""
        added = self._diagnostics.add_error(error)
        logger.debug(f"Recovered from lexical error: {error.message} at {error.location}")

        if driver is None:
            return

        for diagnostic in added:
            if diagnostic.is_error:
                driver.has_error = True
            driver.log(diagnostic.severity, diagnostic.message, diagnostic.position)


def scan(
    source: str,
    driver: Optional[DiagnosticSink] = None,
    filename: str = "<input>",
) -> ScanResult:
    """
    Convenience function to scan source text in one call.

    Args:
        source: Lox source code
        driver: Optional diagnostic sink receiving every diagnostic
        filename: Source filename for error messages

    Returns:
        ScanResult with tokens and diagnostics
    """
    return Scanner(source, filename).scan(driver)
