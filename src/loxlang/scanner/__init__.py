"""
Lox Scanner
===========

Lexical analysis for Lox: source text in, classified tokens out.

    Source → SourceCursor → Scanner → [Token, ..., EOF] → parser

>>> from loxlang.scanner import scan, TokenType
>>> [t.lexeme for t in scan("print .5;").tokens]
['print', '0.5', ';', 'EOF']
"""

from loxlang.scanner.cursor import SourceCursor
from loxlang.scanner.literals import dequote, finalize_lexeme, normalize_number
from loxlang.scanner.scanner import Scanner, ScanResult, scan
from loxlang.scanner.tokens import (
    KEYWORDS,
    LiteralKind,
    Token,
    TokenType,
    literal_kind_for,
)

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "SourceCursor",
    "Token",
    "TokenType",
    "LiteralKind",
    "KEYWORDS",
    "literal_kind_for",
    "dequote",
    "normalize_number",
    "finalize_lexeme",
]
