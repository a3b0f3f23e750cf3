"""
Literal text normalization applied after a token has been classified.

Kept apart from the scanner's dispatch so the dispatch only decides what
a token is, never how its text should look.
"""

from loxlang.scanner.tokens import TokenType


def dequote(lexeme: str) -> str:
    """Strip the enclosing quote characters from a string lexeme."""
    return lexeme[1:-1]


def normalize_number(lexeme: str) -> str:
    """
    Normalize number text for the parser.

        "3."   -> "3"
        ".5"   -> "0.5"
        "3.14" -> "3.14"
    """
    if lexeme.endswith("."):
        return lexeme.split(".")[0]
    if lexeme.startswith("."):
        return "0" + lexeme
    return lexeme


def finalize_lexeme(token_type: TokenType, lexeme: str) -> str:
    """Apply the normalization for `token_type`; other kinds pass through."""
    if token_type is TokenType.STRING:
        return dequote(lexeme)
    if token_type is TokenType.NUMBER:
        return normalize_number(lexeme)
    return lexeme
