"""
Lox Tokens
==========

Token types, the keyword table, and the immutable Token record handed to
the parser.

A token's literal kind is a classification aid for the parser. It is
inferred from the token type alone; no runtime value is built here.
"""

from dataclasses import dataclass
from enum import Enum, auto

from loxlang.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Lox language.

    Keywords are distinguished from identifiers so the parser never has
    to compare lexemes.
    """

    # === Single-character punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    SEMICOLON = auto()      # ;

    # === Arithmetic ===
    MINUS = auto()          # -
    PLUS = auto()           # +
    STAR = auto()           # *
    DIVIDE = auto()         # /
    MODULUS = auto()        # %

    # === One or two character operators ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    VAR = auto()
    FUN = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    PRINT = auto()
    BREAK = auto()
    CONTINUE = auto()
    CLASS = auto()
    THIS = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()
    OR = auto()
    AND = auto()
    SUPER = auto()

    # === Structural ===
    COMMENT = auto()        # never reaches the output sequence
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "var": TokenType.VAR,
    "fun": TokenType.FUN,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
    "print": TokenType.PRINT,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "class": TokenType.CLASS,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "and": TokenType.AND,
    "super": TokenType.SUPER,
}


# =============================================================================
# Literal Kinds
# =============================================================================

class LiteralKind(Enum):
    """What sort of value a token would evaluate to, if any."""
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    NIL = "Nil"


def literal_kind_for(token_type: TokenType) -> LiteralKind:
    """Map a token type to its literal kind; anything without a value is NIL."""
    if token_type is TokenType.NUMBER:
        return LiteralKind.NUMBER
    if token_type is TokenType.STRING:
        return LiteralKind.STRING
    if token_type in (TokenType.TRUE, TokenType.FALSE):
        return LiteralKind.BOOLEAN
    return LiteralKind.NIL


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Lox source code.

    Attributes:
        type: The TokenType classification
        lexeme: Source text of the token (strings without their quotes,
                numbers normalized)
        literal: Literal kind inferred from the type
        line: Line number in source (1-indexed)
        column: Column just after the token's last character (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    lexeme: str
    literal: LiteralKind
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()

    def to_dict(self) -> dict:
        """Plain-data form used by the CLI's JSON output."""
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": self.literal.value,
            "line": self.line,
            "column": self.column,
        }
