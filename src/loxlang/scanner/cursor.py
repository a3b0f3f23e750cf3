"""
Source Cursor
=============

The scanner's position state over one source text. Offsets are byte
offsets into the UTF-8 encoding of the source, so `current` always moves
by the encoded width of the character it steps over, never by a fixed
single byte.

Invariant: start <= current <= len(data).
"""

NUL = "\0"


def _utf8_width(lead: int) -> int:
    """Encoded width of the UTF-8 sequence starting with byte `lead`."""
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    return 4


class SourceCursor:
    """
    Forward-only position over an immutable source text.

    Attributes:
        source: The source text
        start: Byte offset of the token currently being scanned
        current: Byte offset of the next unread character
        line: Current line (1-indexed)
        column: Characters consumed on the current line
    """

    def __init__(self, source: str, line: int = 1):
        self.source = source
        self._data = source.encode("utf-8")
        self.start = 0
        self.current = 0
        self.line = line
        self.column = 0
        self._line_start = 0

    def __len__(self) -> int:
        return len(self._data)

    def _char_at(self, offset: int) -> str:
        if offset >= len(self._data):
            return NUL
        width = _utf8_width(self._data[offset])
        return self._data[offset:offset + width].decode("utf-8")

    # =========================================================================
    # Lookahead
    # =========================================================================

    def is_at_end(self) -> bool:
        return self.current >= len(self._data)

    def peek(self) -> str:
        """Character at `current`, or NUL past the end."""
        return self._char_at(self.current)

    def peek_next(self) -> str:
        """Character after the one at `current`, or NUL past the end."""
        if self.is_at_end():
            return NUL
        width = _utf8_width(self._data[self.current])
        return self._char_at(self.current + width)

    def match_char(self, expected: str) -> bool:
        """
        True if the unconsumed character at `current` equals `expected`.

        Does not advance; callers consume the character themselves after
        a positive match.
        """
        if self.is_at_end():
            return False
        return self.peek() == expected

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self) -> str:
        """Consume and return the character at `current`."""
        if self.is_at_end():
            return NUL

        char = self.peek()
        self.current += _utf8_width(self._data[self.current])
        self.column += 1
        return char

    def newline(self) -> None:
        """Record that a newline has just been consumed."""
        self.line += 1
        self.column = 0
        self._line_start = self.current

    def mark_start(self) -> None:
        self.start = self.current

    # =========================================================================
    # Text Access
    # =========================================================================

    def current_lexeme(self) -> str:
        """Source text between `start` and `current`."""
        return self._data[self.start:self.current].decode("utf-8")

    def rest_of_line(self) -> str:
        """Source text from `current` up to, not including, the next newline."""
        end = self._data.find(b"\n", self.current)
        if end == -1:
            end = len(self._data)
        return self._data[self.current:end].decode("utf-8")

    def line_text(self) -> str:
        """Full text of the line the cursor is on, for error context."""
        end = self._data.find(b"\n", self._line_start)
        if end == -1:
            end = len(self._data)
        return self._data[self._line_start:end].decode("utf-8")
