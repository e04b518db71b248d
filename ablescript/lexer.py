"""Lexer for AbleScript: scans source into a pull-based stream of Tokens."""
from __future__ import annotations
from typing import Iterator, Optional

from .errors import AbleError, ErrorKind
from .tokens import (
    Token, TokenType, Span,
    KEYWORDS, BOOL_LITERALS, ABOOL_LITERALS, SINGLE_CHAR_TOKENS, COMMENT_PREFIX,
    DIGITS, IDENT_START, IDENT_CHARS,
)
from .types import Abool, I32_MAX


class Lexer:
    """Hand-written scanner. Tokens are produced one at a time by `next_token`."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.span = Span(0, 0)

    def error(self, kind: ErrorKind, start: int, detail: str = "") -> AbleError:
        return AbleError(kind, Span(start, self.pos), detail=detail)

    @property
    def current(self) -> str:
        if self.pos >= len(self.source):
            return "\0"
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str:
        p = self.pos + offset
        if p >= len(self.source):
            return "\0"
        return self.source[p]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_whitespace(self):
        while not self.at_end() and self.current.isspace():
            self.pos += 1

    def at_comment(self) -> bool:
        """owo starts a comment only as a whole word, not as an identifier prefix."""
        if not self.source.startswith(COMMENT_PREFIX, self.pos):
            return False
        return self.peek(len(COMMENT_PREFIX)) not in IDENT_CHARS

    def skip_comment(self):
        """Skip owo to end of line."""
        while not self.at_end() and self.current != "\n":
            self.pos += 1

    def read_string(self) -> str:
        """Read a double-quoted string literal. There are no escapes."""
        start = self.pos
        self.pos += 1  # skip opening quote
        while not self.at_end() and self.current != '"':
            self.pos += 1
        if self.at_end():
            raise self.error(ErrorKind.UNTERMINATED_STRING, start)
        self.pos += 1  # skip closing quote
        return self.source[start + 1 : self.pos - 1]

    def read_integer(self) -> int:
        start = self.pos
        while not self.at_end() and self.current in DIGITS:
            self.pos += 1
        value = int(self.source[start : self.pos])
        if value > I32_MAX:
            raise self.error(ErrorKind.INVALID_INTEGER, start, self.source[start : self.pos])
        return value

    def read_identifier(self) -> str:
        start = self.pos
        while not self.at_end() and self.current in IDENT_CHARS:
            self.pos += 1
        return self.source[start : self.pos]

    def next_token(self) -> Optional[Token]:
        """Scan the next token, or return None once the source is exhausted."""
        while True:
            self.skip_whitespace()
            if self.at_end():
                self.span = Span(self.pos, self.pos)
                return None
            if self.at_comment():
                self.skip_comment()
                continue
            break

        start = self.pos
        ttype, value = self._scan()
        self.span = Span(start, self.pos)
        return Token(ttype, value, self.span)

    def _scan(self) -> tuple[TokenType, object]:
        ch = self.current
        start = self.pos

        if ch == '"':
            return TokenType.STRING, self.read_string()

        if ch in DIGITS:
            return TokenType.INTEGER, self.read_integer()

        if ch in IDENT_START:
            ident = self.read_identifier()
            if ident in KEYWORDS:
                return KEYWORDS[ident], ident
            if ident in BOOL_LITERALS:
                return TokenType.BOOL, BOOL_LITERALS[ident]
            if ident in ABOOL_LITERALS:
                return TokenType.ABOOL, Abool[ident.upper()]
            return TokenType.IDENTIFIER, ident

        if ch == "=":
            if self.peek() == "=":
                self.pos += 2
                return TokenType.EQUAL_EQUAL, "=="
            self.pos += 1
            return TokenType.EQUAL, "="

        if ch == "!":
            if self.peek() == "=":
                self.pos += 2
                return TokenType.NOT_EQUAL, "!="
            self.pos += 1
            return TokenType.NOT, "!"

        if ch in SINGLE_CHAR_TOKENS:
            self.pos += 1
            return SINGLE_CHAR_TOKENS[ch], ch

        self.pos += 1
        raise self.error(ErrorKind.UNKNOWN_CHARACTER, start, repr(ch))

    def tokenize(self) -> list[Token]:
        """Drain the remaining source into a list of Tokens."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok
