"""Error kinds shared by the lexer, parser and value model."""
from __future__ import annotations
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    # Parser
    UNEXPECTED_TOKEN = "unexpected token"
    MISSING_LHS = "missing left operand"
    UNEXPECTED_EOF = "unexpected end of file"

    # Values
    INVALID_UTF8 = "invalid UTF-8"

    # Lexer
    UNKNOWN_CHARACTER = "unknown character"
    UNTERMINATED_STRING = "unterminated string literal"
    INVALID_INTEGER = "integer literal out of range"


class AbleError(Exception):
    """Any error detected while lexing, parsing or formatting AbleScript."""

    def __init__(self, kind: ErrorKind, span=None, token: Any = None, detail: str = ""):
        self.kind = kind
        self.span = span
        self.token = token
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" {self.span[0]}..{self.span[1]}" if self.span is not None else ""
        msg = f"[AbleScript{where}] {self.kind.value}"
        if self.token is not None:
            msg += f": {self.token!r}"
        if self.detail:
            msg += f" ({self.detail})"
        return msg

    @classmethod
    def unexpected_token(cls, token, span) -> AbleError:
        return cls(ErrorKind.UNEXPECTED_TOKEN, span, token=token)

    @classmethod
    def unexpected_eof(cls, span) -> AbleError:
        return cls(ErrorKind.UNEXPECTED_EOF, span)

    @classmethod
    def missing_lhs(cls, span) -> AbleError:
        return cls(ErrorKind.MISSING_LHS, span)


def format_span(span: Optional[tuple[int, int]]) -> str:
    if span is None:
        return "?"
    return f"{span[0]}..{span[1]}"
