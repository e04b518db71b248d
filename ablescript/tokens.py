"""Token types for AbleScript."""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, NamedTuple


class Span(NamedTuple):
    """Half-open offset range into the source text."""
    start: int
    end: int


class TokenType(Enum):
    # === Literals ===
    INTEGER = auto()
    STRING = auto()
    BOOL = auto()
    ABOOL = auto()
    NUL = auto()
    IDENTIFIER = auto()

    # === Keywords ===
    FUNCTIO = auto()
    VAR = auto()
    MELO = auto()
    IF = auto()
    LOOP = auto()
    BREAK = auto()
    HOPBACK = auto()
    PRINT = auto()

    # === Arithmetic ===
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    FWD_SLASH = auto()

    # === Comparison ===
    EQUAL_EQUAL = auto()      # ==
    NOT_EQUAL = auto()        # !=
    LESS_THAN = auto()        # <
    GREATER_THAN = auto()     # >

    # === Logical ===
    AND = auto()              # &
    OR = auto()               # |
    NOT = auto()              # !

    # === Assignment ===
    EQUAL = auto()            # =

    # === Delimiters ===
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_CURLY = auto()
    RIGHT_CURLY = auto()
    COMMA = auto()
    SEMICOLON = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Any
    span: Span

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.span.start}..{self.span.end})"


# Keywords and word literals
KEYWORDS: dict[str, TokenType] = {
    "functio": TokenType.FUNCTIO,
    "var": TokenType.VAR,
    "melo": TokenType.MELO,
    "if": TokenType.IF,
    "loop": TokenType.LOOP,
    "break": TokenType.BREAK,
    "hopback": TokenType.HOPBACK,
    "print": TokenType.PRINT,
    "nul": TokenType.NUL,
}

BOOL_LITERALS: dict[str, bool] = {
    "true": True,
    "false": False,
}

# Resolved to Abool members by the lexer
ABOOL_LITERALS: tuple[str, ...] = ("never", "sometimes", "always")

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.FWD_SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_CURLY,
    "}": TokenType.RIGHT_CURLY,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

COMMENT_PREFIX = "owo"

DIGITS = frozenset("0123456789")
IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
IDENT_CHARS = IDENT_START | DIGITS
