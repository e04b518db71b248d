"""AST node definitions for AbleScript."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .tokens import Span, TokenType
from .types import Value, able_nul


# ============================================================
# Base
# ============================================================

@dataclass
class ASTNode:
    """Base for all AST nodes."""
    span: Span = Span(0, 0)


@dataclass
class Statement(ASTNode):
    pass


@dataclass
class Expression(ASTNode):
    """Base for expressions. Expressions never have side effects."""
    pass


@dataclass(frozen=True)
class Iden:
    iden: str
    span: Span = Span(0, 0)


# ============================================================
# Expressions
# ============================================================

class BinOpKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    GREATER = ">"
    AND = "&"
    OR = "|"

    @classmethod
    def from_token(cls, ttype: TokenType) -> Optional[BinOpKind]:
        return _BINOP_TOKENS.get(ttype)


_BINOP_TOKENS: dict[TokenType, BinOpKind] = {
    TokenType.PLUS: BinOpKind.ADD,
    TokenType.MINUS: BinOpKind.SUBTRACT,
    TokenType.STAR: BinOpKind.MULTIPLY,
    TokenType.FWD_SLASH: BinOpKind.DIVIDE,
    TokenType.EQUAL_EQUAL: BinOpKind.EQUAL,
    TokenType.NOT_EQUAL: BinOpKind.NOT_EQUAL,
    TokenType.LESS_THAN: BinOpKind.LESS,
    TokenType.GREATER_THAN: BinOpKind.GREATER,
    TokenType.AND: BinOpKind.AND,
    TokenType.OR: BinOpKind.OR,
}


@dataclass
class Literal(Expression):
    value: Value = field(default_factory=able_nul)


@dataclass
class VariableAccess(Expression):
    name: str = ""


@dataclass
class Not(Expression):
    operand: Expression = field(default_factory=Expression)


@dataclass
class BinOp(Expression):
    lhs: Expression = field(default_factory=Expression)
    rhs: Expression = field(default_factory=Expression)
    kind: BinOpKind = BinOpKind.ADD


# ============================================================
# Statements
# ============================================================

@dataclass
class Block(ASTNode):
    statements: list[Statement] = field(default_factory=list)


@dataclass
class IfStatement(Statement):
    """if (cond) { body }. There is no else."""
    cond: Expression = field(default_factory=Expression)
    body: Block = field(default_factory=Block)


@dataclass
class FunctioDecl(Statement):
    iden: Iden = field(default_factory=lambda: Iden(""))
    params: list[Iden] = field(default_factory=list)
    body: Block = field(default_factory=Block)


@dataclass
class VarDeclaration(Statement):
    """var <iden> [= <init>];"""
    iden: Iden = field(default_factory=lambda: Iden(""))
    init: Optional[Expression] = None


@dataclass
class MeloStatement(Statement):
    """melo <iden>; curses a binding."""
    iden: Iden = field(default_factory=lambda: Iden(""))


@dataclass
class LoopStatement(Statement):
    body: Block = field(default_factory=Block)


@dataclass
class BreakStatement(Statement):
    pass


@dataclass
class HopBackStatement(Statement):
    pass


@dataclass
class PrintStatement(Statement):
    expr: Expression = field(default_factory=Expression)


@dataclass
class CallStatement(Statement):
    iden: Iden = field(default_factory=lambda: Iden(""))
    args: list[Expression] = field(default_factory=list)
