"""Recursive descent parser for AbleScript.

There is no operator precedence: every binary operator takes whatever has
been buffered so far as its left operand and exactly one following operand
as its right, so chains fold strictly left to right.
"""
from __future__ import annotations
from typing import Optional, Union

from .errors import AbleError
from .lexer import Lexer
from .tokens import Token, TokenType, Span
from .ast_nodes import *
from .types import able_str, able_int, able_bool, able_abool, able_nul


class Parser:
    """Pulls tokens on demand and builds statements.

    `source` is either AbleScript text or a token source exposing
    `next_token()` and `span`.
    """

    VALUE_TOKENS = {
        TokenType.IDENTIFIER, TokenType.STRING, TokenType.INTEGER,
        TokenType.BOOL, TokenType.ABOOL, TokenType.NUL, TokenType.LEFT_PAREN,
    }

    def __init__(self, source: Union[str, Lexer]):
        self.lexer = Lexer(source) if isinstance(source, str) else source

    # ================================================
    # Utilities
    # ================================================

    @property
    def span(self) -> Span:
        return self.lexer.span

    def next_token(self) -> Optional[Token]:
        return self.lexer.next_token()

    def advance(self) -> Token:
        """Pull the next token; running out of tokens here is an error."""
        tok = self.lexer.next_token()
        if tok is None:
            raise AbleError.unexpected_eof(self.span)
        return tok

    def require(self, ttype: TokenType):
        tok = self.advance()
        if tok.type != ttype:
            raise AbleError.unexpected_token(tok, self.span)

    def semi_terminated(self, stmt: Statement) -> Statement:
        self.require(TokenType.SEMICOLON)
        return stmt

    def get_iden(self) -> Iden:
        tok = self.advance()
        if tok.type != TokenType.IDENTIFIER:
            raise AbleError.unexpected_token(tok, self.span)
        return Iden(tok.value, self.span)

    def finish(self, node: ASTNode, start: int) -> ASTNode:
        node.span = Span(start, self.span.end)
        return node

    # ================================================
    # Top-level
    # ================================================

    def init(self) -> list[Statement]:
        """Parse the whole token stream. The first error aborts."""
        ast = []
        while True:
            tok = self.next_token()
            if tok is None:
                return ast
            ast.append(self.parse(tok))

    def parse(self, token: Token) -> Statement:
        """Route a lead token to its statement flow."""
        start = self.span.start
        ttype = token.type

        if ttype == TokenType.IF:
            stmt = self.if_flow()
        elif ttype == TokenType.FUNCTIO:
            stmt = self.functio_flow()
        elif ttype == TokenType.VAR:
            stmt = self.var_flow()
        elif ttype == TokenType.MELO:
            stmt = self.melo_flow()
        elif ttype == TokenType.LOOP:
            stmt = self.loop_flow()
        elif ttype == TokenType.BREAK:
            stmt = self.semi_terminated(BreakStatement())
        elif ttype == TokenType.HOPBACK:
            stmt = self.semi_terminated(HopBackStatement())
        elif ttype in self.VALUE_TOKENS:
            stmt = self.value_flow(token)
        else:
            raise AbleError.unexpected_token(token, Span(start, self.span.end))

        return self.finish(stmt, start)

    # ================================================
    # Expressions
    # ================================================

    def parse_expr(self, token: Token, buf: Optional[Expression]) -> Expression:
        """Parse one expression step.

        `buf` is what has been accumulated so far; operators consume it as
        their left operand. The result replaces the buffer.
        """
        start = self.span.start
        ttype = token.type

        # Values
        if ttype == TokenType.IDENTIFIER:
            return VariableAccess(span=self.span, name=token.value)
        if ttype == TokenType.ABOOL:
            return Literal(span=self.span, value=able_abool(token.value))
        if ttype == TokenType.BOOL:
            return Literal(span=self.span, value=able_bool(token.value))
        if ttype == TokenType.INTEGER:
            return Literal(span=self.span, value=able_int(token.value))
        if ttype == TokenType.STRING:
            return Literal(span=self.span, value=able_str(token.value))
        if ttype == TokenType.NUL:
            return Literal(span=self.span, value=able_nul())

        # Operations
        kind = BinOpKind.from_token(ttype)
        if kind is not None:
            return self.binop_flow(kind, buf)

        if ttype == TokenType.NOT:
            operand = self.parse_expr(self.advance(), buf)
            # The operand may have absorbed the buffer, which starts earlier
            return self.finish(Not(operand=operand), min(start, operand.span.start))

        if ttype == TokenType.LEFT_PAREN:
            return self.expr_flow(TokenType.RIGHT_PAREN)

        raise AbleError.unexpected_token(token, Span(start, self.span.end))

    def binop_flow(self, kind: BinOpKind, lhs: Optional[Expression]) -> Expression:
        """Buffered LHS, operator, then exactly one operand as RHS."""
        if lhs is None:
            raise AbleError.missing_lhs(self.span)
        rhs = self.parse_expr(self.advance(), None)
        return self.finish(BinOp(lhs=lhs, rhs=rhs, kind=kind), lhs.span.start)

    def expr_flow(self, terminate: TokenType) -> Expression:
        """Parse expressions until the terminating token."""
        buf = None
        while True:
            tok = self.advance()
            if tok.type == terminate:
                if buf is None:
                    raise AbleError.unexpected_token(tok, self.span)
                return buf
            buf = self.parse_expr(tok, buf)

    # ================================================
    # Statements
    # ================================================

    def get_block(self) -> Block:
        """Parse a { ... } block."""
        self.require(TokenType.LEFT_CURLY)
        start = self.span.start
        statements = []
        while True:
            tok = self.advance()
            if tok.type == TokenType.RIGHT_CURLY:
                break
            statements.append(self.parse(tok))
        return self.finish(Block(statements=statements), start)

    def value_flow(self, init: Token) -> Statement:
        """A statement that starts with a value: print or functio call.

        Expressions are not statements on their own, so the buffered
        expression has to end up either printed or called.
        """
        buf = self.parse_expr(init, None)
        while True:
            tok = self.advance()
            if tok.type == TokenType.PRINT:
                stmt = PrintStatement(expr=buf)
                break
            if tok.type == TokenType.LEFT_PAREN:
                if not isinstance(buf, VariableAccess):
                    raise AbleError.unexpected_token(tok, self.span)
                stmt = self.functio_call_flow(Iden(buf.name, buf.span))
                break
            buf = self.parse_expr(tok, buf)
        self.require(TokenType.SEMICOLON)
        return stmt

    def if_flow(self) -> IfStatement:
        """if (cond) { ... }; there is no else."""
        self.require(TokenType.LEFT_PAREN)
        cond = self.expr_flow(TokenType.RIGHT_PAREN)
        body = self.get_block()
        return IfStatement(cond=cond, body=body)

    def functio_flow(self) -> FunctioDecl:
        """functio name(a, b, c) { ... }"""
        iden = self.get_iden()
        self.require(TokenType.LEFT_PAREN)

        # A comma must be followed by another parameter
        params = []
        tok = self.advance()
        while tok.type != TokenType.RIGHT_PAREN:
            if tok.type != TokenType.IDENTIFIER:
                raise AbleError.unexpected_token(tok, self.span)
            params.append(Iden(tok.value, self.span))

            tok = self.advance()
            if tok.type == TokenType.RIGHT_PAREN:
                break
            if tok.type != TokenType.COMMA:
                raise AbleError.unexpected_token(tok, self.span)
            tok = self.advance()
            if tok.type == TokenType.RIGHT_PAREN:
                raise AbleError.unexpected_token(tok, self.span)

        body = self.get_block()
        return FunctioDecl(iden=iden, params=params, body=body)

    def functio_call_flow(self, iden: Iden) -> CallStatement:
        args = []
        buf = None
        while True:
            tok = self.advance()
            if tok.type == TokenType.RIGHT_PAREN:
                if buf is not None:
                    args.append(buf)
                break
            if tok.type == TokenType.COMMA:
                if buf is None:
                    raise AbleError.unexpected_token(tok, self.span)
                args.append(buf)
                buf = None
                continue
            buf = self.parse_expr(tok, buf)
        return CallStatement(iden=iden, args=args)

    def var_flow(self) -> VarDeclaration:
        iden = self.get_iden()
        tok = self.advance()
        if tok.type == TokenType.EQUAL:
            init = self.expr_flow(TokenType.SEMICOLON)
        elif tok.type == TokenType.SEMICOLON:
            init = None
        else:
            raise AbleError.unexpected_token(tok, self.span)
        return VarDeclaration(iden=iden, init=init)

    def melo_flow(self) -> MeloStatement:
        iden = self.get_iden()
        return self.semi_terminated(MeloStatement(iden=iden))

    def loop_flow(self) -> LoopStatement:
        """loop { ... } runs until a break."""
        return LoopStatement(body=self.get_block())


def parse(source: str) -> list[Statement]:
    """Parse AbleScript source into its top-level statements."""
    return Parser(source).init()
