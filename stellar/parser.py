"""Parser for the Stellar language.

A recursive-descent parser with one token of lookahead. Expressions are
parsed by precedence climbing, one method per precedence tier, lowest
first::

    expression  -> assignment
    assignment  -> IDENT ( "=" | "+=" | "-=" | "*=" | "/=" ) assignment
                 | logic_or
    logic_or    -> logic_and ( "or" logic_and )*
    logic_and   -> equality ( "and" equality )*
    equality    -> comparison ( ( "==" | "!=" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "+" | "-" ) factor )*
    factor      -> unary ( ( "*" | "/" ) unary )*
    unary       -> ( "!" | "-" ) unary | atom
    atom        -> NUMBER | STRING | CHAR | "true" | "false" | "null"
                 | IDENT | "(" expression ")"

Syntax errors do not stop the parse. Each one is recorded as a
:class:`~stellar.errors.SyntaxDiagnostic`, the parser discards tokens up
to the next probable statement boundary and resumes, so a single chunk
can report several independent errors.

The `parse_source` function is the public entry point: it lexes and
parses a chunk of source and returns a :class:`ParseResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .ast import (
    Assign, Binary, Block, Expr, ExprStmt, Grouping, IfStmt, LetStmt,
    Literal, Logical, PrintStmt, Stmt, Unary, Variable,
)
from .errors import Diagnostic, ParseError, SyntaxDiagnostic
from .lexer import tokenize
from .tokens import COMPOUND_ASSIGN, Token, TokenKind
from .types import NULL, CharVal


# Tokens that start a statement; panic-mode recovery stops in front of them
SYNC_KINDS = {
    TokenKind.STRUCT, TokenKind.FUN, TokenKind.LET, TokenKind.FOR,
    TokenKind.IF, TokenKind.WHILE, TokenKind.RETURN,
}


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.pos = 0
        self.diagnostics: List[Diagnostic] = []

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # Token cursor

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().kind is TokenKind.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind is kind

    def match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.diagnostics.append(SyntaxDiagnostic(token.line, message, token.lexeme))
        return ParseError(message)

    def synchronize(self) -> None:
        self.advance()
        while not self.is_at_end():
            if self.previous().kind is TokenKind.SEMICOLON:
                return
            if self.peek().kind in SYNC_KINDS:
                return
            self.advance()

    # Statements

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenKind.LET):
                return self.let_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None
        except RecursionError:
            self.error(self.peek(), "Expression nested too deeply")
            self.synchronize()
            return None

    def let_declaration(self) -> LetStmt:
        name = self.consume(TokenKind.IDENT, "Expected identifier after 'let'")
        initializer: Optional[Expr] = None
        if self.match(TokenKind.EQ):
            initializer = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expected ';' after declaration")
        return LetStmt(name.lexeme, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenKind.IF):
            return self.if_statement()
        if self.match(TokenKind.PRINT):
            return self.print_statement()
        if self.match(TokenKind.LCURLY):
            return Block(self.block())
        return self.expression_statement()

    def if_statement(self) -> IfStmt:
        self.consume(TokenKind.LPAREN, "Expected '(' before condition")
        condition = self.expression()
        self.consume(TokenKind.RPAREN, "Expected ')' after condition")
        self.consume(TokenKind.LCURLY, "Expected '{' after condition")
        then_branch = Block(self.block())
        else_branch: Optional[Stmt] = None
        if self.match(TokenKind.ELSE):
            self.consume(TokenKind.LCURLY, "Expected '{' after 'else'")
            else_branch = Block(self.block())
        return IfStmt(condition, then_branch, else_branch)

    def print_statement(self) -> PrintStmt:
        expr = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expected ';' after expression")
        return PrintStmt(expr)

    def block(self) -> Tuple[Stmt, ...]:
        # the opening '{' has already been consumed
        statements: List[Stmt] = []
        while not self.check(TokenKind.RCURLY) and not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenKind.RCURLY, "Expected '}' after block")
        return tuple(statements)

    def expression_statement(self) -> ExprStmt:
        expr = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expected ';' after expression")
        return ExprStmt(expr)

    # Expressions

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.logic_or()
        if self.match(TokenKind.EQ, *COMPOUND_ASSIGN):
            op_token = self.previous()
            value = self.assignment()
            if not isinstance(expr, Variable):
                raise self.error(op_token, "lvalue required")
            if op_token.kind in COMPOUND_ASSIGN:
                value = Binary(expr, COMPOUND_ASSIGN[op_token.kind], value)
            return Assign(expr.name, value)
        return expr

    def logic_or(self) -> Expr:
        expr = self.logic_and()
        while self.match(TokenKind.OR):
            right = self.logic_and()
            expr = Logical(expr, TokenKind.OR, right)
        return expr

    def logic_and(self) -> Expr:
        expr = self.equality()
        while self.match(TokenKind.AND):
            right = self.equality()
            expr = Logical(expr, TokenKind.AND, right)
        return expr

    def binary_tier(self, operand, *kinds: TokenKind) -> Expr:
        """Parse a left-associative chain of ``operand (op operand)*``."""
        expr = operand()
        while self.match(*kinds):
            op = self.previous().kind
            right = operand()
            expr = Binary(expr, op, right)
        return expr

    def equality(self) -> Expr:
        return self.binary_tier(self.comparison, TokenKind.EQ_EQ, TokenKind.NE)

    def comparison(self) -> Expr:
        return self.binary_tier(
            self.term, TokenKind.GT, TokenKind.GTE, TokenKind.LT, TokenKind.LTE)

    def term(self) -> Expr:
        return self.binary_tier(self.factor, TokenKind.PLUS, TokenKind.MINUS)

    def factor(self) -> Expr:
        return self.binary_tier(self.unary, TokenKind.STAR, TokenKind.SLASH)

    def unary(self) -> Expr:
        if self.match(TokenKind.BANG, TokenKind.MINUS):
            op = self.previous().kind
            operand = self.unary()
            return Unary(op, operand)
        return self.atom()

    def atom(self) -> Expr:
        if self.match(TokenKind.NULL):
            return Literal(NULL)
        if self.match(TokenKind.TRUE):
            return Literal(True)
        if self.match(TokenKind.FALSE):
            return Literal(False)
        if self.match(TokenKind.NUMBER):
            return Literal(float(self.previous().lexeme))
        if self.match(TokenKind.STRING):
            return Literal(self.previous().lexeme)
        if self.match(TokenKind.CHAR):
            return Literal(CharVal(self.previous().lexeme))
        if self.match(TokenKind.IDENT):
            return Variable(self.previous().lexeme)
        if self.match(TokenKind.LPAREN):
            expr = self.expression()
            self.consume(TokenKind.RPAREN, "Expected ')' after expression")
            return Grouping(expr)
        raise self.error(self.peek(), "Expected expression")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of the lex and parse stages for one chunk of source."""
    statements: Tuple[Stmt, ...]
    diagnostics: Tuple[Diagnostic, ...]
    token_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.diagnostics


def parse_source(source: str) -> ParseResult:
    """Lex and parse ``source``.

    The parser only runs when lexing reported nothing, so a chunk with a
    lexical error never yields statements.
    """
    lexer = tokenize(source)
    if lexer.had_error:
        return ParseResult((), tuple(lexer.diagnostics), len(lexer.tokens))
    parser = Parser(lexer.tokens)
    statements = parser.parse()
    return ParseResult(tuple(statements), tuple(parser.diagnostics), len(lexer.tokens))
