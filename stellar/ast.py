"""Abstract Syntax Tree (AST) definitions for the Stellar language.

The parser produces these nodes and the interpreter walks them. Nodes are
frozen dataclasses and child sequences are tuples, so a tree cannot be
changed once it has been built. Each node owns its children; no subtree
is shared between two parents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .tokens import TokenKind
from .types import Value


@dataclass(frozen=True)
class Expr:
    """Base class for expression nodes."""
    pass


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    op: TokenKind
    right: Expr


@dataclass(frozen=True)
class Logical(Expr):
    # op is AND or OR; right is only evaluated when needed
    left: Expr
    op: TokenKind
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    inner: Expr


@dataclass(frozen=True)
class Unary(Expr):
    op: TokenKind
    operand: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: Value


@dataclass(frozen=True)
class Variable(Expr):
    name: str


@dataclass(frozen=True)
class Assign(Expr):
    name: str
    value: Expr


@dataclass(frozen=True)
class Stmt:
    """Base class for statement nodes."""
    pass


@dataclass(frozen=True)
class ExprStmt(Stmt):
    expr: Expr


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expr: Expr


@dataclass(frozen=True)
class LetStmt(Stmt):
    name: str
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]
