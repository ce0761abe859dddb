"""Tree-walking interpreter for the Stellar language.

The interpreter executes a list of statements produced by
:mod:`stellar.parser` against a chain of :class:`Environment` frames.
Runtime errors are scoped to a single statement: the failing statement is
abandoned, the error is printed and execution carries on with the next
statement.
"""

from __future__ import annotations

import enum
import operator
from typing import Callable, Dict, Optional, Sequence, Tuple

from .ast import (
    Assign, Binary, Block, Expr, ExprStmt, Grouping, IfStmt, LetStmt,
    Literal, Logical, PrintStmt, Stmt, Unary, Variable,
)
from .debug import DebugLog
from .environment import Environment
from .errors import ErrorKind, StellarRuntimeError
from .tokens import TokenKind
from .types import Value, is_truthy, to_string, type_name


class InterpreterMode(enum.Enum):
    REPL = 'repl'
    SCRIPT = 'script'


def divide(a: float, b: float) -> float:
    if b == 0.0:
        raise StellarRuntimeError(ErrorKind.ZERO_DIVISION, 'cannot divide by zero')
    return a / b


def concat(a: str, b: Value) -> str:
    return a + to_string(b)


BinaryHandler = Callable[[Value, Value], Value]

# (left type, right type, operator) -> handler
BINARY_OPS: Dict[Tuple[str, str, TokenKind], BinaryHandler] = {
    ('number', 'number', TokenKind.EQ_EQ): operator.eq,
    ('number', 'number', TokenKind.NE): operator.ne,
    ('number', 'number', TokenKind.PLUS): operator.add,
    ('number', 'number', TokenKind.MINUS): operator.sub,
    ('number', 'number', TokenKind.STAR): operator.mul,
    ('number', 'number', TokenKind.SLASH): divide,
    ('number', 'number', TokenKind.GT): operator.gt,
    ('number', 'number', TokenKind.GTE): operator.ge,
    ('number', 'number', TokenKind.LT): operator.lt,
    ('number', 'number', TokenKind.LTE): operator.le,
    ('String', 'String', TokenKind.EQ_EQ): operator.eq,
    ('String', 'String', TokenKind.NE): operator.ne,
    ('String', 'String', TokenKind.PLUS): operator.add,
    ('String', 'number', TokenKind.PLUS): concat,
    ('String', 'char', TokenKind.PLUS): concat,
    ('bool', 'bool', TokenKind.EQ_EQ): operator.eq,
    ('bool', 'bool', TokenKind.NE): operator.ne,
    ('char', 'char', TokenKind.EQ_EQ): operator.eq,
    ('char', 'char', TokenKind.NE): operator.ne,
}


class Interpreter:
    """Core interpreter that executes Stellar statements."""
    def __init__(self, mode: InterpreterMode = InterpreterMode.SCRIPT,
                 debug_level: int = 0, debug_file: str = 'debug.txt',
                 debug: Optional[DebugLog] = None):
        self.mode = mode
        self.globals = Environment()
        self.environment = self.globals
        self.debug = debug if debug is not None else DebugLog(debug_level, debug_file)

    def interpret(self, statements: Sequence[Stmt]) -> None:
        for stmt in statements:
            self.execute(stmt)

    def execute(self, stmt: Stmt) -> None:
        try:
            self.execute_stmt(stmt)
        except StellarRuntimeError as err:
            self.report(stmt, err)
        except RecursionError:
            self.report(stmt, StellarRuntimeError(
                ErrorKind.NESTING_TOO_DEEP, 'ran out of stack while evaluating'))

    def report(self, stmt: Stmt, err: StellarRuntimeError) -> None:
        self.debug(f"runtime error in {type(stmt).__name__}: {err}")
        print(err.report())

    def execute_stmt(self, stmt: Stmt) -> None:
        if isinstance(stmt, ExprStmt):
            value = self.evaluate(stmt.expr)
            if self.mode is InterpreterMode.REPL:
                print(to_string(value))
            return
        if isinstance(stmt, PrintStmt):
            print(to_string(self.evaluate(stmt.expr)))
            return
        if isinstance(stmt, LetStmt):
            value = None
            if stmt.initializer is not None:
                # the name is still declared, uninitialized, when the initializer fails
                try:
                    value = self.evaluate(stmt.initializer)
                except StellarRuntimeError as err:
                    self.report(stmt, err)
            self.environment.define(stmt.name, value)
            if self.debug.enabled(2):
                shown = 'uninitialized' if value is None else to_string(value)
                self.debug(f"declare {stmt.name} = {shown}", 2)
            return
        if isinstance(stmt, Block):
            self.execute_block(stmt.statements, self.environment.child())
            return
        if isinstance(stmt, IfStmt):
            cond = self.evaluate(stmt.condition)
            truthy = is_truthy(cond)
            if self.debug.enabled(3):
                self.debug(f"if condition {to_string(cond)} -> {truthy}", 3)
            if truthy:
                self.execute(stmt.then_branch)
            elif stmt.else_branch is not None:
                self.execute(stmt.else_branch)
            return
        raise NotImplementedError(f"unknown statement {type(stmt).__name__}")

    def execute_block(self, statements: Sequence[Stmt], env: Environment) -> None:
        previous = self.environment
        self.environment = env
        try:
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous

    def evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.inner)
        if isinstance(expr, Variable):
            value = self.environment.get(expr.name)
            if value is None:
                raise StellarRuntimeError(
                    ErrorKind.UNINITIALIZED_ACCESS,
                    f"variable '{expr.name}' was not initialized, "
                    f"cannot read from uninitialized memory")
            return value
        if isinstance(expr, Assign):
            if not self.environment.contains(expr.name):
                raise StellarRuntimeError(ErrorKind.UNDEFINED_VARIABLE, f"'{expr.name}'")
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            if self.debug.enabled(2):
                self.debug(f"assign {expr.name} = {to_string(value)}", 2)
            return value
        if isinstance(expr, Logical):
            left = self.evaluate(expr.left)
            if expr.op is TokenKind.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(expr.right)
        if isinstance(expr, Unary):
            return self.apply_unary_op(expr.op, self.evaluate(expr.operand))
        if isinstance(expr, Binary):
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            return self.apply_binary_op(expr.op, left, right)
        raise NotImplementedError(f"unknown expression {type(expr).__name__}")

    def apply_unary_op(self, op: TokenKind, value: Value) -> Value:
        if op is TokenKind.BANG:
            return is_truthy(value)
        if op is TokenKind.MINUS and type_name(value) == 'number':
            return -value
        raise StellarRuntimeError(
            ErrorKind.OPERATOR_NOT_DEFINED,
            f"unary '{op.value}' not supported for type '{type_name(value)}'")

    def apply_binary_op(self, op: TokenKind, a: Value, b: Value) -> Value:
        left_type = type_name(a)
        right_type = type_name(b)
        handler = BINARY_OPS.get((left_type, right_type, op))
        if handler is None:
            raise StellarRuntimeError(
                ErrorKind.OPERATOR_NOT_DEFINED,
                f"'{op.value}' not supported for types '{left_type}' and '{right_type}'")
        return handler(a, b)
