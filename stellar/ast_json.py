"""JSON serialization/deserialization for the Stellar AST.

This module converts between Stellar AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Literal values are
tagged with their Stellar type name so that chars and ``null`` survive a
round trip; operators are stored by their source spelling.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .ast import (
    Assign, Binary, Block, ExprStmt, Grouping, IfStmt, LetStmt, Literal,
    Logical, PrintStmt, Stmt, Unary, Variable,
)
from .tokens import TokenKind
from .types import NULL, CharVal, Value, type_name


def value_to_obj(value: Value) -> Dict[str, Any]:
    kind = type_name(value)
    if kind == 'char':
        return {"kind": kind, "value": value.value}
    if kind == 'null':
        return {"kind": kind}
    return {"kind": kind, "value": value}


def value_from_obj(o: Dict[str, Any]) -> Value:
    kind = o["kind"]
    if kind == 'number':
        return float(o["value"])
    if kind == 'char':
        return CharVal(o["value"])
    if kind == 'null':
        return NULL
    return o["value"]


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, (list, tuple)):
        return [ast_to_obj(n) for n in node]

    # Expressions
    if isinstance(node, Literal):
        return {"type": "Literal", "value": value_to_obj(node.value)}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "inner": ast_to_obj(node.inner)}
    if isinstance(node, Unary):
        return {"type": "Unary", "op": node.op.value, "operand": ast_to_obj(node.operand)}
    if isinstance(node, (Binary, Logical)):
        return {
            "type": type(node).__name__,
            "op": node.op.value,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }

    # Statements
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, LetStmt):
        return {
            "type": "LetStmt",
            "name": node.name,
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, Block):
        return {"type": "Block", "statements": ast_to_obj(node.statements)}
    if isinstance(node, IfStmt):
        return {
            "type": "IfStmt",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    raise TypeError(f"Unsupported node type for JSON: {type(node).__name__}")


def ast_from_obj(o: Any) -> Any:
    if o is None:
        return None
    if isinstance(o, list):
        return tuple(ast_from_obj(x) for x in o)
    if not isinstance(o, dict) or "type" not in o:
        raise ValueError(f"Invalid AST object: {o!r}")

    t = o["type"]
    if t == "Literal":
        return Literal(value_from_obj(o["value"]))
    if t == "Variable":
        return Variable(o["name"])
    if t == "Assign":
        return Assign(o["name"], ast_from_obj(o["value"]))
    if t == "Grouping":
        return Grouping(ast_from_obj(o["inner"]))
    if t == "Unary":
        return Unary(TokenKind(o["op"]), ast_from_obj(o["operand"]))
    if t == "Binary":
        return Binary(ast_from_obj(o["left"]), TokenKind(o["op"]), ast_from_obj(o["right"]))
    if t == "Logical":
        return Logical(ast_from_obj(o["left"]), TokenKind(o["op"]), ast_from_obj(o["right"]))
    if t == "ExprStmt":
        return ExprStmt(ast_from_obj(o["expr"]))
    if t == "PrintStmt":
        return PrintStmt(ast_from_obj(o["expr"]))
    if t == "LetStmt":
        return LetStmt(o["name"], ast_from_obj(o.get("initializer")))
    if t == "Block":
        return Block(ast_from_obj(o["statements"]))
    if t == "IfStmt":
        return IfStmt(
            ast_from_obj(o["condition"]),
            ast_from_obj(o["then_branch"]),
            ast_from_obj(o.get("else_branch")),
        )
    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(statements: Sequence[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": ast_to_obj(statements)}


def program_from_obj(o: Dict[str, Any]) -> List[Stmt]:
    if not isinstance(o, dict) or o.get("type") != "Program":
        raise ValueError("AST JSON root must be a Program object")
    return list(ast_from_obj(o["body"]))
