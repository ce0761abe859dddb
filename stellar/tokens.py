"""Token definitions for the Stellar language.

Every fixed token kind uses its source spelling as the enum value, so
``TokenKind.PLUS.value`` is ``'+'`` and ``TokenKind.LET.value`` is
``'let'``. Literal categories and the end-of-input sentinel use upper
case names instead.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict


class TokenKind(enum.Enum):
    # Punctuation
    LCURLY = '{'
    RCURLY = '}'
    LPAREN = '('
    RPAREN = ')'
    COMMA = ','
    DOT = '.'
    COLON = ':'
    SEMICOLON = ';'

    # Comparison/equality
    BANG = '!'
    EQ = '='
    EQ_EQ = '=='
    NE = '!='
    GT = '>'
    GTE = '>='
    LT = '<'
    LTE = '<='

    # Arithmetic and compound assignment
    PLUS = '+'
    PLUS_EQ = '+='
    MINUS = '-'
    MINUS_EQ = '-='
    STAR = '*'
    STAR_EQ = '*='
    SLASH = '/'
    SLASH_EQ = '/='

    # Keywords
    IF = 'if'
    ELSE = 'else'
    AND = 'and'
    OR = 'or'
    LET = 'let'
    STRUCT = 'struct'
    SELF = 'self'
    WHILE = 'while'
    FOR = 'for'
    RETURN = 'return'
    FUN = 'fun'
    TRUE = 'true'
    FALSE = 'false'
    NULL = 'null'
    PRINT = 'print'

    # Literals
    IDENT = 'IDENT'
    NUMBER = 'NUMBER'
    STRING = 'STRING'
    CHAR = 'CHAR'

    EOF = 'EOF'


KEYWORDS: Dict[str, TokenKind] = {
    kind.value: kind
    for kind in (
        TokenKind.IF, TokenKind.ELSE, TokenKind.AND, TokenKind.OR,
        TokenKind.LET, TokenKind.STRUCT, TokenKind.SELF, TokenKind.WHILE,
        TokenKind.FOR, TokenKind.RETURN, TokenKind.FUN, TokenKind.TRUE,
        TokenKind.FALSE, TokenKind.NULL, TokenKind.PRINT,
    )
}

# Compound assignment token -> the binary operator it applies
COMPOUND_ASSIGN: Dict[TokenKind, TokenKind] = {
    TokenKind.PLUS_EQ: TokenKind.PLUS,
    TokenKind.MINUS_EQ: TokenKind.MINUS,
    TokenKind.STAR_EQ: TokenKind.STAR,
    TokenKind.SLASH_EQ: TokenKind.SLASH,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"[{self.kind.name} {self.lexeme}]"
