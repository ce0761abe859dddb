"""Lexical analysis for the Stellar language.

The lexer makes a single left-to-right pass over the source and turns it
into a list of :class:`~stellar.tokens.Token` values terminated by one
``EOF`` token. Malformed input never stops the scan: each problem is
recorded as a :class:`~stellar.errors.Diagnostic`, the offending
character is skipped and scanning carries on, so one chunk of source can
surface several lexical errors at once.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import Diagnostic
from .tokens import KEYWORDS, Token, TokenKind


# Characters that may be followed by '=' to form a two-character operator
TWO_CHAR_OPS = {
    '!': (TokenKind.BANG, TokenKind.NE),
    '=': (TokenKind.EQ, TokenKind.EQ_EQ),
    '<': (TokenKind.LT, TokenKind.LTE),
    '>': (TokenKind.GT, TokenKind.GTE),
    '+': (TokenKind.PLUS, TokenKind.PLUS_EQ),
    '-': (TokenKind.MINUS, TokenKind.MINUS_EQ),
    '*': (TokenKind.STAR, TokenKind.STAR_EQ),
}

SINGLE_CHAR_TOKENS = {
    '{': TokenKind.LCURLY,
    '}': TokenKind.RCURLY,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ',': TokenKind.COMMA,
    '.': TokenKind.DOT,
    ':': TokenKind.COLON,
    ';': TokenKind.SEMICOLON,
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


def is_alnum(c: str) -> bool:
    return is_digit(c) or is_alpha(c)


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.cursor = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.cursor
            self.scan_token()
        self.tokens.append(Token(TokenKind.EOF, '', self.line))
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in TWO_CHAR_OPS:
            single, double = TWO_CHAR_OPS[c]
            self.add_token(double if self.next_matches('=') else single)
        elif c == '/':
            if self.next_matches('/'):
                self.line_comment()
            elif self.next_matches('*'):
                self.block_comment()
            elif self.next_matches('='):
                self.add_token(TokenKind.SLASH_EQ)
            else:
                self.add_token(TokenKind.SLASH)
        elif c in ' \t\r':
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif c == '\'':
            self.char()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.error(f"Unexpected symbol '{c}'")

    def add_token(self, kind: TokenKind, lexeme: Optional[str] = None) -> None:
        if lexeme is None:
            lexeme = self.source[self.start:self.cursor]
        self.tokens.append(Token(kind, lexeme, self.line))

    def error(self, message: str) -> None:
        self.diagnostics.append(Diagnostic(self.line, message))

    def string(self) -> None:
        while not self.is_at_end() and self.peek() != '"':
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.error("Unterminated string literal")
            return
        self.advance()  # closing quote
        self.add_token(TokenKind.STRING, self.source[self.start + 1:self.cursor - 1])

    def char(self) -> None:
        if self.is_at_end():
            self.error("Unterminated character literal")
            return
        value = self.advance()
        if value == '\n':
            self.line += 1
        if self.peek() != '\'':
            self.error("Unterminated character literal")
            if not self.is_at_end():
                self.advance()
            return
        self.advance()  # closing quote
        self.add_token(TokenKind.CHAR, value)

    def number(self) -> None:
        while is_digit(self.peek()):
            self.advance()
        if self.peek() == '.':
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenKind.NUMBER)

    def identifier(self) -> None:
        while is_alnum(self.peek()):
            self.advance()
        text = self.source[self.start:self.cursor]
        self.add_token(KEYWORDS.get(text, TokenKind.IDENT))

    def line_comment(self) -> None:
        while not self.is_at_end() and self.peek() != '\n':
            self.advance()

    def block_comment(self) -> None:
        while not self.is_at_end():
            c = self.advance()
            if c == '\n':
                self.line += 1
            elif c == '*' and self.peek() == '/':
                self.advance()
                return
        self.error("Unterminated multi-line comment")

    def advance(self) -> str:
        c = self.source[self.cursor]
        self.cursor += 1
        return c

    def next_matches(self, expected: str) -> bool:
        if self.peek() != expected:
            return False
        self.cursor += 1
        return True

    def peek(self) -> str:
        # '' at end of input never matches any character class
        if self.is_at_end():
            return ''
        return self.source[self.cursor]

    def is_at_end(self) -> bool:
        return self.cursor >= len(self.source)


def tokenize(source: str) -> Lexer:
    """Scan ``source`` and return the lexer holding its tokens and diagnostics."""
    lexer = Lexer(source)
    lexer.scan_tokens()
    return lexer
