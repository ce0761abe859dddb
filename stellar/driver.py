"""Drives one chunk of source at a time through lexer, parser and interpreter."""

from __future__ import annotations

import platform
import sys
from pathlib import Path
from typing import Sequence

from termcolor import colored

from . import __version__
from .ast import Stmt
from .debug import DebugLog
from .errors import Diagnostic
from .interpreter import Interpreter, InterpreterMode
from .parser import parse_source


def welcome_message() -> str:
    return f"Welcome to Stellar {__version__}, running {platform.machine()} on platform {sys.platform}"


class Stellar:
    """Owns an interpreter and feeds it chunks of source.

    Interpreter state (the global scope) persists across chunks, so a
    REPL session can define a variable on one line and use it on the
    next. Lex and parse diagnostics are returned by value from
    :func:`stellar.parser.parse_source` and never outlive the chunk that
    produced them.
    """
    def __init__(self, mode: InterpreterMode = InterpreterMode.SCRIPT,
                 debug_level: int = 0, debug_file: str = 'debug.txt', color: bool = False):
        self.debug = DebugLog(debug_level, debug_file)
        self.interpreter = Interpreter(mode, debug=self.debug)
        self.color = color

    @property
    def mode(self) -> InterpreterMode:
        return self.interpreter.mode

    def report(self, diagnostic: Diagnostic):
        text = str(diagnostic)
        if self.color:
            text = colored(text, 'red', attrs=['bold'])
        print(text)

    def run(self, source: str) -> bool:
        """Run one chunk. Returns True when it reached the interpreter."""
        result = parse_source(source)
        self.debug(f"chunk: {result.token_count} tokens, "
                   f"{len(result.statements)} statements, {len(result.diagnostics)} errors")
        if not result.ok:
            for diagnostic in result.diagnostics:
                self.report(diagnostic)
            return False
        if not result.statements:
            return False
        if self.debug.enabled(3):
            for stmt in result.statements:
                self.debug(repr(stmt), 3)
        self.execute(result.statements)
        return True

    def execute(self, statements: Sequence[Stmt]):
        self.interpreter.interpret(statements)

    def run_file(self, path: Path) -> bool:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
        return self.run(source)

    def close(self):
        self.debug.close()


def run_program(source: str, mode: InterpreterMode = InterpreterMode.SCRIPT,
                debug_level: int = 0) -> Stellar:
    """Run a complete program and return the driver that ran it."""
    stellar = Stellar(mode, debug_level=debug_level)
    try:
        stellar.run(source)
    finally:
        stellar.close()
    return stellar
