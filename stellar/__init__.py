# Stellar language package
# This package provides a lexer, parser and tree-walking interpreter for the Stellar language.
__version__ = '0.1.0'

from .driver import Stellar, run_program
from .errors import StellarRuntimeError
from .interpreter import Interpreter, InterpreterMode
from .parser import parse_source

__all__ = [
    'Stellar',
    'run_program',
    'parse_source',
    'Interpreter',
    'InterpreterMode',
    'StellarRuntimeError',
]
