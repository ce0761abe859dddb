import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A lexical error reported while scanning."""
    line: int
    message: str

    def __str__(self) -> str:
        return f"[Line: {self.line}] Error: {self.message}"


@dataclass(frozen=True)
class SyntaxDiagnostic(Diagnostic):
    """A syntax error reported while parsing, pinned to the offending lexeme."""
    lexeme: str = ''

    def __str__(self) -> str:
        return f"[Line: {self.line}] Error: at '{self.lexeme}', {self.message}"


class ErrorKind(enum.Enum):
    OPERATOR_NOT_DEFINED = 'Operator not defined'
    ZERO_DIVISION = 'Division by zero'
    TYPE_MISMATCH = 'Type mismatch'
    UNINITIALIZED_ACCESS = 'Uninitialized access'
    UNDEFINED_VARIABLE = 'Undefined variable'
    NESTING_TOO_DEEP = 'Nesting too deep'


class StellarRuntimeError(Exception):
    """Exception type used to propagate Stellar runtime errors."""
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message

    def report(self) -> str:
        return f"Runtime Error: {self}"


class ParseError(Exception):
    """Internal signal used by the parser to unwind to the next declaration."""
