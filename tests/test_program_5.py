from pathlib import Path

from stellar.parser import parse_source
from stellar.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_runtime_errors(capsys):
    with open(EXAMPLES / 'program_5.stellar', 'r', encoding='utf-8') as f:
        source = f.read()
    result = parse_source(source)
    Interpreter().interpret(result.statements)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Runtime Error: Division by zero: cannot divide by zero",
        "after division",
        "n = 1",
        "Runtime Error: Operator not defined: '+' not supported for types 'bool' and 'number'",
        "Runtime Error: Uninitialized access: variable 'u' was not initialized, "
        "cannot read from uninitialized memory",
        "3",
        "Runtime Error: Undefined variable: 'missing'",
        "Runtime Error: Operator not defined: unary '-' not supported for type 'String'",
    ]
