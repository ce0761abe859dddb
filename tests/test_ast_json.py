import json

import pytest

from stellar.ast import Literal
from stellar.ast_json import ast_to_obj, program_from_obj, program_to_obj
from stellar.interpreter import Interpreter
from stellar.parser import parse_source
from stellar.types import NULL, CharVal


SOURCE = '''
let x = 1;
let c = 'k';
let nothing = null;
{ x += 2; }
if (x > 2 and !true) { print "x is " + x; } else { print c; }
print nothing or c;
'''


def test_json_round_trip_preserves_tree():
    statements = parse_source(SOURCE).statements
    text = json.dumps(program_to_obj(statements))
    restored = program_from_obj(json.loads(text))
    assert tuple(restored) == statements


def test_restored_program_runs(capsys):
    statements = parse_source(SOURCE).statements
    restored = program_from_obj(json.loads(json.dumps(program_to_obj(statements))))
    Interpreter().interpret(restored)
    assert capsys.readouterr().out.splitlines() == ['x is 3', 'k']


def test_literal_values_are_tagged():
    assert ast_to_obj(Literal(CharVal('a'))) == {"type": "Literal", "value": {"kind": "char", "value": "a"}}
    assert ast_to_obj(Literal(NULL)) == {"type": "Literal", "value": {"kind": "null"}}
    assert ast_to_obj(Literal(2.0)) == {"type": "Literal", "value": {"kind": "number", "value": 2.0}}


def test_rejects_unknown_nodes():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Program", "body": [{"type": "WhileStmt"}]})
    with pytest.raises(ValueError):
        program_from_obj({"body": []})
