from stellar.ast import (
    Assign, Binary, Block, ExprStmt, Grouping, IfStmt, LetStmt, Literal,
    Logical, PrintStmt, Unary, Variable,
)
from stellar.parser import parse_source
from stellar.tokens import TokenKind
from stellar.types import NULL, CharVal


def parse_one(source):
    result = parse_source(source)
    assert result.ok, [str(d) for d in result.diagnostics]
    assert len(result.statements) == 1
    return result.statements[0]


def test_multiplication_binds_tighter_than_addition():
    stmt = parse_one('1 + 2 * 3;')
    assert stmt == ExprStmt(Binary(
        Literal(1.0), TokenKind.PLUS,
        Binary(Literal(2.0), TokenKind.STAR, Literal(3.0)),
    ))


def test_binary_tiers_are_left_associative():
    stmt = parse_one('a - b - c;')
    assert stmt.expr == Binary(
        Binary(Variable('a'), TokenKind.MINUS, Variable('b')),
        TokenKind.MINUS, Variable('c'),
    )


def test_comparison_below_equality():
    stmt = parse_one('1 < 2 == true;')
    assert stmt.expr == Binary(
        Binary(Literal(1.0), TokenKind.LT, Literal(2.0)),
        TokenKind.EQ_EQ, Literal(True),
    )


def test_unary_is_right_associative_prefix():
    stmt = parse_one('!-x;')
    assert stmt.expr == Unary(TokenKind.BANG, Unary(TokenKind.MINUS, Variable('x')))


def test_grouping_and_atoms():
    stmt = parse_one("(null);")
    assert stmt.expr == Grouping(Literal(NULL))
    assert parse_one("'c';").expr == Literal(CharVal('c'))
    assert parse_one('"s";').expr == Literal('s')
    assert parse_one('false;').expr == Literal(False)


def test_assignment_is_right_associative():
    stmt = parse_one('a = b = 3;')
    assert stmt.expr == Assign('a', Assign('b', Literal(3.0)))


def test_compound_assignment_desugars():
    stmt = parse_one('total *= 2;')
    assert stmt.expr == Assign('total', Binary(Variable('total'), TokenKind.STAR, Literal(2.0)))


def test_logical_operators():
    stmt = parse_one('a or b and c == d;')
    assert stmt.expr == Logical(
        Variable('a'), TokenKind.OR,
        Logical(Variable('b'), TokenKind.AND,
                Binary(Variable('c'), TokenKind.EQ_EQ, Variable('d'))),
    )


def test_statements():
    result = parse_source('let x; let y = 2; print y; { x = 1; }')
    assert result.statements == (
        LetStmt('x', None),
        LetStmt('y', Literal(2.0)),
        PrintStmt(Variable('y')),
        Block((ExprStmt(Assign('x', Literal(1.0))),)),
    )


def test_if_else_branches_are_blocks():
    stmt = parse_one('if (x) { print 1; } else { print 2; print 3; }')
    assert stmt == IfStmt(
        Variable('x'),
        Block((PrintStmt(Literal(1.0)),)),
        Block((PrintStmt(Literal(2.0)), PrintStmt(Literal(3.0)))),
    )
    assert parse_one('if (x) { }').else_branch is None


def test_lvalue_required():
    result = parse_source('1 = 2;')
    assert [str(d) for d in result.diagnostics] == ["[Line: 1] Error: at '=', lvalue required"]


def test_missing_semicolon_reports_offending_lexeme():
    result = parse_source('print 1\nprint 2;')
    assert [str(d) for d in result.diagnostics] == [
        "[Line: 2] Error: at 'print', Expected ';' after expression",
    ]


def test_panic_mode_recovers_and_reports_every_error():
    source = 'let = 1;\nprint (2;\nlet ok = 3;\n1 +;'
    result = parse_source(source)
    assert [str(d) for d in result.diagnostics] == [
        "[Line: 1] Error: at '=', Expected identifier after 'let'",
        "[Line: 2] Error: at ';', Expected ')' after expression",
        "[Line: 4] Error: at ';', Expected expression",
    ]
    assert LetStmt('ok', Literal(3.0)) in result.statements
    assert not result.ok


def test_synchronize_stops_before_statement_keyword():
    result = parse_source('print + let x = 1;')
    assert len(result.diagnostics) == 1
    assert result.statements == (LetStmt('x', Literal(1.0)),)


def test_unclosed_block():
    result = parse_source('{ print 1;')
    assert [str(d) for d in result.diagnostics] == ["[Line: 1] Error: at '', Expected '}' after block"]


def test_lexical_error_skips_parsing():
    result = parse_source('print 1; ~')
    assert result.statements == ()
    assert [str(d) for d in result.diagnostics] == ["[Line: 1] Error: Unexpected symbol '~'"]
