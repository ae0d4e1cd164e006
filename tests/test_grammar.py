import dataclasses

import pytest

from yieldlang import (
    parse_program, parse_expr, Boolean, Integer, String, Literal, Identifier,
    AssignmentExpr, FunctionApplication, Block, ParseError,
    MalformedLiteralError, IncompleteParseError, NestingTooDeepError,
)


def I(name):
    return Identifier(name)


def num(n):
    return Literal(Integer(n))


def app(*terms):
    head, *tail = terms
    for t in tail:
        head = FunctionApplication(head, t)
    return head


# ---- terminals / grouping ----

@pytest.mark.parametrize("text, expected", [
    ("42", num(42)),
    ("x", I("x")),
    ('"hi"', Literal(String("hi"))),
    ("true", Literal(Boolean(True))),
    ("false", Literal(Boolean(False))),
    ("truefoo", I("truefoo")),
    ("false_flag", I("false_flag")),
    ("(x)", I("x")),
    ("(  x  )", I("x")),
    ("((42))", num(42)),
    ("   x\t", I("x")),
])
def test_terminals_and_grouping(text, expected):
    assert parse_expr(text) == expected


# ---- application ----

def test_application_is_left_associative():
    assert parse_expr("f a b c") == FunctionApplication(
        FunctionApplication(FunctionApplication(I("f"), I("a")), I("b")), I("c")
    )


def test_application_nodes_are_binary():
    e = parse_expr("f 1 2")
    assert isinstance(e, FunctionApplication)
    assert e.argument == num(2)
    assert e.callee == FunctionApplication(I("f"), num(1))


@pytest.mark.parametrize("text, expected", [
    ("f (g x) y", app(I("f"), app(I("g"), I("x")), I("y"))),
    ("(f a) b", app(I("f"), I("a"), I("b"))),
    ("f  a", app(I("f"), I("a"))),
    ("f\ta", app(I("f"), I("a"))),
    ("print \"hi\" true 3", app(I("print"), Literal(String("hi")), Literal(Boolean(True)), num(3))),
    ("f (x = 1)", app(I("f"), AssignmentExpr("x", num(1)))),
    ("(x = f) y", app(AssignmentExpr("x", I("f")), I("y"))),
])
def test_application_shapes(text, expected):
    assert parse_expr(text) == expected


# ---- assignment ----

def test_assignment():
    assert parse_expr("x = f 1") == AssignmentExpr("x", app(I("f"), num(1)))


def test_assignment_value_can_be_parenthesized_assignment():
    assert parse_expr("x = (y = 1)") == AssignmentExpr("x", AssignmentExpr("y", num(1)))


def test_assignment_does_not_chain():
    with pytest.raises(IncompleteParseError):
        parse_expr("a = b = 1")


def test_assignment_requires_whitespace():
    with pytest.raises(IncompleteParseError) as exc:
        parse_expr("x=1")
    assert exc.value.col == 2


def test_assignment_to_boolean_name():
    # true/false are not reserved names
    assert parse_expr("true = 1") == AssignmentExpr("true", num(1))


def test_assignment_target_must_be_identifier():
    with pytest.raises(ParseError):
        parse_expr("1 = x")


# ---- program ----

TWO = Block((AssignmentExpr("x", num(1)), AssignmentExpr("y", num(2))))


@pytest.mark.parametrize("source", [
    "x = 1\ny = 2\n",
    "x = 1\ny = 2",
    "x = 1\r\ny = 2\r\n",
    "x = 1\n\n\ny = 2\n\n",
    "x = 1  \n   \n  y = 2  ",
    "x = 1\ny = 2\n   ",
])
def test_program_statements_in_order(source):
    assert parse_program(source) == TWO


def test_program_single_statement():
    assert parse_program("main") == Block((I("main"),))


def test_program_is_never_empty():
    with pytest.raises(ParseError) as exc:
        parse_program("")
    assert type(exc.value) is ParseError
    assert exc.value.rules[0] == "terminals"
    assert exc.value.rules[-1] == "program"


def test_program_trailing_garbage_is_incomplete():
    with pytest.raises(IncompleteParseError) as exc:
        parse_program("x = 1\n)")
    assert (exc.value.line, exc.value.col) == (2, 1)


def test_integer_followed_by_letters_is_incomplete():
    with pytest.raises(IncompleteParseError):
        parse_program("123abc")


def test_out_of_range_integer_in_program():
    with pytest.raises(MalformedLiteralError) as exc:
        parse_program("x = 99999999999")
    assert "does not fit in 32 bits" in str(exc.value)
    assert exc.value.col == 5


def test_invalid_code_point_in_program():
    with pytest.raises(MalformedLiteralError):
        parse_program('s = "\\u{110000}"\n')


def test_nesting_limit():
    deep = "(" * 40 + "x" + ")" * 40
    with pytest.raises(NestingTooDeepError):
        parse_program(deep)


def test_nesting_limit_is_configurable():
    assert parse_program("(((x)))", max_depth=4) == Block((I("x"),))
    with pytest.raises(NestingTooDeepError):
        parse_program("(((x)))", max_depth=3)


def test_nesting_past_interpreter_stack_is_too_deep():
    deep = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(NestingTooDeepError):
        parse_program(deep, max_depth=100000)


def test_moderate_nesting_parses():
    text = "(" * 20 + "f x" + ")" * 20
    assert parse_program(text) == Block((app(I("f"), I("x")),))


def test_tree_is_immutable():
    block = parse_program("x = 1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.exprs[0].name = "y"
    assert isinstance(block.exprs, tuple)


def test_parse_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        parse_program("x = ")
