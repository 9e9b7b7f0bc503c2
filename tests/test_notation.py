import pytest

from labstructs.notation import (
    infix_to_postfix,
    infix_to_prefix,
    is_operator,
    main,
    postfix_to_infix,
    postfix_to_prefix,
    precedence,
    prefix_to_infix,
    prefix_to_postfix,
)


def _operands(expression):
    return [ch for ch in expression if ch.isalnum()]


def test_operators_recognised():
    assert all(is_operator(ch) for ch in "+-*/")
    assert not any(is_operator(ch) for ch in "a1()^ ")


def test_precedence_order():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("+") < precedence("*")
    assert precedence("(") < precedence("+")


def test_pinned_postfix_example():
    assert infix_to_postfix("a+b*c") == "abc*+"
    assert postfix_to_infix("abc*+") == "(a+(b*c))"


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*c", "a*b+c", "a-b-c", "a*(b-c)/d"])
def test_infix_to_postfix_keeps_operands_in_order(expression):
    result = infix_to_postfix(expression)
    assert _operands(result) == _operands(expression)
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*c", "a*b+c"])
def test_prefix_and_postfix_routes_agree(expression):
    via_postfix = postfix_to_infix(infix_to_postfix(expression))
    via_prefix = prefix_to_infix(infix_to_prefix(expression))
    assert via_postfix == via_prefix


@pytest.mark.parametrize("postfix", ["ab+", "abc*+", "ab+c*", "ab-c-", "abc-*d/"])
def test_postfix_infix_round_trip(postfix):
    assert infix_to_postfix(postfix_to_infix(postfix)) == postfix


@pytest.mark.parametrize("postfix", ["ab+", "abc*+", "ab+c*", "abc-*d/"])
def test_postfix_prefix_round_trip(postfix):
    prefix = postfix_to_prefix(postfix)
    assert prefix_to_postfix(prefix) == postfix
    assert _operands(prefix) == _operands(postfix)


@pytest.mark.parametrize("prefix", ["+ab", "+a*bc", "*+abc"])
def test_prefix_infix_round_trip(prefix):
    assert infix_to_prefix(prefix_to_infix(prefix)) == prefix


def test_spaces_are_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")
    assert infix_to_prefix(" ( a + b ) * c ") == infix_to_prefix("(a+b)*c")


@pytest.mark.parametrize(
    "convert, expression",
    [
        (postfix_to_infix, "+"),
        (postfix_to_infix, "ab"),
        (postfix_to_infix, ""),
        (prefix_to_infix, "+a"),
        (prefix_to_postfix, "*"),
        (postfix_to_prefix, "a+"),
        (infix_to_postfix, "a+b)"),
        (infix_to_postfix, "(a+b"),
        (infix_to_prefix, "(a+b"),
    ],
)
def test_malformed_expressions_raise(convert, expression):
    with pytest.raises(ValueError):
        convert(expression)


def test_main_prints_conversion(capsys):
    assert main(["infix-to-postfix", "a+b*c"]) == 0
    out = capsys.readouterr().out
    assert out == f"Postfix expression: {infix_to_postfix('a+b*c')}\n"


def test_main_reports_error(capsys):
    assert main(["postfix-to-infix", "+"]) == 1
    assert "error" in capsys.readouterr().err