import pytest

from kappa.builtin import env_builtin
from kappa.errors import KappaArityError, KappaTypeError, KappaZeroDivisionError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(+ -1 5 -3)", 1),
        ("(- 10 3 2)", 5),
        ("(- 5)", -5),
        ("(-)", 0),
        ("(- -10 -5)", -5),
        ("(* 2 3 4)", 24),
        ("(*)", 1),
        ("(* -2 3)", -6),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 100 5 2)", 10),
        ("(/ 9)", 9),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("(+ 9223372036854775807 1)", -9223372036854775808),
        ("(* 4611686018427387904 2)", -9223372036854775808),
        ("(/ -9223372036854775808 -1)", -9223372036854775808),
    ]
)
def test_arithmetic(interp, source, expected):
    result = interp.eval(source)
    assert type(result) is int
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(!= 1 2)", True),
        ("(!= 3 3)", False),
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(> 3 2)", True),
        ("(>= 2 2)", True),
        ("(<= 3 2)", False),
        ("(<= -3 2)", True),
        ("(not (= 1 2))", True),
        ("(not (< 1 2))", False),
    ]
)
def test_relational_and_not(interp, source, expected):
    result = interp.eval(source)
    assert type(result) is bool
    assert result is expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(/ 1 0)", KappaZeroDivisionError),
        ("(/ 10 2 0)", KappaZeroDivisionError),
        ("(/)", KappaArityError),
        ("(+ 1 (= 1 1))", KappaTypeError),
        ("(- (= 1 1) 2)", KappaTypeError),
        ("(* 2 (lambda (x) x))", KappaTypeError),
        ("(/ (= 1 1))", KappaTypeError),
        ("(= 1)", KappaArityError),
        ("(= 1 2 3)", KappaArityError),
        ("(< 1 (= 1 1))", KappaTypeError),
        ("(not 1)", KappaTypeError),
        ("(not)", KappaArityError),
        ("(not (= 1 1) (= 1 1))", KappaArityError),
    ]
)
def test_arithmetic_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_builtins_called_directly(env):
    assert env_builtin.add(env, [1, 2]) == 3
    assert env_builtin.sub(env, [7]) == -7
    assert env_builtin.truncating_div(-9, 4) == -2
    assert env_builtin.ge(env, [2, 1]) is True
    assert env_builtin.logical_not(env, [False]) is True
