'''
Postfix evaluator tests
'''

import math

import regex

from infixcalc.evaluator import evaluate
from infixcalc.lexer import tokenize
from infixcalc.parser import to_postfix
from infixcalc.registry import AngleMode
from infixcalc.tokens import Number, Identifier, Operator, Call
from infixcalc.util import (StackUnderflowError, ExcessOperandError,
                            ArgumentCountError, UnknownIdentifierError)

from pytest import approx, mark, raises


def run(text, **kwargs):
    return evaluate(to_postfix(tokenize(text)), **kwargs)


def test_postfix_directly():
    assert evaluate([Number(2.0), Number(3.0), Operator('+')]) == 5
    assert evaluate([Number(7.0), Number(2.0), Operator('-')]) == 5
    assert evaluate([Number(9.0), Call('sqrt', 1)]) == 3
    assert evaluate([Identifier('pi')]) == math.pi


@mark.parametrize('expression', [
    '1+2*3-4/5',
    '(1+2)*(3-4)/5',
    '10/4/2',
    '100-10-1',
    '2*(3+(4-1))*2',
    '0.1+0.2',
    '((7))',
])
def test_matches_python_arithmetic(expression):
    assert run(expression) == eval(expression)


def test_power_is_right_associative():
    assert run('2^3^2') == 512


def test_negation():
    assert run('-2^2') == -4
    assert run('2^-1') == 0.5
    assert run('2*-3') == -6
    assert run('--2') == 2


def test_factorial():
    assert run('5!') == 120
    assert run('0!') == 1
    assert run('3!!') == 720
    assert run('-3!') == -6
    assert math.isnan(run('(-1)!'))
    assert math.isnan(run('2.5!'))
    assert run('171!') == math.inf
    assert math.isfinite(run('170!'))


def test_percent():
    assert run('50%') == 0.5
    assert run('200+50%') == 200.5
    assert run('3!%') == approx(0.06)


def test_division_by_zero():
    assert run('1/0') == math.inf
    assert run('-1/0') == -math.inf
    assert math.isnan(run('0/0'))


def test_power_edge_cases():
    assert math.isnan(run('(-8)^(1/3)'))
    assert run('10^400') == math.inf
    assert run('(-10)^401') == -math.inf
    assert run('0^-1') == math.inf


def test_functions():
    assert run('sqrt(16)') == 4
    assert run('ln(e)') == 1
    assert run('log(1000)') == approx(3)
    assert run('abs(-2)') == 2
    assert run('exp(0)') == 1
    assert run('\N{GREEK SMALL LETTER PI}') == math.pi
    assert run('pi()') == math.pi
    assert math.isnan(run('sqrt(-1)'))


def test_names_ignore_case():
    assert run('SQRT(9)') == 3
    assert run('Pi') == math.pi


def test_angle_mode():
    assert run('sin(0)') == 0
    assert run('sin(90)', angle_mode=AngleMode.DEGREES) == approx(1)
    assert run('cos(180)', angle_mode=AngleMode.DEGREES) == approx(-1)
    assert run('sin(pi/2)') == approx(1)
    # Only trigonometry cares.
    assert run('sqrt(90)', angle_mode=AngleMode.DEGREES) == run('sqrt(90)')


def test_empty():
    assert evaluate([]) == 0
    assert run('') == 0
    assert run('   ') == 0


def test_underflow():
    with raises(StackUnderflowError,
                match=regex.escape("'*' needs 2 operand(s), has 0")):
        run('*')
    with raises(StackUnderflowError):
        run('2+')
    with raises(StackUnderflowError):
        run('2*(3+)')


def test_excess_operands():
    with raises(ExcessOperandError):
        run('2 3')


def test_unknown_names_lenient():
    assert run('foo') == 0
    assert run('1+foo(3)') == 1
    assert run('2*x') == 0


def test_unknown_names_strict():
    with raises(UnknownIdentifierError,
                match=regex.escape("Unknown name 'foo'")):
        run('foo', strict=True)
    with raises(UnknownIdentifierError):
        run('foo(3)', strict=True)


def test_argument_count():
    with raises(ArgumentCountError, match='needs parentheses'):
        run('sqrt')
    with raises(ArgumentCountError,
                match=regex.escape('sqrt() takes 1 argument(s), 2 given')):
        run('sqrt(1, 2)')
    with raises(ArgumentCountError):
        run('sqrt()')
