'''
Shunting-yard conversion tests
'''

import regex

from infixcalc.lexer import tokenize
from infixcalc.parser import to_postfix
from infixcalc.tokens import Number, Identifier, Operator, Call
from infixcalc.util import ParseError, MismatchedParenError

from pytest import raises


def postfix(text):
    return ' '.join(map(str, to_postfix(tokenize(text))))


def test_precedence():
    assert to_postfix(tokenize('2+3*4')) == [Number(2.0),
                                             Number(3.0),
                                             Number(4.0),
                                             Operator('*'),
                                             Operator('+')]
    assert postfix('2*3+4') == '2 3 * 4 +'
    assert postfix('(2+3)*4') == '2 3 + 4 *'


def test_left_associative():
    assert postfix('1-2-3') == '1 2 - 3 -'
    assert postfix('8/4/2') == '8 4 / 2 /'


def test_right_associative_power():
    assert postfix('2^3^2') == '2 3 2 ^ ^'


def test_prefix_minus():
    assert postfix('-2^2') == '2 2 ^ _'
    assert postfix('2^-1') == '2 1 _ ^'
    assert postfix('2*-3') == '2 3 _ *'
    assert postfix('-2+3') == '2 _ 3 +'
    assert postfix('2--3') == '2 3 _ -'
    assert postfix('(-1)!') == '1 _ !'


def test_prefix_plus_dropped():
    assert postfix('+3') == '3'
    assert postfix('2*+3') == '2 3 *'


def test_postfix_operators():
    assert postfix('3!%') == '3 ! %'
    assert postfix('2^3!') == '2 3 ! ^'
    assert postfix('200+50%') == '200 50 % +'
    assert postfix('-3!') == '3 ! _'


def test_function_calls():
    assert to_postfix(tokenize('sin(30)')) == [Number(30.0), Call('sin', 1)]
    assert postfix('sqrt(2+2)*2') == '2 2 + sqrt/1 2 *'
    assert postfix('sqrt(sqrt(16))') == '16 sqrt/1 sqrt/1'
    assert postfix('f()') == 'f/0'
    assert postfix('f(1, 2*3)') == '1 2 3 * f/2'


def test_constants():
    assert to_postfix(tokenize('pi*2')) == [Identifier('pi'),
                                            Number(2.0),
                                            Operator('*')]


def test_missing_close():
    with raises(MismatchedParenError, match=regex.escape("Missing ')'")):
        to_postfix(tokenize('(1+2'))
    with raises(MismatchedParenError):
        to_postfix(tokenize('sin(30'))


def test_missing_open():
    with raises(MismatchedParenError, match=regex.escape("Missing '('")):
        to_postfix(tokenize('1+2)'))


def test_stray_separator():
    with raises(ParseError, match='outside of parentheses'):
        to_postfix(tokenize('1,2'))
    with raises(ParseError, match='outside of a function call'):
        to_postfix(tokenize('(1,2)'))


def test_empty():
    assert to_postfix([]) == []
