'''
Operator and function tables.

Both tables are read-only. Every rule answers nan on a domain error and inf on
overflow instead of raising, the way float arithmetic does.
'''

from collections import namedtuple
from enum import Enum
from functools import wraps
from types import MappingProxyType

import math
import operator


class Associativity(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class AngleMode(Enum):
    RADIANS = 'rad'
    DEGREES = 'deg'


OperatorSpec = namedtuple('OperatorSpec',
                          'precedence associativity arity function')
FunctionSpec = namedtuple('FunctionSpec', 'arity function angular')

# Largest n whose factorial is still a finite float.
MAX_FACTORIAL = 170

# Symbol the converter substitutes for a prefix minus.
NEGATE = '_'


def _ieee(f):
    '''
    Make a math function answer nan on domain errors and inf on overflow.
    '''
    @wraps(f)
    def wrapped(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapped


def _divide(left, right):
    '''
    True division, with x/0 giving a signed infinity and 0/0 giving nan.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base, exponent):
    '''
    Real power.

    Negative bases with fractional exponents have no real answer: nan.
    '''
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0 and exponent < 0:
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf


def _percent(n):
    return n / 100


def _factorial(n):
    '''
    Product of 2..n, with 0! = 1.

    Only defined for non-negative integers; anything else is nan.
    '''
    if math.isnan(n) or n < 0:
        return math.nan
    if math.isinf(n):
        return math.inf
    if not float(n).is_integer():
        return math.nan
    if n > MAX_FACTORIAL:
        return math.inf
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def _constant(value):
    def wrapped():
        return value
    return wrapped


OPERATORS = MappingProxyType({
    '+': OperatorSpec(2, Associativity.LEFT, 2, operator.__add__),
    '-': OperatorSpec(2, Associativity.LEFT, 2, operator.__sub__),
    '*': OperatorSpec(3, Associativity.LEFT, 2, operator.__mul__),
    '/': OperatorSpec(3, Associativity.LEFT, 2, _divide),
    NEGATE: OperatorSpec(4, Associativity.RIGHT, 1, operator.__neg__),
    '^': OperatorSpec(5, Associativity.RIGHT, 2, _power),
    # Postfix; bind to the operand right before them.
    '%': OperatorSpec(6, Associativity.LEFT, 1, _percent),
    '!': OperatorSpec(6, Associativity.LEFT, 1, _factorial),
})

# Punctuation the lexer recognises alongside the operators.
PARENS = '(', ')'
SEPARATOR = ','

FUNCTIONS = MappingProxyType({
    'pi': FunctionSpec(0, _constant(math.pi), False),
    '\N{GREEK SMALL LETTER PI}': FunctionSpec(0, _constant(math.pi), False),
    'e': FunctionSpec(0, _constant(math.e), False),

    'sin': FunctionSpec(1, _ieee(math.sin), True),
    'cos': FunctionSpec(1, _ieee(math.cos), True),
    'tan': FunctionSpec(1, _ieee(math.tan), True),
    'ln': FunctionSpec(1, _ieee(math.log), False),
    'log': FunctionSpec(1, _ieee(math.log10), False),
    'sqrt': FunctionSpec(1, _ieee(math.sqrt), False),
    'abs': FunctionSpec(1, _ieee(math.fabs), False),
    'exp': FunctionSpec(1, _ieee(math.exp), False),
})


def lookup_function(name):
    '''
    Return the FunctionSpec for name, ignoring case, or None.
    '''
    return FUNCTIONS.get(name.lower())


def to_radians(value, angle_mode):
    '''
    Convert an angle given in angle_mode to radians.
    '''
    if angle_mode is AngleMode.DEGREES:
        return math.radians(value)
    return value
