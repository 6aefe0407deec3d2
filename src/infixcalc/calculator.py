import logging

import regex

from .evaluator import evaluate
from .formatter import DEFAULT_PRECISION, format_result
from .lexer import Lexer
from .parser import to_postfix
from .registry import AngleMode
from .util import CalcError


logger = logging.getLogger(__name__)

# Display glyphs people paste in, and their ASCII operators.
GLYPHS = str.maketrans({
    '\N{MULTIPLICATION SIGN}': '*',
    '\N{ASTERISK OPERATOR}': '*',
    '\N{MIDDLE DOT}': '*',
    '\N{DIVISION SIGN}': '/',
    '\N{DIVISION SLASH}': '/',
    '\N{MINUS SIGN}': '-',
    '\N{EN DASH}': '-',
    '\N{EM DASH}': '-',
})

# Where a * is implied: 2(3), 2pi, (1)(2), (1)2, (1)pi. Names are matched
# whole first so the digits in log10( stay put.
IMPLICIT_MULTIPLICATION = regex.compile(
    r'(?<name>' + Lexer.NAME + r')|'
    r'(?<number>[0-9.]+)(?=\s*(?:\(|' + Lexer.NAME_START + r'))|'
    r'(?<close>\))(?=\s*(?:[(0-9.]|' + Lexer.NAME_START + r'))')


def _multiply(match):
    if match.group('name'):
        return match.group(0)
    return match.group(0) + '*'


def preprocess(raw):
    '''
    Rewrite raw input into the plain grammar the lexer reads.

    Normalises operator glyphs and spells out implicit multiplication.
    '''
    return IMPLICIT_MULTIPLICATION.sub(_multiply, raw.translate(GLYPHS))


class Calculator:
    '''
    Infix calculator.

    Carries the settings an evaluation depends on, so callers only hand over
    the text they got from the user.
    '''

    DEFAULT_ANGLE_MODE = AngleMode.RADIANS
    DEFAULT_PRECISION = DEFAULT_PRECISION
    # What display() shows instead of a result.
    ERROR = 'Error'

    def __init__(self, angle_mode=None, strict_identifiers=False,
                 strict_numbers=False, precision=None):
        '''
        Create calculator.

        :param angle_mode: AngleMode for sin, cos and tan.
        :param strict_identifiers: Raise on unknown names rather than use 0.
        :param strict_numbers: Raise on numbers like 1.2.3 rather than read
                               as much as makes sense.
        :param precision: Significant digits shown by display().
        '''
        self.angle_mode = angle_mode or type(self).DEFAULT_ANGLE_MODE
        self.strict_identifiers = strict_identifiers
        self.strict_numbers = strict_numbers
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        if precision < 1:
            raise ValueError(
                'Precision must be at least 1, not {}'.format(precision))
        self.precision = precision

    def toggle_angle_mode(self):
        '''
        Switch between radians and degrees, returning the new mode.
        '''
        if self.angle_mode is AngleMode.RADIANS:
            self.angle_mode = AngleMode.DEGREES
        else:
            self.angle_mode = AngleMode.RADIANS
        return self.angle_mode

    def tokenize(self, raw):
        return Lexer(strict=self.strict_numbers).tokenize(preprocess(raw))

    def postfix(self, raw):
        '''
        Return the postfix sequence raw converts to.
        '''
        return to_postfix(self.tokenize(raw))

    def evaluate(self, raw):
        '''
        Evaluate raw to a float, nan and infinities included.

        Blank input is 0. Malformed input raises a CalcError.
        '''
        return evaluate(self.postfix(raw),
                        angle_mode=self.angle_mode,
                        strict=self.strict_identifiers)

    def format(self, value):
        return format_result(value, self.precision)

    def display(self, raw):
        '''
        Evaluate and format raw, or return ERROR if that isn't possible.
        '''
        try:
            return self.format(self.evaluate(raw))
        except CalcError as e:
            logger.debug('Cannot display %r: %s', raw, e.args[0])
            return type(self).ERROR
