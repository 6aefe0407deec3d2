from functools import reduce
import logging
import math
import operator

import regex

from .registry import OPERATORS, NEGATE, PARENS, SEPARATOR
from .tokens import Number, Identifier, Operator
from .util import MalformedNumberError, wrap_user_errors


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the infix *regular* grammar.

    Holds no state besides the number policy: lenient lexers read a malformed
    number as far as it makes sense (1.2.3 is 1.2), strict ones refuse it.
    '''
    # Digits and dots, however many. Whether that's a number is decided later.
    NUMBER = r'[0-9.]+'
    # sin, log, pi, x_1, π
    NAME_START = '[A-Za-z\N{GREEK SMALL LETTER PI}]'
    NAME = NAME_START + '[A-Za-z0-9_]*'

    SYMBOLS = tuple(symbol
                    for symbol
                    in OPERATORS
                    if symbol != NEGATE) + PARENS + (SEPARATOR,)
    assert not [symbol
                for symbol
                in SYMBOLS
                if len(symbol) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'
    SPACE = r'\s+'
    # Anything else is dropped, one character at a time.
    UNKNOWN = r'.'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<name>' + NAME + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')|' \
             r'(?<unknown>' + UNKNOWN + r')'
    # Default regex flags for matching lexemes. Not POSIX: the first
    # alternative that matches wins, so UNKNOWN only catches leftovers.
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Longest prefix of a digit/dot run that reads as a float.
    LEADING_NUMBER = r'[0-9]*(?:\.[0-9]*)?'

    def __init__(self, strict=False):
        self.strict = strict

    def lex(self, line):
        '''
        Take a line and yield all lexemes, spaces and unknown characters
        included.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            yield match
            line = line[len(match.group(0)):]

    def tokenize(self, line):
        '''
        Take a line and return its tokens, in order.
        '''
        tokens = []
        for match in self.lex(line):
            groups = self.matchedgroups(match)
            if 'number' in groups:
                tokens.append(Number(self._convert(groups['number'])))
            elif 'name' in groups:
                tokens.append(Identifier(groups['name']))
            elif 'operator' in groups:
                tokens.append(Operator(groups['operator']))
            elif 'unknown' in groups:
                logger.debug('Skipping unknown character %r', groups['unknown'])
        return tokens

    def _convert(self, number):
        '''
        Convert a run of digits and dots to a float, per the number policy.
        '''
        if self.strict:
            return self._strict_convert(number)
        prefix = regex.match(type(self).LEADING_NUMBER, number).group(0)
        if prefix != number:
            logger.debug('Reading malformed number %r as %r', number, prefix)
        try:
            return float(prefix)
        except ValueError:
            return math.nan

    @wrap_user_errors('Malformed number {1!r}', MalformedNumberError)
    def _strict_convert(self, number):
        return float(number)

    def matchedgroups(self, match):
        '''
        Return the named groups that matched, with their text.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}


def tokenize(line, strict=False):
    '''
    Tokenize line with a throwaway Lexer.
    '''
    return Lexer(strict=strict).tokenize(line)
