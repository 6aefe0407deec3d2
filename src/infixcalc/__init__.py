'''
Infix calculator.

Reads the notation people type into a pocket calculator: numbers, + - * / ^,
parentheses, prefix minus, postfix % and !, and a handful of named functions
and constants (sin, cos, tan, ln, log, sqrt, abs, exp, pi, e). Implied
multiplication like 2(3+4) or 2pi works. Trigonometry runs in radians or
degrees.

Text goes through a regex lexer, a shunting-yard converter to postfix, and a
stack evaluator; results are rendered with float noise trimmed.
'''

from .calculator import Calculator, preprocess
from .cli import CLI
from .evaluator import evaluate
from .formatter import format_result
from .lexer import Lexer, tokenize
from .parser import to_postfix
from .registry import AngleMode


__all__ = ('Calculator', 'Lexer', 'CLI', 'AngleMode', 'preprocess',
           'tokenize', 'to_postfix', 'evaluate', 'format_result')
