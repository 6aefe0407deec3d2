'''
Tokens passed between the lexer, the converter and the evaluator.

All of them are immutable. Call only ever appears in postfix sequences.
str() gives the token as it would be written.
'''

from dataclasses import dataclass


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self):
        text = repr(self.value)
        # 2.0 -> 2
        return text[:-2] if text.endswith('.0') else text


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class Call:
    name: str
    arity: int

    def __str__(self):
        return '{}/{}'.format(self.name, self.arity)
