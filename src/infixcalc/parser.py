'''
Infix to postfix conversion (shunting-yard).
'''

import logging

from .registry import OPERATORS, NEGATE, Associativity
from .tokens import Number, Identifier, Operator, Call
from .util import ParseError, MismatchedParenError


logger = logging.getLogger(__name__)

# After any of these, a + or - has no left operand and is a prefix sign.
_OPERAND_ENDINGS = {')', '%', '!'}


def _is_symbol(token, symbol):
    return isinstance(token, Operator) and token.symbol == symbol


def _is_prefix_position(previous):
    '''
    Return True if a sign following previous can only be unary.
    '''
    if previous is None:
        return True
    return isinstance(previous, Operator) and \
        previous.symbol not in _OPERAND_ENDINGS


def _yields(incoming, top):
    '''
    Return True if the operator on top of the stack must be output before
    incoming is pushed.
    '''
    if not isinstance(top, Operator) or top.symbol not in OPERATORS:
        return False
    spec, top_spec = OPERATORS[incoming], OPERATORS[top.symbol]
    if spec.associativity is Associativity.LEFT:
        return spec.precedence <= top_spec.precedence
    return spec.precedence < top_spec.precedence


class _Frame:
    '''
    One open parenthesis, and the argument count if it opened a call.
    '''
    def __init__(self, call):
        self.call = call
        self.separators = 0
        self.empty = True

    @property
    def arity(self):
        return 0 if self.empty else self.separators + 1


def to_postfix(tokens):
    '''
    Convert an infix token sequence to postfix order.

    Identifiers directly followed by ( become Call tokens carrying their
    argument count; other identifiers are constant references. Parentheses
    and commas don't survive.
    '''
    tokens = list(tokens)
    output = []
    stack = []
    frames = []
    previous = None
    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if frames and not _is_symbol(token, ')'):
            frames[-1].empty = False
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Identifier):
            if _is_symbol(following, '('):
                stack.append(token)
            else:
                output.append(token)
        elif token.symbol == '(':
            frames.append(_Frame(call=isinstance(previous, Identifier)))
            stack.append(token)
        elif token.symbol == ',':
            _unwind(stack, output, ',')
            if not frames[-1].call:
                raise ParseError("',' outside of a function call")
            frames[-1].separators += 1
        elif token.symbol == ')':
            _unwind(stack, output, ')')
            stack.pop()
            frame = frames.pop()
            if frame.call:
                output.append(Call(stack.pop().name, frame.arity))
        elif token.symbol in '+-' and _is_prefix_position(previous):
            if token.symbol == '-':
                stack.append(Operator(NEGATE))
        else:
            while stack and _yields(token.symbol, stack[-1]):
                output.append(stack.pop())
            stack.append(token)
        previous = token
    while stack:
        top = stack.pop()
        if _is_symbol(top, '('):
            raise MismatchedParenError("Missing ')'")
        output.append(top)
    logger.debug('Postfix: %r', output)
    return output


def _unwind(stack, output, closer):
    '''
    Move operators to output down to the nearest (, which stays.
    '''
    while stack and not _is_symbol(stack[-1], '('):
        output.append(stack.pop())
    if not stack:
        if closer == ',':
            raise ParseError("',' outside of parentheses")
        raise MismatchedParenError("Missing '('")
