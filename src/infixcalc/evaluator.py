'''
Postfix evaluation on an operand stack.
'''

import logging

from .registry import OPERATORS, AngleMode, lookup_function, to_radians
from .tokens import Number, Identifier, Operator, Call
from .util import (StackUnderflowError, ExcessOperandError,
                   ArgumentCountError, UnknownIdentifierError)


logger = logging.getLogger(__name__)


def _popstack(stack, n, name):
    '''
    Pop n operands, returned in the order they were pushed.
    '''
    if len(stack) < n:
        raise StackUnderflowError(
            '{!r} needs {} operand(s), has {}'.format(name, n, len(stack)))
    if not n:
        return []
    operands = stack[-n:]
    del stack[-n:]
    return operands


def _unknown(name, strict):
    if strict:
        raise UnknownIdentifierError('Unknown name {!r}'.format(name))
    logger.debug('Unknown name %r, using 0', name)
    return 0.0


def _call(spec, args, angle_mode):
    if spec.angular:
        args = [to_radians(arg, angle_mode) for arg in args]
    return float(spec.function(*args))


def evaluate(postfix, angle_mode=AngleMode.RADIANS, strict=False):
    '''
    Evaluate a postfix token sequence to a float.

    :param angle_mode: Unit the trigonometric functions take their argument in.
    :param strict: Raise on unknown names instead of reading them as 0.

    Non-finite results are returned, not raised. An empty sequence is 0.
    '''
    stack = []
    for token in postfix:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Identifier):
            spec = lookup_function(token.name)
            if spec is None:
                stack.append(_unknown(token.name, strict))
            elif spec.arity:
                raise ArgumentCountError(
                    '{}() needs parentheses around its argument'.format(
                        token.name))
            else:
                stack.append(_call(spec, [], angle_mode))
        elif isinstance(token, Call):
            spec = lookup_function(token.name)
            if spec is None:
                value = _unknown(token.name, strict)
                _popstack(stack, token.arity, token.name)
                stack.append(value)
                continue
            if spec.arity != token.arity:
                raise ArgumentCountError(
                    '{}() takes {} argument(s), {} given'.format(
                        token.name, spec.arity, token.arity))
            args = _popstack(stack, spec.arity, token.name)
            stack.append(_call(spec, args, angle_mode))
        elif isinstance(token, Operator):
            spec = OPERATORS[token.symbol]
            args = _popstack(stack, spec.arity, token.symbol)
            stack.append(spec.function(*args))
    if not stack:
        return 0.0
    if len(stack) > 1:
        raise ExcessOperandError(
            '{} values left without an operator between them'.format(
                len(stack)))
    return float(stack[0])
