from functools import wraps


class CalcError(Exception):
    pass


class MalformedNumberError(CalcError):
    pass


class ParseError(CalcError):
    pass


class MismatchedParenError(ParseError):
    pass


class StackUnderflowError(CalcError):
    pass


class ExcessOperandError(CalcError):
    pass


class ArgumentCountError(CalcError):
    pass


class UnknownIdentifierError(CalcError):
    pass


class NonFiniteResultError(CalcError):
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts unexpected exceptions to calculator errors.

    Passes through CalcErrors. The message is fmt formatted with the call's
    arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
