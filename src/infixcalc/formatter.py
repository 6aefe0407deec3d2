'''
Human readable rendering of results.
'''

from decimal import Decimal
import math

from .util import NonFiniteResultError


DEFAULT_PRECISION = 12
# Anything smaller is float noise, e.g. sin(pi).
NOISE = 1e-12
# Values with magnitude in [PLAIN_MINIMUM, EXPONENT_THRESHOLD) print as plain
# decimals, like 0.00002 and 1000000000000 rather than 2e-5 and 1e+12.
PLAIN_MINIMUM = 1e-6
EXPONENT_THRESHOLD = 1e21


def format_result(n, precision=DEFAULT_PRECISION):
    '''
    Render n with at most precision significant digits, trailing zeros and
    needless decimal points stripped.

    Raises NonFiniteResultError for nan and infinities; callers show those as
    an error instead.
    '''
    if precision < 1:
        raise ValueError('Precision must be at least 1, not {}'.format(
            precision))
    if not math.isfinite(n):
        raise NonFiniteResultError('Result is {}'.format(n))
    if abs(n) < NOISE:
        return '0'
    rounded = float('{:.{}g}'.format(n, precision))
    if rounded == 0:
        return '0'
    if PLAIN_MINIMUM <= abs(rounded) < EXPONENT_THRESHOLD:
        if rounded.is_integer():
            return str(int(rounded))
        # repr is the shortest round trip, so there are no trailing zeros.
        return format(Decimal(repr(rounded)), 'f')
    mantissa, e, exponent = repr(rounded).partition('e')
    if e:
        # 1e-07 -> 1e-7
        exponent = exponent[0] + exponent[1:].lstrip('0')
    return mantissa + e + exponent
