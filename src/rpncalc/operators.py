'''
Operator vocabulary and what each operator does to its operands.
'''

from enum import Enum
import operator
import math

from .util import DivisionByZeroError, NegativeSqrtError


class Operator(Enum):
    '''
    Every operator the language knows, with its arity.

    Looked up by symbol: Operator('+') is Operator.ADD. Case-sensitive.
    '''

    ADD = '+', 2
    SUB = '-', 2
    MUL = '*', 2
    DIV = '/', 2
    POW = '^', 2
    SQRT = 'sqrt', 1
    SIN = 'sin', 1
    COS = 'cos', 1
    TAN = 'tan', 1

    def __new__(cls, symbol, arity):
        member = object.__new__(cls)
        member._value_ = symbol
        member.arity = arity
        return member

    def __str__(self):
        return self.value

    def apply(self, *operands):
        '''
        Apply operator to operands, leftmost operand first.

        For binary operators, 10 3 - is apply(10, 3), not apply(3, 10).
        '''
        return FUNCTIONS[self](*operands)


def _divide(left, right):
    # -0.0 == 0 too.
    if right == 0:
        raise DivisionByZeroError()
    return left / right


def _power(base, exponent):
    '''
    IEEE 754 pow, without Python's exceptions or complex results.

    -8 ** (1/3) is nan, not complex; overflow is inf, not OverflowError.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _isodd(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Only two ways to get here: 0 to a negative power, or a negative
        # base to a non-integral power.
        if base == 0:
            if _isodd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def _sqrt(only):
    if only < 0:
        raise NegativeSqrtError(only)
    return math.sqrt(only)


def _degrees(f):
    '''
    Make trigonometric function f take degrees instead of radians.

    Infinite angles are nan, like IEEE says, not ValueError.
    '''
    def wrapped(degrees):
        if not math.isfinite(degrees):
            return math.nan
        return f(math.radians(degrees))
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


FUNCTIONS = {
    Operator.ADD: operator.__add__,
    Operator.SUB: operator.__sub__,
    Operator.MUL: operator.__mul__,
    Operator.DIV: _divide,
    Operator.POW: _power,
    Operator.SQRT: _sqrt,
    Operator.SIN: _degrees(math.sin),
    Operator.COS: _degrees(math.cos),
    Operator.TAN: _degrees(math.tan),
}

assert FUNCTIONS.keys() == set(Operator), 'Operator without a function'
