'''
RPN calculator.

Evaluates Reverse Polish Notation expressions: plain old arithmetic, power,
square root, and trigonometry in degrees. Every operator follows its operands,
so no precedence rules or parentheses are needed.

    >>> evaluate('3 4 + 5 *')
    35.0
    >>> validate('3 4')
    False

Failures raise one of a closed set of RPNError subclasses, each with a
human readable message. trace() shows what every token did to the stack.
'''

from .cli import CLI
from .history import CalculationRecord, History
from .lexer import Lexer
from .machine import Machine, Step, evaluate, trace, validate
from .operators import Operator
from .util import (RPNError,
                   EmptyExpressionError,
                   UnknownTokenError,
                   InsufficientOperandsError,
                   TooManyOperandsError,
                   DivisionByZeroError,
                   NegativeSqrtError)


__all__ = ('evaluate', 'validate', 'trace',
           'Machine', 'Step', 'Lexer', 'Operator', 'CLI',
           'History', 'CalculationRecord',
           'RPNError', 'EmptyExpressionError', 'UnknownTokenError',
           'InsufficientOperandsError', 'TooManyOperandsError',
           'DivisionByZeroError', 'NegativeSqrtError')
