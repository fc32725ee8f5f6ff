from functools import reduce
import operator
import math

import regex

from .util import EmptyExpressionError
from .operators import Operator


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Splits expressions into tokens and tells numbers from operators. Holds no
    internal state, so one instance can be shared freely.
    '''
    # Integral or fractional digits
    DIGITS = r'[0-9]+'
    # Significand, with or without a decimal point
    SIGNIFICAND = r'''
                   (?:
                       # 1, 12, 1. (notice trailing dot), 1.3
                       {DIGITS}
                       (?:
                           \.
                           (?:{DIGITS})?
                       )?
                   )|(?:
                       # .2 but not a lone .
                       \.
                       {DIGITS}
                   )
                   '''.format(DIGITS=DIGITS)
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:{SIGNIFICAND})
              (?:
                  # 1e3, 1E-3, 2.5e+10
                  [eE]
                  [+-]?
                  {DIGITS}
              )?
              '''.format(SIGNIFICAND=SIGNIFICAND, DIGITS=DIGITS)
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                      (op.value for op in Operator))) + r')'
    SPACE = r'\s+'

    # Default regex flags for matching tokens
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def tokenize(self, expression):
        '''
        Take an expression and return all its tokens, in order.

        Doesn't look at what the tokens are. That's the machine's job.
        '''
        if expression is None or not expression.strip():
            raise EmptyExpressionError()
        return regex.split(type(self).SPACE, expression.strip(),
                           flags=type(self).FLAGS)

    def isnumber(self, token):
        '''
        Return True if token is a finite number literal.
        '''
        return self.number(token) is not None

    def number(self, token):
        '''
        Return the float value of a number literal, None if not one.

        Literals too large to be finite (1e999) aren't numbers either.
        '''
        if regex.fullmatch(type(self).NUMBER, token,
                           flags=type(self).FLAGS) is None:
            return None
        value = float(token)
        if not math.isfinite(value):
            return None
        return value

    def asoperator(self, token):
        '''
        Return the Operator spelled by token, None if not one.
        '''
        try:
            return Operator(token)
        except ValueError:
            return None

    def classify(self, token):
        '''
        Name the kind of token: number, operator, or invalid.
        '''
        if self.isnumber(token):
            return 'number'
        elif self.asoperator(token) is not None:
            return 'operator'
        return 'invalid'
