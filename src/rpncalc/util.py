import math


class RPNError(Exception):
    '''
    Base of every error an expression can fail with.

    The first argument is always the human readable message.
    '''


class EmptyExpressionError(RPNError):
    def __init__(self):
        super().__init__('Expression cannot be empty')


class UnknownTokenError(RPNError):
    def __init__(self, token):
        super().__init__("Unknown token: '{}'".format(token))
        self.token = token


class InsufficientOperandsError(RPNError):
    def __init__(self, operator=None):
        '''
        :param operator: Symbol short of operands, or None when the whole
                         expression reduced to nothing.
        '''
        if operator is None:
            message = 'Invalid expression: insufficient operands'
        else:
            message = "Insufficient operands for operator '{}'".format(operator)
        super().__init__(message)
        self.operator = operator


class TooManyOperandsError(RPNError):
    def __init__(self, count):
        super().__init__('Invalid expression: too many operands')
        self.count = count


class DivisionByZeroError(RPNError):
    def __init__(self):
        super().__init__('Division by zero')


class NegativeSqrtError(RPNError):
    def __init__(self, operand):
        super().__init__('Square root of negative number')
        self.operand = operand


def format_number(n):
    '''
    Format a float for display, dropping the .0 of integral values.

    >>> format_number(7.0)
    '7'
    >>> format_number(0.5)
    '0.5'
    '''
    # Past 2**53 ints stop being exact; let repr pick the exponent form.
    if math.isfinite(n) and n.is_integer() and abs(n) < 2 ** 53:
        return str(int(n))
    return repr(n)
