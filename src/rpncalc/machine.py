from collections import deque
from typing import NamedTuple, Tuple
import logging

from .util import (RPNError,
                   InsufficientOperandsError,
                   TooManyOperandsError,
                   UnknownTokenError,
                   format_number)
from .lexer import Lexer


logger = logging.getLogger(__name__)


class Step(NamedTuple):
    '''
    What one token did to the stack.
    '''
    token: str
    # Bottom of the stack first
    stack: Tuple[float, ...]
    action: str


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them. A machine is good for one expression: make a
    new one for each, there is nothing worth keeping between them.
    '''

    def __init__(self, record=False):
        '''
        Create empty stack machine.

        :param record: Keep a Step for every token fed, in self.steps.
        '''
        self.stack = deque()
        self.steps = [] if record else None
        self.lexer = Lexer()

    def run(self, expression):
        '''
        Feed every token of expression, then return the only value left.
        '''
        for token in self.lexer.tokenize(expression):
            self.feed(token)
        return self.result()

    def feed(self, token):
        '''
        Push a number or apply an operator, depending on token.
        '''
        number = self.lexer.number(token)
        if number is not None:
            self._pshstack(number)
            self._record(token, 'Push {}'.format(token))
            return
        op = self.lexer.asoperator(token)
        if op is None:
            raise UnknownTokenError(token)
        # Topmost first, so 10 3 - gives args [10, 3], not [3, 10].
        args = list(reversed(self._popstack(op.arity, op)))
        self._pshstack(op.apply(*args))
        if op.arity == 1:
            action = 'Apply {} to {}'.format(op, format_number(*args))
        else:
            action = 'Apply {} {} {}'.format(format_number(args[0]),
                                             op,
                                             format_number(args[1]))
        self._record(token, action)

    def result(self):
        '''
        Return the final value, which must be the only one on the stack.
        '''
        if len(self.stack) > 1:
            raise TooManyOperandsError(len(self.stack))
        elif not self.stack:
            raise InsufficientOperandsError()
        return self.stack[0]

    def _record(self, token, action):
        logger.debug('%s: %s -> %s', token, action, list(self.stack))
        if self.steps is not None:
            self.steps.append(Step(token, tuple(self.stack), action))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n, op):
        '''
        Pop n args from stack for op, topmost first.

        Nothing is popped when there are not enough.
        '''
        if len(self.stack) < n:
            raise InsufficientOperandsError(op.value)
        return [self.stack.pop() for _ in range(n)]


def evaluate(expression):
    '''
    Evaluate RPN expression, returning its value as a float.

    :raises RPNError: One of its subclasses, naming what went wrong.
    '''
    return Machine().run(expression)


def validate(expression):
    '''
    Return True if expression evaluates without error.
    '''
    try:
        evaluate(expression)
    except RPNError:
        return False
    return True


def trace(expression):
    '''
    Evaluate expression, returning the Step taken for each token.

    Fails exactly where, and how, evaluate() would.
    '''
    machine = Machine(record=True)
    machine.run(expression)
    return machine.steps
