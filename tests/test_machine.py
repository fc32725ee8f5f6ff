'''
RPN machine tests: evaluate, validate, trace
'''

import math
import threading

import regex

from rpncalc import (evaluate, validate, trace, Machine, Step,
                     EmptyExpressionError,
                     UnknownTokenError,
                     InsufficientOperandsError,
                     TooManyOperandsError,
                     DivisionByZeroError,
                     NegativeSqrtError,
                     RPNError)

from pytest import approx, mark, raises


@mark.parametrize('expression, value', [
    ('3 4 +', 7),
    ('3 4 + 5 *', 35),
    ('9 sqrt', 3),
    ('2 3 ^', 8),
    ('10 3 -', 7),
    ('3 10 -', -7),
    ('1 4 /', 0.25),
    ('2 0.5 ^', math.sqrt(2)),
    ('5 1 2 + 4 * + 3 -', 14),
    ('-3 4 *', -12),
    ('  3   4 +  ', 7),
    ('42', 42),
])
def test_evaluate(expression, value):
    assert evaluate(expression) == approx(value)


@mark.parametrize('expression, value', [
    ('90 sin', 1),
    ('0 sin', 0),
    ('0 cos', 1),
    ('180 cos', -1),
    ('45 tan', 1),
    ('30 sin 2 *', 1),
])
def test_evaluate_degrees(expression, value):
    assert evaluate(expression) == approx(value, abs=1e-12)


@mark.parametrize('a, b', [(7.5, 2.5), (-1, 3), (1e10, 1e-3)])
@mark.parametrize('op, f', [
    ('+', lambda a, b: a + b),
    ('-', lambda a, b: a - b),
    ('*', lambda a, b: a * b),
    ('/', lambda a, b: a / b),
])
def test_operand_order(a, b, op, f):
    assert evaluate('{!r} {!r} {}'.format(a, b, op)) == approx(f(a, b))


def test_power_edge_cases():
    assert math.isnan(evaluate('-2 0.5 ^'))
    assert evaluate('10 400 ^') == math.inf
    assert evaluate('0 -1 ^') == math.inf


@mark.parametrize('expression', ['', '   ', '\n\t'])
def test_empty(expression):
    with raises(EmptyExpressionError):
        evaluate(expression)


def test_unknown_token():
    with raises(UnknownTokenError, match=regex.escape("Unknown token: 'foo'")) \
            as info:
        evaluate('3 foo +')
    assert info.value.token == 'foo'


@mark.parametrize('expression', ['3abc', '1.2.3 1 +', '1e999', 'nan', 'SIN',
                                        '\N{ARABIC-INDIC DIGIT THREE} 4 +'])
def test_unknown_numberish(expression):
    with raises(UnknownTokenError):
        evaluate(expression)


def test_insufficient_operands():
    with raises(InsufficientOperandsError,
                match=regex.escape("Insufficient operands for operator '+'")) \
            as info:
        evaluate('+')
    assert info.value.operator == '+'
    with raises(InsufficientOperandsError, match="operator 'sqrt'"):
        evaluate('sqrt')
    with raises(InsufficientOperandsError, match="operator '-'"):
        evaluate('3 -')


def test_insufficient_operands_at_end():
    machine = Machine()
    with raises(InsufficientOperandsError,
                match='Invalid expression: insufficient operands') as info:
        machine.result()
    assert info.value.operator is None


def test_too_many_operands():
    with raises(TooManyOperandsError,
                match='Invalid expression: too many operands') as info:
        evaluate('3 4')
    assert info.value.count == 2


def test_division_by_zero():
    with raises(DivisionByZeroError, match='Division by zero'):
        evaluate('8 0 /')
    with raises(DivisionByZeroError):
        evaluate('1 2 2 - /')


def test_negative_sqrt():
    with raises(NegativeSqrtError, match='Square root of negative number'):
        evaluate('-4 sqrt')


def test_errors_are_rpn_errors():
    for expression in ['', '3 foo +', '+', '3 4', '8 0 /', '-4 sqrt']:
        with raises(RPNError):
            evaluate(expression)


def test_first_error_wins():
    # Division by zero comes before the unknown token.
    with raises(DivisionByZeroError):
        evaluate('1 0 / foo')


@mark.parametrize('expression', [
    '3 4 +', '3 4', '+', '', '   ', '3 foo +', '8 0 /', '-4 sqrt',
    '90 sin', '2 3 ^', '1.2.3', '-2 0.5 ^', None,
])
def test_validate_agrees_with_evaluate(expression):
    try:
        evaluate(expression)
    except RPNError:
        succeeded = False
    else:
        succeeded = True
    assert validate(expression) is succeeded


def test_trace():
    steps = trace('3 4 + 2 *')
    assert steps == [
        Step('3', (3.0,), 'Push 3'),
        Step('4', (3.0, 4.0), 'Push 4'),
        Step('+', (7.0,), 'Apply 3 + 4'),
        Step('2', (7.0, 2.0), 'Push 2'),
        Step('*', (14.0,), 'Apply 7 * 2'),
    ]


def test_trace_order_and_unary():
    steps = trace('10 3 - sqrt')
    assert [step.action for step in steps] == ['Push 10',
                                               'Push 3',
                                               'Apply 10 - 3',
                                               'Apply sqrt to 7']
    assert steps[-1].stack == (approx(math.sqrt(7)),)


def test_trace_final_value_is_result():
    expression = '2 0.5 ^ 30 sin +'
    assert trace(expression)[-1].stack == (evaluate(expression),)


@mark.parametrize('expression, error', [
    ('8 0 /', DivisionByZeroError),
    ('-4 sqrt', NegativeSqrtError),
    ('+', InsufficientOperandsError),
    ('3 4', TooManyOperandsError),
    ('3 foo +', UnknownTokenError),
    ('', EmptyExpressionError),
])
def test_trace_is_guarded(expression, error):
    with raises(error):
        trace(expression)


def test_machines_share_nothing():
    results = {}

    def run(n):
        results[n] = evaluate('{} {} * 1 +'.format(n, n))

    threads = [threading.Thread(target=run, args=(n,)) for n in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == {n: n * n + 1 for n in range(20)}
