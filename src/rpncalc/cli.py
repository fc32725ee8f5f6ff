from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from .util import RPNError, format_number
from .lexer import Lexer
from .operators import Operator
from .machine import evaluate, trace
from .history import History


HELP = '''\
Reverse Polish Notation places operators after their operands. No
parentheses needed!

  3 4 +         7
  3 4 + 5 *     35
  9 sqrt        3
  90 sin        1

Operators:
  +     Addition
  -     Subtraction
  *     Multiplication
  /     Division
  ^     Power
  sqrt  Square root
  sin   Sine (degrees)
  cos   Cosine (degrees)
  tan   Tangent (degrees)

Commands:
  :help      This text
  :history   Past calculations, most recent first
  :clear     Forget past calculations
  :steps     Toggle showing each step
  :N         Calculate history entry N again'''

COMMANDS = ':help', ':history', ':clear', ':steps'


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=InMemoryHistory(),
                                    # Complete operators and commands
                                    completer=WordCompleter(
                                        [op.value for op in Operator] +
                                        list(COMMANDS),
                                        WORD=True),
                                    complete_while_typing=False,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all tokens, their kind, and arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<arity>')
        status = 0
        for line in self._lines():
            try:
                tokens = lexer.tokenize(line)
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
                status = 1
                continue
            for token in tokens:
                op = lexer.asoperator(token)
                print(lexer.classify(token),
                      repr(token),
                      op.arity if op is not None else None,
                      sep='\t')
        return status

    def executor(self):
        '''
        Run calculator on every expression.
        '''
        status = 0
        for line in self._lines():
            if line.startswith(':'):
                line = self.command(line[1:])
                if line is None:
                    continue
            # Abort entire rest of line, makes sense anyway
            try:
                self.calculate(line)
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
                status = 1
        return status

    def calculate(self, expression):
        '''
        Evaluate and print expression, steps first if asked, then remember it.
        '''
        if self.steps:
            steps = trace(expression)
            for step in steps:
                print(step.token,
                      ' '.join(map(format_number, step.stack)),
                      step.action,
                      sep='\t')
            result = steps[-1].stack[-1]
        else:
            result = evaluate(expression)
        self.history.add(expression, result)
        print(format_number(result))
        return result

    def command(self, name):
        '''
        Run interactive command.

        Return an expression to calculate, if the command recalls one.
        '''
        name = name.strip()
        if name == 'help':
            self.help_operators()
        elif name == 'history':
            for n, record in enumerate(self.history, start=1):
                print(n,
                      record.timestamp.strftime('%H:%M:%S'),
                      record.expression,
                      '= ' + format_number(record.result),
                      sep='\t')
        elif name == 'clear':
            self.history.clear()
        elif name == 'steps':
            self.steps = not self.steps
            print('steps', 'on' if self.steps else 'off')
        elif name.isdigit():
            try:
                return self.history.recall(int(name)).expression
            except IndexError as e:
                print(e.args[0], file=sys.stderr)
        else:
            print('Unknown command :{}'.format(name), file=sys.stderr)
        return None

    def help_operators(self):
        '''
        Print how to use the calculator.
        '''
        print(HELP)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print('number:', lexer.NUMBER, sep='\n')
        print('operator:', lexer.OPERATOR, sep='\n')

    def _lines(self):
        '''
        Yield expressions to run, skipping blank lines of streamed input.
        '''
        if isinstance(self.args.expressions, list):
            # Given explicitly, so even a blank one is an error.
            yield from self.args.expressions
            return
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.history = History()
        self.steps = False
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every step')
        self.argument_parser.add_argument('-s', '--steps',
                                          action='store_true',
                                          help='show each step')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='expressions to evaluate')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-H', '--help-operators',
                                       self.help_operators)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status: 1 if any expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(name)s: %(message)s',
                            stream=sys.stderr)
        self.steps = self.args.steps
        if self.args.expressions is None and \
           self.args.action in (self.executor, self.dumper):
            self.args.expressions = self._prompting_input()
        try:
            return self.args.action() or 0
        except KeyboardInterrupt:
            return 1
