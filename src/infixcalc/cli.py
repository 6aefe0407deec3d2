from os import isatty
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .calculator import Calculator
from .lexer import Lexer
from .parser import to_postfix
from .registry import AngleMode
from .util import CalcError


logger = logging.getLogger(__name__)


def _precision(text):
    '''
    argparse type for a count of significant digits.
    '''
    precision = int(text)
    if precision < 1:
        raise ArgumentTypeError('must be at least 1, not {}'.format(text))
    return precision


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(name)s: %(message)s'

    # Session commands, as typed after the colon.
    COMMANDS = {
        'deg': AngleMode.DEGREES,
        'rad': AngleMode.RADIANS,
    }

    def _calculator(self):
        return Calculator(angle_mode=(AngleMode.DEGREES
                                      if self.args.degrees
                                      else AngleMode.RADIANS),
                          strict_identifiers=self.args.strict,
                          strict_numbers=self.args.strict,
                          precision=self.args.precision)

    def dumper(self):
        '''
        Dump every line's tokens and postfix sequence.
        '''
        calculator = self._calculator()
        print('<line>\t<tokens>\t<postfix>')
        for line in self._lines():
            try:
                tokens = calculator.tokenize(line)
                postfix = to_postfix(tokens)
            except CalcError as e:
                print(e.args[0], file=sys.stderr)
                continue
            print(repr(line),
                  ' '.join(map(str, tokens)),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate every line, printing its result.
        '''
        calculator = self._calculator()
        for line in self._lines():
            if line.startswith(':'):
                self._command(calculator, line[1:])
                continue
            try:
                print(calculator.format(calculator.evaluate(line)))
            # Only this line is lost; carry on with the next.
            except CalcError as e:
                print(Calculator.ERROR)
                print(e.args[0], file=sys.stderr)

    def _command(self, calculator, command):
        if command in self.COMMANDS:
            calculator.angle_mode = self.COMMANDS[command]
        elif command != 'mode':
            print('Unknown command {!r}'.format(command), file=sys.stderr)
            return
        print(calculator.angle_mode.value)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        '''
        Yield the non-blank input lines, stripped.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line

    def _prompting_input(self):
        '''
        Return where lines come from when no -e was given.

        An interactive session if a prompt was asked for or we're on a
        terminal, plain stdin otherwise.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Set up the argument parser. Nothing is parsed until run().
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-d', '--degrees',
                                          action='store_true',
                                          help='trigonometry in degrees')
        self.argument_parser.add_argument('--strict',
                                          action='store_true',
                                          help='reject unknown names and '
                                               'malformed numbers')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_precision,
                                          default=Calculator.DEFAULT_PRECISION,
                                          help='significant digits shown')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Parse args (sys.argv if None) and run the chosen action.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.WARNING),
                            format=self.LOG_FORMAT,
                            stream=sys.stderr)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        logger.debug('Angle mode %s', 'deg' if self.args.degrees else 'rad')
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
