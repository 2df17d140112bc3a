from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys
import traceback

from prompt_toolkit import PromptSession

from .util import CalcError
from .lexer import Lexer
from .parser import MAX_EXPRESSION_LENGTH, evaluate


class InteractiveInput:
    '''
    Prompting line source. Stops at the first empty line, or EOF.
    '''
    BANNER = 'Enter an expression (empty string to exit)'

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        print(self.BANNER)
        session = PromptSession(message=self.prompt,
                                enable_suspend=True,
                                # Persistent
                                history=None,
                                erase_when_done=False)
        try:
            while True:
                line = session.prompt()
                if not line:
                    return
                yield line
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump the tokens of every expression.
        '''
        print('<kind>\t<repr(text)>\t<column>')
        for line in self._lines():
            try:
                for token in Lexer(line):
                    print(token.kind.name, repr(token.text), token.column,
                          sep='\t')
            except CalcError as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate every expression, printing its value.
        '''
        for line in self._lines():
            try:
                ans = evaluate(line, max_length=self.args.max_length or None)
            except CalcError as e:
                self._report(e)
                continue
            print('\tAns = {:g}'.format(ans))
            if self._interactive():
                print()

    def raw_grammar(self):
        '''
        Print the regular expression the lexer matches tokens with.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        for line in self.args.expressions:
            line = line.rstrip('\n')
            # Blank lines in piped input are skipped, not evaluated.
            if line.strip() or self._interactive():
                yield line

    def _report(self, error):
        self.failed = True
        if self.args.verbose:
            traceback.print_exception(type(error), error, error.__traceback__,
                                      file=sys.stderr)
        print(error, file=sys.stderr)

    def _prompting_input(self):
        '''
        Return the line source: a prompt, or plain stdin.

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
        Set up the argument parser. Arguments are parsed by run().
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        self.argument_parser.add_argument('-m', '--max-length',
                                          type=int,
                                          default=MAX_EXPRESSION_LENGTH,
                                          help='longest expression accepted, '
                                               '0 for no limit')
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
        self.failed = False

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Parse args (sys.argv when None) and run the chosen action.

        Returns the exit status: 1 if any expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.max_length < 0:
            self.argument_parser.error('--max-length must not be negative')
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return int(self.failed and not self._interactive())


def main():
    sys.exit(CLI().run())
