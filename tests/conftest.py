from pytest import fixture

from smallcalc.cli import CLI
from smallcalc.lexer import Lexer


@fixture
def kinds():
    '''
    Token kind names of an expression, END included.
    '''
    def lex(text):
        return [token.kind.name for token in Lexer(text)]
    return lex


@fixture
def run_cli(capsys):
    '''
    Run the CLI non-interactively; return (status, stdout, stderr).
    '''
    def run(*args):
        status = CLI().run(args=list(args))
        captured = capsys.readouterr()
        return status, captured.out, captured.err
    return run
