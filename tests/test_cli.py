'''
Command line interface tests
'''

import io

from smallcalc import cli
from smallcalc.cli import CLI, InteractiveInput
from smallcalc.lexer import Lexer

from pytest import raises


def test_expressions(run_cli):
    status, out, err = run_cli('-e', '2 + 3 * 4', '(2 + 3) * 4')
    assert status == 0
    assert out == '\tAns = 14\n\tAns = 20\n'
    assert err == ''


def test_division_by_zero(run_cli):
    status, out, _ = run_cli('-e', '10 / 0')
    assert status == 0
    assert out == '\tAns = inf\n'


def test_error_continues(run_cli):
    status, out, err = run_cli('-e', '(2 + 3', '1 / 4')
    assert status == 1
    assert out == '\tAns = 0.25\n'
    assert 'Missing close parenthesis' in err


def test_verbose_traceback(run_cli):
    _, _, err = run_cli('-v', '-e', '2 + @')
    assert 'Traceback' in err
    assert "Unrecognized character '@' at column 5" in err


def test_max_length(run_cli):
    status, _, err = run_cli('-m', '3', '-e', '1 + 2')
    assert status == 1
    assert 'longer than 3' in err
    status, out, _ = run_cli('-m', '0', '-e', ' + '.join(['1'] * 500))
    assert status == 0
    assert out == '\tAns = 500\n'


def test_negative_max_length(run_cli):
    with raises(SystemExit):
        run_cli('-m', '-1', '-e', '1')


def test_dump(run_cli):
    status, out, _ = run_cli('-D', '-e', '2*(-1.5)')
    assert status == 0
    assert out.splitlines() == [
        '<kind>\t<repr(text)>\t<column>',
        "NUMBER\t'2'\t1",
        "STAR\t'*'\t2",
        "OPEN_PAREN\t'('\t3",
        "MINUS\t'-'\t4",
        "NUMBER\t'1.5'\t5",
        "CLOSE_PAREN\t')'\t8",
        "END\t''\t9",
    ]


def test_raw_grammar(run_cli):
    _, out, _ = run_cli('-G')
    assert out == Lexer.LEXEME + '\n'


def test_piped_input(run_cli, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('1 + 1\n\n2 * 3\n'))
    status, out, _ = run_cli()
    assert status == 0
    assert out == '\tAns = 2\n\tAns = 6\n'


def test_interactive_stops_at_empty_line(capsys, monkeypatch):
    lines = iter(['2 + 2', '2 +', ''])

    class FakeSession:
        def __init__(self, **kwargs):
            self.message = kwargs['message']

        def prompt(self):
            return next(lines)

    monkeypatch.setattr(cli, 'PromptSession', FakeSession)
    command = CLI()
    status = command.run(args=['-p'])
    captured = capsys.readouterr()
    assert isinstance(command.args.expressions, InteractiveInput)
    assert status == 0
    assert captured.out == '{}\n\tAns = 4\n\n'.format(InteractiveInput.BANNER)
    assert 'Expected a number' in captured.err


def test_interactive_eof(capsys, monkeypatch):
    class FakeSession:
        def __init__(self, **kwargs):
            pass

        def prompt(self):
            raise EOFError

    monkeypatch.setattr(cli, 'PromptSession', FakeSession)
    assert CLI().run(args=['-p', '>>> ']) == 0


def test_deep_nesting_without_length_limit(run_cli):
    status, out, err = run_cli('-m', '0', '-e', '(' * 1000 + '1' + ')' * 1000)
    assert status == 1
    assert out == ''
    assert 'nested deeper' in err
