'''
Infix arithmetic calculator.

Evaluates one expression at a time: + - * /, unary minus and parentheses,
over floats, with the usual precedence. No variables, no statements, no state
kept between expressions.

    >>> from smallcalc import evaluate
    >>> evaluate('(2 + 3) * 4')
    20.0

The core (lexer and parser) never prints; errors are raised as CalcError
subclasses. The smallcalc command is a thin read-evaluate-print loop on top.
'''

from .cli import CLI
from .lexer import MAX_TOKEN_LENGTH, Lexer, Token, TokenKind
from .parser import MAX_EXPRESSION_LENGTH, MAX_NESTING, Operator, Parser, \
    evaluate
from .util import CalcError, ExpressionSyntaxError, LengthExceeded, \
    TokenTooLong


__all__ = 'evaluate', 'Parser', 'Operator', 'Lexer', 'Token', 'TokenKind', \
    'CalcError', 'ExpressionSyntaxError', 'LengthExceeded', 'TokenTooLong', \
    'CLI', 'MAX_EXPRESSION_LENGTH', 'MAX_NESTING', 'MAX_TOKEN_LENGTH'
