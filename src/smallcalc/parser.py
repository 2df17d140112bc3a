from enum import Enum
import math
import operator

from .lexer import Lexer, TokenKind
from .util import ExpressionSyntaxError, LengthExceeded, wrap_user_errors


# Longest expression accepted by evaluate(), in characters.
MAX_EXPRESSION_LENGTH = 1000
# Deepest parenthesis nesting. Each level costs several Python stack frames.
MAX_NESTING = 100


def _divide(lhs, rhs):
    '''
    IEEE 754 division: x/0 is a signed infinity, 0/0 is NaN.

    Python raises ZeroDivisionError instead.
    '''
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    def __call__(self, lhs, rhs):
        return _APPLY[self](lhs, rhs)


_APPLY = {
    Operator.ADD: operator.__add__,
    Operator.SUB: operator.__sub__,
    Operator.MUL: operator.__mul__,
    Operator.DIV: _divide,
}


# Only these token kinds are binary operators.
OPERATORS = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
    TokenKind.STAR: Operator.MUL,
    TokenKind.SLASH: Operator.DIV,
}


class Parser:
    '''
    Recursive descent parser that evaluates as it goes.

    One method per precedence level, loosest first. Each leaves the current
    token just past what it consumed. Single use: make one per expression.
    '''
    def __init__(self, text):
        self.lexer = Lexer(text)
        self.token = None
        self.depth = 0

    def parse(self):
        '''
        Evaluate the whole expression and return its value as a float.
        '''
        self._advance()
        ans = self.sum()
        if self.token.kind is not TokenKind.END:
            raise ExpressionSyntaxError(
                'Unexpected {!r} at column {}'.format(self.token.text,
                                                      self.token.column),
                self.token.column)
        return ans

    def _advance(self):
        self.token = self.lexer.next_token()

    def _binary(self, kinds, operand):
        # Left associative: 8 - 2 - 1 is (8 - 2) - 1.
        ans = operand()
        while self.token.kind in kinds:
            op = OPERATORS[self.token.kind]
            self._advance()
            ans = op(ans, operand())
        return ans

    def sum(self):
        '''
        Addition and subtraction.
        '''
        return self._binary({TokenKind.PLUS, TokenKind.MINUS}, self.term)

    def term(self):
        '''
        Multiplication and division.
        '''
        return self._binary({TokenKind.STAR, TokenKind.SLASH}, self.unary)

    def unary(self):
        '''
        Unary minus. Only one per operand; --5 is an error, -(-5) isn't.
        '''
        if self.token.kind is TokenKind.MINUS:
            self._advance()
            return -self.primary()
        return self.primary()

    def primary(self):
        '''
        Parenthesised expression or number.
        '''
        if self.token.kind is TokenKind.OPEN_PAREN:
            if self.depth == MAX_NESTING:
                raise LengthExceeded(
                    'Parentheses nested deeper than {} at column {}'.format(
                        MAX_NESTING, self.token.column),
                    self.token.column)
            self.depth += 1
            self._advance()
            ans = self.sum()
            if self.token.kind is not TokenKind.CLOSE_PAREN:
                raise ExpressionSyntaxError(
                    'Missing close parenthesis at column {}'.format(
                        self.token.column),
                    self.token.column)
            self.depth -= 1
            self._advance()
            return ans
        if self.token.kind is not TokenKind.NUMBER:
            found = repr(self.token.text) if self.token.text \
                else self.token.kind.value
            raise ExpressionSyntaxError(
                'Expected a number at column {}, found {}'.format(
                    self.token.column, found),
                self.token.column)
        ans = self._number(self.token)
        self._advance()
        return ans

    @wrap_user_errors('Malformed number {1.text!r} at column {1.column}',
                      locate=lambda self, token: token.column)
    def _number(self, token):
        return float(token.text)


def evaluate(expression, max_length=MAX_EXPRESSION_LENGTH):
    '''
    Evaluate an arithmetic expression.

    Supports + - * /, unary minus and parentheses over floats. Division by
    zero gives inf or nan, not an error.

    :param expression: Expression text, e.g. '(2 + 3) * 4'.
    :param max_length: Longest expression accepted, None for no limit.
    :raises LengthExceeded: Expression, or a number in it, is too long, or
        parentheses nest deeper than MAX_NESTING.
    :raises ExpressionSyntaxError: Expression is malformed.
    '''
    if max_length is not None and len(expression) > max_length:
        raise LengthExceeded(
            'Expression is longer than {} characters'.format(max_length),
            max_length + 1)
    return Parser(expression).parse()
