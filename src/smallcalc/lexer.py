from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import ExpressionSyntaxError, TokenTooLong


# Longest numeral accepted, in characters.
MAX_TOKEN_LENGTH = 20


class TokenKind(Enum):
    NUMBER = 'number'
    PLUS = '+'
    MINUS = '-'
    STAR = '*'
    SLASH = '/'
    OPEN_PAREN = '('
    CLOSE_PAREN = ')'
    # Never produced; there are no variables.
    VARIABLE = 'variable'
    END = 'end of input'


Token = namedtuple('Token', ['kind', 'text', 'column'])


SINGLE_CHAR_TOKENS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.STAR,
    '/': TokenKind.SLASH,
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN,
}


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    Holds the expression and a cursor that only ever moves forward. Tokens
    are produced on demand with next_token(), or all at once by iterating.
    '''
    # Number. No sign, that's the parser's unary minus. At most one decimal
    # point, and digits on both sides of it: 1, 12, 1.5, but not 1., .5 or
    # 1.2.3 (which lexes as 1.2 and then chokes on the second dot).
    NUMBER = r'''
              [0-9]+
              (?:
                  \.
                  [0-9]+
              )?
              '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SINGLE_CHAR_TOKENS)) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def __init__(self, text):
        self.text = text
        self.position = 0

    def __iter__(self):
        '''
        Yield every remaining token, END included.
        '''
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def next_token(self):
        '''
        Return the token at the cursor and move the cursor past it.

        Whitespace is skipped. Past the end of the text, keeps returning END.
        '''
        while self.position < len(self.text):
            match = self.PATTERN.match(self.text, self.position)
            if match is None:
                raise ExpressionSyntaxError(
                    'Unrecognized character {!r} at column {}'.format(
                        self.text[self.position], self.position + 1),
                    self.position + 1)
            column = self.position + 1
            self.position = match.end()
            if match.group('space') is not None:
                continue
            return self._classify(match, column)
        return Token(TokenKind.END, '', len(self.text.rstrip()) + 1)

    def _classify(self, match, column):
        number = match.group('number')
        if number is not None:
            if len(number) > MAX_TOKEN_LENGTH:
                raise TokenTooLong(
                    'Number at column {} is longer than {} characters'.format(
                        column, MAX_TOKEN_LENGTH),
                    column)
            return Token(TokenKind.NUMBER, number, column)
        text = match.group('operator')
        return Token(SINGLE_CHAR_TOKENS[text], text, column)
