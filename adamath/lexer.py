import logging
import string

from .errors import ErrorKind, LexerError
from .tokens import COMPARISON_TOKENS, SINGLE_CHAR_TOKENS, Span, Token, TokenType


logger = logging.getLogger(__name__)

DIGITS = set(string.digits)
LETTERS = set(string.ascii_letters)
NUMBER_CHARS = DIGITS | {'.', '_'}


class Lexer:
    # one token per scan_token() call, END forever once the source is exhausted

    def __init__(self, source):
        self.source = source
        self._pos = 0

    @property
    def position(self):
        return self._pos

    @property
    def at_end(self):
        return self._pos >= len(self.source)

    def advance(self):
        if self.at_end:
            return None
        c = self.source[self._pos]
        self._pos += 1
        return c

    def peek(self):
        if self.at_end:
            return None
        return self.source[self._pos]

    def __iter__(self):
        while True:
            token = self.scan_token()
            yield token
            if token.type == TokenType.END:
                return

    def scan_token(self):
        start = self._pos
        c = self.advance()

        if c is None:
            return Token(TokenType.END, None, Span(start, start))

        if c in SINGLE_CHAR_TOKENS:
            return Token.single(SINGLE_CHAR_TOKENS[c], start)

        if c in COMPARISON_TOKENS:
            single, double = COMPARISON_TOKENS[c]
            if self.peek() == '=':
                self.advance()
                return Token(double, None, Span(start, self._pos))
            return Token.single(single, start)

        if c == '!':
            return self._scan_bang(start)

        if c in DIGITS:
            return self._scan_number(start)

        if c in LETTERS:
            return self._scan_variable(start)

        raise self._error(ErrorKind.UNEXPECTED_CHARACTER, start, c)

    def _scan_bang(self, start):
        following = self.peek()
        if following is None:
            raise self._error(ErrorKind.UNEXPECTED_END, start)
        if following != '=':
            raise self._error(ErrorKind.INVALID_BANG, start, following, Span(start, start + 2))
        self.advance()
        return Token(TokenType.NOT_EQUAL, None, Span(start, self._pos))

    def _scan_number(self, start):
        self._consume_run(NUMBER_CHARS)
        span = Span(start, self._pos)
        literal = self.source[span.slice()]
        # underscores are accepted by the run but never by the parser
        if '_' in literal:
            raise self._error(ErrorKind.MALFORMED_NUMBER, start, literal, span)
        try:
            value = float(literal)
        except ValueError:
            raise self._error(ErrorKind.MALFORMED_NUMBER, start, literal, span) from None
        return Token(TokenType.CONSTANT, value, span)

    def _scan_variable(self, start):
        self._consume_run(LETTERS)
        span = Span(start, self._pos)
        return Token(TokenType.VARIABLE, self.source[span.slice()], span)

    def _consume_run(self, chars):
        while (c := self.peek()) is not None and c in chars:
            self.advance()

    def _error(self, kind, position, detail=None, span=None):
        error = LexerError(kind, position, detail, span)
        logger.debug('lexical error: %s', error)
        return error


def tokenize(s, skip_spaces=False):
    tokens = []
    for token in Lexer(s):
        if skip_spaces and token.type == TokenType.SPACE:
            continue
        tokens.append(token)
    return tokens
