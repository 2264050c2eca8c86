import collections
import enum


class TokenType(enum.Enum):
    # single-character
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    DOT = '.'
    LPAREN = '('
    RPAREN = ')'
    EQUALS = '='
    SPACE = ' '
    LESS = '<'
    GREATER = '>'

    # two-character
    LESS_EQUAL = '<='
    GREATER_EQUAL = '>='
    NOT_EQUAL = '!='

    # function call like sin, not produced by the lexer yet
    FUNCTION = 'function'

    # values
    CONSTANT = 'constant'
    VARIABLE = 'variable'

    END = 'end'


SINGLE_CHAR_TOKENS = {
    t.value: t for t in (
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.MULTIPLY,
        TokenType.DIVIDE,
        TokenType.POWER,
        TokenType.DOT,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.EQUALS,
        TokenType.SPACE,
    )
}

# first char -> (token without '=', token with '=')
COMPARISON_TOKENS = {
    '<': (TokenType.LESS, TokenType.LESS_EQUAL),
    '>': (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

PAYLOAD_TYPES = {TokenType.FUNCTION, TokenType.CONSTANT, TokenType.VARIABLE}


class Span(collections.namedtuple('Span', ['start', 'end'])):
    # half-open [start, end)
    __slots__ = ()

    @property
    def length(self):
        return self.end - self.start

    def __str__(self):
        return f'{self.start}..{self.end}'

    def slice(self):
        return slice(self.start, self.end)


class Token(collections.namedtuple('Token', ['type', 'value', 'span'])):
    __slots__ = ()

    @classmethod
    def single(cls, typ, start):
        return cls(typ, None, Span(start, start + 1))

    def text(self, source):
        return source[self.span.slice()]

    def __str__(self):
        if self.type in PAYLOAD_TYPES:
            return f'{self.type.name}({self.value!r})'
        return self.type.name
