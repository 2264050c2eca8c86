import enum

from .tokens import Span


class ErrorKind(enum.Enum):
    UNEXPECTED_CHARACTER = 'unexpected character'
    MALFORMED_NUMBER = 'malformed number'
    INVALID_BANG = 'invalid use of !'
    UNEXPECTED_END = 'unexpected end of input'


class LexerError(SyntaxError):
    def __init__(self, kind, position, detail=None, span=None):
        self.kind = kind
        self.position = position
        self.detail = detail
        if span is None:
            span = Span(position, position + len(detail or ' '))
        self.span = span
        super().__init__(self._describe())

    def _describe(self):
        match self.kind:
            case ErrorKind.UNEXPECTED_CHARACTER:
                return f'Unexpected character at position {self.position}: {self.detail!r}'
            case ErrorKind.MALFORMED_NUMBER:
                return f'Bad-formatted number starting at position {self.position}: {self.detail}'
            case ErrorKind.INVALID_BANG:
                return (f"'!' must be followed by '=' at position {self.position}, "
                        f'got {self.detail!r}')
            case ErrorKind.UNEXPECTED_END:
                return f"Unexpected end of input after '!' at position {self.position}"
        msg = f'Unknown error kind: {self.kind}'
        raise ValueError(msg)

    def __str__(self):
        return self.msg
