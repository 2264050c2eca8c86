from .errors import ErrorKind, LexerError
from .lexer import Lexer, tokenize
from .tokens import Span, Token, TokenType
