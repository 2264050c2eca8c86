import argparse
import logging
import pathlib
import sys

from adamath.errors import LexerError
from adamath.formatters import CliFormatter
from adamath.lexer import Lexer
from adamath.tokens import TokenType


logger = logging.getLogger('adamath')

DEMO_EXPRESSION = '5 <= 35*test^2 <= 35'


def main(expression=None, filename=None, skip_spaces=False, keep_going=False, color=True):
    # resolve input
    if filename is not None:
        with pathlib.Path(filename).open('r') as f:
            expression = f.read().rstrip('\r\n')
    elif expression is None:
        expression = DEMO_EXPRESSION
    formatter = CliFormatter(color=color)
    print(formatter.format_source(expression))

    # pull tokens until the end token or the first error
    lexer = Lexer(expression)
    tokens, errors = [], []
    while True:
        try:
            token = lexer.scan_token()
        except LexerError as e:
            errors.append(e)
            print(formatter.format_error(e, expression), file=sys.stderr)
            if not keep_going:
                break
            logger.info('resuming at position %d', lexer.position)
            continue
        if token.type == TokenType.END:
            break
        if skip_spaces and token.type == TokenType.SPACE:
            continue
        tokens.append(token)
        print(formatter.indent([formatter.format_token(token)]))

    logger.debug('%d token(s), %d error(s)', len(tokens), len(errors))

    # return summary for automated testing purposes
    return {'tokens': tokens, 'errors': errors}


def cli(argv=None):
    parser = argparse.ArgumentParser(description='Math expression tokenizer')
    parser.add_argument('expression', nargs='?', default=None)
    parser.add_argument('--file', type=pathlib.Path, default=None)
    parser.add_argument('--skip-spaces', action='store_true')
    parser.add_argument('--keep-going', action='store_true')
    parser.add_argument('--no-color', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    summary = main(args.expression, args.file, args.skip_spaces, args.keep_going, not args.no_color)
    return 1 if summary['errors'] else 0


if __name__ == '__main__':
    sys.exit(cli())
