class CliFormatter:
    def __init__(self, color=True):
        self.color = color

    def bold(self, text):
        if not self.color:
            return text
        return f'\033[1m{text}\033[0m'

    def indent(self, lines):
        out = [f'    {line}' for line in lines]
        return '\n'.join(out)

    def format_source(self, source):
        return self.indent([repr(source)])

    def format_token(self, token):
        return f'{self.bold(str(token))} {token.span}'

    def format_tokens(self, tokens):
        return self.indent([self.format_token(t) for t in tokens])

    def format_error(self, error, source):
        # underline on the line holding the error, tokens never span lines
        line_start = source.rfind('\n', 0, error.span.start) + 1
        line_end = source.find('\n', error.span.start)
        if line_end == -1:
            line_end = len(source)
        line = source[line_start:line_end]
        start = error.span.start - line_start
        width = max(1, min(error.span.end, line_end) - error.span.start)
        out = []
        out.append(self.bold(f'error: {error}'))
        out.append(f'    {line}')
        out.append(f'    {" " * start}{"^" * width}')
        return '\n'.join(out)
