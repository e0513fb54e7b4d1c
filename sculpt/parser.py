from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, UnexpectedToken, UnexpectedCharacters
from lark.lexer import PatternStr

from sculpt.lexer import LEXER, TERMINAL_NAMES
from sculpt.objects import *

from sculpt.error import SculptSyntaxError

from sculpt.report import SourceText

import functools
import logging


logger = logging.getLogger(__name__)


class MainTransformer(Transformer):
    """Builds the syntax tree for one source text.

    Tree nodes keep a reference to ``source`` and carry spans into it, so
    names and literal values are sliced out on demand rather than copied.
    """

    def __init__(self, source):
        Transformer.__init__(self, visit_tokens=True)

        self.source = source

    def main(self, args):
        return Main(tuple(args))

    def statement(self, args):
        return args[0]

    def macro(self, args):
        name, arguments = args
        return Macro(name, arguments)

    def arg_list(self, args):
        return tuple(args)

    def MACRO_NAME(self, token):
        return Name(self.span_of(token), self.source)

    def STR_LIT(self, token):
        return StrLit(self.span_of(token), self.source)

    @staticmethod
    def span_of(token):
        return Span(token.start_pos, token.end_pos)


def describe_terminal(parser: Lark, name: str) -> str:
    if name in TERMINAL_NAMES:
        return TERMINAL_NAMES[name]

    try:
        terminal = parser.get_terminal(name)
    except KeyError:
        return name

    if isinstance(terminal.pattern, PatternStr):
        return '"{}"'.format(terminal.pattern.value)

    return name


def syntax_error(parser: Lark, data: str, error: UnexpectedInput, base=0, source=None,
                 error_class=SculptSyntaxError) -> SculptSyntaxError:
    """Translate a lark exception raised while parsing ``data``.

    ``base`` is the offset of ``data`` within ``source`` when only a piece of
    a larger text was parsed.
    """
    if source is None:
        source = data

    if isinstance(error, UnexpectedToken):
        if error.token.type == '$END':
            offset = len(data)
        else:
            offset = error.token.start_pos
        expected = error.accepts or error.expected
    elif isinstance(error, UnexpectedCharacters):
        offset = error.pos_in_stream
        expected = error.allowed
    else:
        offset = error.pos_in_stream or 0
        expected = ()

    expected = {describe_terminal(parser, name) for name in (expected or ()) if name not in parser.ignore_tokens}

    offset += base
    line, column = SourceText(source).find_line_column(offset)
    return error_class(offset, line, column, expected)


@functools.lru_cache(maxsize=None)
def get_parser(debug=False) -> Lark:
    return Lark(LEXER, start='main', debug=debug, parser='lalr', lexer='contextual')


def parse_main(data: str, debug=False) -> Main:
    parser = get_parser(debug)
    logger.debug('parsing %d characters', len(data))

    try:
        tree = parser.parse(data)
    except UnexpectedInput as e:
        error = syntax_error(parser, data, e)
        logger.debug('syntax error: %s', error)
        raise error from e

    main = MainTransformer(data).transform(tree)
    logger.debug('parsed %d statement(s)', len(main.statements))
    return main
