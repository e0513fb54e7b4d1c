from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from sculpt.lexer import FMT_LEXER
from sculpt.objects import FmtArg, FmtLit, FmtSpec, Span, StrLit

from sculpt.error import FormatStringError

from sculpt.parser import syntax_error
from sculpt.report import SourceText

from typing import List

import functools
import logging


logger = logging.getLogger(__name__)

# ASCII whitespace as understood by format placeholders; vertical tab is excluded.
PLACEHOLDER_WHITESPACE = frozenset(' \t\n\r\f')


class FmtTransformer(Transformer):
    def __init__(self, lit: StrLit):
        Transformer.__init__(self, visit_tokens=True)

        self.source = lit.source
        self.base = lit.body_start

    def fmt(self, args):
        return list(args)

    def FMT_LIT(self, token):
        return FmtLit(self.span_of(token), token.value)

    def FMT_ARG(self, token):
        for i, c in enumerate(token.value[1:-1]):
            if c not in PLACEHOLDER_WHITESPACE:
                offset = self.base + token.start_pos + 1 + i
                line, column = SourceText(self.source).find_line_column(offset)
                raise FormatStringError(offset, line, column)

        return FmtArg(self.span_of(token))

    def span_of(self, token):
        return Span(self.base + token.start_pos, self.base + token.end_pos)


@functools.lru_cache(maxsize=None)
def get_fmt_parser(debug=False) -> Lark:
    return Lark(FMT_LEXER, start='fmt', debug=debug, parser='lalr', lexer='contextual')


def extract_fmt(lit: StrLit, debug=False) -> List[FmtSpec]:
    """Split the body of a string literal into literal text and ``{}`` placeholders.

    Spans of the returned pieces point into the source the literal came from.
    A stray brace, or anything but whitespace between a pair of braces,
    raises :class:`FormatStringError` at the offending offset.
    """
    parser = get_fmt_parser(debug)
    body = lit.val

    try:
        tree = parser.parse(body)
    except UnexpectedInput as e:
        raise syntax_error(parser, body, e, base=lit.body_start, source=lit.source,
                           error_class=FormatStringError) from e

    try:
        specs = FmtTransformer(lit).transform(tree)
    except VisitError as e:
        # Transformer callbacks have their exceptions wrapped by lark.
        if isinstance(e.orig_exc, FormatStringError):
            raise e.orig_exc from None
        raise

    logger.debug('format string at %d split into %d piece(s)', lit.span.start, len(specs))
    return specs
