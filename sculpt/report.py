"""
Text rendering of errors raised while parsing or checking a program.

Errors only know offsets into the source. SourceText turns an offset into a
1-based line and column and slices out the line it sits on; format_error
builds a report like:

    [InvalidToken] Error: encountered unexpected syntax
     --> main.sculpt:2:15
      |
    2 |     println!("}");
      |               ^ unexpected syntax

Lines are broken on \\r\\n, \\r and \\n.
"""

import bisect
import re
import sys

from sculpt.error import SculptError


LINE_BREAK = re.compile(r'\r\n?|\n')


class SourceText:
    def __init__(self, content: str, filename=None):
        self.content = content
        self.filename = filename
        self._bounds = None

    @property
    def bounds(self):
        # Line breaks are only searched for once an error needs locating.
        if self._bounds is None:
            inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
            self._bounds = [0] + inside + [len(self.content)]
        return self._bounds

    def find_line_column(self, offset: int):
        bounds = self.bounds
        row = bisect.bisect_right(bounds, offset, hi=len(bounds) - 1) - 1
        return row + 1, offset - bounds[row] + 1

    def line_of_text(self, line: int) -> str:
        bounds = self.bounds
        r = min(max(0, line - 1), len(bounds) - 2)
        return self.content[bounds[r]:bounds[r + 1]].rstrip('\r\n')


def illustration(single_line: str, column: int, width: int = 0, *, prefix='', caption='here') -> str:
    """Underline ``width`` characters of a line starting at 1-based ``column``."""
    start = column - 1
    blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
    underline = '^' * max(1, min(width, len(single_line) - start))
    return blanks + underline + ' ' + caption


def format_error(path, source: str, error: SculptError) -> str:
    filename = '<input>' if path is None else str(path)
    text = SourceText(source, filename)

    lines = ['[{}] Error: {}'.format(error.code, error.message)]

    located = []
    for span, caption in error.labels():
        line, column = text.find_line_column(span.start)
        located.append((line, column, span, caption))

    if not located:
        return '\n'.join(lines)

    line, column = located[0][:2]
    lines.append(' --> {}:{}:{}'.format(filename, line, column))

    width = max(len(str(line)) for line, _, _, _ in located)
    gutter = ' ' * width + ' |'
    lines.append(gutter)

    for line, column, span, caption in located:
        single_line = text.line_of_text(line)
        lines.append('{} | {}'.format(str(line).rjust(width), single_line).rstrip())
        lines.append(gutter + ' ' + illustration(single_line, column, len(span), caption=caption))

    return '\n'.join(lines)


def report_error(path, source: str, error: SculptError, writer=None):
    if writer is None:
        writer = sys.stderr

    print(format_error(path, source, error), file=writer)
