from sculpt.objects import Span


class SculptError(Exception):
    code = 'Error'
    message = ''

    def labels(self):
        """Return a list of ``(Span, caption)`` pairs locating the error in source."""
        return []


class SculptSyntaxError(SculptError):
    code = 'InvalidToken'
    message = 'encountered unexpected syntax'

    def __init__(self, offset, line=None, column=None, expected=()):
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = frozenset(expected)
        SculptError.__init__(self, self.describe())

    def describe(self):
        text = '{} at offset {}'.format(self.message, self.offset)
        if self.line is not None:
            text += ' (line {}, column {})'.format(self.line, self.column)
        if self.expected:
            text += ', expected one of: ' + ', '.join(sorted(self.expected))
        return text

    def labels(self):
        caption = 'unexpected syntax'
        if self.expected:
            caption = 'expected ' + ' or '.join(sorted(self.expected))
        return [(Span(self.offset, self.offset + 1), caption)]


class FormatStringError(SculptSyntaxError):
    message = 'invalid format string'

    def __init__(self, offset, line=None, column=None, expected=()):
        # Expected sets are not reported inside format strings.
        SculptSyntaxError.__init__(self, offset, line, column)


class CheckError(SculptError):
    pass


class MissingFormatStringError(CheckError):
    code = 'MissingFmtStr'
    message = 'missing format string'

    def __init__(self, name_span):
        self.name_span = name_span
        CheckError.__init__(self, self.message)

    def labels(self):
        return [(self.name_span, 'requires at least a format string argument')]


class ExtraFormatArgumentsError(CheckError):
    code = 'ExtraFmtArguments'

    def __init__(self, fmt_span, arg_spans):
        self.fmt_span = fmt_span
        self.arg_spans = list(arg_spans)
        if len(self.arg_spans) == 1:
            self.message = 'unused formatting argument'
        else:
            self.message = 'multiple unused formatting arguments'
        CheckError.__init__(self, self.message)

    def labels(self):
        caption = 'missing formatting specifier' if len(self.arg_spans) == 1 else 'multiple missing formatting specifiers'
        labels = [(self.fmt_span, caption)]
        labels.extend((span, 'argument never used') for span in self.arg_spans)
        return labels


class NotEnoughFormatArgumentsError(CheckError):
    code = 'NotEnoughFmtArguments'

    def __init__(self, spec_spans, arg_spans):
        self.spec_spans = list(spec_spans)
        self.arg_spans = list(arg_spans)

        specs = len(self.spec_spans)
        args = len(self.arg_spans)
        self.message = '{} positional argument{} in format string, but there {} {} argument{}'.format(
            specs, '' if specs == 1 else 's', 'is' if args == 1 else 'are', args, '' if args == 1 else 's')
        CheckError.__init__(self, self.message)

    def labels(self):
        labels = [(span, 'formatting specifier') for span in self.spec_spans]
        labels.extend((span, 'argument') for span in self.arg_spans)
        return labels


class UnknownMacroError(CheckError):
    code = 'UnknownMacro'

    def __init__(self, name_span, name):
        self.name_span = name_span
        self.name = name
        self.message = 'cannot find macro `{}` in this scope'.format(name)
        CheckError.__init__(self, self.message)

    def labels(self):
        return [(self.name_span, 'unknown macro')]
