from sculpt.objects import FmtArg, Macro, Main

from sculpt.error import (ExtraFormatArgumentsError, MissingFormatStringError, NotEnoughFormatArgumentsError,
                          UnknownMacroError)

from sculpt.fmt import extract_fmt

import logging


logger = logging.getLogger(__name__)


def check_print(macro: Macro):
    if not macro.args:
        raise MissingFormatStringError(macro.name.span)

    fmt_str, args = macro.args[0], macro.args[1:]
    spec_spans = [spec.span for spec in extract_fmt(fmt_str) if isinstance(spec, FmtArg)]

    expected = len(spec_spans)
    if len(args) > expected:
        raise ExtraFormatArgumentsError(fmt_str.span, [arg.span for arg in args[expected:]])

    if len(args) < expected:
        raise NotEnoughFormatArgumentsError(spec_spans, [arg.span for arg in args])


def check_println(macro: Macro):
    # A bare println!() only ends the line.
    if macro.args:
        check_print(macro)


check_functions = {
    'print!': check_print,
    'println!': check_println,
}


def check_macro(macro: Macro):
    name = macro.name.name

    try:
        check_function = check_functions[name]
    except KeyError:
        raise UnknownMacroError(macro.name.span, name) from None

    check_function(macro)


def check_main(main: Main):
    """Validate every statement, raising on the first invalid one."""
    for macro in main.statements:
        check_macro(macro)

    logger.debug('checked %d statement(s)', len(main.statements))
