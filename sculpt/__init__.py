from sculpt.objects import Main, Macro, Name, StrLit, Span, FmtLit, FmtArg
from sculpt.error import (SculptError, SculptSyntaxError, FormatStringError, CheckError, MissingFormatStringError,
                          ExtraFormatArgumentsError, NotEnoughFormatArgumentsError, UnknownMacroError)
from sculpt.parser import parse_main
from sculpt.fmt import extract_fmt
from sculpt.check import check_main, check_macro
from sculpt.report import format_error, report_error
