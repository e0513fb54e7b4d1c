LEXER = r'''main: "fn" "main" "(" ")" "{" statement* "}"

statement: macro ";"

macro: MACRO_NAME "(" arg_list ")"

arg_list: (STR_LIT ",")* STR_LIT?

MACRO_NAME: /[a-z]+!/

STR_LIT: /"[^"]*"/


%ignore WHITESPACE
WHITESPACE: WHITESPACE_INLINE | /[\r\n]/+
WHITESPACE_INLINE: /[ \t\f\v]/+
'''


FMT_LEXER = r'''fmt: (FMT_LIT | FMT_ARG)*

FMT_LIT: /[^{}]+/
FMT_ARG: /\{[^{}]*\}/
'''


# Human-readable names for the terminals that appear in "expected" sets.
TERMINAL_NAMES = {
    'MACRO_NAME': 'macro name',
    'STR_LIT': 'string literal',
    'FMT_LIT': 'format text',
    'FMT_ARG': '"{}"',
    '$END': 'end of input',
    '<END-OF-FILE>': 'end of input',
}
