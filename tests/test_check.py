import unittest

from sculpt.check import check_macro, check_main
from sculpt.error import (ExtraFormatArgumentsError, FormatStringError, MissingFormatStringError,
                          NotEnoughFormatArgumentsError, UnknownMacroError)
from sculpt.parser import parse_main


def program(*statements):
    return 'fn main() {\n' + ''.join('    {}\n'.format(s) for s in statements) + '}\n'


class TestCheck(unittest.TestCase):
    def test_valid_program(self):
        main = parse_main(program('print!("Hello");', 'print!(" ");', 'println!();',
                                  'println!("Hello {} and {}!", "Alice", "Bob");'))
        check_main(main)

    def test_empty_program(self):
        check_main(parse_main('fn main() { }'))

    def test_missing_format_string(self):
        src = program('print!();')

        with self.assertRaises(MissingFormatStringError) as cm:
            check_main(parse_main(src))

        self.assertEqual(cm.exception.name_span.of(src), 'print!')

    def test_extra_arguments(self):
        src = program('print!(" {} ", "a", "b", "c");')

        with self.assertRaises(ExtraFormatArgumentsError) as cm:
            check_main(parse_main(src))

        self.assertEqual(cm.exception.fmt_span.of(src), '" {} "')
        self.assertEqual([span.of(src) for span in cm.exception.arg_spans], ['"b"', '"c"'])
        self.assertEqual(cm.exception.message, 'multiple unused formatting arguments')

    def test_single_extra_argument(self):
        with self.assertRaises(ExtraFormatArgumentsError) as cm:
            check_main(parse_main(program('println!("x", "y");')))

        self.assertEqual(cm.exception.message, 'unused formatting argument')

    def test_not_enough_arguments(self):
        src = program('print!("{} {} {}", "a");')

        with self.assertRaises(NotEnoughFormatArgumentsError) as cm:
            check_main(parse_main(src))

        self.assertEqual([span.of(src) for span in cm.exception.spec_spans], ['{}', '{}', '{}'])
        self.assertEqual([span.of(src) for span in cm.exception.arg_spans], ['"a"'])
        self.assertEqual(cm.exception.message, '3 positional arguments in format string, but there is 1 argument')

    def test_unknown_macro(self):
        main = parse_main(program('print!("ok");', 'shout!("HEY");'))

        with self.assertRaises(UnknownMacroError) as cm:
            check_main(main)

        self.assertEqual(cm.exception.name, 'shout!')

    def test_invalid_format_string(self):
        main = parse_main(program('println!("}");'))

        with self.assertRaises(FormatStringError):
            check_macro(main.statements[0])

    def test_first_error_wins(self):
        main = parse_main(program('print!();', 'nope!();'))

        with self.assertRaises(MissingFormatStringError):
            check_main(main)


if __name__ == '__main__':
    unittest.main()
