"""
# Code-HTML: test_cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `cli.py`.
"""

import contextlib
import io
import os
import tempfile
import unittest

from codehtml.cli import load_keyword_rules, main, parse_command_line_arguments
from codehtml.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, SAMPLE_CODE
from codehtml.core import code_to_html
from codehtml.rules import KeywordRule


class TestCli(unittest.TestCase):
    def test_parse_command_line_arguments(self):
        parsed_arguments = parse_command_line_arguments([])
        self.assertEqual(parsed_arguments.code_file_names, [])
        self.assertIsNone(parsed_arguments.keyword_rules_file_name)
        self.assertFalse(parsed_arguments.verbose_mode_enabled)

        parsed_arguments = parse_command_line_arguments(['-x', '-k', 'rules.txt', 'a.cpp', '-'])
        self.assertEqual(parsed_arguments.code_file_names, ['a.cpp', '-'])
        self.assertEqual(parsed_arguments.keyword_rules_file_name, 'rules.txt')
        self.assertTrue(parsed_arguments.verbose_mode_enabled)

    def test_main_sample(self):
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            main([])

        self.assertEqual(output.getvalue(), code_to_html(SAMPLE_CODE) + '\n')

    def test_main_files(self):
        with tempfile.TemporaryDirectory() as directory_name:
            code_file_name = os.path.join(directory_name, 'main.py')
            with open(code_file_name, 'w', encoding='utf-8') as code_file:
                code_file.write('def f(): return 1  // no\n')

            rules_file_name = os.path.join(directory_name, 'rules.txt')
            with open(rules_file_name, 'w', encoding='utf-8') as rules_file:
                rules_file.write('# Python\n* def --> blue\n')

            output = io.StringIO()
            with contextlib.redirect_stdout(output):
                main(['-k', rules_file_name, code_file_name])

        self.assertEqual(
            output.getvalue(),
            "<pre style='font-family: monospace;'>"
            "<span style='color: blue;'>def</span> f(): return 1  "
            "<span style='color: gray;'>// no</span>\n"
            "</pre>\n",
        )

    def test_main_missing_file(self):
        with tempfile.TemporaryDirectory() as directory_name:
            missing_file_name = os.path.join(directory_name, 'missing.cpp')
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    main([missing_file_name])

        self.assertEqual(context.exception.code, COMMAND_LINE_ERROR_EXIT_CODE)

    def test_main_unreadable_files(self):
        with tempfile.TemporaryDirectory() as directory_name:
            latin_1_file_name = os.path.join(directory_name, 'latin_1.cpp')
            with open(latin_1_file_name, 'wb') as latin_1_file:
                latin_1_file.write(b'int x; // caf\xe9\n')

            error_output = io.StringIO()
            with contextlib.redirect_stderr(error_output):
                with self.assertRaises(SystemExit) as context:
                    main([latin_1_file_name])
            self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)
            self.assertIn('not valid UTF-8', error_output.getvalue())

            error_output = io.StringIO()
            with contextlib.redirect_stderr(error_output):
                with self.assertRaises(SystemExit) as context:
                    main([directory_name])
            self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)
            self.assertIn('cannot read file', error_output.getvalue())

            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    main(['-k', directory_name])
            self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)

    def test_main_verbose(self):
        output = io.StringIO()
        error_output = io.StringIO()
        with contextlib.redirect_stdout(output), contextlib.redirect_stderr(error_output):
            main(['-x'])

        self.assertEqual(output.getvalue(), code_to_html(SAMPLE_CODE) + '\n')
        self.assertEqual(output.getvalue().count('<pre'), 1)
        self.assertTrue(error_output.getvalue().startswith('<' * 48 + ' BEFORE CommentHighlighter\n'))
        self.assertIn('>' * 48 + ' AFTER PlainCodeRenderer', error_output.getvalue())

    def test_load_keyword_rules(self):
        self.assertIsNone(load_keyword_rules(None))

        with tempfile.TemporaryDirectory() as directory_name:
            rules_file_name = os.path.join(directory_name, 'rules.txt')
            with open(rules_file_name, 'w', encoding='utf-8') as rules_file:
                rules_file.write('* fn --> blue\n')
            self.assertEqual(load_keyword_rules(rules_file_name), [KeywordRule('fn', 'blue')])

            with open(rules_file_name, 'w', encoding='utf-8') as rules_file:
                rules_file.write('fn = blue\n')
            error_output = io.StringIO()
            with contextlib.redirect_stderr(error_output):
                with self.assertRaises(SystemExit) as context:
                    load_keyword_rules(rules_file_name)
            self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)
            self.assertIn('line 1', error_output.getvalue())

            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as context:
                    load_keyword_rules(os.path.join(directory_name, 'missing.txt'))
            self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    unittest.main()
