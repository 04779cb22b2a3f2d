"""
# Code-HTML: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from codehtml._version import __version__
from codehtml.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    KEYWORD_RULES_SYNTAX_HELP,
    SAMPLE_CODE,
)
from codehtml.core import build_standard_renderer, code_to_html
from codehtml.exceptions import KeywordRuleSyntaxException
from codehtml.rules import KeywordRule, parse_keyword_rules

DESCRIPTION = '''
    Convert source code to HTML with keyword, string literal, and comment highlighting.
'''
CODE_FILE_NAME_HELP = '''
    name of code file to be converted (`-` for standard input);
    if none is given, a built-in C++ sample is converted
'''
KEYWORDS_HELP = '''
    name of keyword rules file (lines of the form `* «keyword» --> «colour»`)
    to be used instead of the standard keyword rules
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every highlighting applied)
'''
STANDARD_INPUT_FILE_NAME = '-'


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-k', '--keywords',
        dest='keyword_rules_file_name',
        default=None,
        help=KEYWORDS_HELP,
        metavar='rules.txt',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'code_file_names',
        default=[],
        help=CODE_FILE_NAME_HELP,
        metavar='file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def read_code(code_file_name: str) -> str:
    try:
        if code_file_name == STANDARD_INPUT_FILE_NAME:
            return sys.stdin.read()

        with open(code_file_name, 'r', encoding='utf-8') as code_file:
            return code_file.read()
    except FileNotFoundError:
        print(f'error: argument `{code_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except UnicodeDecodeError:
        print(f'error: argument `{code_file_name}`: file is not valid UTF-8', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: argument `{code_file_name}`: cannot read file ({os_error.strerror})', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def load_keyword_rules(keyword_rules_file_name: Optional[str]) -> Optional[list['KeywordRule']]:
    if keyword_rules_file_name is None:
        return None

    try:
        with open(keyword_rules_file_name, 'r', encoding='utf-8') as keyword_rules_file:
            rules = keyword_rules_file.read()
    except FileNotFoundError:
        print(f'error: keyword rules file `{keyword_rules_file_name}` not found', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except UnicodeDecodeError:
        print(f'error: keyword rules file `{keyword_rules_file_name}` is not valid UTF-8', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: cannot read keyword rules file `{keyword_rules_file_name}` ({os_error.strerror})',
              file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    try:
        return parse_keyword_rules(rules)
    except KeywordRuleSyntaxException as keyword_rule_syntax_exception:
        print(
            f'error: `{keyword_rules_file_name}`, line {keyword_rule_syntax_exception.line_number}: '
            f'invalid keyword rule `{keyword_rule_syntax_exception.line}`\n\n{KEYWORD_RULES_SYNTAX_HELP}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def write_html(html: str):
    try:
        print(html)
    except IOError:
        print('error: cannot write to standard output', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    code_file_names = parsed_arguments.code_file_names
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    keyword_rules = load_keyword_rules(parsed_arguments.keyword_rules_file_name)

    if len(code_file_names) == 0:
        codes = [SAMPLE_CODE]
    else:
        codes = [read_code(code_file_name) for code_file_name in code_file_names]

    for code in codes:
        renderer = build_standard_renderer(keyword_rules, verbose_mode_enabled)
        write_html(code_to_html(code, renderer))


if __name__ == '__main__':
    main()
