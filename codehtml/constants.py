"""
# Code-HTML: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

from codehtml.rules import KeywordRule

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

PLAIN_OPENING_TAG = "<pre style='font-family: monospace;'>"
PLAIN_CLOSING_TAG = '</pre>'

STRING_LITERAL_COLOUR = 'green'
COMMENT_COLOUR = 'gray'
COMMENT_MARKER = '//'

STANDARD_KEYWORD_RULES = (
    KeywordRule('int', 'blue'),
    KeywordRule('void', 'blue'),
    KeywordRule('class', 'purple'),
    KeywordRule('public', 'purple'),
    KeywordRule('private', 'purple'),
    KeywordRule('return', 'darkblue'),
    KeywordRule('if', 'darkorange'),
    KeywordRule('else', 'darkorange'),
    KeywordRule('for', 'darkorange'),
    KeywordRule('while', 'darkorange'),
    KeywordRule('#include', 'red'),
    KeywordRule('cout', 'blue'),
    KeywordRule('string', 'green'),
)

KEYWORD_RULES_SYNTAX_HELP = '''\
In a keyword rules file, a line must be one of the following:
(1) whitespace-only;
(2) a comment (beginning with `#`);
(3) a keyword rule (`* «keyword» --> «colour»`).
- Note for (3): rules are applied in file order,
  and a later rule scans the markup inserted by earlier rules.
- Note for (3): «colour» may only contain letters, digits, and `#()%,.-`.
'''

SAMPLE_CODE = '''
#include <iostream>
// Пример кода
int main() {
    string message = "Hello, World!";
    return 0;
}
'''
