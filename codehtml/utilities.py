"""
# Code-HTML: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def build_colour_span(colour: str, content: str) -> str:
    return f"<span style='color: {colour};'>{content}</span>"


def escape_code_html(code: str) -> str:
    """
    Escape angle brackets so that code may be embedded in HTML.

    Ampersands are left alone, so that `&lt;` in the code will come out as `<` in the browser.
    """
    code = re.sub(pattern='<', repl='&lt;', string=code)
    code = re.sub(pattern='>', repl='&gt;', string=code)

    return code


def is_ascii_alphanumeric(character: str) -> bool:
    """
    Whether a character is an ASCII letter or digit.

    Non-ASCII letters (e.g. Cyrillic) do not count,
    so that a keyword directly next to one is still treated as a whole word.
    """
    return character.isascii() and character.isalnum()
