"""
# Code-HTML: renderers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Classes for the renderers that are actually assembled into a rendering chain.

Highlighting is plain substring search, not tokenisation.
Each highlighter scans whatever it is given, including markup inserted by highlighters that ran before it.
"""

from typing import Iterable, Optional

from codehtml.bases import CodeRenderer, SyntaxHighlighter
from codehtml.constants import (
    COMMENT_COLOUR,
    COMMENT_MARKER,
    PLAIN_CLOSING_TAG,
    PLAIN_OPENING_TAG,
    STANDARD_KEYWORD_RULES,
    STRING_LITERAL_COLOUR,
)
from codehtml.exceptions import EmptyKeywordException
from codehtml.rules import KeywordRule
from codehtml.utilities import build_colour_span, is_ascii_alphanumeric


class PlainCodeRenderer(CodeRenderer):
    """
    A renderer that wraps code, verbatim, in a monospace preformatted block.
    """
    def render(self, code: str) -> str:
        html = f'{PLAIN_OPENING_TAG}{code}{PLAIN_CLOSING_TAG}'
        self.print_trace(code, html)

        return html


class KeywordHighlighter(SyntaxHighlighter):
    """
    A highlighter for whole-word keywords.

    Keyword rules are applied in order, each to the output of the one before.
    For a given rule, an occurrence of «keyword» is a whole word
    if it is neither preceded nor followed by an ASCII alphanumeric character,
    where "preceded" is with respect to the working copy
    (i.e. an occurrence straight after a replacement by the same rule is preceded by `>`).
    Whole-word occurrences become `<span style='color: «colour»;'>«keyword»</span>`.
    """
    _keyword_rules: tuple['KeywordRule', ...]

    def __init__(self, wrapped: 'CodeRenderer', keyword_rules: Optional[Iterable['KeywordRule']] = None,
                 verbose_mode_enabled: bool = False):
        if keyword_rules is None:
            keyword_rules = STANDARD_KEYWORD_RULES

        keyword_rules = tuple(KeywordRule(*keyword_rule) for keyword_rule in keyword_rules)
        for keyword_rule in keyword_rules:
            if len(keyword_rule.keyword) == 0:
                raise EmptyKeywordException(f'error: empty keyword in rule for colour `{keyword_rule.colour}`')

        super().__init__(wrapped, verbose_mode_enabled)
        self._keyword_rules = keyword_rules

    @property
    def keyword_rules(self) -> tuple['KeywordRule', ...]:
        return self._keyword_rules

    def _highlight(self, code: str) -> str:
        for keyword, colour in self._keyword_rules:
            code = KeywordHighlighter.highlight_keyword(code, keyword, colour)

        return code

    @staticmethod
    def highlight_keyword(string: str, keyword: str, colour: str) -> str:
        replacement = build_colour_span(colour, keyword)
        keyword_length = len(keyword)

        pieces = []
        position = 0
        replacement_end = None
        while True:
            start = string.find(keyword, position)
            if start == -1:
                break

            end = start + keyword_length

            if start == 0:
                preceding_character = ''
            elif start == replacement_end:
                preceding_character = replacement[-1]
            else:
                preceding_character = string[start - 1]

            following_character = string[end:end + 1]

            pieces.append(string[position:start])
            if not is_ascii_alphanumeric(preceding_character) and not is_ascii_alphanumeric(following_character):
                pieces.append(replacement)
                replacement_end = end
            else:
                pieces.append(keyword)

            position = end

        pieces.append(string[position:])

        return ''.join(pieces)


class StringHighlighter(SyntaxHighlighter):
    """
    A highlighter for double-quoted string literals.

    A literal runs from a double quote to the very next double quote, inclusive.
    Backslash escapes are not recognised, so `"a \\"b\\""` highlights as `"a \\"` followed by `b\\""`.
    An unpaired final double quote, and everything after it, is left untouched.
    """
    _colour: str

    def __init__(self, wrapped: 'CodeRenderer', colour: str = STRING_LITERAL_COLOUR,
                 verbose_mode_enabled: bool = False):
        super().__init__(wrapped, verbose_mode_enabled)
        self._colour = colour

    @property
    def colour(self) -> str:
        return self._colour

    def _highlight(self, code: str) -> str:
        pieces = []
        position = 0
        while True:
            start = code.find('"', position)
            if start == -1:
                break

            end = code.find('"', start + 1)
            if end == -1:
                break

            pieces.append(code[position:start])
            pieces.append(build_colour_span(self._colour, code[start:end + 1]))
            position = end + 1

        pieces.append(code[position:])

        return ''.join(pieces)


class CommentHighlighter(SyntaxHighlighter):
    """
    A highlighter for `//` line comments.

    A comment runs from `//` up to but excluding the next newline, or to the end of the code.
    """
    _colour: str

    def __init__(self, wrapped: 'CodeRenderer', colour: str = COMMENT_COLOUR, verbose_mode_enabled: bool = False):
        super().__init__(wrapped, verbose_mode_enabled)
        self._colour = colour

    @property
    def colour(self) -> str:
        return self._colour

    def _highlight(self, code: str) -> str:
        pieces = []
        position = 0
        while True:
            start = code.find(COMMENT_MARKER, position)
            if start == -1:
                break

            end = code.find('\n', start)
            if end == -1:
                end = len(code)

            pieces.append(code[position:start])
            pieces.append(build_colour_span(self._colour, code[start:end]))
            position = end

        pieces.append(code[position:])

        return ''.join(pieces)
