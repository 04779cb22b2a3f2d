"""
# Code-HTML: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class EmptyKeywordException(Exception):
    pass


class KeywordRuleSyntaxException(Exception):
    _line_number: int
    _line: str

    def __init__(self, line_number: int, line: str):
        super().__init__(f'line {line_number}: invalid keyword rule `{line}`')
        self._line_number = line_number
        self._line = line

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def line(self) -> str:
        return self._line


class WrappedRendererReuseException(Exception):
    pass
