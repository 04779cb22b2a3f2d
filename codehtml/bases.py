"""
# Code-HTML: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for code renderers.
"""

import abc
import sys

from codehtml.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from codehtml.exceptions import WrappedRendererReuseException


class CodeRenderer(abc.ABC):
    """
    Base class for a code renderer.

    A renderer converts code to HTML via `render(code)`,
    which must be a pure function of the code and the renderer's fixed configuration.
    A renderer may be wrapped by at most one SyntaxHighlighter.
    """
    _is_wrapped: bool
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False):
        self._is_wrapped = False
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def is_wrapped(self) -> bool:
        return self._is_wrapped

    @abc.abstractmethod
    def render(self, code: str) -> str:
        raise NotImplementedError

    def print_trace(self, string_before: str, string_after: str):
        if not self._verbose_mode_enabled:
            return

        if string_before == string_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        try:
            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {self.name}', file=sys.stderr)
            print(string_before, file=sys.stderr)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
            print(string_after, file=sys.stderr)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {self.name}', file=sys.stderr)
            print('\n\n\n\n', file=sys.stderr)
        except UnicodeEncodeError as unicode_encode_error:
            error_message = (
                'bad print due to non-Unicode terminal encoding, likely `cp1252` on Git BASH for Windows. '
                'Try setting the `PYTHONIOENCODING` environment variable to `utf-8` '
                '(add `export PYTHONIOENCODING=utf-8` to `.bash_profile` and then source it). '
                'See <https://stackoverflow.com/a/7865013>.'
            )
            raise UnicodeError(error_message) from unicode_encode_error


class SyntaxHighlighter(CodeRenderer):
    """
    A renderer that wraps another renderer.

    The highlighter takes ownership of the wrapped renderer:
    the same renderer cannot be handed to a second highlighter.
    On `render(code)`, the code is first highlighted by `_highlight(code)`
    and the result is then rendered by the wrapped renderer.
    A bare SyntaxHighlighter does no highlighting of its own and merely forwards.
    """
    _wrapped: 'CodeRenderer'

    def __init__(self, wrapped: 'CodeRenderer', verbose_mode_enabled: bool = False):
        super().__init__(verbose_mode_enabled)

        if wrapped.is_wrapped:
            raise WrappedRendererReuseException(
                f'error: cannot wrap `{wrapped.name}` which is already wrapped by another highlighter'
            )

        wrapped._is_wrapped = True
        self._wrapped = wrapped

    @property
    def wrapped(self) -> 'CodeRenderer':
        return self._wrapped

    def render(self, code: str) -> str:
        highlighted = self._highlight(code)
        self.print_trace(code, highlighted)

        return self._wrapped.render(highlighted)

    def _highlight(self, code: str) -> str:
        """
        Highlight code before it is passed on to the wrapped renderer.
        """
        return code
