"""
# Code-HTML: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

The standard rendering chain is assembled as
````
CommentHighlighter(StringHighlighter(KeywordHighlighter(PlainCodeRenderer())))
````
so that, on `render(code)`, comments are highlighted first, then string literals, then keywords,
and finally the result is wrapped in a preformatted block.
Changing the nesting can change the output,
since a highlighter scans the markup inserted by the highlighters that ran before it.
"""

from typing import Iterable, Optional

from codehtml.bases import CodeRenderer
from codehtml.renderers import CommentHighlighter, KeywordHighlighter, PlainCodeRenderer, StringHighlighter
from codehtml.rules import KeywordRule
from codehtml.utilities import escape_code_html


def build_standard_renderer(keyword_rules: Optional[Iterable['KeywordRule']] = None,
                            verbose_mode_enabled: bool = False) -> 'CodeRenderer':
    renderer = PlainCodeRenderer(verbose_mode_enabled)
    renderer = KeywordHighlighter(renderer, keyword_rules, verbose_mode_enabled=verbose_mode_enabled)
    renderer = StringHighlighter(renderer, verbose_mode_enabled=verbose_mode_enabled)
    renderer = CommentHighlighter(renderer, verbose_mode_enabled=verbose_mode_enabled)

    return renderer


def code_to_html(code: str, renderer: Optional['CodeRenderer'] = None) -> str:
    """
    Convert code to HTML.

    The code is escaped before rendering; if no renderer is given, the standard rendering chain is used.
    """
    if renderer is None:
        renderer = build_standard_renderer()

    return renderer.render(escape_code_html(code))
