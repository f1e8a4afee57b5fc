"""Built-in regex CSS minifier.

Not a CSS parser: it strips comments and squeezes whitespace, which is
enough for hand-written global stylesheets. Strings containing ``/*`` or
significant whitespace are not protected.
"""

from __future__ import annotations

import re

__all__ = ["RegexMinifier", "minify"]

# Unrolled /* ... */ match: closes on the first "*/" even with stars inside.
_COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")
_LINE_BREAKS_TABLE = str.maketrans("", "", "\r\n\t")
_PUNCTUATION_SPACE_RE = re.compile(r"\s*([{}:;,])\s*")
_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_SEMICOLON_RE = re.compile(r";+\}")


def _strip_comments(css: str) -> str:
    # Removing a comment or a line break can join "/" and "*" into a new one.
    while True:
        stripped = _COMMENT_RE.sub("", css)
        if stripped == css:
            return css
        css = stripped


def minify(css: str) -> str:
    """Return a compact version of *css*.

    Steps, each on the previous result: drop comments, drop line breaks
    and tabs, drop whitespace around ``{ } : ; ,``, collapse remaining
    whitespace runs to one space, drop semicolons before ``}``, trim.
    Comment removal repeats until stable so the result is a fixed point.
    """
    if not isinstance(css, str) or not css:
        return ""
    css = _strip_comments(css)
    css = _strip_comments(css.translate(_LINE_BREAKS_TABLE))
    css = _PUNCTUATION_SPACE_RE.sub(r"\1", css)
    css = _WHITESPACE_RE.sub(" ", css)
    css = _TRAILING_SEMICOLON_RE.sub("}", css)
    return css.strip()


class RegexMinifier:
    """Default Minifier backed by :func:`minify`."""

    def minify(self, css: str) -> str:
        return minify(css)
