from global_styles.minifier.base import FunctionMinifier, Minifier
from global_styles.minifier.builtin import RegexMinifier, minify

DEFAULT_MINIFIER = RegexMinifier()

__all__ = [
    "DEFAULT_MINIFIER",
    "FunctionMinifier",
    "Minifier",
    "RegexMinifier",
    "minify",
]
