"""Base protocol for CSS minification strategies."""

from __future__ import annotations

from typing import Callable, Protocol


class Minifier(Protocol):
    """A stylesheet-to-stylesheet compaction step."""

    def minify(self, css: str) -> str: ...


class FunctionMinifier:
    """Adapt a plain ``str -> str`` callable to the Minifier protocol."""

    def __init__(self, fn: Callable[[str], str]) -> None:
        self._fn = fn

    def minify(self, css: str) -> str:
        return self._fn(css)
