"""Global Styles: one global stylesheet with class hints and static delivery."""
from __future__ import annotations

from global_styles.annotations import (
    AnnotatedClass,
    parse_annotated_classes,
    parse_hints,
)
from global_styles.config import GlobalStylesConfig
from global_styles.minifier import minify

__version__ = "2.0.0"

__all__ = [
    "AnnotatedClass",
    "GlobalStylesConfig",
    "minify",
    "parse_annotated_classes",
    "parse_hints",
]
