"""Parser for class annotations embedded in CSS comments.

Two annotation forms are recognised:

    /* @hint callout | Boxed paragraph with a tinted background */

    /**
     * @class lead | Larger introductory paragraph
     * @class muted
     */

``@hint`` is matched line by line anywhere in the stylesheet and collected
into a mapping where the last occurrence of a name wins. ``@class`` is only
matched inside ``/* ... */`` blocks and collected into a list that keeps
duplicates.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from global_styles.annotations.model import AnnotatedClass, is_valid_class_name

__all__ = [
    "ANNOTATED_CLASSES",
    "HINTS",
    "HINT_PATTERN",
    "AnnotationGrammar",
    "parse_annotated_classes",
    "parse_annotations",
    "parse_hints",
]

# Documented in the user-facing help text; keep byte-compatible.
_LINE_TEMPLATE = (
    r"^\s*\/?\*+\s@{tag}\s+(?P<name>\S+)\s*"
    r"(?:\|\s*(?P<description>.*?)\s*)?(?:\*\/.*)?$"
)

HINT_PATTERN = re.compile(_LINE_TEMPLATE.format(tag="hint"), re.MULTILINE)

# A complete /* ... */ block; stars not followed by a slash stay inside.
_COMMENT_RE = re.compile(r"/\*(?:[^*]|\*(?!/))*\*/")

_BLOCK_LINE_TEMPLATE = r"^[ \t]*\*?[ \t]*@{tag}\s+(.+)$"


@dataclass(frozen=True)
class AnnotationGrammar:
    """How one annotation tag is found and aggregated.

    ``scope`` is ``"line"`` for the per-line form that may appear anywhere,
    or ``"block"`` for tags only honoured inside comment blocks.
    ``aggregate`` is ``"map"`` (last write wins) or ``"list"`` (duplicates
    kept in source order).
    """

    tag: str
    scope: Literal["line", "block"] = "line"
    aggregate: Literal["map", "list"] = "map"

    def line_pattern(self) -> re.Pattern[str]:
        if self.scope == "line":
            return re.compile(_LINE_TEMPLATE.format(tag=re.escape(self.tag)), re.MULTILINE)
        return re.compile(_BLOCK_LINE_TEMPLATE.format(tag=re.escape(self.tag)), re.MULTILINE)


HINTS = AnnotationGrammar(tag="hint", scope="line", aggregate="map")
ANNOTATED_CLASSES = AnnotationGrammar(tag="class", scope="block", aggregate="list")


def _split_line_match(match: re.Match[str]) -> tuple[str, str]:
    """Return (name, description) from a line-form match.

    ``\\S+`` is greedy, so ``@hint a|b */`` captures ``a|b`` as the name.
    A comment terminator and a pipe inside the captured name are split off
    the same way they would be with surrounding whitespace.
    """
    name = match.group("name")
    description = match.group("description")
    name = name.split("*/", 1)[0]
    if description is None and "|" in name:
        name, description = name.split("|", 1)
    return name.strip(), (description or "").strip()


def _split_definition(definition: str) -> tuple[str, str]:
    parts = definition.split("|", 1)
    description = parts[1].strip() if len(parts) > 1 else ""
    return parts[0].strip(), description


def _scan_lines(css: str, grammar: AnnotationGrammar) -> list[tuple[str, str]]:
    pattern = HINT_PATTERN if grammar == HINTS else grammar.line_pattern()
    return [_split_line_match(m) for m in pattern.finditer(css)]


def _scan_blocks(css: str, grammar: AnnotationGrammar) -> list[tuple[str, str]]:
    pattern = grammar.line_pattern()
    found: list[tuple[str, str]] = []
    for block in _COMMENT_RE.finditer(css):
        content = block.group(0)[2:-2].strip()
        for m in pattern.finditer(content):
            found.append(_split_definition(m.group(1)))
    return found


def parse_annotations(
    css: str, grammar: AnnotationGrammar
) -> dict[str, str] | list[AnnotatedClass]:
    """Collect the annotations described by *grammar* from *css*.

    Never raises: entries with an invalid class name are skipped and
    non-string input yields an empty result.
    """
    if not isinstance(css, str) or not css:
        return {} if grammar.aggregate == "map" else []

    if grammar.scope == "line":
        pairs = _scan_lines(css, grammar)
    else:
        pairs = _scan_blocks(css, grammar)

    valid = [(name, desc) for name, desc in pairs if is_valid_class_name(name)]

    if grammar.aggregate == "map":
        result: dict[str, str] = {}
        for name, desc in valid:
            result[name] = desc
        return result
    return [AnnotatedClass(name=name, description=desc) for name, desc in valid]


def parse_hints(css: str) -> dict[str, str]:
    """Map class name to description for every ``@hint`` line in *css*."""
    return parse_annotations(css, HINTS)  # type: ignore[return-value]


def parse_annotated_classes(css: str) -> list[AnnotatedClass]:
    """List every ``@class`` definition found inside comment blocks of *css*."""
    return parse_annotations(css, ANNOTATED_CLASSES)  # type: ignore[return-value]
