"""Editing service for the global stylesheet.

Raw CSS lives in the option store so it can be edited again with its
comments intact. A minified copy is written as a static file for
delivery. Previews parse hints from unsaved CSS without touching either.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import StrEnum

from global_styles.annotations import parse_hints
from global_styles.hooks import (
    HINTS_FILTER,
    MINIMIZE_FILTER,
    PRE_SAVE_FILTER,
    CssSaved,
    CssSaveFailed,
    EventBus,
    FilterRegistry,
)
from global_styles.minifier import DEFAULT_MINIFIER, Minifier
from global_styles.store import OptionRepository, StylesheetFile

logger = logging.getLogger(__name__)

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
# A "<" followed by whitespace is a comparison, not a tag.
_TAG_RE = re.compile(r"<[A-Za-z/!?][^>]*>")


def sanitize_css(css: str) -> str:
    """Trim, drop NUL bytes and strip markup smuggled into the stylesheet."""
    css = css.strip().replace("\0", "")
    css = _SCRIPT_STYLE_RE.sub("", css)
    css = _TAG_RE.sub("", css)
    return css.strip()


class SaveStatus(StrEnum):
    OK = "ok"
    INVALID_REQUEST = "invalid_request"
    SAVE_FAILED = "save_failed"


@dataclass(frozen=True)
class SaveResult:
    status: SaveStatus
    message: str
    css_content: str = ""
    available_hints: dict[str, str] = field(default_factory=dict)
    persisted: bool = False

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.OK

    def to_dict(self) -> dict:
        data: dict = {"success": self.ok, "message": self.message}
        if self.ok:
            data.update(
                css_content=self.css_content,
                available_hints=self.available_hints,
                persisted=self.persisted,
            )
        else:
            data["code"] = self.status.value
        return data


class Editor:
    """Previews and saves the global stylesheet."""

    def __init__(
        self,
        options: OptionRepository,
        stylesheet: StylesheetFile,
        *,
        filters: FilterRegistry | None = None,
        events: EventBus | None = None,
        minifier: Minifier | None = None,
    ) -> None:
        self.options = options
        self.stylesheet = stylesheet
        self.filters = filters or FilterRegistry()
        self.events = events or EventBus()
        self.minifier = minifier or DEFAULT_MINIFIER

    def get_css(self) -> str:
        return self.options.get_css()

    def get_available_hints(self) -> dict[str, str]:
        """Hints from the stored CSS after the ``hints`` filter."""
        css = self.options.get_css()
        if not css:
            return {}
        return self.filters.apply(HINTS_FILTER, parse_hints(css))

    def editor_data(self) -> dict:
        """Everything a UI shell needs to open the editor."""
        info = self.stylesheet.info()
        return {
            "css_content": self.get_css(),
            "available_hints": self.get_available_hints(),
            "stylesheet_url": info.url if info.exists else "",
            "stylesheet_version": info.version,
        }

    def preview(self, css: str) -> SaveResult:
        """Parse hints from unsaved *css*; nothing is stored."""
        css = self.filters.apply(PRE_SAVE_FILTER, css)
        hints = self.filters.apply(HINTS_FILTER, parse_hints(css))
        return SaveResult(
            status=SaveStatus.OK,
            message="CSS updated in preview. Save the document to make changes permanent.",
            css_content=css,
            available_hints=hints,
            persisted=False,
        )

    def save(self, css: str) -> SaveResult:
        """Store *css* and regenerate the static file."""
        css = self.filters.apply(PRE_SAVE_FILTER, css)
        sanitized = sanitize_css(css)

        stored = self.options.set_css(sanitized)
        written = self.stylesheet.write(self.minify(sanitized))
        if not (stored and written):
            reason = "database" if not stored else "file"
            logger.error("saving global stylesheet failed (%s)", reason)
            self.events.emit(CssSaveFailed(reason=reason))
            return SaveResult(status=SaveStatus.SAVE_FAILED, message="Failed to save CSS.")

        self.events.emit(CssSaved(css=sanitized, path=str(self.stylesheet.path)))
        return SaveResult(
            status=SaveStatus.OK,
            message="CSS saved successfully.",
            css_content=css,
            available_hints=self.get_available_hints(),
            persisted=True,
        )

    def minify(self, css: str) -> str:
        """Minify with the ``minimize`` filter if one is registered, else the minifier."""
        if self.filters.has(MINIMIZE_FILTER):
            return self.filters.apply(MINIMIZE_FILTER, css)
        return self.minifier.minify(css)
