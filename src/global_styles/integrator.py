"""Expose ``@class`` annotations of the stored stylesheet to other consumers."""

from __future__ import annotations

from global_styles.annotations import AnnotatedClass, parse_annotated_classes
from global_styles.hooks import AnnotatedClassesFound, EventBus
from global_styles.store import OptionRepository


class Integrator:
    def __init__(self, options: OptionRepository, events: EventBus | None = None) -> None:
        self.options = options
        self.events = events or EventBus()

    def annotated_classes(self) -> list[AnnotatedClass]:
        css = self.options.get_css()
        if not css:
            return []
        return parse_annotated_classes(css)

    def parse_and_trigger_annotated_classes(self) -> list[AnnotatedClass]:
        """Emit AnnotatedClassesFound if the stored CSS declares any classes.

        Returns the announced classes. Without listeners nothing is parsed
        and the result is empty; use :meth:`annotated_classes` to read them.
        """
        if not self.events.has_listeners(AnnotatedClassesFound):
            return []
        classes = self.annotated_classes()
        if classes:
            self.events.emit(AnnotatedClassesFound(classes=tuple(classes)))
        return classes
