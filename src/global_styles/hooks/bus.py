"""Action dispatch for stylesheet lifecycle events (saved, failed, classes found)."""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventBus:
    """Delivers CssSaved, CssSaveFailed and AnnotatedClassesFound to integrations.

    Catch-all listeners run before typed ones; both in the order they
    were added. A listener that raises aborts the save or scan that
    emitted the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Callable) -> None:
        """Listen to every stylesheet event, e.g. for audit logging."""
        self._global_listeners.append(callback)

    def has_listeners(self, event_type: type) -> bool:
        """True if emitting *event_type* would reach anyone; lets callers skip building it."""
        return bool(self._global_listeners or self._listeners.get(event_type))

    def emit(self, event: Any) -> None:
        logger.debug("emit %s", type(event).__name__)
        for cb in self._global_listeners:
            cb(event)
        for cb in self._listeners.get(type(event), []):
            cb(event)
