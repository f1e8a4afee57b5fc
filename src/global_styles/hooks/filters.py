"""Named value filters that let integrations rewrite data in flight."""

from __future__ import annotations

from typing import Any, Callable

# Receives and returns dict[str, str] of class name -> description.
HINTS_FILTER = "hints"
# Receives and returns the raw CSS about to be previewed or saved.
PRE_SAVE_FILTER = "pre-save"
# Replaces the built-in minifier when at least one callback is registered.
MINIMIZE_FILTER = "minimize"


class FilterRegistry:
    """Ordered chains of ``value -> value`` callbacks keyed by name."""

    def __init__(self) -> None:
        self._filters: dict[str, list[Callable[[Any], Any]]] = {}

    def add(self, name: str, callback: Callable[[Any], Any]) -> None:
        self._filters.setdefault(name, []).append(callback)

    def remove(self, name: str, callback: Callable[[Any], Any]) -> bool:
        """Unregister *callback*; returns False if it was not registered."""
        chain = self._filters.get(name, [])
        if callback not in chain:
            return False
        chain.remove(callback)
        return True

    def has(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply(self, name: str, value: Any) -> Any:
        """Pass *value* through every callback registered under *name*."""
        for callback in self._filters.get(name, []):
            value = callback(value)
        return value
