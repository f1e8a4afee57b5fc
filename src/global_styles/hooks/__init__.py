from global_styles.hooks.bus import EventBus
from global_styles.hooks.events import AnnotatedClassesFound, CssSaved, CssSaveFailed
from global_styles.hooks.filters import (
    HINTS_FILTER,
    MINIMIZE_FILTER,
    PRE_SAVE_FILTER,
    FilterRegistry,
)

__all__ = [
    "AnnotatedClassesFound",
    "CssSaveFailed",
    "CssSaved",
    "EventBus",
    "FilterRegistry",
    "HINTS_FILTER",
    "MINIMIZE_FILTER",
    "PRE_SAVE_FILTER",
]
