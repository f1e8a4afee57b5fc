"""Event types emitted when the global stylesheet changes."""

from dataclasses import dataclass

from global_styles.annotations.model import AnnotatedClass


@dataclass(frozen=True)
class CssSaved:
    css: str
    path: str
    persisted: bool = True


@dataclass(frozen=True)
class CssSaveFailed:
    reason: str


@dataclass(frozen=True)
class AnnotatedClassesFound:
    classes: tuple[AnnotatedClass, ...]
