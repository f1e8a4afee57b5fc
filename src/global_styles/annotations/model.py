"""Annotation model: AnnotatedClass and the class-name rule."""

from __future__ import annotations

import re
from dataclasses import dataclass

_CLASS_NAME_RE = re.compile(r"[A-Za-z][\w-]*", re.ASCII)


def is_valid_class_name(name: str) -> bool:
    """Return True if *name* starts with a letter and continues with word chars or hyphens."""
    return bool(name) and _CLASS_NAME_RE.fullmatch(name) is not None


@dataclass(frozen=True)
class AnnotatedClass:
    """A class name exposed through an ``@class`` annotation."""

    name: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}
