from __future__ import annotations

from global_styles.store.db import Database
from global_styles.store.files import FileInfo, StylesheetFile
from global_styles.store.migrations import run_migrations
from global_styles.store.repositories import OptionRepository

__all__ = [
    "Database",
    "FileInfo",
    "OptionRepository",
    "StylesheetFile",
    "run_migrations",
]
