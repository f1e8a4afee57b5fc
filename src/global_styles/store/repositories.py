from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any

from global_styles.store.db import Database

logger = logging.getLogger(__name__)

_MISSING = object()


class OptionRepository:
    """A single named option holding a JSON value, usually a dict of settings.

    ``get``/``set`` work on the whole value when *key* is None, or on one
    entry of the dict otherwise.
    """

    def __init__(self, db: Database, option_name: str) -> None:
        self._db = db
        self.option_name = option_name

    def _load(self) -> Any:
        row = self._db.fetch_one("SELECT value FROM options WHERE name = ?", (self.option_name,))
        if row is None:
            return _MISSING
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError:
            logger.error("option %s holds invalid JSON; treating as empty", self.option_name)
            return _MISSING

    def get(self, key: str | None = None) -> Any:
        """Return the option value, or one key of it. Missing keys give None."""
        option = self._load()
        if option is _MISSING:
            option = {}
        if key is None:
            return option
        if not isinstance(option, dict):
            return None
        return option.get(key)

    def set(self, value: Any, key: str | None = None) -> bool:
        """Store *value* as the whole option, or under *key*. Returns success."""
        if key is not None:
            option = self.get()
            if not isinstance(option, dict):
                option = {}
            option[key] = value
            value = option
        try:
            self._db.execute(
                """INSERT INTO options (name, value) VALUES (?, ?)
                   ON CONFLICT(name) DO UPDATE SET value = excluded.value""",
                (self.option_name, json.dumps(value)),
            )
            self._db.commit()
        except (sqlite3.Error, TypeError, ValueError) as exc:
            logger.error("failed to store option %s: %s", self.option_name, exc)
            return False
        return True

    def delete(self) -> bool:
        """Remove the option row. Returns True if a row was deleted."""
        cursor = self._db.execute("DELETE FROM options WHERE name = ?", (self.option_name,))
        self._db.commit()
        return cursor.rowcount > 0

    def get_css(self) -> str:
        css = self.get("css")
        return css if isinstance(css, str) else ""

    def set_css(self, css: str) -> bool:
        return self.set(css, "css")
