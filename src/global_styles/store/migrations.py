from __future__ import annotations

from global_styles.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS options (
    name TEXT PRIMARY KEY,
    value TEXT NOT NULL DEFAULT '{}'
);
"""


def run_migrations(db: Database) -> None:
    """Create all tables."""
    db.connection.executescript(SCHEMA)
    db.commit()
