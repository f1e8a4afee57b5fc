from __future__ import annotations

import pytest

from global_styles.config import GlobalStylesConfig
from global_styles.hooks import EventBus, FilterRegistry
from global_styles.store.db import Database
from global_styles.store.migrations import run_migrations
from global_styles.web.app import create_app


@pytest.fixture
def db():
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def config(tmp_path) -> GlobalStylesConfig:
    return GlobalStylesConfig(slug="site-styles", output_dir=str(tmp_path), base_url="/uploads")


@pytest.fixture
def filters() -> FilterRegistry:
    return FilterRegistry()


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def app(config, db, filters, events):
    """Create a Flask app for testing."""
    application = create_app(config=config, db=db, filters=filters, events=events)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
