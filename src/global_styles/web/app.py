from __future__ import annotations

from urllib.parse import urlparse

from flask import Flask

from global_styles.config import GlobalStylesConfig
from global_styles.editor import Editor
from global_styles.hooks import CssSaved, EventBus, FilterRegistry
from global_styles.integrator import Integrator
from global_styles.minifier import Minifier
from global_styles.store.db import Database
from global_styles.store.files import StylesheetFile
from global_styles.store.migrations import run_migrations
from global_styles.store.repositories import OptionRepository


def create_app(
    config: GlobalStylesConfig | None = None,
    db: Database | None = None,
    filters: FilterRegistry | None = None,
    events: EventBus | None = None,
    minifier: Minifier | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or GlobalStylesConfig()
    app = Flask(__name__)
    app.config["GLOBAL_STYLES"] = config

    if db is None:
        db = Database(":memory:")
        db.connect()
        run_migrations(db)

    events = events or EventBus()
    options = OptionRepository(db, config.option_name)
    stylesheet = StylesheetFile(config.css_dir, config.slug, config.base_url)
    editor = Editor(options, stylesheet, filters=filters, events=events, minifier=minifier)
    integrator = Integrator(options, events)

    # Re-announce @class annotations whenever the stylesheet is saved.
    events.subscribe(CssSaved, lambda _event: integrator.parse_and_trigger_annotated_classes())

    app.extensions["db"] = db
    app.extensions["options"] = options
    app.extensions["stylesheet"] = stylesheet
    app.extensions["editor"] = editor
    app.extensions["integrator"] = integrator
    app.extensions["events"] = events

    from global_styles.web.routes.api import api_bp
    from global_styles.web.routes.assets import make_assets_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(make_assets_bp(urlparse(stylesheet.url).path))

    return app
