"""Global Styles CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from global_styles import __version__
from global_styles.config import GlobalStylesConfig

db_option = click.option("--db", default="global-styles.db", help="Database path")
output_dir_option = click.option(
    "--output-dir", default="uploads", help="Directory that receives <slug>/<slug>.css"
)
slug_option = click.option("--slug", default="global-styles", help="Name of the stylesheet")


def _build(db: str, output_dir: str, slug: str):
    """Open the database and return (database, editor, integrator)."""
    from global_styles.editor import Editor
    from global_styles.integrator import Integrator
    from global_styles.store import (
        Database,
        OptionRepository,
        StylesheetFile,
        run_migrations,
    )

    config = GlobalStylesConfig(slug=slug, db_path=db, output_dir=output_dir)
    database = Database(config.db_path)
    database.connect()
    run_migrations(database)

    options = OptionRepository(database, config.option_name)
    stylesheet = StylesheetFile(config.css_dir, config.slug, config.base_url)
    return database, Editor(options, stylesheet), Integrator(options)


@click.group()
@click.version_option(version=__version__, prog_name="global-styles")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Global Styles: maintain one global stylesheet with class hints."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def hints(cssfile, as_json: bool) -> None:
    """List @hint annotations found in a CSS file."""
    from global_styles.annotations import parse_hints

    found = parse_hints(cssfile.read())
    if as_json:
        click.echo(json.dumps(found, indent=2))
        return
    for name, description in found.items():
        click.echo(f"{name}\t{description}" if description else name)


@cli.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
def classes(cssfile) -> None:
    """List @class annotations found in a CSS file as JSON."""
    from global_styles.annotations import parse_annotated_classes

    found = parse_annotated_classes(cssfile.read())
    click.echo(json.dumps([c.to_dict() for c in found], indent=2))


@cli.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-")
def minify(cssfile, output) -> None:
    """Minify a CSS file to stdout or --output."""
    from global_styles.minifier import minify as run_minify

    output.write(run_minify(cssfile.read()) + "\n")


@cli.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@db_option
@output_dir_option
@slug_option
def save(cssfile, db: str, output_dir: str, slug: str) -> None:
    """Store a CSS file and regenerate the static stylesheet."""
    database, editor, integrator = _build(db, output_dir, slug)
    try:
        result = editor.save(cssfile.read())
        if not result.ok:
            click.echo(f"Error: {result.message}", err=True)
            sys.exit(1)
        classes_found = integrator.annotated_classes()
    finally:
        database.close()

    click.echo(f"Saved {editor.stylesheet.path}")
    click.echo(f"{len(result.available_hints)} hint(s), {len(classes_found)} annotated class(es)")


@cli.command()
@db_option
@output_dir_option
@slug_option
def show(db: str, output_dir: str, slug: str) -> None:
    """Print the stored (unminified) CSS."""
    database, editor, _ = _build(db, output_dir, slug)
    try:
        click.echo(editor.get_css())
    finally:
        database.close()


@cli.command()
@db_option
@output_dir_option
@slug_option
@click.confirmation_option(prompt="Delete the stored CSS and the generated file?")
def uninstall(db: str, output_dir: str, slug: str) -> None:
    """Remove the stored option and the generated stylesheet."""
    database, editor, _ = _build(db, output_dir, slug)
    try:
        editor.options.delete()
        editor.stylesheet.remove()
    finally:
        database.close()
    click.echo("Removed stored CSS and generated stylesheet")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--base-url", default="", help="Public URL prefix of the output directory")
@db_option
@output_dir_option
@slug_option
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    host: str, port: int, base_url: str, db: str, output_dir: str, slug: str, debug: bool
) -> None:
    """Start the Global Styles web server."""
    from global_styles.store import Database, run_migrations
    from global_styles.web.app import create_app

    config = GlobalStylesConfig(
        slug=slug, db_path=db, output_dir=output_dir, base_url=base_url, host=host, port=port
    )
    database = Database(config.db_path)
    database.connect()
    run_migrations(database)

    app = create_app(config=config, db=database)
    click.echo(f"Starting Global Styles on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
