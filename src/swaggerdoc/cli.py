"""CLI entry point for swaggerdoc."""

import importlib
import logging
import os
import sys
import traceback
from pathlib import Path

import click

from swaggerdoc.config import load_settings
from swaggerdoc.errors import ConfigError, RouterNotFoundError
from swaggerdoc.generator.document import generate
from swaggerdoc.parser.router import load_routes, resolve_router_name
from swaggerdoc.parser.schema import loaded_models


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument("router", required=False)
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML configuration file (default: ./swaggerdoc.yaml).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output directory, overrides output_path.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug diagnostics.")
def main(router: str | None, config_path: Path | None, output: Path | None, verbose: bool):
    """Generate Swagger JSON from the application's routes and models.

    ROUTER names the route provider as package.module[:attribute].
    """
    _configure_logging(verbose)
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if output is not None:
        settings = settings.model_copy(update={"output_path": output})

    try:
        routes = load_routes(resolve_router_name(router, settings))
        if settings.models_namespace:
            importlib.import_module(settings.models_namespace)
        models = list(loaded_models(settings.models_namespace))
        generate(routes, models, settings)
    except RouterNotFoundError as e:
        raise click.UsageError(str(e)) from e
    except Exception as e:
        click.echo(f"Failed to generate Swagger documentation: {type(e).__name__}: {e}", err=True)
        click.echo(traceback.format_exc(), err=True)
        sys.exit(1)
