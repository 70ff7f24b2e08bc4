"""Swagger document assembly and output."""

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import click

from swaggerdoc.config import Settings
from swaggerdoc.parser.base import RouteDescriptor

from .base import Contact, Info, License, SwaggerDocument
from .definitions import build_definitions
from .routes import merge_routes
from .verbs import ModelResolver


def app_document(settings: Settings) -> SwaggerDocument:
    """The application-specific base of the document, before definitions and paths."""
    return SwaggerDocument(
        swagger=settings.swagger_version,
        info=Info(
            version=settings.project_version,
            title=settings.project_name,
            description=settings.project_desc,
            terms_of_service=settings.project_terms,
            contact=Contact(
                name=settings.project_contact_name,
                email=settings.project_contact_email,
                url=settings.project_contact_url,
            ),
            license=License(
                name=settings.project_license_name,
                url=settings.project_license_url,
            ),
        ),
        host=settings.host,
        base_path=settings.base_path,
        schemes=list(settings.schemes),
        consumes=list(settings.consumes),
        produces=list(settings.produces),
    )


def build_document(
    routes: Iterable[RouteDescriptor],
    models: Iterable[Any],
    settings: Settings,
    echo: Callable[[str], Any] = click.echo,
) -> SwaggerDocument:
    document = app_document(settings)

    echo("Adding model definitions...")
    definitions = build_definitions(models, settings.exclude_parameters)
    document = document.model_copy(update={"definitions": definitions})

    echo("Adding routes...")
    return merge_routes(routes, document, settings, ModelResolver.from_settings(settings))


def render_document(document: SwaggerDocument) -> str:
    return json.dumps(document.to_dict())


def write_document(document: SwaggerDocument, settings: Settings) -> Path:
    """Write the document to ``output_path/output_file``, creating the directory."""
    output_path = Path(settings.output_path)
    output_path.mkdir(parents=True, exist_ok=True)

    target = settings.output_file_path
    target.write_text(render_document(document), encoding="utf-8")
    return target


def generate(
    routes: Iterable[RouteDescriptor],
    models: Iterable[Any],
    settings: Settings,
    echo: Callable[[str], Any] = click.echo,
) -> Path:
    """Run the whole pipeline and return the written file."""
    echo("Generating Swagger documentation...")
    document = build_document(routes, models, settings, echo=echo)

    echo("Writing JSON to file...")
    target = write_document(document, settings)
    echo("Finished generating Swagger documentation!")
    return target
