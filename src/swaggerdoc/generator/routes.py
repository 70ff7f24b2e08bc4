"""Fold the application's routes into the document's paths map."""

import logging
import re
from collections.abc import Iterable

from swaggerdoc.config import Settings
from swaggerdoc.parser.base import RouteDescriptor

from .base import SwaggerDocument
from .paths import convert_path
from .verbs import ModelResolver, synthesize_verb

logger = logging.getLogger(__name__)


def merge_routes(
    routes: Iterable[RouteDescriptor] | None,
    document: SwaggerDocument,
    settings: Settings,
    resolver: ModelResolver | None = None,
) -> SwaggerDocument:
    """Return a copy of ``document`` with one operation per matching route.

    Routes are applied in order; a later route with the same path and verb
    replaces the earlier one.
    """
    pattern = re.compile(settings.route_test_pattern)
    paths = {template: dict(verbs) for template, verbs in document.paths.items()}

    for route in routes or ():
        if not pattern.search(route.path):
            logger.debug("Skipping %s %s: no match for %r", route.verb, route.path, settings.route_test_pattern)
            continue

        template = convert_path(route.path) or "/"
        entry = synthesize_verb(route, settings, resolver)
        paths[template] = {**paths.get(template, {}), route.verb: entry}

    return document.model_copy(update={"paths": paths})
