"""Default operation objects for a single route.

A handler may supply its own operation object through an override hook;
otherwise parameters come from the request model (post/put/patch) or
from the path variables, and the remaining fields get defaults.
"""

import importlib
import logging
from collections.abc import Mapping
from typing import Any

from swaggerdoc.config import Settings
from swaggerdoc.parser.base import RouteDescriptor

from .base import ParameterDescriptor, ResponseDescriptor, VerbEntry
from .definitions import collect_schema
from .paths import path_parameters

logger = logging.getLogger(__name__)

MUTATING_VERBS = ("post", "put", "patch")

HOOK_PREFIX = "swaggerdoc_"


def build_parameter(name: Any, type: str = "string") -> ParameterDescriptor:
    """Return a path parameter object.

    Compound names (tuples) use their first element as the parameter name.
    """
    display_name = name[0] if isinstance(name, tuple) else name
    return ParameterDescriptor(
        name=str(display_name),
        location="path",
        description="",
        required=True,
        # assumes all params named "id" are integers
        type="integer" if display_name == "id" else type,
    )


def default_responses(verb: str, response_schema: Any = None) -> dict[str, ResponseDescriptor]:
    """Default response map for a verb."""
    responses = {
        "404": ResponseDescriptor(description="Resource not found"),
        "401": ResponseDescriptor(description="Request is not authorized"),
        "500": ResponseDescriptor(description="Internal Server Error"),
    }

    if verb == "get":
        responses["200"] = ResponseDescriptor(description="Resource Content", response_schema=response_schema)
    elif verb == "delete":
        responses["204"] = ResponseDescriptor(description="No Content")
    elif verb == "post":
        responses["201"] = ResponseDescriptor(description="Resource created")
        responses["400"] = ResponseDescriptor(description="Request contains bad values")
    elif verb == "put":
        responses["204"] = ResponseDescriptor(description="No Content")
        responses["400"] = ResponseDescriptor(description="Request contains bad values")

    return responses


class ModelResolver:
    """Finds the data model behind a controller by naming convention.

    ``UserController`` resolves to ``User`` inside ``namespace``.
    """

    def __init__(self, namespace: str = "", suffix: str = "Controller"):
        self.namespace = namespace
        self.suffix = suffix

    @classmethod
    def from_settings(cls, settings: Settings) -> "ModelResolver":
        return cls(namespace=settings.models_namespace, suffix=settings.controller_suffix)

    def model_name(self, handler: Any) -> str | None:
        if handler is None:
            return None
        cls_name = handler.__name__ if isinstance(handler, type) else type(handler).__name__
        if self.suffix and cls_name.endswith(self.suffix):
            cls_name = cls_name[: -len(self.suffix)]
        return cls_name or None

    def resolve(self, handler: Any) -> Any | None:
        name = self.model_name(handler)
        if not name or not self.namespace:
            return None

        module = importlib.import_module(self.namespace)
        model = getattr(module, name, None)
        if model is None:
            logger.debug("No model %s in %s", name, self.namespace)
        return model


def custom_swagger_spec(route: RouteDescriptor) -> dict | None:
    """Ask the route's handler for a developer-written operation object.

    Handlers opt in either with ``custom_swagger_spec(action)`` or with a
    zero-argument ``swaggerdoc_<action>`` callable. Both must be callable on
    the handler as given, so use static or class methods on classes.
    """
    handler = route.handler
    if handler is None:
        return None

    spec = None
    hook = getattr(handler, "custom_swagger_spec", None)
    if callable(hook):
        spec = hook(route.action)

    if spec is None:
        named_hook = getattr(handler, f"{HOOK_PREFIX}{route.action}", None)
        if callable(named_hook):
            spec = named_hook()

    if spec is None:
        return None
    if not isinstance(spec, Mapping):
        raise TypeError(
            f"Swagger override for {route.verb.upper()} {route.path} must return a mapping, "
            f"got {type(spec).__name__}"
        )
    return dict(spec)


def synthesize_verb(
    route: RouteDescriptor, settings: Settings, resolver: ModelResolver | None = None
) -> VerbEntry:
    """Build the operation object of a route, filling absent fields with defaults."""
    data = custom_swagger_spec(route)
    if data is None:
        data = {"parameters": _default_parameters(route, settings, resolver)}

    response_schema = data.pop("response_schema", None)
    entry = VerbEntry.model_validate(data)

    updates: dict[str, Any] = {}
    if entry.responses is None:
        updates["responses"] = default_responses(route.verb, response_schema)
    if entry.produces is None:
        updates["produces"] = list(settings.produces)
    if entry.operation_id is None:
        updates["operation_id"] = route.action
    if entry.description is None:
        updates["description"] = ""
    return entry.model_copy(update=updates)


def _default_parameters(
    route: RouteDescriptor, settings: Settings, resolver: ModelResolver | None
) -> list[ParameterDescriptor]:
    if route.verb in MUTATING_VERBS:
        model = resolver.resolve(route.handler) if resolver else None
        properties = collect_schema(model, settings.exclude_parameters) if model is not None else None
        return [build_parameter(field) for field in (properties or {}).items()]

    return [build_parameter(name) for name in path_parameters(route.path)]
