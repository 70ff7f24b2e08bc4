"""Route provider lookup.

A router is named ``package.module[:attribute]``; the attribute defaults
to ``routes``. It may hold a sequence of routes, an object exposing a
``routes`` attribute, or a zero-argument callable returning either.
"""

import importlib
from collections.abc import Mapping
from typing import Any

from swaggerdoc.config import Settings
from swaggerdoc.errors import RouterNotFoundError

from .base import RouteDescriptor

DEFAULT_ATTRIBUTE = "routes"


def resolve_router_name(arg: str | None, settings: Settings) -> str:
    """Pick the router: explicit argument, configured router, then ``<app>.router``."""
    if arg:
        return arg
    if settings.router:
        return settings.router
    if settings.app_namespace:
        return f"{settings.app_namespace}.router"
    raise RouterNotFoundError(
        "No router configured; pass an explicit router (package.module[:attribute]) "
        "or set app_namespace in the configuration"
    )


def load_routes(name: str) -> list[RouteDescriptor]:
    """Import the named router and return its routes in registration order."""
    module_name, _, attribute = name.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        # only the router module itself (or a parent package) missing means "not found"
        if not e.name or not _is_module_or_parent(e.name, module_name):
            raise
        raise RouterNotFoundError(f"Cannot import router module {module_name!r}: {e}") from e

    attribute = attribute or DEFAULT_ATTRIBUTE
    if not hasattr(module, attribute):
        raise RouterNotFoundError(f"Router module {module_name!r} has no attribute {attribute!r}")

    provider = getattr(module, attribute)
    if callable(provider) and not isinstance(provider, type):
        provider = provider()
    if hasattr(provider, "routes"):
        provider = provider.routes
        if callable(provider):
            provider = provider()

    return [coerce_route(item) for item in provider or ()]


def coerce_route(item: Any) -> RouteDescriptor:
    """Accept a RouteDescriptor, a mapping, or a ``(verb, path, handler, action)`` tuple."""
    if isinstance(item, RouteDescriptor):
        return item
    if isinstance(item, Mapping):
        return RouteDescriptor(**item)
    if isinstance(item, (tuple, list)) and len(item) == 4:
        verb, path, handler, action = item
        return RouteDescriptor(verb=verb, path=path, handler=handler, action=action)
    raise TypeError(f"Unsupported route entry: {item!r}")


def _is_module_or_parent(name: str, module_name: str) -> bool:
    return module_name == name or module_name.startswith(name + ".")
