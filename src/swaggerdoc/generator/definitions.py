"""Schema definitions: model field types -> Swagger property types."""

import datetime
import types
import uuid
from collections.abc import Iterable
from typing import Any, Union, get_args, get_origin

from swaggerdoc.config import DEFAULT_EXCLUDE_PARAMETERS
from swaggerdoc.parser.schema import model_name, schema_fields

from .base import Definition, PropertyDescriptor

# http://swagger.io/specification/#dataTypeType
TYPE_MAP: dict[str, tuple[str, str | None]] = {
    "id": ("integer", "int64"),
    "binary_id": ("string", "binary"),
    "integer": ("integer", "int64"),
    "float": ("number", "float"),
    "boolean": ("boolean", None),
    "string": ("string", None),
    "binary": ("string", "binary"),
    "datetime": ("string", "date-time"),
    "date": ("string", "date"),
    "time": ("string", "date-time"),
    "uuid": ("string", None),
}

PYTHON_TYPES: dict[type, str] = {
    bool: "boolean",
    int: "integer",
    float: "float",
    str: "string",
    bytes: "binary",
    datetime.datetime: "datetime",
    datetime.date: "date",
    datetime.time: "time",
    uuid.UUID: "uuid",
}


def map_type(declared_type: Any) -> PropertyDescriptor:
    """Convert a declared field type into a Swagger property type.

    Unknown types fall back to a plain string.
    """
    tag = _vocabulary_tag(declared_type)
    type_, format_ = TYPE_MAP.get(tag, ("string", None))
    return PropertyDescriptor(type=type_, format=format_)


def _vocabulary_tag(declared_type: Any) -> str | None:
    if isinstance(declared_type, str):
        return declared_type

    if get_origin(declared_type) in (Union, types.UnionType):
        # Optional[X] documents as X
        args = [arg for arg in get_args(declared_type) if arg is not type(None)]
        return _vocabulary_tag(args[0]) if len(args) == 1 else None

    if isinstance(declared_type, type):
        # IntEnum, str-based Enum, ... document as their builtin base
        for base in declared_type.__mro__:
            if base in PYTHON_TYPES:
                return PYTHON_TYPES[base]
    return None


def collect_schema(
    model: Any, exclude_fields: Iterable[str] | None = None
) -> dict[str, PropertyDescriptor] | None:
    """Gather the property map of a model, or None if it has no schema."""
    fields = schema_fields(model)
    if fields is None:
        return None

    excluded = set(DEFAULT_EXCLUDE_PARAMETERS if exclude_fields is None else exclude_fields)
    return {f.name: map_type(f.declared_type) for f in fields if f.name not in excluded}


def build_definitions(
    models: Iterable[Any], exclude_fields: Iterable[str] | None = None
) -> dict[str, Definition]:
    """Build the definitions map, keyed by fully-qualified model name."""
    if exclude_fields is not None:
        exclude_fields = list(exclude_fields)

    definitions: dict[str, Definition] = {}
    for model in models:
        properties = collect_schema(model, exclude_fields)
        if properties is not None:
            definitions[model_name(model)] = Definition(properties=properties)
    return definitions
