"""Data-model introspection (the model registry).

A model has schema capability when it either exposes a callable
``__schema__()`` returning ``(field_name, declared_type)`` pairs, or is a
pydantic ``BaseModel`` subclass.
"""

import sys
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from .base import FieldDescriptor


def declares_schema(model: Any) -> bool:
    """True when the model exposes an explicit ``__schema__()`` hook."""
    return callable(getattr(model, "__schema__", None))


def is_pydantic_model(model: Any) -> bool:
    return isinstance(model, type) and issubclass(model, BaseModel) and model is not BaseModel


def has_schema(model: Any) -> bool:
    return declares_schema(model) or is_pydantic_model(model)


def schema_fields(model: Any) -> list[FieldDescriptor] | None:
    """Return the model's typed fields, or None without schema capability."""
    if declares_schema(model):
        types = model.__schema__()
        pairs = types.items() if isinstance(types, Mapping) else types
        return [FieldDescriptor(name=str(name), declared_type=declared) for name, declared in pairs]

    if is_pydantic_model(model):
        return [
            FieldDescriptor(name=name, declared_type=info.annotation)
            for name, info in model.model_fields.items()
        ]

    return None


def model_name(model: Any) -> str:
    """Fully-qualified name used as the definitions key."""
    return f"{model.__module__}.{model.__qualname__}"


def loaded_models(namespace: str = "") -> Iterator[type]:
    """Yield every loaded class with schema capability, sorted by module name.

    With a namespace only modules inside that package are scanned and both
    kinds of models are collected. Without one, every loaded module is
    scanned but only classes declaring ``__schema__()`` count, so that
    unrelated pydantic models of third-party libraries stay out.
    """
    for module_name, module in sorted(list(sys.modules.items())):
        if namespace and not _in_namespace(module_name, namespace):
            continue
        members = getattr(module, "__dict__", None)
        if not members:
            continue

        for obj in list(members.values()):
            if not isinstance(obj, type) or getattr(obj, "__module__", None) != module_name:
                continue
            if namespace:
                capable = has_schema(obj)
            else:
                capable = declares_schema(obj)
            if capable:
                yield obj


def _in_namespace(module_name: str, namespace: str) -> bool:
    return module_name == namespace or module_name.startswith(namespace + ".")
