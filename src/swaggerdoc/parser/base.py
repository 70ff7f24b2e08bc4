"""Input descriptors read from the host application.

The route provider and the model registry hand their metadata to the
generator in these shapes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class RouteDescriptor(BaseModel):
    """A single registered endpoint: verb + raw path + handler + action."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str  # /users/:id
    verb: str  # get / post / put / patch / delete
    handler: Any = None  # controller class or instance
    action: str

    @field_validator("verb", mode="before")
    @classmethod
    def _lower_verb(cls, value: Any) -> str:
        return str(value).lower()


class FieldDescriptor(BaseModel):
    """A typed field exposed by a data model."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    declared_type: Any  # vocabulary tag ("id", "string", ...) or a Python type
