"""Swagger 2.0 object models.

Every generator step produces or folds these models; the document is
serialized with ``model_dump(by_alias=True, exclude_none=True)``.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class PropertyDescriptor(BaseModel):
    """A schema property type (http://swagger.io/specification/#dataTypeType)."""

    type: str
    format: str | None = None


class ParameterDescriptor(BaseModel):
    """A parameter object (http://swagger.io/specification/#parameterObject)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    location: str = Field("path", alias="in")
    description: str = ""
    required: bool = True
    type: str | None = None


class ResponseDescriptor(BaseModel):
    """A single response keyed by status code."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: str
    response_schema: Any = Field(None, alias="schema")


# Developer-written parameter and response objects stay plain mappings
# ($ref objects, query parameters, ...); only generated ones are models.
ParameterItem = Annotated[dict[str, Any] | ParameterDescriptor, Field(union_mode="left_to_right")]
ResponseItem = Annotated[dict[str, Any] | ResponseDescriptor, Field(union_mode="left_to_right")]


class VerbEntry(BaseModel):
    """Operation object for one verb of one path.

    All fields start out absent; developer overrides set some of them and
    the defaults fill the rest.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    parameters: list[ParameterItem] | None = None
    responses: dict[str, ResponseItem] | None = None
    produces: list[str] | None = None
    operation_id: str | None = Field(None, alias="operationId")
    description: str | None = None


class Definition(BaseModel):
    properties: dict[str, PropertyDescriptor]


class Contact(BaseModel):
    name: str = ""
    email: str = ""
    url: str = ""


class License(BaseModel):
    name: str = ""
    url: str = ""


class Info(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: str = ""
    title: str = ""
    description: str = ""
    terms_of_service: str = Field("", alias="termsOfService")
    contact: Contact = Contact()
    license: License = License()


class SwaggerDocument(BaseModel):
    """Top-level Swagger document."""

    model_config = ConfigDict(populate_by_name=True)

    swagger: str = "2.0"
    info: Info = Info()
    host: str = ""
    base_path: str = Field("", alias="basePath")
    schemes: list[str] = ["http"]
    consumes: list[str] = []
    produces: list[str] = []
    definitions: dict[str, Definition] = {}
    paths: dict[str, dict[str, VerbEntry]] = {}

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
