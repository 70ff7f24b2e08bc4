import pytest
from pydantic import ValidationError

from swaggerdoc.generator.base import ParameterDescriptor, SwaggerDocument, VerbEntry
from swaggerdoc.parser.base import FieldDescriptor, RouteDescriptor


class TestRouteDescriptor:
    def test_verb_is_lowercased(self):
        route = RouteDescriptor(verb="POST", path="/users", action="create")
        assert route.verb == "post"
        assert route.handler is None

    def test_immutable(self):
        route = RouteDescriptor(verb="get", path="/users", action="index")
        with pytest.raises(ValidationError):
            route.path = "/posts"

    def test_action_required(self):
        with pytest.raises(ValidationError):
            RouteDescriptor(verb="get", path="/users")


class TestFieldDescriptor:
    def test_any_declared_type(self):
        assert FieldDescriptor(name="age", declared_type=int).declared_type is int
        assert FieldDescriptor(name="age", declared_type="integer").declared_type == "integer"


class TestParameterDescriptor:
    def test_in_alias(self):
        param = ParameterDescriptor(name="id", location="path", type="integer")
        assert param.model_dump(by_alias=True)["in"] == "path"

    def test_body_parameter_passes_through(self):
        param = ParameterDescriptor.model_validate(
            {"name": "user", "in": "body", "schema": {"$ref": "#/definitions/User"}}
        )
        dumped = param.model_dump(by_alias=True, exclude_none=True)
        assert dumped["in"] == "body"
        assert dumped["schema"] == {"$ref": "#/definitions/User"}
        assert "type" not in dumped


class TestVerbEntry:
    def test_all_fields_absent(self):
        assert VerbEntry().model_dump(exclude_none=True) == {}

    def test_operation_id_alias_and_extras(self):
        entry = VerbEntry.model_validate({"operationId": "list", "summary": "List users"})
        assert entry.operation_id == "list"
        dumped = entry.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"operationId": "list", "summary": "List users"}


class TestSwaggerDocument:
    def test_top_level_keys(self):
        assert list(SwaggerDocument().to_dict()) == [
            "swagger",
            "info",
            "host",
            "basePath",
            "schemes",
            "consumes",
            "produces",
            "definitions",
            "paths",
        ]
