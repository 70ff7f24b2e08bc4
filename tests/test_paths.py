from swaggerdoc.generator.paths import convert_path, path_parameters


class TestConvertPath:
    def test_single_variable(self):
        assert convert_path("/users/:id") == "/users/{id}"

    def test_nested_variables(self):
        assert convert_path("/users/:id/posts/:post_id") == "/users/{id}/posts/{post_id}"

    def test_empty_path(self):
        assert convert_path("") is None
        assert convert_path(None) is None
        assert convert_path("/") is None

    def test_drops_empty_segments(self):
        assert convert_path("//api//users/") == "/api/users"

    def test_leading_variable_has_no_colon(self):
        assert convert_path("/:tenant/users") == "/{tenant}/users"
        assert ":" not in convert_path(":tenant/:id")


class TestPathParameters:
    def test_in_order(self):
        assert path_parameters("/users/:id/posts/:post_id") == ["id", "post_id"]

    def test_none(self):
        assert path_parameters("/users") == []
        assert path_parameters(None) == []
