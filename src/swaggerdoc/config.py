"""Generator configuration.

Settings are read once from a YAML file (``swaggerdoc.yaml`` by default)
and passed explicitly to every step that needs them.
"""

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swaggerdoc.errors import ConfigError

DEFAULT_CONFIG_FILE = "swaggerdoc.yaml"

DEFAULT_EXCLUDE_PARAMETERS = ["id", "inserted_at", "updated_at"]


class Settings(BaseModel):
    """Immutable generator settings with the documented defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    swagger_version: str = "2.0"
    project_version: str = ""
    project_name: str = ""
    project_desc: str = ""
    project_terms: str = ""
    project_contact_name: str = ""
    project_contact_email: str = ""
    project_contact_url: str = ""
    project_license_name: str = ""
    project_license_url: str = ""
    host: str = ""
    base_path: str = ""
    schemes: list[str] = ["http"]
    consumes: list[str] = []
    produces: list[str] = []
    output_path: Path = Field(default_factory=lambda: Path.cwd() / "swagger")
    output_file: str = "api.json"
    exclude_parameters: list[str] = DEFAULT_EXCLUDE_PARAMETERS
    route_test_pattern: str = ""  # empty pattern matches every path

    # discovery / naming
    app_namespace: str = ""
    router: str = ""
    model_namespace: str = ""
    controller_suffix: str = "Controller"

    @field_validator("route_test_pattern")
    @classmethod
    def _compile_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value

    @property
    def output_file_path(self) -> Path:
        return Path(self.output_path) / self.output_file

    @property
    def models_namespace(self) -> str:
        """Package the data models live in; falls back to the app namespace."""
        return self.model_namespace or self.app_namespace


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Without an explicit path, ``./swaggerdoc.yaml`` is used when it exists,
    otherwise the defaults apply. The file may hold the options at top level
    or under a ``swaggerdoc`` key.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not path.exists():
            return Settings()

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    if isinstance(data.get("swaggerdoc"), dict):
        data = data["swaggerdoc"]

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
