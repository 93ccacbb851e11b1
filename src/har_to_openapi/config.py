"""Converter settings: document metadata and entry filtering options.

Settings can be read from a YAML file; every field has a default so an
empty or missing file is valid.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Contact(BaseModel):
    name: str | None = None
    email: str | None = None
    url: str | None = None


class License(BaseModel):
    name: str
    url: str | None = None


class Info(BaseModel):
    title: str = "API reconstructed from HTTP captures"
    version: str = "1.0.0"
    description: str = (
        "OpenAPI description generated from recorded browser network traffic. "
        "Paths, parameters and schemas are inferred from observed requests and responses."
    )
    contact: Contact | None = None
    license: License | None = None


class ExternalDocs(BaseModel):
    description: str | None = None
    url: str


class ConverterSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    openapi_version: str = "3.0.0"
    info: Info = Info()
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    json_mime_types: list[str] = ["application/json"]
    excluded_headers: list[str] = ["host", "content-length"]

    def is_json(self, mime_type: str) -> bool:
        return mime_type in self.json_mime_types

    def is_excluded_header(self, name: str) -> bool:
        return name.lower() in {h.lower() for h in self.excluded_headers}


class SettingsError(Exception):
    """Raised when a settings file exists but cannot be used."""


def load_settings(file_path: Path | None = None) -> ConverterSettings:
    """Load settings from a YAML file, or return defaults."""
    if file_path is None or not file_path.exists():
        return ConverterSettings()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"{file_path}: invalid YAML ({e})") from e

    if not isinstance(data, dict):
        raise SettingsError(f"{file_path}: expected a mapping at top level")

    try:
        return ConverterSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"{file_path}: {e}") from e
