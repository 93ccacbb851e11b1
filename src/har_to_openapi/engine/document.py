"""Assembles the OpenAPI document and its YAML rendering."""

import yaml

from har_to_openapi.config import ConverterSettings

from .models import ApiModel


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that writes repeated objects out in full (no &id anchors)."""

    def ignore_aliases(self, data):
        return True


def assemble_document(model: ApiModel, settings: ConverterSettings | None = None) -> dict:
    """Build the OpenAPI document as plain dicts, in OpenAPI field order."""
    settings = settings or ConverterSettings()

    doc: dict = {
        "openapi": settings.openapi_version,
        "info": settings.info.model_dump(exclude_none=True),
    }
    if settings.external_docs:
        doc["externalDocs"] = settings.external_docs.model_dump(exclude_none=True)
    doc["servers"] = [{"url": url} for url in model.servers]
    doc["paths"] = {
        template: {
            method: operation.model_dump(by_alias=True, exclude_none=True)
            for method, operation in methods.items()
        }
        for template, methods in model.paths.items()
    }
    return doc


def render_yaml(document: dict) -> str:
    """Render an assembled document, keeping its key order."""
    return yaml.dump(
        document,
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
