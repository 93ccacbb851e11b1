"""OpenAPI building blocks accumulated while processing a capture.

Field aliases match the OpenAPI 3.0 object model, so ``model_dump(by_alias=True,
exclude_none=True)`` yields document-ready dicts.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """A path, query or header parameter. Unique per (name, location)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # path / query / header
    required: bool = True
    example: Any = None
    schema_: dict = Field(default={"type": "string"}, alias="schema")


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: dict = Field(alias="schema")
    example: Any = None


class RequestBody(BaseModel):
    content: dict[str, MediaType]


class ResponseSpec(BaseModel):
    description: str
    content: dict[str, MediaType] | None = None


class Operation(BaseModel):
    """One HTTP method on one path template."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str | None = None
    tags: list[str] | None = None
    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, ResponseSpec] = {}


class ApiModel(BaseModel):
    """Accumulator threaded through the entries of every capture in a run.

    ``paths`` maps a path template to ``{method: Operation}``; both levels keep
    discovery order. ``servers`` holds unique origins in discovery order.
    """

    servers: list[str] = []
    paths: dict[str, dict[str, Operation]] = {}

    def register_server(self, origin: str) -> None:
        if origin not in self.servers:
            self.servers.append(origin)

    def ensure_operation(self, template: str, method: str, summary: str | None = None) -> Operation:
        """Get or create the operation bucket for (template, method)."""
        methods = self.paths.setdefault(template, {})
        method = method.lower()
        if method not in methods:
            methods[method] = Operation(summary=summary)
        return methods[method]

    def operations(self):
        """Yield ``(template, method, operation)`` triples in discovery order."""
        for template, methods in self.paths.items():
            for method, operation in methods.items():
                yield template, method, operation
