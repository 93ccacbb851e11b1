"""Data models for recorded HTTP traffic (HAR captures).

The loader keeps entries as raw dicts so that one malformed entry can be
skipped on its own; ``Entry.model_validate`` is applied per entry.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NameValue(BaseModel):
    """A header or query string pair."""

    name: str
    value: str = ""


class PostData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(default="", alias="mimeType")
    text: str | None = None


class Content(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(default="", alias="mimeType")
    text: str | None = None


class HarRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    method: str
    headers: list[NameValue] = []
    query_string: list[NameValue] | None = Field(default=None, alias="queryString")
    post_data: PostData | None = Field(default=None, alias="postData")


class HarResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: int
    content: Content = Content()

    @property
    def mime_type(self) -> str:
        return self.content.mime_type

    @property
    def body(self) -> str | None:
        return self.content.text


class Entry(BaseModel):
    """One observed request/response exchange."""

    request: HarRequest
    response: HarResponse


class Capture(BaseModel):
    """An ordered sequence of raw entries plus where they came from."""

    source: str = "<memory>"
    entries: list[Any]
