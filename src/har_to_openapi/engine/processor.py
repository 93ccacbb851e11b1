"""Entry processor: folds one recorded exchange into the ApiModel.

Each step that can fail on bad input is isolated. A bad URL or entry shape
skips the whole entry. A bad request or response body skips only that body.
"""

import json
from urllib.parse import SplitResult, parse_qsl, urlsplit

from pydantic import ValidationError

from har_to_openapi.capture.base import Entry, HarRequest, HarResponse
from har_to_openapi.config import ConverterSettings
from har_to_openapi.diagnostics import Diagnostics

from .models import ApiModel, MediaType, Operation, Parameter, RequestBody, ResponseSpec
from .schema import infer_schema
from .templater import has_parameter, template_path

STATUS_DESCRIPTIONS = {
    200: "Successful response",
    201: "Resource created",
    204: "No content",
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    500: "Internal server error",
}


class EntryError(ValueError):
    """An entry that cannot contribute anything to the document."""


class EntryProcessor:
    """Applies entries, in order, to a shared ApiModel."""

    def __init__(
        self,
        model: ApiModel,
        settings: ConverterSettings | None = None,
        diagnostics: Diagnostics | None = None,
    ):
        self.model = model
        self.settings = settings or ConverterSettings()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def process(self, raw_entry: object, source: str = "<memory>", index: int = 0) -> bool:
        """Process one raw entry. Returns True when it contributed to ``paths``."""
        try:
            entry = Entry.model_validate(raw_entry)
        except ValidationError as e:
            self.diagnostics.record(source, index, "entry", f"malformed entry: {e.error_count()} error(s)")
            return False

        try:
            url = parse_url(entry.request.url)
        except EntryError as e:
            self.diagnostics.record(source, index, "url", str(e))
            return False

        self.model.register_server(origin(url))

        if not self.settings.is_json(entry.response.mime_type):
            return False

        path_params: list[Parameter] = []
        template = template_path(url.path or "/", path_params)
        operation = self.model.ensure_operation(template, entry.request.method, summary=public_url(url))

        for param in path_params:
            _add_parameter(operation, param)
        for name, value in _query_pairs(entry.request, url):
            _add_parameter(operation, Parameter(name=name, location="query", example=value))
        for header in entry.request.headers:
            if not self.settings.is_excluded_header(header.name):
                _add_parameter(operation, Parameter(name=header.name, location="header", example=header.value))

        self._attach_request_body(operation, entry.request, source, index)
        self._attach_response(operation, entry.response, source, index)
        return True

    def _attach_request_body(self, operation: Operation, request: HarRequest, source: str, index: int) -> None:
        post = request.post_data
        if not post or not post.text or not self.settings.is_json(post.mime_type):
            return
        try:
            body = json.loads(post.text)
        except json.JSONDecodeError as e:
            self.diagnostics.record(source, index, "request_body", f"invalid JSON: {e.msg}")
            return

        operation.request_body = RequestBody(
            content={post.mime_type: MediaType(schema=infer_schema(body), example=body)}
        )

    def _attach_response(self, operation: Operation, response: HarResponse, source: str, index: int) -> None:
        code = str(response.status)
        text = response.body

        if not text:
            operation.responses[code] = ResponseSpec(description=describe_status(response.status))
            return

        try:
            body = json.loads(text)
        except json.JSONDecodeError as e:
            self.diagnostics.record(source, index, "response_body", f"invalid JSON: {e.msg}")
            operation.responses[code] = ResponseSpec(description=describe_status(response.status))
            return

        operation.responses[code] = ResponseSpec(
            description=describe_status(response.status, text),
            content={response.mime_type: MediaType(schema=infer_schema(body), example=body)},
        )


def parse_url(raw_url: str) -> SplitResult:
    """Split an absolute URL, raising EntryError if it is not one."""
    try:
        url = urlsplit(raw_url)
    except ValueError as e:
        raise EntryError(f"unparseable URL {raw_url!r}: {e}") from e
    if not url.scheme or not url.netloc:
        raise EntryError(f"not an absolute URL: {raw_url!r}")
    return url


def origin(url: SplitResult) -> str:
    host = url.netloc.rpartition("@")[2]
    return f"{url.scheme}://{host}"


def public_url(url: SplitResult) -> str:
    """The URL without credentials or fragment."""
    return url._replace(netloc=url.netloc.rpartition("@")[2], fragment="").geturl()


def describe_status(status: int, body: str | None = None) -> str:
    if status in STATUS_DESCRIPTIONS:
        return STATUS_DESCRIPTIONS[status]
    if body:
        return f"Status {status}: {body}"
    return f"Status {status}"


def _query_pairs(request: HarRequest, url: SplitResult) -> list[tuple[str, str]]:
    if request.query_string is not None:
        return [(q.name, q.value) for q in request.query_string]
    return parse_qsl(url.query, keep_blank_values=True)


def _add_parameter(operation: Operation, param: Parameter) -> None:
    if not has_parameter(operation.parameters, param.name, param.location):
        operation.parameters.append(param)
