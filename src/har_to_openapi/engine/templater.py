"""Path templater.

Rewrites a raw request path such as ``/users/42/posts`` into
``/users/{usersId}/posts`` and records the discovered path parameters.
"""

from .classifier import Segment, classify
from .models import Parameter

SCHEMA_TYPES = {"uuid": "string", "integer": "integer", "float": "number"}


def template_path(raw_path: str, parameters: list[Parameter]) -> str:
    """Return the templated form of ``raw_path``.

    New path parameters are appended to ``parameters``. A parameter that is
    already present (same name, ``in: path``) is left untouched, so the first
    observed value stays the default and re-templating is idempotent.
    """
    segments = raw_path.split("/")
    classified = [classify(s) for s in segments]

    for i, seg in enumerate(classified):
        if not seg.is_dynamic:
            continue

        name = _param_name(classified, i)
        segments[i] = f"{{{name}}}"

        if not has_parameter(parameters, name, "path"):
            parameters.append(_path_parameter(name, seg))

    return "/".join(segments)


def has_parameter(parameters: list[Parameter], name: str, location: str) -> bool:
    return any(p.name == name and p.location == location for p in parameters)


def _param_name(classified: list[Segment], index: int) -> str:
    previous = classified[index - 1] if index > 0 else None
    if previous is None or not previous.value or previous.is_dynamic:
        return f"param{index}"
    return f"{previous.value}Id"


def _path_parameter(name: str, seg: Segment) -> Parameter:
    schema_type = SCHEMA_TYPES[seg.kind]
    if seg.kind == "integer":
        default = int(seg.value)
    elif seg.kind == "float":
        default = float(seg.value)
    else:
        default = seg.value

    return Parameter(
        name=name,
        location="path",
        required=True,
        example=seg.value,
        schema={"type": schema_type, "default": default},
    )
