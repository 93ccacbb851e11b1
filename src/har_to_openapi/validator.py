"""Structural checks for a generated OpenAPI document.

Never called by the conversion pipeline itself; the CLI runs it on request.
"""

import re

import yaml

REQUIRED_KEYS = ("openapi", "info", "paths")
HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}
PLACEHOLDER_RE = re.compile(r"\{([^}/]+)\}")


def validate_yaml(text: str) -> dict[str, str]:
    """Check that the rendered YAML parses back to a mapping.

    Returns dict of {location: error_message}.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return {"_yaml": f"YAMLError: {e}"}
    if not isinstance(data, dict):
        return {"_yaml": "document is not a mapping"}
    return {}


def validate_document(doc: dict) -> dict[str, str]:
    """Check the document shape and path parameter consistency.

    Returns dict of {location: error_message} for every problem found.
    """
    errors = {}
    for key in REQUIRED_KEYS:
        if key not in doc:
            errors[key] = "missing required key"
    if errors:
        return errors

    if not str(doc["openapi"]).startswith("3."):
        errors["openapi"] = f"unsupported version {doc['openapi']!r}"
    if not doc["info"].get("title") or not doc["info"].get("version"):
        errors["info"] = "title and version are required"

    for path, methods in doc["paths"].items():
        placeholders = set(PLACEHOLDER_RE.findall(path))
        for method, operation in methods.items():
            where = f"{method.upper()} {path}"
            if method not in HTTP_METHODS:
                errors[where] = f"unknown HTTP method {method!r}"
                continue
            problems = _check_operation(operation, placeholders)
            if problems:
                errors[where] = "; ".join(problems)

    return errors


def validate_all(doc: dict, text: str | None = None) -> dict[str, str]:
    """Run document checks, plus the YAML check when the text is given."""
    errors = validate_document(doc)
    if text is not None:
        errors.update(validate_yaml(text))
    return errors


def _check_operation(operation: dict, placeholders: set[str]) -> list[str]:
    problems = []
    declared = {p["name"] for p in operation.get("parameters", []) if p.get("in") == "path"}

    for name in sorted(placeholders - declared):
        problems.append(f"path parameter {name!r} is not declared")
    for name in sorted(declared - placeholders):
        problems.append(f"path parameter {name!r} does not appear in the path")
    for p in operation.get("parameters", []):
        if p.get("in") == "path" and p.get("required") is not True:
            problems.append(f"path parameter {p['name']!r} must be required")
    if not operation.get("responses"):
        problems.append("no responses")
    return problems
