"""Summary counts over the discovered operations. Informational only."""

from pydantic import BaseModel

from .models import ApiModel


class Report(BaseModel):
    total_paths: int = 0
    total_endpoints: int = 0
    methods: dict[str, int] = {}
    response_codes: dict[str, int] = {}


def generate_report(model: ApiModel) -> Report:
    methods: dict[str, int] = {}
    codes: dict[str, int] = {}
    total = 0

    for _, method, operation in model.operations():
        total += 1
        methods[method] = methods.get(method, 0) + 1
        for code in operation.responses:
            codes[code] = codes.get(code, 0) + 1

    return Report(
        total_paths=len(model.paths),
        total_endpoints=total,
        methods=methods,
        response_codes=codes,
    )
