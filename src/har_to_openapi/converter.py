"""Capture-to-OpenAPI pipeline.

Stages run in a fixed order over one ``ApiModel``:

1. fold every entry of every capture, in order, through ``EntryProcessor``
2. assign tags over the whole set of templates
3. build the report
4. assemble the document and render the YAML from that same dict
"""

from dataclasses import dataclass

from har_to_openapi.capture.base import Capture
from har_to_openapi.config import ConverterSettings
from har_to_openapi.diagnostics import Diagnostics
from har_to_openapi.engine.document import assemble_document, render_yaml
from har_to_openapi.engine.models import ApiModel
from har_to_openapi.engine.processor import EntryProcessor
from har_to_openapi.engine.report import Report, generate_report
from har_to_openapi.engine.tagger import assign_tags


@dataclass
class ConversionResult:
    """The document, its YAML rendering (same dict), the report and recorded issues."""

    document: dict
    yaml_text: str
    report: Report
    diagnostics: Diagnostics


def fold_entries(
    captures: list[Capture],
    settings: ConverterSettings | None = None,
    diagnostics: Diagnostics | None = None,
) -> ApiModel:
    """Fold the entries of all captures into a single ApiModel."""
    model = ApiModel()
    processor = EntryProcessor(model, settings, diagnostics)
    for capture in captures:
        for index, entry in enumerate(capture.entries):
            processor.process(entry, source=capture.source, index=index)
    return model


def convert(
    captures: Capture | list[Capture],
    settings: ConverterSettings | None = None,
    diagnostics: Diagnostics | None = None,
) -> ConversionResult:
    """Convert one or more captures into an OpenAPI document and its YAML text."""
    if isinstance(captures, Capture):
        captures = [captures]
    settings = settings or ConverterSettings()
    if diagnostics is None:
        diagnostics = Diagnostics()

    model = fold_entries(captures, settings, diagnostics)
    assign_tags(model)
    report = generate_report(model)
    document = assemble_document(model, settings)

    return ConversionResult(
        document=document,
        yaml_text=render_yaml(document),
        report=report,
        diagnostics=diagnostics,
    )
