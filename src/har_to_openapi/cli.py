"""CLI entry point for har-to-openapi."""

import json
import logging
from pathlib import Path

import click
import yaml

from har_to_openapi.capture.loader import CaptureLoadError, load_captures
from har_to_openapi.config import SettingsError, load_settings
from har_to_openapi.converter import convert
from har_to_openapi.diagnostics import Diagnostics, setup_logging
from har_to_openapi.engine.report import Report
from har_to_openapi.validator import validate_all, validate_document


def _echo_report(report: Report, diagnostics: Diagnostics) -> None:
    click.echo(f"Found {report.total_endpoints} endpoints on {report.total_paths} paths.")
    if report.methods:
        methods = ", ".join(f"{m.upper()}={n}" for m, n in report.methods.items())
        click.echo(f"  Methods: {methods}")
    if report.response_codes:
        codes = ", ".join(f"{c}={n}" for c, n in report.response_codes.items())
        click.echo(f"  Responses: {codes}")
    if len(diagnostics):
        stages = ", ".join(f"{s}={n}" for s, n in diagnostics.count_by_stage().items())
        click.echo(f"  Skipped: {len(diagnostics)} ({stages})")


def _echo_errors(errors: dict[str, str]) -> None:
    for where, message in errors.items():
        click.echo(f"  {where}: {message}", err=True)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """HAR to OpenAPI: infer an API description from recorded browser traffic."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command("convert")
@click.argument("captures", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the YAML document.")
@click.option("--json", "json_output", default=None, type=click.Path(path_type=Path), help="Also write the document as JSON.")
@click.option("--config", "config_path", default=None, type=click.Path(path_type=Path), help="YAML settings file.")
@click.option("--validate", is_flag=True, help="Validate the generated document before writing it.")
def convert_cmd(captures: tuple[Path, ...], output: Path, json_output: Path | None, config_path: Path | None, validate: bool):
    """Convert one or more HAR captures into an OpenAPI document."""
    try:
        settings = load_settings(config_path)
        click.echo(f"Loading {len(captures)} capture(s)...")
        loaded = load_captures(list(captures))
    except (CaptureLoadError, SettingsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Processing {sum(len(c.entries) for c in loaded)} entries...")
    result = convert(loaded, settings)
    _echo_report(result.report, result.diagnostics)

    if validate:
        errors = validate_all(result.document, result.yaml_text)
        if errors:
            _echo_errors(errors)
            raise click.ClickException(f"Generated document has {len(errors)} problem(s).")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.yaml_text, encoding="utf-8")
    click.echo(f"OpenAPI document saved to {output}")

    if json_output:
        json_output.parent.mkdir(parents=True, exist_ok=True)
        json_output.write_text(json.dumps(result.document, indent=2, ensure_ascii=False), encoding="utf-8")
        click.echo(f"JSON document saved to {json_output}")


@main.command("validate")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_cmd(doc_path: Path):
    """Validate an OpenAPI document (YAML or JSON)."""
    try:
        doc = yaml.safe_load(doc_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise click.ClickException(f"{doc_path}: cannot parse ({e})") from e
    if not isinstance(doc, dict):
        raise click.ClickException(f"{doc_path}: not an OpenAPI document")

    errors = validate_document(doc)
    if errors:
        _echo_errors(errors)
        raise click.ClickException(f"{len(errors)} problem(s) found.")
    click.echo(f"{doc_path} is valid.")
