"""CLI entry point for ism-transform."""

import json
import logging
from pathlib import Path

import click
import yaml

from ism_transform.models import TransformOptions
from ism_transform.payload.loader import load_payload
from ism_transform.payload.validator import InvalidPayloadError
from ism_transform.pipeline import transform_payload


def _run_transform(payload_path: Path, options: TransformOptions):
    """Load and transform a payload, turning shape errors into CLI errors."""
    try:
        return transform_payload(load_payload(payload_path), options)
    except InvalidPayloadError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """ISM Transform: derive API interfaces and a document outline from ISM payloads."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("payload_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the derived interfaces and sections.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--no-outcome-fields", is_flag=True, help="Do not synthesize success/message response fields.")
@click.option("--no-chunks", is_flag=True, help="Leave document chunk sections out of the outline.")
def transform(payload_path: Path, output: Path, fmt: str, no_outcome_fields: bool, no_chunks: bool):
    """Derive interfaces and document sections from a backend payload."""
    click.echo(f"Transforming {payload_path}...")
    options = TransformOptions(outcome_fields=not no_outcome_fields, include_chunks=not no_chunks)
    result = _run_transform(payload_path, options)
    click.echo(f"Found {len(result.interfaces)} interfaces, {len(result.sections)} sections.")

    for warning in result.warnings:
        click.echo(f"  Backend warning: {warning}")

    data = result.model_dump(mode="json", by_alias=True)
    if fmt == "yaml":
        text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    else:
        text = json.dumps(data, ensure_ascii=False, indent=2)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Result saved to {output}")


@main.command()
@click.argument("payload_path", type=click.Path(exists=True, path_type=Path))
def validate(payload_path: Path):
    """Check that a payload has the minimal ISM shape."""
    result = _run_transform(payload_path, TransformOptions())
    click.echo(f"Valid payload: {result.title} ({len(result.interfaces)} interfaces)")


@main.command()
@click.argument("payload_path", type=click.Path(exists=True, path_type=Path))
def outline(payload_path: Path):
    """Print the document outline of a payload."""
    result = _run_transform(payload_path, TransformOptions())
    for section in result.sections:
        marker = "[API] " if section.is_api else ""
        click.echo(f"{section.id}  {marker}{section.title}")
