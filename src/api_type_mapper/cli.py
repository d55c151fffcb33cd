"""CLI entry point for api-type-mapper."""

import logging
from pathlib import Path

import click

from api_type_mapper.converter import OptionsConverter
from api_type_mapper.options import InvalidOptionError


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Type Mapper: inspect type mapping configuration."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("mapping_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--target-dir", default=None, help="Target directory of the generated sources.")
@click.option("--validate", is_flag=True, help="Fail if a required option is missing.")
def options(mapping_path: Path, target_dir: str | None, validate: bool):
    """Print the effective processor options of a mapping document.

    Only the options section is read. The result style shows the default
    unless type mappings are passed to ApiOptions programmatically.
    """
    raw = {"mapping": mapping_path.read_text(encoding="utf-8")}
    if target_dir is not None:
        raw["targetDir"] = target_dir

    try:
        api_options = OptionsConverter().convert_options(raw)
        if validate:
            api_options.validate_options()
    except InvalidOptionError as e:
        raise click.ClickException(str(e)) from e

    click.echo(api_options.model_dump_json(indent=2))
    click.echo(f"result style: {api_options.result_style.value}")
