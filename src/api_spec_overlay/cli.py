"""CLI entry point for api-spec-overlay."""

import logging
import sys
from pathlib import Path

import click

from api_spec_overlay.config import DEFAULT_CONFIG_FILES, find_default_config, load_config
from api_spec_overlay.errors import ConfigError, SpecError
from api_spec_overlay.jobs import diff_jobs, run_jobs
from api_spec_overlay.parser.loader import parse_service_from_file

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

log_level_option = click.option(
    "--log-level",
    default="off",
    type=click.Choice([*LOG_LEVELS, "off"]),
    help="Log verbosity on stderr.",
)
config_option = click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(path_type=Path),
    help=f"Job file (default: {' or '.join(DEFAULT_CONFIG_FILES)}).",
)


def _configure_logging(level: str) -> None:
    if level == "off":
        return
    logging.basicConfig(
        level=LOG_LEVELS[level],
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _resolve_config(config_path: Path | None) -> Path:
    if config_path is not None:
        return config_path
    found = find_default_config()
    if found is None:
        raise ConfigError(f"no config file given and none of {', '.join(DEFAULT_CONFIG_FILES)} found")
    return found


@click.group()
def main():
    """API Spec Overlay: expand and validate resource-oriented API specifications."""
    pass


@main.command()
@config_option
@log_level_option
def generate(config_path: Path | None, log_level: str):
    """Run every job in the config file and write its outputs."""
    _configure_logging(log_level)
    try:
        path = _resolve_config(config_path)
        jobs = load_config(path)
        written = run_jobs(jobs, path.parent)
    except SpecError as e:
        raise click.ClickException(str(e))

    for out in written:
        click.echo(f"  Created {out}")
    click.echo(f"Processed {len(jobs)} jobs from {path}")


@main.command()
@config_option
@log_level_option
def diff(config_path: Path | None, log_level: str):
    """Check whether generated outputs match the files on disk."""
    _configure_logging(log_level)
    try:
        path = _resolve_config(config_path)
        differences = diff_jobs(load_config(path), path.parent)
    except SpecError as e:
        raise click.ClickException(str(e))

    if differences:
        click.echo("Differences found:")
        for difference in differences:
            click.echo(difference)
        sys.exit(1)
    click.echo("No differences found.")


@main.command()
@click.argument("spec_path", type=click.Path(path_type=Path))
@log_level_option
def validate(spec_path: Path, log_level: str):
    """Validate and expand a single specification document."""
    _configure_logging(log_level)
    try:
        service = parse_service_from_file(spec_path)
    except SpecError as e:
        raise click.ClickException(str(e))

    click.echo(
        f"{spec_path} is valid: {len(service.resources)} resources, "
        f"{len(service.objects)} objects after expansion"
    )
