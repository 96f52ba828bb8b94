"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_normalizer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from openapi_normalizer.normalization_run import (
    NormalizationRequest,
    NormalizationRunError,
    execute_normalization_run,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_CONFIG_OPTION_HELP = "Path to a YAML/JSON normalizer configuration file"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-normalizer")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each rewrite step.")
def cli(verbose: bool) -> None:
    """Normalize generated OpenAPI documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="fix")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("output_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=_CONFIG_OPTION_HELP,
)
def fix(input_path: str, output_path: str, config_path: str | None) -> None:
    """Rewrite generator quirks into standard OpenAPI 3.0."""
    _run(NormalizationRequest(input_path, output_path, config_path, fix=True, hoist=False))


@cli.command(name="extract")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("output_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=_CONFIG_OPTION_HELP,
)
def extract(input_path: str, output_path: str, config_path: str | None) -> None:
    """Move inline object schemas into components.schemas as $ref targets."""
    _run(NormalizationRequest(input_path, output_path, config_path, fix=False, hoist=True))


@cli.command(name="normalize")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("output_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=_CONFIG_OPTION_HELP,
)
def normalize(input_path: str, output_path: str, config_path: str | None) -> None:
    """Run fix, then extract, on one document."""
    _run(NormalizationRequest(input_path, output_path, config_path, fix=True, hoist=True))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration file holding the default settings."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _run(request: NormalizationRequest) -> None:
    try:
        outcome = execute_normalization_run(request)
    except NormalizationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="openapi-normalizer", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
