"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from avro_schema_flattener.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_settings,
    write_placeholder_configuration,
)
from avro_schema_flattener.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_schema_generation,
)
from avro_schema_flattener.source_emission import SUPPORTED_TARGETS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="avro-schema-flattener")
@click.option(
    "--log-level",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity written to stderr",
)
def cli(log_level: str) -> None:
    """Hoist nested Avro records into flat, individually named schema constants."""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT, stream=sys.stderr)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--infile",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to input Avro JSON schema",
)
@click.option(
    "--outfile",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the generated source file to write",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML settings file providing defaults for these options",
)
@click.option(
    "--dedupe/--no-dedupe",
    default=None,
    help="Emit a repeated nested record only once  [default: no-dedupe]",
)
@click.option(
    "--target",
    required=False,
    type=click.Choice(SUPPORTED_TARGETS),
    help="Language of the generated source  [default: go]",
)
@click.option(
    "--package",
    "package_name",
    required=False,
    help="Package clause of generated Go sources  [default: collector]",
)
@click.pass_context
def generate(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    config_path: str | None,
    dedupe: bool | None,
    target: str | None,
    package_name: str | None,
) -> None:
    """Generate a source file with one named constant per (nested) record schema."""
    try:
        settings = build_settings(
            input_path=input_path,
            output_path=output_path,
            dedupe=dedupe,
            target=target,
            package_name=package_name,
            config_path=config_path,
        )
        outcome = execute_schema_generation(
            GenerationRequest(settings=settings, argv=_invocation_argv(ctx))
        )
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


def _invocation_argv(ctx: click.Context) -> tuple[str, ...]:
    """Return the command line recorded in generated headers."""
    if isinstance(ctx.obj, dict) and "argv" in ctx.obj:
        return tuple(ctx.obj["argv"])
    return tuple(sys.argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(
            args=list(argv),
            standalone_mode=False,
            obj={"argv": (*sys.argv[:1], *argv)},
        )
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
