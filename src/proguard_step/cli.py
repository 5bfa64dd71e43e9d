"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from proguard_step.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    write_placeholder_configuration,
)
from proguard_step.run_execution import StepRequest, execute_shrink_step
from proguard_step.step_failures import BuildStepError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="proguard-step")
def cli() -> None:
    """Run ProGuard as a build-pipeline step."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML step configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML step configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON step configuration file",
)
@click.option(
    "--skip",
    is_flag=True,
    default=False,
    envvar="PROGUARD_SKIP",
    help="Disable the step regardless of the configuration file.",
)
@click.option(
    "--dependency",
    "dependencies",
    multiple=True,
    type=click.Path(path_type=str),
    help="Additional resolved dependency artifact; may be repeated.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details.")
def run_step(
    config_path: str, skip: bool, dependencies: tuple[str, ...], verbose: bool
) -> None:
    """Prepare the input artifact and run ProGuard on it."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    try:
        outcome = execute_shrink_step(
            StepRequest(
                config_path=config_path,
                skip=skip,
                extra_dependencies=dependencies,
            )
        )
    except (ConfigurationError, BuildStepError) as exc:
        raise CliError(str(exc)) from exc
    if outcome.skip_reason is not None:
        click.echo(f"proguard skipped ({outcome.skip_reason.value})")
    else:
        click.echo(f"proguard finished: {outcome.output_path}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
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
