"""
Command-line interface for medic.

Provides the ``medic`` command and the ``medic_option`` decorator that
host programs attach to their own click commands.
"""

import logging
import sys
from typing import Callable, Iterable, Optional, Union

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .checker import MedicChecker, exit_code
from .checks import default_checks
from .config import ColorChoice, MedicConfig, load_config
from .errors import ConfigError
from .models import Check, Severity
from .render import diagnose

console = Console()
err_console = Console(stderr=True)

ChecksSource = Union[MedicChecker, Iterable[Check], Callable[[], Iterable[Check]]]


def _make_checker(
    checks: ChecksSource,
    config: MedicConfig,
    explicit_config: bool,
) -> MedicChecker:
    if callable(checks) and not isinstance(checks, MedicChecker):
        checks = checks()
    if isinstance(checks, MedicChecker):
        if not explicit_config:
            return checks
        # An explicit config overrides the checker's own skip list
        return MedicChecker(checks.checks, config=config)
    return MedicChecker(checks, config=config)


def medic_option(
    checks: ChecksSource,
    *param_decls: str,
    fail_on: Optional[Union[Severity, str]] = None,
    config: Optional[MedicConfig] = None,
    **kwargs,
):
    """
    Add a ``--medic`` flag to a click command.

    When the flag is given the checks run, the report is written to
    stdout and the program exits with the report's exit code, like
    ``click.version_option`` does for ``--version``.

    Args:
        checks: A checker, a list of checks, or a factory returning checks
        param_decls: Option names (defaults to ``--medic``)
        fail_on: Severity that makes the exit code non-zero
        config: Color, skip and fail_on settings (defaults to
            ``load_config()``, which honors ``MEDIC_COLOR``); when given with a
            checker, its skip list replaces the checker's own
    """
    if not param_decls:
        param_decls = ("--medic",)
    if isinstance(fail_on, str) and not isinstance(fail_on, Severity):
        fail_on = Severity.parse(fail_on)

    def callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        if config is not None:
            cfg = config
        else:
            try:
                cfg = load_config()
            except ConfigError as e:
                raise click.ClickException(str(e))
        checker = _make_checker(checks, cfg, config is not None)
        report = diagnose(checker, sys.stdout, cfg.color)
        ctx.exit(exit_code(report, fail_on or cfg.fail_on))

    kwargs.setdefault("is_flag", True)
    kwargs.setdefault("expose_value", False)
    kwargs.setdefault("is_eager", True)
    kwargs.setdefault("help", "Print a diagnostic report and exit.")
    kwargs["callback"] = callback
    return click.option(*param_decls, **kwargs)


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="medic")
@click.option("--verbose", "-v", is_flag=True, help="Log check execution to stderr")
def cli(verbose: bool):
    """
    Medic diagnostic report

    Runs environment checks and prints a troubleshooting report
    suitable for pasting into a bug report.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ============================================================
# RUN Command
# ============================================================

@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file",
)
@click.option(
    "--color",
    type=click.Choice([c.value for c in ColorChoice]),
    default=None,
    help="Color output mode (overrides configuration)",
)
@click.option(
    "--fail-on",
    type=click.Choice([s.value for s in Severity], case_sensitive=False),
    default=None,
    help="Exit non-zero when the overall result reaches this severity",
)
@click.option("--skip", "-s", multiple=True, help="Name of a check to skip (repeatable)")
def run(config_path: Optional[str], color: Optional[str], fail_on: Optional[str], skip):
    """Run the standard checks and print the report."""
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        err_console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        sys.exit(2)

    updates = {}
    if color:
        updates["color"] = ColorChoice(color)
    if fail_on:
        updates["fail_on"] = Severity.parse(fail_on)
    if skip:
        updates["skip"] = [*cfg.skip, *skip]
    if updates:
        cfg = cfg.model_copy(update=updates)

    checker = MedicChecker(default_checks(), config=cfg)
    report = diagnose(checker, sys.stdout, cfg.color)
    sys.exit(exit_code(report, cfg.fail_on))


# ============================================================
# LIST Command
# ============================================================

@cli.command(name="list")
def list_checks():
    """List the standard checks."""
    table = Table(title="Standard Checks")
    table.add_column("Check", style="cyan")
    table.add_column("Description")

    for check in default_checks():
        table.add_row(check.name, check.description)

    console.print(table)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
