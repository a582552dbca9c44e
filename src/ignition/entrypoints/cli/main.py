"""IGNITION CLI entry point.

Defines the top-level ``ignition`` command group and its subcommands.

Commands
- ``ignition start NAME``: start a component and its dependencies.

Component specifications are not read from files. ``--specs`` (or
``IGNITION_SPECS``) names a Python object as ``MODULE:ATTR`` holding an
iterable of `ComponentSpec`, or a callable returning one.

Examples
    $ ignition --version
    $ ignition -v start web --specs myapp.components:SPECS --mode permanent
"""

import logging

import click

from ignition import __version__, config
from ignition.bootstrap import bootstrap, load_specs
from ignition.bootstrap.bootstrap import InvalidSpecsPath
from ignition.domain.errors import DomainError
from ignition.domain.model import AlreadyRunning, StartMode
from ignition.interfaces.registry import RegistryError
from ignition.logging import config_console_handler, log_startup

from .helpers import error, parse_log_level, success

logger = logging.getLogger(__name__)


HELP = """IGNITION command-line interface.

    Start a component together with every dependency it declares. Dependencies
    that are not running yet are started first, innermost first.
    """

MISSING_SPECS_MSG = (
    "No component specifications given.\n"
    "Pass --specs MODULE:ATTR or set IGNITION_SPECS."
)


@click.group(help=HELP)
@click.version_option(__version__, prog_name="ignition")
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--color/--no-color",
    "color",
    help="Colorize console output.",
    default=True,
    show_default=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="IGNITION_LOGGER_LEVELS",
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable, "
        "or a comma/space separated list via IGNITION_LOGGER_LEVELS."
    ),
    show_envvar=True,
)
@click.pass_context
def ignition(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    color: bool,
    logger_levels: dict[str, int],
) -> None:
    """IGNITION command-line interface."""
    ctx.color = color

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handler = config_console_handler(level=level, debug_mode=debug, color=color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=handler.level,
        handlers=[handler],
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


def _resolve_specs(specs_path: str | None):
    if specs_path is None:
        try:
            specs_path = config.get_specs_path()
        except config.SpecsNotSetError as e:
            raise click.ClickException(MISSING_SPECS_MSG) from e
    try:
        return load_specs(specs_path)
    except InvalidSpecsPath as e:
        raise click.ClickException(str(e)) from e


@ignition.command()
@click.argument("name")
@click.option(
    "--specs",
    "specs_path",
    metavar="MODULE:ATTR",
    help="Python object holding the component specifications.",
    default=None,
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in StartMode], case_sensitive=False),
    default=StartMode.TEMPORARY.value,
    show_default=True,
    help="Start mode for NAME. Dependencies are always started as temporary.",
)
@click.option(
    "--detect-cycles/--no-detect-cycles",
    "detect_cycles",
    default=None,
    help="Report dependency cycles instead of recursing. Defaults to IGNITION_DETECT_CYCLES.",
)
def start(name: str, specs_path: str | None, mode: str, detect_cycles: bool | None) -> None:
    """Start component NAME and its dependencies."""
    specs = _resolve_specs(specs_path)
    try:
        app = bootstrap(specs, detect_cycles=detect_cycles)
    except (DomainError, RegistryError, config.InvalidSettingError) as e:
        raise click.ClickException(str(e)) from e

    try:
        outcome = app.coordinator.start(name, StartMode(mode.lower()))
    except RecursionError as e:
        raise click.ClickException(
            f"Dependency cycle while starting '{name}'. "
            "Re-run with --detect-cycles to see the cycle."
        ) from e

    if not outcome.ok:
        reason = getattr(outcome, "reason", outcome)
        error(f"Could not start {name}: {reason}")
        ctx = click.get_current_context()
        ctx.exit(1)

    if isinstance(outcome, AlreadyRunning):
        success(f"{name} is already running")
    else:
        success(f"{name} started ({mode.lower()})")
    for running in app.registry.running():  # type: ignore[attr-defined]
        click.echo(running)
