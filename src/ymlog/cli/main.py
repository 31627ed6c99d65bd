# topmark:header:start
#
#   project      : YmLog
#   file         : main.py
#   file_relpath : src/ymlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``ymlog`` command group.

Group-level options (verbosity) are resolved once and stored in ``ctx.obj``
together with the program-output console; subcommands read them from there.
"""

from __future__ import annotations

import click

from ymlog.cli.commands.init_config import init_config_command
from ymlog.cli.commands.render import render_command
from ymlog.cli.commands.version import version_command
from ymlog.cli.console import ClickConsole
from ymlog.cli.options import common_verbose_options, resolve_verbosity, verbosity_to_log_level
from ymlog.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize verbosity, diagnostics logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; its ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    verbosity: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    log_level: int | None = resolve_env_log_level()
    if log_level is None:
        log_level = verbosity_to_log_level(verbosity)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.obj["console"] = ClickConsole(enable_color=ctx.color is not False)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="YmLog: streaming YAML logger.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the YmLog CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'ymlog render [SCRIPT]' to render a script of log calls.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(init_config_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
