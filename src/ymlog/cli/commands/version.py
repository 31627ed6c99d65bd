# topmark:header:start
#
#   project      : YmLog
#   file         : version.py
#   file_relpath : src/ymlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YmLog `version` command.

Prints the YmLog version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from ymlog.cli.console import ClickConsole
from ymlog.constants import YMLOG_VERSION


@click.command(
    name="version",
    help="Show the current version of YmLog.",
)
def version_command() -> None:
    """Show the current version of YmLog."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("YmLog version:", bold=True, underline=True))
        console.print(f"    {console.styled(YMLOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(YMLOG_VERSION, bold=True))
