# topmark:header:start
#
#   project      : YmLog
#   file         : init_config.py
#   file_relpath : src/ymlog/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YmLog `init-config` command.

Prints a starter configuration to stdout: the annotated ``ymlog-default.toml``
template, or the runtime defaults nested under ``[tool.ymlog]`` for pasting
into ``pyproject.toml``.
"""

from __future__ import annotations

import click

from ymlog.cli.console import ClickConsole
from ymlog.config.io import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    nest_under_pyproject,
    to_toml,
)


@click.command(
    name="init-config",
    help="Display an initial YmLog configuration file.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Render the defaults as a [tool.ymlog] table for pyproject.toml.",
)
def init_config_command(*, pyproject: bool = False) -> None:
    """Print a starter config file to stdout."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if pyproject:
        text: str = to_toml(nest_under_pyproject(load_defaults_dict()))
    else:
        text = load_default_config_template_toml_text()

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.note("# === BEGIN ===")
    console.print(text, nl=not text.endswith("\n"))
    if ctx.obj.get("verbosity_level", 0) > 0:
        console.note("# === END ===")
