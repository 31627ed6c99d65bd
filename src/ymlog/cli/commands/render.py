# topmark:header:start
#
#   project      : YmLog
#   file         : render.py
#   file_relpath : src/ymlog/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""YmLog `render` command.

Replays a script of log calls through a `YmLog` logger and writes the
resulting YAML stream to stdout (or ``--output``). One call per line:

    ```text
    # comments and blank lines are skipped
    starting
    + => loading config
    => reading ymlog.toml
    bW => first line\nsecond line
    r => done
    ```

Settings are resolved from the runtime defaults, discovered project config
files, ``--config`` files and ``YMLOG_LEVEL``; the command options override
all of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING

import click

from ymlog.actions import parse_actions
from ymlog.call import emit, split_call
from ymlog.cli.cli_types import EnumChoiceParam
from ymlog.cli.errors import YmlogFileNotFoundError, YmlogIOError, from_library_error
from ymlog.config.logging import get_logger
from ymlog.config.model import MutableLoggerConfig
from ymlog.errors import YmlogError
from ymlog.levels import Level
from ymlog.logger import YmLog
from ymlog.rendering.styles import Chomp, ScalarKind, Style

if TYPE_CHECKING:
    from ymlog.cli.console import ClickConsole
    from ymlog.config.logging import YmlogLogger
    from ymlog.config.model import LoggerConfig

logger: YmlogLogger = get_logger(__name__)


def _resolve_config(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    level: Level | None,
    indent_width: int | None,
    wrap_at: int | None,
    show_metadata: bool | None,
) -> LoggerConfig:
    draft: MutableLoggerConfig = MutableLoggerConfig.load_merged(
        extra_config_files=config_files,
        no_config=no_config,
    )
    overrides = MutableLoggerConfig(
        level=level,
        indent_width=indent_width,
        wrap_at=wrap_at,
        show_metadata=show_metadata,
    )
    return draft.merge_with(overrides).freeze()


def _read_script(script: Path) -> list[str]:
    if str(script) == "-":
        return click.get_text_stream("stdin", encoding="utf-8").read().splitlines()
    if not script.exists():
        raise YmlogFileNotFoundError(f"Script not found: {script}")
    try:
        return script.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise YmlogIOError(f"Cannot read script {script}: {exc}") from exc


def _is_skipped(line: str) -> bool:
    stripped: str = line.strip()
    return not stripped or stripped.startswith("#")


def render_script(
    lines: list[str],
    log: YmLog,
    *,
    style: Style | None = None,
    stamp: bool = False,
) -> int:
    """Log every call of a script; return the number of calls.

    Args:
        lines (list[str]): Script lines, without line breaks.
        log (YmLog): The logger receiving the calls.
        style (Style | None): Style override applied to every entry.
        stamp (bool): Timestamp every entry.

    Returns:
        int: How many calls were logged (skipped lines excluded).

    Raises:
        YmlogCliError: If a line cannot be logged; the error names the line.
    """
    calls: int = 0
    for lineno, line in enumerate(lines, start=1):
        if _is_skipped(line):
            continue
        actions, message = split_call(line)
        try:
            parse_actions(actions)
            emit(log, message, actions=actions, style=style, stamp=stamp)
        except YmlogError as exc:
            raise from_library_error(exc, where=f"line {lineno}") from exc
        logger.debug("line %d: actions=%r message=%r", lineno, actions, message)
        calls += 1
    return calls


@click.command(
    name="render",
    help="Render a script of log calls ('ACTIONS => message' per line) as a YAML stream.",
)
@click.argument(
    "script",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default="-",
    required=False,
)
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Write the stream to this file instead of stdout.",
)
@click.option(
    "--config",
    "config_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="Extra config file (ymlog.toml or pyproject.toml); may be repeated.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore config files discovered from the current directory.",
)
@click.option(
    "--level",
    type=EnumChoiceParam(Level),
    default=None,
    help="Minimum level written to the stream.",
)
@click.option(
    "--indent-width",
    type=click.IntRange(2, 9),
    default=None,
    help="Spaces per nesting level.",
)
@click.option(
    "--wrap-at",
    type=click.IntRange(min=1),
    default=None,
    help="Wrap column for folded and long scalars.",
)
@click.option(
    "--metadata/--no-metadata",
    "show_metadata",
    default=None,
    help="Render timestamp, level, tags and children as full records.",
)
@click.option(
    "--stamp",
    is_flag=True,
    default=False,
    help="Timestamp every entry (visible with --metadata).",
)
@click.option(
    "--style",
    "scalar_kind",
    type=EnumChoiceParam(ScalarKind),
    default=None,
    help="Scalar style for every string message.",
)
@click.option(
    "--chomp",
    type=EnumChoiceParam(Chomp),
    default=None,
    help="Chomping indicator for block styles (requires --style).",
)
def render_command(
    *,
    script: Path,
    output: IO[bytes],
    config_files: tuple[Path, ...],
    no_config: bool,
    level: Level | None,
    indent_width: int | None,
    wrap_at: int | None,
    show_metadata: bool | None,
    stamp: bool,
    scalar_kind: ScalarKind | None,
    chomp: Chomp | None,
) -> None:
    """Render a script of log calls."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if chomp is not None and scalar_kind is None:
        console.warn("--chomp has no effect without --style")
    style: Style | None = (
        Style(scalar_kind, chomp if chomp is not None else Chomp.CLIP)
        if scalar_kind is not None
        else None
    )

    try:
        config: LoggerConfig = _resolve_config(
            config_files=config_files,
            no_config=no_config,
            level=level,
            indent_width=indent_width,
            wrap_at=wrap_at,
            show_metadata=show_metadata,
        )
    except YmlogError as exc:
        raise from_library_error(exc) from exc
    logger.debug("Resolved logger config: %s", config)

    lines: list[str] = _read_script(script)
    log = YmLog(output, config=config)
    calls: int = render_script(lines, log, style=style, stamp=stamp)

    if log.bytes_written:
        try:
            output.write(b"\n")
            output.flush()
        except OSError as exc:
            raise YmlogIOError(f"Failed to finish the stream: {exc}") from exc

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.note(f"{calls} calls, {log.bytes_written} bytes written")
