# topmark:header:start
#
#   project      : YmLog
#   file         : options.py
#   file_relpath : src/ymlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic."""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from ymlog.cli.errors import YmlogUsageError
from ymlog.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        YmlogUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise YmlogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count if verbose_count > 0 else -quiet_count


def verbosity_to_log_level(verbosity: int) -> int | None:
    """Return the diagnostics logging level implied by the verbosity, if any.

    ``-vvv`` enables TRACE, ``-vv`` DEBUG and ``-v`` INFO diagnostics; otherwise
    None leaves the choice to the environment.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting -v/--verbose and -q/--quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f
