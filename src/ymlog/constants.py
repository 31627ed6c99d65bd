# topmark:header:start
#
#   project      : YmLog
#   file         : constants.py
#   file_relpath : src/ymlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YmLog Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    YMLOG_VERSION: str = get_version("ymlog")
except PackageNotFoundError:  # running from a source checkout
    YMLOG_VERSION = "0.0.0+unknown"

# Name of the bundled default config inside the package `ymlog.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "ymlog.config"
DEFAULT_TOML_CONFIG_NAME: str = "ymlog-default.toml"

# Project-local config file names, in discovery order
PROJECT_CONFIG_NAMES: tuple[str, ...] = ("pyproject.toml", "ymlog.toml")
PYPROJECT_SECTION: str = "tool.ymlog"

# Environment overrides
ENV_LEVEL: str = "YMLOG_LEVEL"
ENV_LOG_LEVEL: str = "YMLOG_LOG_LEVEL"

# Key of the innermost wrapper mapping used to cut nested fragments out of a full YAML dump.
# It must never be produced by the renderer for caller content before the wrapper key itself.
SPLICE_SENTINEL: str = "__ymlog_cut_here__"

# Phony key that opens a nested sequence after a block scalar already consumed the line
BLOCK_INDENT_KEY: str = '- "" :'

DOCUMENT_START: str = "---"
DOCUMENT_END: str = "..."

DEFAULT_INDENT_WIDTH: int = 2
DEFAULT_WRAP_AT: int = 120
