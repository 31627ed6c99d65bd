# topmark:header:start
#
#   project      : YmLog
#   file         : io.py
#   file_relpath : src/ymlog/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Sources are the packaged annotated template (``ymlog-default.toml``) and
on-disk ``ymlog.toml`` / ``pyproject.toml`` files. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ymlog.config.keys import Toml
from ymlog.config.logging import get_logger
from ymlog.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    DEFAULT_WRAP_AT,
    PYPROJECT_SECTION,
)
from ymlog.errors import ConfigError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from ymlog.config.logging import YmlogLogger

TomlTable = dict[str, Any]

logger: YmlogLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-compatible dict.

    This performs no I/O; the packaged template is for human-facing output only.
    The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_LOGGER: {
            Toml.KEY_LEVEL: "info",
            Toml.KEY_INDENT_WIDTH: DEFAULT_INDENT_WIDTH,
            Toml.KEY_WRAP_AT: DEFAULT_WRAP_AT,
            Toml.KEY_SHOW_METADATA: False,
        },
    }


def _strip_none(value: object) -> object:
    """Remove `None` entries from mappings (TOML has no null)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none(v) for k, v in m.items() if v is not None}
    return value


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return tomlkit.dumps(cast("Mapping[str, Any]", _strip_none(data)))


def nest_under_pyproject(data: TomlTable) -> TomlTable:
    """Nest a config table under ``[tool.ymlog]``."""
    outer: TomlTable = data
    for part in reversed(PYPROJECT_SECTION.split(".")):
        outer = {part: outer}
    return outer


def load_default_config_template_toml_text() -> str:
    """Return the packaged annotated config template.

    Falls back to TOML generated from `load_defaults_dict` when the packaged
    resource cannot be read.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to ``ymlog.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable: The parsed document as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.ymlog]`` table of a parsed ``pyproject.toml``, or None."""
    section: object = data
    for part in PYPROJECT_SECTION.split("."):
        if not isinstance(section, dict):
            return None
        section = cast("TomlTable", section).get(part)
    return cast("TomlTable", section) if isinstance(section, dict) else None
