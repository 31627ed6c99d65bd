# topmark:header:start
#
#   project      : YmLog
#   file         : model.py
#   file_relpath : src/ymlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logger settings: an immutable `LoggerConfig` and its mutable builder.

`MutableLoggerConfig` collects settings from layered sources (runtime
defaults, discovered project files, explicit files, environment) with
last-wins merging; `MutableLoggerConfig.freeze` validates the result and
returns the frozen `LoggerConfig` a `YmLog` logger is built from.

Merge order for `MutableLoggerConfig.load_merged` (lowest to highest):
    1) Runtime defaults
    2) Project configs discovered upward from the anchor, root-most first;
       within one directory ``pyproject.toml`` before ``ymlog.toml``
    3) Explicit config files, in the given order
    4) The ``YMLOG_LEVEL`` environment variable
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from ymlog.config.io import (
    extract_tool_section,
    load_defaults_dict,
    load_toml_dict,
)
from ymlog.config.keys import Toml
from ymlog.config.logging import get_logger
from ymlog.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_WRAP_AT,
    ENV_LEVEL,
    PROJECT_CONFIG_NAMES,
)
from ymlog.errors import ConfigError
from ymlog.levels import Level

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ymlog.config.io import TomlTable
    from ymlog.config.logging import YmlogLogger

logger: YmlogLogger = get_logger(__name__)


@dataclass(frozen=True)
class LoggerConfig:
    """Immutable logger settings.

    Attributes:
        level (Level): Minimum level of entries written to the stream.
        indent_width (int): Spaces per nesting level (2..9).
        wrap_at (int): Wrap column for folded and long flow scalars.
        show_metadata (bool): Render entries with metadata as full records.
        config_files (tuple[Path, ...]): Files the settings were read from.
    """

    level: Level = Level.INFO
    indent_width: int = DEFAULT_INDENT_WIDTH
    wrap_at: int = DEFAULT_WRAP_AT
    show_metadata: bool = False
    config_files: tuple[Path, ...] = ()

    @property
    def indent_unit(self) -> str:
        """One level of indentation."""
        return " " * self.indent_width

    def thaw(self) -> MutableLoggerConfig:
        """Return a mutable copy of this config."""
        return MutableLoggerConfig(
            level=self.level,
            indent_width=self.indent_width,
            wrap_at=self.wrap_at,
            show_metadata=self.show_metadata,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible dict."""
        return {
            Toml.SECTION_LOGGER: {
                Toml.KEY_LEVEL: self.level.name.lower(),
                Toml.KEY_INDENT_WIDTH: self.indent_width,
                Toml.KEY_WRAP_AT: self.wrap_at,
                Toml.KEY_SHOW_METADATA: self.show_metadata,
            },
        }


def _require_int(value: object, key: str, source: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source}: '{key}' must be an integer, got {value!r}")
    return value


@dataclass
class MutableLoggerConfig:
    """Mutable builder for `LoggerConfig`; unset fields are ``None``."""

    level: Level | None = None
    indent_width: int | None = None
    wrap_at: int | None = None
    show_metadata: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> LoggerConfig:
        """Validate the draft and return an immutable `LoggerConfig`.

        Raises:
            ConfigError: If a value is out of range.
        """
        indent_width: int = (
            self.indent_width if self.indent_width is not None else DEFAULT_INDENT_WIDTH
        )
        wrap_at: int = self.wrap_at if self.wrap_at is not None else DEFAULT_WRAP_AT
        if not 2 <= indent_width <= 9:
            raise ConfigError(f"indent_width must be between 2 and 9, got {indent_width}")
        if wrap_at < 1:
            raise ConfigError(f"wrap_at must be positive, got {wrap_at}")
        return LoggerConfig(
            level=self.level if self.level is not None else Level.INFO,
            indent_width=indent_width,
            wrap_at=wrap_at,
            show_metadata=bool(self.show_metadata),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableLoggerConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableLoggerConfig:
        """Build a draft from a parsed ``ymlog.toml`` table.

        Unknown sections and keys are reported as warnings and ignored.

        Args:
            data (Mapping[str, Any]): The parsed table (already extracted from
                ``[tool.ymlog]`` for ``pyproject.toml``).
            config_file (Path | None): Source file, used in messages.

        Returns:
            MutableLoggerConfig: The draft; keys absent from ``data`` stay unset.

        Raises:
            ConfigError: If a value has the wrong type or an unknown level name.
        """
        source: str = str(config_file) if config_file is not None else "<defaults>"
        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                logger.warning("%s: ignoring unknown config key '%s'", source, key)

        section_any: object = data.get(Toml.SECTION_LOGGER, {})
        if not isinstance(section_any, dict):
            raise ConfigError(f"{source}: [{Toml.SECTION_LOGGER}] must be a table")
        section: dict[str, Any] = cast("dict[str, Any]", section_any)
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS[Toml.SECTION_LOGGER]
        for key in section:
            if key not in allowed:
                logger.warning(
                    "%s: ignoring unknown key '%s' in [%s]", source, key, Toml.SECTION_LOGGER
                )

        draft = cls()
        if Toml.KEY_LEVEL in section:
            raw: object = section[Toml.KEY_LEVEL]
            level: Level | None = None
            if isinstance(raw, (str, int)) and not isinstance(raw, bool):
                level = Level.parse(raw)
            if level is None:
                raise ConfigError(f"{source}: unknown level {raw!r}")
            draft.level = level
        if Toml.KEY_INDENT_WIDTH in section:
            draft.indent_width = _require_int(
                section[Toml.KEY_INDENT_WIDTH], Toml.KEY_INDENT_WIDTH, source
            )
        if Toml.KEY_WRAP_AT in section:
            draft.wrap_at = _require_int(section[Toml.KEY_WRAP_AT], Toml.KEY_WRAP_AT, source)
        if Toml.KEY_SHOW_METADATA in section:
            flag: object = section[Toml.KEY_SHOW_METADATA]
            if not isinstance(flag, bool):
                raise ConfigError(f"{source}: '{Toml.KEY_SHOW_METADATA}' must be a boolean")
            draft.show_metadata = flag
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableLoggerConfig | None:
        """Load a draft from ``ymlog.toml`` or the ``[tool.ymlog]`` table of ``pyproject.toml``.

        Returns:
            MutableLoggerConfig | None: The draft, or None when a ``pyproject.toml``
                has no ``[tool.ymlog]`` table.

        Raises:
            ConfigError: If the file cannot be read or holds invalid settings.
        """
        logger.debug("Loading logger config from %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == "pyproject.toml":
            tool_section: TomlTable | None = extract_tool_section(data)
            if tool_section is None:
                logger.debug("No [tool.ymlog] table in %s", path)
                return None
            data = tool_section
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``, root-most first.

        Within a directory ``pyproject.toml`` precedes ``ymlog.toml`` so that the
        latter wins a later merge. A config setting ``root = true`` stops the walk
        after its directory.
        """
        found: list[list[Path]] = []
        for directory in (start, *start.parents):
            here: list[Path] = [
                directory / name for name in PROJECT_CONFIG_NAMES if (directory / name).is_file()
            ]
            if not here:
                continue
            found.append(here)
            if any(cls._declares_root(path) for path in here):
                break
        return [path for group in reversed(found) for path in group]

    @staticmethod
    def _declares_root(path: Path) -> bool:
        data: TomlTable = load_toml_dict(path)
        if path.name == "pyproject.toml":
            data = extract_tool_section(data) or {}
        return data.get(Toml.KEY_ROOT) is True

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> MutableLoggerConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory (or file) where discovery starts; CWD if None.
            extra_config_files (Iterable[Path] | None): Files merged after discovery.
            no_config (bool): Skip discovery of project files.
            environ (Mapping[str, str] | None): Environment to read overrides from
                (default: ``os.environ``).

        Returns:
            MutableLoggerConfig: The merged draft, ready to be frozen.
        """
        draft: MutableLoggerConfig = cls.from_defaults()

        start: Path = anchor if anchor is not None else Path.cwd()
        if start.is_file():
            start = start.parent

        if not no_config:
            for path in cls.discover_local_config_files(start):
                discovered: MutableLoggerConfig | None = cls.from_toml_file(path)
                if discovered is not None:
                    draft = draft.merge_with(discovered)

        for extra in extra_config_files or ():
            explicit: MutableLoggerConfig | None = cls.from_toml_file(Path(extra))
            if explicit is not None:
                draft = draft.merge_with(explicit)

        return draft.apply_env(environ)

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableLoggerConfig) -> MutableLoggerConfig:
        """Return a new draft where the set values of ``other`` override this draft."""
        return MutableLoggerConfig(
            level=other.level if other.level is not None else self.level,
            indent_width=other.indent_width
            if other.indent_width is not None
            else self.indent_width,
            wrap_at=other.wrap_at if other.wrap_at is not None else self.wrap_at,
            show_metadata=other.show_metadata
            if other.show_metadata is not None
            else self.show_metadata,
            config_files=self.config_files + other.config_files,
        )

    def apply_env(self, environ: Mapping[str, str] | None = None) -> MutableLoggerConfig:
        """Apply the ``YMLOG_LEVEL`` override in place and return ``self``.

        Raises:
            ConfigError: If the variable holds an unknown level.
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ
        raw: str | None = env.get(ENV_LEVEL)
        if raw:
            level: Level | None = Level.parse(raw)
            if level is None:
                raise ConfigError(f"{ENV_LEVEL}: unknown level {raw!r}")
            logger.debug("Level overridden by %s=%s", ENV_LEVEL, raw)
            self.level = level
        return self
