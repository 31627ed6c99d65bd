# topmark:header:start
#
#   project      : YmLog
#   file         : keys.py
#   file_relpath : src/ymlog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for YmLog configuration.

These names are the external configuration API as it appears in ``ymlog.toml``
and in ``[tool.ymlog]`` inside ``pyproject.toml``. Renaming or removing a key
is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by YmLog configuration.

    The ordering mirrors ``ymlog-default.toml``.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [logger]
    SECTION_LOGGER: Final[str] = "logger"

    KEY_LEVEL: Final[str] = "level"
    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_WRAP_AT: Final[str] = "wrap_at"
    KEY_SHOW_METADATA: Final[str] = "show_metadata"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({KEY_ROOT, SECTION_LOGGER})

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_LOGGER: frozenset(
            {
                KEY_LEVEL,
                KEY_INDENT_WIDTH,
                KEY_WRAP_AT,
                KEY_SHOW_METADATA,
            }
        ),
    }
