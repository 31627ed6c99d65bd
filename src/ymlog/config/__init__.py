# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for YmLog: the logger settings model, TOML loading and diagnostics logging.

Modules:
    keys: TOML section and key names.
    io: TOML parsing helpers built on tomlkit.
    model: `LoggerConfig` (frozen) and `MutableLoggerConfig` (builder).
    logging: TRACE-aware diagnostics logging for the library itself.
"""
