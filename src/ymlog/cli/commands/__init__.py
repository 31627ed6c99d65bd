# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``ymlog`` CLI."""
