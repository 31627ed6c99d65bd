# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UI-agnostic helpers shared across YmLog."""

from __future__ import annotations
