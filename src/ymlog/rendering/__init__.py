# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for YmLog.

This package turns entry values into YAML text fragments.

Public modules:
    - ymlog.rendering.styles
    - ymlog.rendering.folder
    - ymlog.rendering.splice
"""

from __future__ import annotations
