# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for YmLog (``ymlog``)."""
