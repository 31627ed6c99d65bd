# topmark:header:start
#
#   project      : YmLog
#   file         : __main__.py
#   file_relpath : src/ymlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running YmLog via ``python -m ymlog``.

Examples:
    Render a script from stdin::

        printf 'hello\\n+ => world\\n' | python -m ymlog render
"""

from __future__ import annotations

from ymlog.cli.main import cli

if __name__ == "__main__":
    cli()
