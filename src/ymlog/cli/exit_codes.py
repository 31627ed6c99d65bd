# topmark:header:start
#
#   project      : YmLog
#   file         : exit_codes.py
#   file_relpath : src/ymlog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the YmLog CLI, aligned with the BSD `sysexits` convention."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the YmLog CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A script line cannot be logged (bad actions, bad entry shape).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        INTERNAL_ERROR: Renderer invariant violated. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: Writing the stream failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing, invalid or malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
