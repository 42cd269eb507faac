# topmark:header:start
#
#   project      : FrontRange
#   file         : exit_codes.py
#   file_relpath : src/frontrange/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Exit codes for the FrontRange CLI.

Failure codes follow the BSD `sysexits` convention where one fits. Two small
values are reserved for answers rather than failures: Click's own usage
errors exit with 2, and predicate commands (`has`, `array contains`) exit with 3
when the answer is "no" so shell scripts can branch on it.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the `fr` CLI.

    Attributes:
        SUCCESS: Everything worked.
        FAILURE: Generic failure, e.g. an edit precondition failed for some file.
        USAGE_ERROR: Invalid flags or arguments (same value Click uses).
        NOT_FOUND: A predicate command answered "no" for at least one file.
        PARSE_ERROR: A document could not be parsed. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a file failed. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: A config file is malformed. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    NOT_FOUND = 3

    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
