"""Exit codes for the autorelease CLI.

Each failure category of a release run maps to a stable process exit code
so CI logs show what kind of step failed.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success (including "no release needed")
    - 1: Configuration error (missing input, missing manifest, no version)
    - 2: Parse error (manifest is not valid JSON)
    - 3: I/O error (file exists but cannot be read)
    - 4: Git error (tag creation or file retrieval failed)
    - 5: API error (release creation failed)
    """

    OK = 0
    CONFIG_ERROR = 1
    PARSE_ERROR = 2
    IO_ERROR = 3
    GIT_ERROR = 4
    API_ERROR = 5
