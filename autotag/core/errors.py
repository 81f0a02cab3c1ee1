"""Error codes for CLI exit status.

The GitHub Actions runner only distinguishes zero from non-zero, but the
codes stay distinct so local invocations and scripts can tell a bad input
apart from an unreachable API.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success (including dry runs)
    - 1: User error (bad input, invalid tag, unresolved repository)
    - 2: Environment error (missing token, unreadable event payload)
    - 4: Network error (GitHub API call failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
