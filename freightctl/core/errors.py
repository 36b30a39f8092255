"""Error codes for CLI exit status.

Every command maps its failures onto one of these values so that scripts
wrapping `freightctl` can tell a bad invocation from an unreachable server.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing or conflicting flags, bad output format)
    - 2: Environment error (config unreadable, no server configured)
    - 4: Network error (remote call failed, including partial failures)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
