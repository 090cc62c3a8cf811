"""
pshell Exception Hierarchy

All custom exceptions inherit from ShellError. The read-eval loop
catches ShellError, prints ``user_message`` and carries on with the
next line.

Architecture:
    ShellError (Base)
    ├── ParseError
    │   ├── EmptyCommandError
    │   ├── InvalidExitCodeError
    │   ├── InvalidArgumentsError
    │   └── RedirectionTargetMissingError
    ├── ProcessError
    │   └── CommandNotFoundError
    │       └── ExecutableLaunchError
    └── FilesystemError
        ├── ChangeDirectoryError
        ├── WorkingDirectoryError
        └── RedirectionWriteError
"""

from .shell_exceptions import ShellError

from .parse_exceptions import (
    ParseError,
    EmptyCommandError,
    InvalidExitCodeError,
    InvalidArgumentsError,
    RedirectionTargetMissingError,
)

from .process_exceptions import (
    ProcessError,
    CommandNotFoundError,
    ExecutableLaunchError,
)

from .fs_exceptions import (
    FilesystemError,
    ChangeDirectoryError,
    WorkingDirectoryError,
    RedirectionWriteError,
)

__all__ = [
    "ShellError",
    # Parse exceptions
    "ParseError",
    "EmptyCommandError",
    "InvalidExitCodeError",
    "InvalidArgumentsError",
    "RedirectionTargetMissingError",
    # Process exceptions
    "ProcessError",
    "CommandNotFoundError",
    "ExecutableLaunchError",
    # Filesystem exceptions
    "FilesystemError",
    "ChangeDirectoryError",
    "WorkingDirectoryError",
    "RedirectionWriteError",
]
