"""
Filesystem Exceptions

Errors raised by builtins and redirections when the underlying
operating system call fails for a reason other than the ones the
shell reports as ordinary command output.

Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellError


class FilesystemError(ShellError):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        reason: OS-provided description (strerror)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        reason: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(
            message=message,
            error_code=error_code or 3000,
            context=ctx
        )
        self.path = path
        self.reason = reason or message

    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[str] = None) -> 'FilesystemError':
        """Build the error from an ``OSError`` raised by the platform."""
        return cls(path=path if path is not None else exc.filename,
                   reason=exc.strerror or str(exc))


class ChangeDirectoryError(FilesystemError):
    """
    ``cd`` failed for a reason other than a missing directory.

    Example:
        >>> raise ChangeDirectoryError("/root", reason="Permission denied")
    """

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Cannot change directory to {path}",
            path=path,
            reason=reason,
            error_code=3001,
            context=context
        )

    @property
    def user_message(self) -> str:
        return f"cd: {self.path}: {self.reason}"


class WorkingDirectoryError(FilesystemError):
    """
    The current working directory could not be determined.

    Example:
        >>> raise WorkingDirectoryError(reason="No such file or directory")
    """

    def __init__(
        self,
        path: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="Cannot determine working directory",
            path=path,
            reason=reason,
            error_code=3002,
            context=context
        )

    @property
    def user_message(self) -> str:
        return f"pwd: {self.reason}"


class RedirectionWriteError(FilesystemError):
    """
    The redirection target could not be opened or written.

    Example:
        >>> raise RedirectionWriteError("/etc/shadow", reason="Permission denied")
    """

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Cannot write redirection target {path}",
            path=path,
            reason=reason,
            error_code=3003,
            context=context
        )

    @property
    def user_message(self) -> str:
        return f"pshell: {self.path}: {self.reason}"
