"""
Process Exceptions

Errors related to locating and launching external programs.

Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellError


class ProcessError(ShellError):
    """
    Base exception for all process-related errors.

    Attributes:
        message: Human-readable error description
        name: Program name associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(
            message=message,
            error_code=error_code or 2000,
            context=ctx
        )
        self.name = name


class CommandNotFoundError(ProcessError):
    """
    No builtin or executable matches the command name.

    Example:
        >>> raise CommandNotFoundError("frobnicate")
    """

    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Command not found: {name}",
            name=name,
            error_code=2001,
            context=context
        )

    @property
    def user_message(self) -> str:
        return f"{self.name}: command not found"


class ExecutableLaunchError(CommandNotFoundError):
    """
    The operating system refused to start the program.

    Raised when the program does not exist, is not executable or
    cannot be exec'd for any other reason. A program that starts and
    exits non-zero is not an error.

    Example:
        >>> raise ExecutableLaunchError("nope", reason="No such file or directory")
    """

    def __init__(
        self,
        name: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(name=name, context=ctx)
        self.error_code = 2002
        self.message = f"Cannot launch {name}"
        self.reason = reason
