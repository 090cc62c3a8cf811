"""
Parse Exceptions

Errors raised while turning an input line into a command: empty
commands, malformed builtin arguments and incomplete redirections.
None of these are fatal; the shell reports them and reads the next line.

Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellError


class ParseError(ShellError):
    """
    Base exception for all parse errors.

    Attributes:
        message: Human-readable error description
        command: Name of the command being parsed (if known)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(
            message=message,
            error_code=error_code or 1000,
            context=ctx
        )
        self.command = command


class EmptyCommandError(ParseError):
    """
    The token sequence contained no command.

    Example:
        >>> raise EmptyCommandError()
    """

    def __init__(self, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message="Empty command",
            error_code=1001,
            context=context
        )

    @property
    def user_message(self) -> str:
        return "pshell: empty command"


class InvalidExitCodeError(ParseError):
    """
    The argument to ``exit`` is missing or is not a signed integer.

    Example:
        >>> raise InvalidExitCodeError("abc")
    """

    def __init__(
        self,
        argument: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if argument is not None:
            ctx["argument"] = argument
            message = f"Invalid exit code: {argument!r}"
        else:
            message = "Exit expects exactly one argument"
        super().__init__(
            message=message,
            command="exit",
            error_code=1002,
            context=ctx
        )
        self.argument = argument

    @property
    def user_message(self) -> str:
        if self.argument is None:
            return "exit: expected exactly one argument"
        return f"exit: {self.argument}: numeric argument required"


class InvalidArgumentsError(ParseError):
    """
    A builtin was given the wrong number of arguments.

    Example:
        >>> raise InvalidArgumentsError("cd", expected=1, received=0)
    """

    def __init__(
        self,
        command: str,
        expected: int,
        received: int,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx.update({"expected": expected, "received": received})
        super().__init__(
            message=f"{command} expects {expected} argument(s), got {received}",
            command=command,
            error_code=1003,
            context=ctx
        )
        self.expected = expected
        self.received = received

    @property
    def user_message(self) -> str:
        return f"{self.command}: expected exactly one argument"


class RedirectionTargetMissingError(ParseError):
    """
    A redirection operator was not followed by a target path.

    Example:
        >>> raise RedirectionTargetMissingError(">>")
    """

    def __init__(
        self,
        operator: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["operator"] = operator
        super().__init__(
            message=f"Missing redirection target after {operator!r}",
            error_code=1004,
            context=ctx
        )
        self.operator = operator

    @property
    def user_message(self) -> str:
        return f"pshell: syntax error: missing target after '{self.operator}'"
