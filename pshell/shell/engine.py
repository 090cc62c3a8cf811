"""
Execution Engine

Runs one resolved command and delivers its output, either to the
console or, when a redirection is present, partly to a file.

Delivery rules:
- Without redirection only one stream reaches the console: stderr if
  the command produced any, otherwise stdout.
- With redirection the named stream is written to the target file
  (even if empty) and the other stream, if it has content, goes to the
  console.

Version: 1.0.0
"""

from typing import Optional, Sequence

from pshell.exceptions import ExecutableLaunchError
from pshell.filesystem.locator import ExecutableLocator
from pshell.logger import get_logger
from pshell.process.runner import ProcessRunner
from .builtins import BuiltinCommands
from .commands import (
    CdCommand,
    Command,
    EchoCommand,
    ExecutionResult,
    ExitCommand,
    ExternalCommand,
    PwdCommand,
    TypeCommand,
)
from .console import Console
from .context import ShellContext
from .redirection import RedirectionSpec, Stream, write_redirection


class ExecutionEngine:
    """
    Dispatches commands to builtins or external programs.

    Example:
        >>> engine = ExecutionEngine(Console())
        >>> engine.run(EchoCommand(text='hi'))
        hi
    """

    def __init__(
        self,
        console: Console,
        context: Optional[ShellContext] = None,
        locator: Optional[ExecutableLocator] = None,
        runner: Optional[ProcessRunner] = None
    ):
        self._console = console
        self._context = context or ShellContext()
        self._runner = runner or ProcessRunner()
        self._builtins = BuiltinCommands(self._context, locator or ExecutableLocator())
        self._logger = get_logger('engine')

    @property
    def context(self) -> ShellContext:
        return self._context

    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins

    def execute(self, command: Command) -> ExecutionResult:
        """
        Run a command and collect its output.

        ``exit`` raises SystemExit and never returns.
        """
        match command:
            case ExitCommand(code=code):
                self._builtins.cmd_exit(code)
            case EchoCommand(text=text):
                return self._builtins.cmd_echo(text)
            case TypeCommand(target=target):
                return self._builtins.cmd_type(target)
            case PwdCommand():
                return self._builtins.cmd_pwd()
            case CdCommand(path=path):
                return self._builtins.cmd_cd(path)
            case ExternalCommand(name=name, args=args):
                return self._execute_external(name, args)
            case _:
                raise TypeError(f"Unsupported command: {command!r}")

    def _execute_external(self, name: str, args: Sequence[str]) -> ExecutionResult:
        try:
            output = self._runner.run(
                name,
                list(args),
                cwd=self._context.get_cwd(),
                env=self._context.environ,
            )
        except ExecutableLaunchError as e:
            self._logger.debug("Command not found", context={'name': name, 'reason': e.reason})
            return ExecutionResult(stderr=f"{e.user_message}\n")

        return ExecutionResult(stdout=output.stdout, stderr=output.stderr)

    def deliver(
        self,
        result: ExecutionResult,
        redirection: Optional[RedirectionSpec] = None
    ) -> None:
        """Send a command's output to the console and/or a redirection target."""
        if redirection is None:
            self._write_console(result.stderr, result.stdout)
            return

        write_redirection(
            redirection,
            result.get(redirection.stream),
            cwd=self._context.get_cwd(),
        )
        self._logger.debug(
            "Redirected output",
            context={'stream': redirection.stream.value, 'target': redirection.target}
        )

        if redirection.stream is Stream.STDOUT:
            self._write_console(result.stderr)
        else:
            self._write_console(result.stdout)

    def _write_console(self, *candidates: Optional[str]) -> None:
        # First stream with content wins
        for text in candidates:
            if text:
                self._console.write(text)
                return

    def run(
        self,
        command: Command,
        redirection: Optional[RedirectionSpec] = None
    ) -> ExecutionResult:
        """Execute a command and deliver its output."""
        result = self.execute(command)
        self.deliver(result, redirection)
        return result
