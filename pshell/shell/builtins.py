"""
Shell Built-in Commands

Implements the commands the shell runs itself, without creating a
new process: exit, echo, type, pwd and cd.

Version: 1.0.0
"""

import sys
from typing import NoReturn, Optional

from pshell.exceptions import ChangeDirectoryError, WorkingDirectoryError
from pshell.filesystem.locator import ExecutableLocator
from pshell.logger import get_logger
from .commands import ExecutionResult, is_builtin
from .context import ShellContext


class BuiltinCommands:
    """
    Built-in shell commands.

    Every handler returns an ExecutionResult with at most one stream
    set, except ``cmd_exit`` which never returns.
    """

    def __init__(
        self,
        context: Optional[ShellContext] = None,
        locator: Optional[ExecutableLocator] = None
    ):
        """
        Initialize built-in commands.

        Args:
            context: Process state the builtins read and change
            locator: Used by ``type`` to search ``PATH``
        """
        self._context = context or ShellContext()
        self._locator = locator or ExecutableLocator()
        self._logger = get_logger('builtins')

    @property
    def context(self) -> ShellContext:
        return self._context

    def cmd_exit(self, code: int) -> NoReturn:
        """Terminate the shell immediately with ``code``."""
        self._logger.info("Exit requested", context={'code': code})
        sys.exit(code)

    def cmd_echo(self, text: str) -> ExecutionResult:
        return ExecutionResult(stdout=f"{text}\n")

    def cmd_type(self, target: str) -> ExecutionResult:
        """Describe how a command name would be interpreted."""
        if is_builtin(target):
            return ExecutionResult(stdout=f"{target} is a shell builtin\n")

        full_path = self._locator.find(self._context.get_path(), target)
        if full_path is not None:
            return ExecutionResult(stdout=f"{target} is {full_path}\n")

        return ExecutionResult(stderr=f"{target}: not found\n")

    def cmd_pwd(self) -> ExecutionResult:
        try:
            cwd = self._context.get_cwd()
        except OSError as e:
            raise WorkingDirectoryError.from_os_error(e) from e
        return ExecutionResult(stdout=f"{cwd}\n")

    def cmd_cd(self, path: str) -> ExecutionResult:
        """
        Change the working directory.

        A leading ``~`` is replaced with the home directory. A missing
        directory is reported as ordinary error output; any other
        failure raises ChangeDirectoryError.
        """
        if path.startswith('~'):
            path = self._context.home_dir() + path[1:]

        try:
            self._context.change_dir(path)
        except FileNotFoundError:
            return ExecutionResult(stderr=f"cd: {path}: No such file or directory\n")
        except OSError as e:
            raise ChangeDirectoryError.from_os_error(e, path=path) from e

        self._logger.debug("Changed directory", context={'path': path})
        return ExecutionResult()
