"""
pshell Shell Module

The interactive read-eval loop.

Version: 1.0.0
"""

from typing import Optional

from pshell.core.config_loader import get_config
from pshell.exceptions import ShellError
from pshell.logger import get_logger
from .commands import parse_line
from .console import Console
from .engine import ExecutionEngine


class Shell:
    """
    pshell interactive shell.

    Writes the prompt, reads a line, runs it, and repeats until input
    ends or ``exit`` is run. A failing command never stops the loop:
    its error is shown in place of its output.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        engine: Optional[ExecutionEngine] = None,
        prompt: Optional[str] = None
    ):
        config = get_config()

        self._console = console or Console()
        self._engine = engine or ExecutionEngine(self._console)
        self._prompt = prompt if prompt is not None else config.shell.prompt
        self._skip_blank_lines = config.shell.skip_blank_lines
        self._logger = get_logger('shell')

    @property
    def console(self) -> Console:
        return self._console

    @property
    def engine(self) -> ExecutionEngine:
        return self._engine

    @property
    def prompt(self) -> str:
        return self._prompt

    def run(self) -> int:
        """
        Run the interactive shell.

        Returns:
            0 once the input is exhausted. ``exit`` leaves through
            SystemExit instead.
        """
        self._logger.info("Shell started")

        while True:
            self._console.write(self._prompt)

            line = self._console.read_line()
            if line is None:
                self._logger.info("End of input")
                return 0

            self.execute_line(line)

    def execute_line(self, line: str) -> None:
        """
        Parse and run one command line.

        Shell errors are reported as a line of text on the console;
        unexpected errors are logged and reported the same way.
        """
        if self._skip_blank_lines and not line.strip():
            return

        try:
            parsed = parse_line(line)
            self._logger.debug(
                "Parsed line",
                context={'command': type(parsed.command).__name__, 'tokens': list(parsed.tokens)}
            )
            self._engine.run(parsed.command, parsed.redirection)
        except ShellError as e:
            self._logger.warning(f"Command failed: {e}")
            self._console.write(f"{e.user_message}\n")
        except Exception as e:
            self._logger.exception(f"Shell error: {e}", exc=e)
            self._console.write(f"pshell: error: {e}\n")

    def run_script(self, script: str) -> None:
        """
        Run several command lines without prompting.

        Blank lines and lines starting with ``#`` are skipped.

        Args:
            script: Script content
        """
        for line in script.split('\n'):
            line = line.strip()
            if line and not line.startswith('#'):
                self.execute_line(line)


def create_shell(
    console: Optional[Console] = None,
    engine: Optional[ExecutionEngine] = None
) -> Shell:
    """Factory function to create a shell."""
    return Shell(console=console, engine=engine)
