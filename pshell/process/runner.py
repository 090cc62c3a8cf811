"""
Process Runner

Runs external programs to completion and captures their output.
All child process creation in pshell goes through ProcessRunner.

Version: 1.0.0
"""

import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from pshell.exceptions import ExecutableLaunchError
from pshell.logger import get_logger


@dataclass
class ProcessOutput:
    """
    Captured output of a finished program.

    ``stdout``/``stderr`` are None when the stream produced no bytes.
    """
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    returncode: int = 0


class ProcessRunner:
    """
    Launches programs with ``subprocess``.

    The child gets ``/dev/null`` as stdin; stdout and stderr are
    captured separately and decoded leniently. Execution blocks until
    the child exits; there is no timeout.

    Example:
        >>> output = ProcessRunner().run('ls', ['-a'])
        >>> output.stdout is not None
        True
    """

    def __init__(self, encoding: str = 'utf-8'):
        self._encoding = encoding
        self._logger = get_logger('process')

    def _decode(self, data: bytes) -> Optional[str]:
        if not data:
            return None
        return data.decode(self._encoding, errors='replace')

    def run(
        self,
        name: str,
        args: Sequence[str],
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None
    ) -> ProcessOutput:
        """
        Run a program and wait for it to finish.

        A bare name is looked up on the ``PATH`` of ``env`` (or of the
        current process when ``env`` is None).

        Args:
            name: Program name or path
            args: Arguments, not including the program name
            cwd: Working directory for the child
            env: Environment for the child

        Returns:
            ProcessOutput with the captured streams and exit status

        Raises:
            ExecutableLaunchError: If the program could not be started
        """
        argv = [name, *args]
        self._logger.debug("Launching process", context={'argv': argv})

        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=cwd,
                env=dict(env) if env is not None else None,
                check=False,
            )
        except (OSError, ValueError) as e:
            reason = getattr(e, 'strerror', None) or str(e)
            self._logger.debug("Launch failed", context={'name': name, 'reason': reason})
            raise ExecutableLaunchError(name, reason=reason) from e

        self._logger.debug(
            "Process exited",
            context={'name': name, 'returncode': completed.returncode}
        )

        return ProcessOutput(
            stdout=self._decode(completed.stdout),
            stderr=self._decode(completed.stderr),
            returncode=completed.returncode,
        )
