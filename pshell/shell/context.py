"""
Shell Context

Process-wide state the builtins read and change: the working
directory, the environment and the home directory. Builtins receive a
context object instead of touching ``os`` directly, so tests can swap
in a fake.

Version: 1.0.0
"""

import os
from pathlib import Path
from typing import MutableMapping, Optional


class ShellContext:
    """
    Context backed by the real process state.

    ``change_dir`` calls ``os.chdir`` and ``get_cwd`` calls
    ``os.getcwd``, so child processes and relative paths see the same
    directory as the shell. Both propagate ``OSError`` unchanged.
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        home: Optional[str] = None
    ):
        self._environ = os.environ if environ is None else environ
        self._home = home

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ

    def get_cwd(self) -> str:
        return os.getcwd()

    def change_dir(self, path: str) -> None:
        os.chdir(path)
        self._environ['PWD'] = os.getcwd()

    def home_dir(self) -> str:
        """Home directory used for ``~`` expansion."""
        if self._home is not None:
            return self._home
        return self._environ.get('HOME') or str(Path.home())

    def get_path(self) -> str:
        """Colon-separated executable search path (empty if unset)."""
        return self._environ.get('PATH', '')
