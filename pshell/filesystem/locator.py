"""
Executable Locator

Finds programs on a colon-separated search path.

Version: 1.0.0
"""

import os
from typing import Optional, List

from pshell.logger import get_logger


SEARCH_PATH_SEPARATOR = ":"


class ExecutableLocator:
    """
    Scans the directories of a search path in order.

    The first directory containing an entry with the requested name
    wins. Only existence is checked, not the executable bit.

    Example:
        >>> ExecutableLocator().find('/usr/local/bin:/usr/bin', 'ls')
        '/usr/bin/ls'
    """

    def __init__(self):
        self._logger = get_logger('locator')

    @staticmethod
    def split_search_path(search_path: str) -> List[str]:
        """
        Split a search path into directories.

        Empty entries are dropped; they would only ever produce
        relative results.
        """
        return [d for d in search_path.split(SEARCH_PATH_SEPARATOR) if d]

    def find(self, search_path: str, name: str) -> Optional[str]:
        """
        Locate ``name`` on ``search_path``.

        Args:
            search_path: Colon-separated list of directories
            name: Program name

        Returns:
            Absolute path of the first match, or None
        """
        if not name:
            return None

        for directory in self.split_search_path(search_path):
            candidate = os.path.join(directory, name)
            if os.path.exists(candidate):
                found = os.path.abspath(candidate)
                self._logger.debug("Executable found", context={'name': name, 'path': found})
                return found

        self._logger.debug("Executable not found", context={'name': name})
        return None
