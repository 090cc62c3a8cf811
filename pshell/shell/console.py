"""
Console I/O

Reads input lines and writes text for the shell.

Version: 1.0.0
"""

import sys
from typing import Optional, TextIO


class Console:
    """
    Line-oriented console over a pair of text streams.

    When the reader exposes its underlying byte stream (as ``sys.stdin``
    does), lines are read as bytes and decoded with replacement
    characters, so undecodable input never aborts the shell.

    Example:
        >>> console = Console(io.StringIO("pwd\\n"), io.StringIO())
        >>> console.read_line()
        'pwd'
    """

    def __init__(
        self,
        reader: Optional[TextIO] = None,
        writer: Optional[TextIO] = None,
        encoding: str = 'utf-8'
    ):
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout
        self._encoding = encoding

    def read_line(self) -> Optional[str]:
        """
        Block until a line is available.

        Returns:
            The line with surrounding whitespace removed, or None at
            end of input
        """
        raw = getattr(self._reader, 'buffer', None)
        if raw is not None:
            line = raw.readline().decode(self._encoding, errors='replace')
        else:
            line = self._reader.readline()

        if not line:
            return None
        return line.strip()

    def write(self, text: str) -> None:
        """Write ``text`` unchanged and flush."""
        self._writer.write(text)
        self._writer.flush()
