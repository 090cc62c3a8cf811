"""
pshell - A minimal POSIX-flavoured interactive shell

Reads a line, splits it into words honoring single quotes, double
quotes and backslash escapes, runs a builtin or an external program,
and routes the output to the console or to a redirection target.
"""

__version__ = "1.0.0"

from .shell.commands import parse_line, resolve
from .shell.engine import ExecutionEngine
from .shell.lexer import tokenize
from .shell.shell import Shell, create_shell

__all__ = [
    'tokenize',
    'parse_line',
    'resolve',
    'ExecutionEngine',
    'Shell',
    'create_shell',
]
