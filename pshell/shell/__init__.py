"""
pshell Shell Module

Provides the interactive command-line shell:
- Line tokenizing with quoting and escaping
- Output redirection
- Built-in commands
- External program execution
"""

from .lexer import tokenize
from .redirection import (
    RedirectionSpec,
    Stream,
    OutputMode,
    split_redirection,
    is_redirection_operator,
    write_redirection,
)
from .commands import (
    BUILTIN_NAMES,
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ExternalCommand,
    ExecutionResult,
    ParsedLine,
    is_builtin,
    resolve,
    parse_line,
)
from .context import ShellContext
from .builtins import BuiltinCommands
from .console import Console
from .engine import ExecutionEngine
from .shell import Shell, create_shell

__all__ = [
    # Lexer
    'tokenize',
    # Redirection
    'RedirectionSpec',
    'Stream',
    'OutputMode',
    'split_redirection',
    'is_redirection_operator',
    'write_redirection',
    # Commands
    'BUILTIN_NAMES',
    'ExitCommand',
    'EchoCommand',
    'TypeCommand',
    'PwdCommand',
    'CdCommand',
    'ExternalCommand',
    'ExecutionResult',
    'ParsedLine',
    'is_builtin',
    'resolve',
    'parse_line',
    # Runtime
    'ShellContext',
    'BuiltinCommands',
    'Console',
    'ExecutionEngine',
    'Shell',
    'create_shell',
]
