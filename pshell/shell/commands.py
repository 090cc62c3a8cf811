"""
Command Model and Resolver

Turns the words of one input line into a command value. Builtins are
a fixed, closed set; everything else is an external program.

Version: 1.0.0
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from pshell.exceptions import (
    EmptyCommandError,
    InvalidArgumentsError,
    InvalidExitCodeError,
)
from .lexer import tokenize
from .redirection import RedirectionSpec, Stream, split_redirection


BUILTIN_NAMES: Tuple[str, ...] = ('exit', 'echo', 'type', 'pwd', 'cd')

_EXIT_CODE_PATTERN = re.compile(r'[+-]?[0-9]+')
_EXIT_CODE_MIN = -2 ** 31
_EXIT_CODE_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class ExitCommand:
    code: int


@dataclass(frozen=True)
class EchoCommand:
    text: str


@dataclass(frozen=True)
class TypeCommand:
    target: str


@dataclass(frozen=True)
class PwdCommand:
    pass


@dataclass(frozen=True)
class CdCommand:
    path: str


@dataclass(frozen=True)
class ExternalCommand:
    """A program resolved through ``PATH`` and run as a child process."""
    name: str
    args: Tuple[str, ...] = ()


BuiltinCommand = Union[ExitCommand, EchoCommand, TypeCommand, PwdCommand, CdCommand]
Command = Union[BuiltinCommand, ExternalCommand]


@dataclass(frozen=True)
class ParsedLine:
    """A resolved command plus its optional redirection."""
    command: Command
    redirection: Optional[RedirectionSpec] = None
    tokens: Tuple[str, ...] = field(default=(), compare=False)


@dataclass
class ExecutionResult:
    """
    Output of one command run.

    Builtins fill in at most one of the two streams; external
    programs may fill in both.
    """
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    def get(self, stream: Stream) -> Optional[str]:
        """Text of the given stream."""
        return self.stdout if stream is Stream.STDOUT else self.stderr


def is_builtin(name: str) -> bool:
    """Check if a command name refers to a builtin."""
    return name in BUILTIN_NAMES


def _single_argument(name: str, args: Sequence[str]) -> str:
    if len(args) != 1:
        raise InvalidArgumentsError(name, expected=1, received=len(args))
    return args[0]


def _parse_exit_code(args: Sequence[str]) -> int:
    if len(args) != 1:
        raise InvalidExitCodeError()

    raw = args[0]
    if not _EXIT_CODE_PATTERN.fullmatch(raw):
        raise InvalidExitCodeError(raw)

    code = int(raw)
    if not _EXIT_CODE_MIN <= code <= _EXIT_CODE_MAX:
        raise InvalidExitCodeError(raw)
    return code


def resolve(tokens: Sequence[str]) -> Command:
    """
    Classify a word list as a builtin or an external command.

    The first word, stripped of surrounding whitespace, is matched
    exactly against the builtin names. The remaining words are passed
    through unchanged.

    Args:
        tokens: Command words (redirection already removed)

    Returns:
        The command value

    Raises:
        EmptyCommandError: If ``tokens`` is empty
        InvalidExitCodeError: If ``exit`` lacks a valid integer argument
        InvalidArgumentsError: If ``type`` or ``cd`` do not get exactly
            one argument
    """
    if not tokens:
        raise EmptyCommandError()

    name = tokens[0].strip()
    args = list(tokens[1:])

    if name == 'exit':
        return ExitCommand(code=_parse_exit_code(args))
    if name == 'echo':
        return EchoCommand(text=' '.join(args))
    if name == 'type':
        return TypeCommand(target=_single_argument(name, args))
    if name == 'pwd':
        return PwdCommand()
    if name == 'cd':
        return CdCommand(path=_single_argument(name, args))

    return ExternalCommand(name=name, args=tuple(args))


def parse_line(raw: str) -> ParsedLine:
    """
    Parse one input line into a command and its redirection.

    Words before the first redirection operator form the command;
    the operator and its target form the redirection.

    Example:
        >>> parse_line("echo hi > f.txt").command
        EchoCommand(text='hi')
    """
    tokens: List[str] = tokenize(raw)
    command_tokens, redirection = split_redirection(tokens)
    return ParsedLine(
        command=resolve(command_tokens),
        redirection=redirection,
        tokens=tuple(tokens),
    )
