"""
Output Redirection

Detects a redirection operator in a tokenized command line and writes
the redirected stream to its target file.

Recognized operators (standalone words only):

    >   1>     stdout, truncate
    >>  1>>    stdout, append
    2>         stderr, truncate
    2>>        stderr, append

Version: 1.0.0
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from pshell.exceptions import RedirectionTargetMissingError, RedirectionWriteError


class Stream(Enum):
    """Output stream of a command."""
    STDOUT = "stdout"
    STDERR = "stderr"


class OutputMode(Enum):
    """How a redirection target is opened."""
    OVERRIDE = "override"
    APPEND = "append"


OPERATORS: dict[str, Tuple[Stream, OutputMode]] = {
    '>': (Stream.STDOUT, OutputMode.OVERRIDE),
    '1>': (Stream.STDOUT, OutputMode.OVERRIDE),
    '>>': (Stream.STDOUT, OutputMode.APPEND),
    '1>>': (Stream.STDOUT, OutputMode.APPEND),
    '2>': (Stream.STDERR, OutputMode.OVERRIDE),
    '2>>': (Stream.STDERR, OutputMode.APPEND),
}


@dataclass(frozen=True)
class RedirectionSpec:
    """Where one stream of a command goes instead of the console."""
    stream: Stream
    mode: OutputMode
    target: str

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'RedirectionSpec':
        """
        Build a redirection from an operator and the words following it.

        Args:
            tokens: The operator followed by the target path; anything
                after the target is ignored

        Raises:
            ValueError: If the first token is not an operator
            RedirectionTargetMissingError: If no target follows the operator
        """
        if not tokens or tokens[0] not in OPERATORS:
            raise ValueError(f"Not a redirection operator: {tokens[:1]!r}")

        operator = tokens[0]
        if len(tokens) < 2:
            raise RedirectionTargetMissingError(operator)

        stream, mode = OPERATORS[operator]
        return cls(stream=stream, mode=mode, target=tokens[1])


def is_redirection_operator(token: str) -> bool:
    """Check if a word is one of the recognized redirection operators."""
    return token in OPERATORS


def split_redirection(
    tokens: Sequence[str]
) -> Tuple[List[str], Optional[RedirectionSpec]]:
    """
    Split a word list at the first redirection operator.

    Args:
        tokens: Words produced by the lexer

    Returns:
        Tuple of (command words, redirection spec or None)

    Example:
        >>> split_redirection(['echo', 'hi', '>', 'f.txt'])
        (['echo', 'hi'], RedirectionSpec(stream=<Stream.STDOUT: 'stdout'>, ...))
    """
    for index, token in enumerate(tokens):
        if is_redirection_operator(token):
            return list(tokens[:index]), RedirectionSpec.from_tokens(tokens[index:])

    return list(tokens), None


def write_redirection(
    spec: RedirectionSpec,
    text: Optional[str],
    cwd: Optional[str] = None
) -> None:
    """
    Write a stream's text to the redirection target.

    The target is created if needed, then truncated or appended to
    depending on the mode. A stream that produced nothing still
    creates (or truncates) the file. Relative targets are resolved
    against ``cwd`` when it is given.

    Raises:
        RedirectionWriteError: If the file cannot be opened or written
    """
    mode = 'a' if spec.mode is OutputMode.APPEND else 'w'
    path = os.path.join(cwd, spec.target) if cwd else spec.target

    try:
        with open(path, mode, encoding='utf-8', newline='') as f:
            f.write(text or '')
    except OSError as e:
        raise RedirectionWriteError.from_os_error(e, path=spec.target) from e
