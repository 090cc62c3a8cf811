"""
Command Line Lexer

Splits a raw input line into shell words, applying quote and
escape rules:

- ``'...'`` copies everything literally up to the closing quote.
- ``"..."`` copies everything literally except that a backslash
  escapes a following ``"``, ``$`` or ``\\``.
- Outside quotes a backslash escapes whatever character follows it.
- Unquoted, unescaped spaces separate words.

Version: 1.0.0
"""

from typing import List


SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = '\\'
SEPARATOR = ' '

# Characters a backslash may escape inside double quotes.
DOUBLE_QUOTE_ESCAPABLE = frozenset('"$\\')


def tokenize(raw: str) -> List[str]:
    """
    Convert a raw input line into an ordered list of words.

    The lexer never rejects input. An unterminated quote swallows the
    rest of the line. The word being accumulated when input runs out is
    always appended, even when empty, so ``tokenize("")`` and
    ``tokenize("echo ''")`` both end with an empty word.

    Args:
        raw: Input line, without its trailing newline

    Returns:
        List of words in input order

    Example:
        >>> tokenize("echo 'a  b' c\\ d")
        ['echo', 'a  b', 'c d']
    """
    tokens: List[str] = []
    current: List[str] = []
    in_single_quotes = False
    in_double_quotes = False

    i = 0
    length = len(raw)

    while i < length:
        char = raw[i]
        next_char = raw[i + 1] if i + 1 < length else None

        if in_single_quotes:
            if char == SINGLE_QUOTE:
                in_single_quotes = False
            else:
                current.append(char)
            i += 1
            continue

        if in_double_quotes:
            if char == DOUBLE_QUOTE:
                in_double_quotes = False
            elif char == BACKSLASH and next_char in DOUBLE_QUOTE_ESCAPABLE:
                current.append(next_char)
                i += 2
                continue
            else:
                current.append(char)
            i += 1
            continue

        # Bare text
        if char == BACKSLASH:
            # A lone trailing backslash has nothing to escape and is dropped
            if next_char is not None:
                current.append(next_char)
            i += 2
            continue

        if char == SINGLE_QUOTE:
            in_single_quotes = True
        elif char == DOUBLE_QUOTE:
            in_double_quotes = True
        elif char == SEPARATOR:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)
        i += 1

    tokens.append(''.join(current))
    return tokens
