"""Output normalization for line-by-line comparison."""

from __future__ import annotations

_TRAILING = ' \t\r'


def normalize_output(text: str) -> list[str]:
    """Split interpreter output into comparable lines.

    Applies these transformations:
    - Split on ``\\n``
    - Strip trailing spaces, tabs and carriage returns from each line
    - Drop lines that are empty after stripping

    Leading whitespace is significant and kept.

    Args:
        text: Raw stdout from the interpreter.

    Returns:
        Remaining lines in their original order.
    """
    lines = (line.rstrip(_TRAILING) for line in text.split('\n'))
    return [line for line in lines if line]
