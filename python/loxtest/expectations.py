"""Extraction of ``// expect: <value>`` markers from script source."""

from __future__ import annotations

import re
from pathlib import Path

EXPECT_PATTERN = re.compile(r'//\s*expect:\s*(.+)')

_TRAILING = ' \t\r\n'


def parse_expectations(path: Path) -> list[str]:
    """Collect expected output lines from a script, in file order.

    Every line containing an expect marker contributes one entry: the text
    after ``expect:`` with trailing whitespace removed. The marker may sit
    after code on the same line, e.g. ``print 1 + 1; // expect: 2``.

    Args:
        path: Path to the script file.

    Returns:
        List of expected output lines.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    expectations = []
    # Split on \n only: a lone CR inside a line is content.
    with open(path, encoding='utf-8', errors='replace', newline='\n') as f:
        for line in f:
            match = EXPECT_PATTERN.search(line)
            if match:
                expectations.append(match.group(1).rstrip(_TRAILING))
    return expectations
