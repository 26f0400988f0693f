"""Classification of script results and the terminal summary."""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Comparison logic
# ---------------------------------------------------------------------------


def lines_match(expected: list[str], actual: list[str]) -> bool:
    """Compare expected and actual output lines positionally.

    Args:
        expected: Expectation list extracted from the script.
        actual: Normalized interpreter output.

    Returns:
        True only if both lists have the same length and agree at every index.
    """
    if len(expected) != len(actual):
        return False
    for want, got in zip(expected, actual):
        if want != got:
            return False
    return True


# ---------------------------------------------------------------------------
# Result accumulation
# ---------------------------------------------------------------------------


@dataclass
class ResultSets:
    """Passed and failed script paths, in the order they were classified."""

    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def record(self, script: str, passed: bool) -> None:
        if passed:
            self.passed.append(script)
        else:
            self.failed.append(script)

    @property
    def exit_code(self) -> int:
        """0 when nothing failed, 1 otherwise."""
        return 0 if not self.failed else 1


# ---------------------------------------------------------------------------
# Terminal output (colored)
# ---------------------------------------------------------------------------

GREEN = '\033[1;32m'
RED = '\033[1;31m'
RESET = '\033[0m'

PASS_MARK = '✓'
FAIL_MARK = '✗'


def _color(text: str, color: str) -> str:
    return f'{color}{text}{RESET}'


def print_summary(results: ResultSets) -> None:
    """Print passed paths, failed paths, then the totals."""
    for script in results.passed:
        print(_color(f'{PASS_MARK} {script}', GREEN))

    for script in results.failed:
        print(_color(f'{FAIL_MARK} {script}', RED))

    print()
    print(_color(f'Passed: {len(results.passed)}', GREEN))
    print(_color(f'Failed: {len(results.failed)}', RED))
