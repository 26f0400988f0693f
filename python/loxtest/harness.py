"""Lox interpreter conformance test runner.

Runs every ``.lox`` script under ``test/`` through an interpreter, compares
its stdout against the ``// expect:`` comments in the script, and reports
which scripts passed.

Usage:
    loxtest <path to interpreter>
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional

from .discovery import DEFAULT_TEST_ROOT, SCRIPT_EXTENSION, discover_scripts
from .errors import LoxTestError, UsageError
from .expectations import parse_expectations
from .normalize import normalize_output
from .report import ResultSets, lines_match, print_summary
from .runner import run_interpreter

# ---------------------------------------------------------------------------
# Per-script evaluation
# ---------------------------------------------------------------------------


def run_single_script(binary: str, script_path: Path) -> bool:
    """Run one script and decide whether it passed.

    Args:
        binary: Path to the interpreter executable.
        script_path: Path to the ``.lox`` script.

    Returns:
        True if the normalized output matches the script's expectations.

    Raises:
        ProcessLaunchError: If the interpreter could not be spawned.
    """
    captured = run_interpreter(binary, script_path)

    try:
        expected = parse_expectations(script_path)
    except OSError as exc:
        print(f'WARNING: cannot read expectations from {script_path}: {exc}', file=sys.stderr)
        return False

    return lines_match(expected, normalize_output(captured.stdout))


def run_suite(
    binary: str,
    root: Path = DEFAULT_TEST_ROOT,
    extension: str = SCRIPT_EXTENSION,
) -> ResultSets:
    """Run every script under ``root`` sequentially, in discovery order.

    Args:
        binary: Path to the interpreter executable.
        root: Directory searched recursively for scripts.
        extension: Script file suffix.

    Returns:
        ResultSets with each script recorded exactly once.

    Raises:
        FilesystemError: If ``root`` cannot be enumerated.
        ProcessLaunchError: If the interpreter could not be spawned.
    """
    results = ResultSets()
    for script_path in discover_scripts(root, extension):
        print(f'Testing {script_path}')
        results.record(str(script_path), run_single_script(binary, script_path))
    return results


# ---------------------------------------------------------------------------
# Main orchestration
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _usage(prog: str) -> str:
    return f'Usage: {prog} <path to interpreter>'


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the runner.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 if every script passed, 1 on any failure, usage error
        or fatal error.
    """
    parser = _ArgumentParser(
        prog='loxtest',
        description='Lox interpreter conformance test runner',
        add_help=False,
    )
    parser.add_argument('interpreter', help='Path to the interpreter executable')

    try:
        args = parser.parse_args(argv)
    except UsageError:
        print(_usage(parser.prog))
        return 1

    try:
        results = run_suite(args.interpreter)
    except LoxTestError as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
        return 1

    print_summary(results)
    return results.exit_code
