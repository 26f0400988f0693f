"""Conformance test runner for Lox interpreters.

Example::

    from loxtest import run_suite, print_summary

    results = run_suite('./clox')
    print_summary(results)
"""

from .discovery import DEFAULT_TEST_ROOT, SCRIPT_EXTENSION, discover_scripts
from .errors import FilesystemError, LoxTestError, ProcessLaunchError, UsageError
from .expectations import EXPECT_PATTERN, parse_expectations
from .harness import main, run_single_script, run_suite
from .normalize import normalize_output
from .report import ResultSets, lines_match, print_summary
from .runner import CapturedResult, run_interpreter

__all__ = (
    'DEFAULT_TEST_ROOT',
    'SCRIPT_EXTENSION',
    'EXPECT_PATTERN',
    'discover_scripts',
    'parse_expectations',
    'run_interpreter',
    'CapturedResult',
    'normalize_output',
    'lines_match',
    'ResultSets',
    'print_summary',
    'run_single_script',
    'run_suite',
    'main',
    'LoxTestError',
    'UsageError',
    'FilesystemError',
    'ProcessLaunchError',
)
