"""Exception types raised by the conformance runner.

Only structural failures are exceptions. A script whose output does not
match its expectations is a normal outcome and is recorded as failed.
"""

from __future__ import annotations

from pathlib import Path


class LoxTestError(Exception):
    """Base class for all runner failures."""


class UsageError(LoxTestError):
    """The command line did not match ``<runner> <path-to-interpreter>``."""


class FilesystemError(LoxTestError):
    """The test root could not be enumerated. Aborts the whole run."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'cannot read test directory {path}: {reason}')
        self.path = path


class ProcessLaunchError(LoxTestError):
    """The interpreter could not be spawned. Aborts the whole run."""

    def __init__(self, binary: str, script_path: Path, reason: str) -> None:
        super().__init__(f'cannot launch interpreter {binary} on {script_path}: {reason}')
        self.binary = binary
        self.script_path = script_path
