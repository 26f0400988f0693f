"""Running a script through the interpreter under test."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import ProcessLaunchError


@dataclass
class CapturedResult:
    """Result of running a script through the interpreter.

    Only ``stdout`` takes part in comparison. ``exit_code`` is recorded but
    never consulted; a script that crashes after printing the expected lines
    still passes.
    """

    stdout: str
    exit_code: int


def run_interpreter(binary: str, script_path: Path) -> CapturedResult:
    """Run a script through the interpreter, capturing its stdout.

    The interpreter is spawned as ``[binary, script_path]`` without a shell,
    so paths containing spaces or shell metacharacters are passed intact.
    Its stderr is inherited, so runtime errors show up on the console as
    they happen. The call blocks until the child exits; there is no timeout.

    Stdout is captured as bytes and decoded here rather than in text mode,
    so a carriage return inside a line is kept as content.

    Args:
        binary: Path to the interpreter executable.
        script_path: Path to the script to execute.

    Returns:
        CapturedResult with the decoded stdout and the exit code.

    Raises:
        ProcessLaunchError: If the interpreter process could not be created.
    """
    try:
        result = subprocess.run(
            [binary, str(script_path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=None,
        )
    except OSError as exc:
        raise ProcessLaunchError(binary, script_path, exc.strerror or str(exc)) from exc
    return CapturedResult(
        stdout=result.stdout.decode('utf-8', 'replace'),
        exit_code=result.returncode,
    )
