import os
import sys
import textwrap
from pathlib import Path

import pytest

# A tiny stand-in for a Lox interpreter: evaluates `print <expr>;` with Python
# and honours `exit <code>;` and `warn <text>;` so tests can exercise crashes
# and stderr output.
FAKE_INTERPRETER = textwrap.dedent("""\
    import re
    import sys

    with open(sys.argv[1]) as f:
        for line in f:
            m = re.match(r'\\s*print\\s+(.*?);', line)
            if m:
                print(eval(m.group(1)), flush=True)
                continue
            m = re.match(r'\\s*warn\\s+(.*?);', line)
            if m:
                print(m.group(1), file=sys.stderr)
                continue
            m = re.match(r'\\s*exit\\s+(\\d+);', line)
            if m:
                sys.exit(int(m.group(1)))
""")


@pytest.fixture
def fake_interpreter(tmp_path: Path) -> str:
    """Path to an executable that behaves like a minimal Lox interpreter."""
    if sys.platform == 'win32':
        pytest.skip('fake interpreter is a shell script')
    bin_dir = tmp_path / 'bin'
    bin_dir.mkdir()
    impl = bin_dir / 'fake_lox.py'
    impl.write_text(FAKE_INTERPRETER)
    wrapper = bin_dir / 'lox'
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{impl}" "$@"\n')
    wrapper.chmod(0o755)
    return str(wrapper)


@pytest.fixture
def write_script(tmp_path: Path):
    """Write a script under ``tmp_path`` and return its path."""

    def write(relpath: str, source: str) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source))
        return path

    return write


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside ``tmp_path`` so the relative ``test`` root resolves there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def unreadable(tmp_path: Path):
    """Strip read permission from a path for the duration of a test."""
    if sys.platform == 'win32' or os.geteuid() == 0:
        pytest.skip('permission bits are not enforced here')
    changed = []

    def make(path: Path) -> Path:
        changed.append((path, path.stat().st_mode))
        path.chmod(0)
        return path

    yield make
    for path, mode in changed:
        path.chmod(mode)
